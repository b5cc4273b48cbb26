from madfood.infra.paths import SHOPPING_LISTS_FILE


def test_recipes_crud(client):
    resp = client.post("/api/recipes", json={"title": " Pancakes ", "ingredients": [
        {"name": "Flour", "quantity": "2", "unit": "cups"}, {"name": "   "}]})
    assert resp.status_code == 201, resp.text
    recipe = resp.json()
    assert recipe["title"] == "Pancakes"
    assert [i["name"] for i in recipe["ingredients"]] == ["Flour"]

    updated = client.put(f"/api/recipes/{recipe['id']}", json={"title": "Crepes"}).json()
    assert updated["title"] == "Crepes"
    assert updated["ingredients"] == []
    assert client.get("/api/recipes").json()["count"] == 1

    assert client.delete(f"/api/recipes/{recipe['id']}").json() == {"success": True}
    assert client.get(f"/api/recipes/{recipe['id']}").status_code == 404
    assert client.put("/api/recipes/missing", json={"title": "Ghost"}).status_code == 404


def test_recipe_requires_title(client):
    assert client.post("/api/recipes", json={"title": "   "}).status_code == 422


def test_pantry_value(client):
    client.post("/api/pantry", json={"name": "Rice", "quantity": 2, "estimated_price": 1.26})
    client.post("/api/pantry", json={"name": "Oil", "quantity": 1, "estimated_price": 7, "in_stock": False})
    listing = client.get("/api/pantry").json()
    assert [i["name"] for i in listing["items"]] == ["Rice", "Oil"]
    value = client.get("/api/pantry/value").json()
    assert value["estimated_value"] == listing["estimated_value"]
    assert value["estimated_value_label"] == "$2.52"


def test_pantry_edit_and_delete(client):
    item = client.post("/api/pantry", json={"name": "Beans", "quantity": 3}).json()
    edited = client.put(f"/api/pantry/{item['id']}", json={"name": "Beans", "quantity": 1, "in_stock": False})
    assert edited.json()["in_stock"] is False
    assert client.delete(f"/api/pantry/{item['id']}").status_code == 200
    assert client.delete(f"/api/pantry/{item['id']}").status_code == 404
    assert client.put("/api/pantry/missing", json={"name": "Beans"}).status_code == 404


def test_shopping_flow(client):
    client.post("/api/pantry", json={"name": "Milk", "quantity": 1, "estimated_price": 2.0, "in_stock": False})
    grocery = client.post("/api/shopping-lists", json={"name": "Weekly"}).json()
    list_id = grocery["id"]

    milk = client.post(f"/api/shopping-lists/{list_id}/items",
                       json={"name": "milk", "quantity": 2, "price": 0, "already_have_in_pantry": True})
    assert milk.status_code == 201, milk.text
    pantry = {i["name"]: i for i in client.get("/api/pantry").json()["items"]}
    assert (pantry["Milk"]["quantity"], pantry["Milk"]["estimated_price"], pantry["Milk"]["in_stock"]) == (2, 2.0, True)

    eggs = client.post(f"/api/shopping-lists/{list_id}/items",
                       json={"name": "Eggs", "quantity": 12, "price": 0.25, "purchased": True}).json()
    assert eggs["purchased_at"] == "2024-02-07T12:00:00+00:00"

    detail = client.get(f"/api/shopping-lists/{list_id}").json()
    assert [i["name"] for i in detail["items"]] == ["milk", "Eggs"]
    assert (detail["total"], detail["to_buy_total"], detail["purchased_total"]) == (3.0, 3.0, 3.0)

    spend = client.get("/api/shopping/week-spend").json()
    assert spend == {"start": "2024-02-04T00:00:00.000Z", "end": "2024-02-10T23:59:59.999Z", "week_spend": 3.0}

    # moving eggs to "already have" takes them out of the spend
    resp = client.put(f"/api/shopping-items/{eggs['id']}",
                      json={"name": "Eggs", "quantity": 12, "price": 0.25,
                            "already_have_in_pantry": True, "purchased": True})
    assert resp.json()["purchased"] is False
    assert client.get("/api/shopping/week-spend").json()["week_spend"] == 0.0
    assert client.get(f"/api/shopping-lists/{list_id}").json()["to_buy_total"] == 0.0

    types = [e["type"] for e in client.get("/api/activity").json()["events"]]
    assert types.count("pantry.merged") == 2
    assert types.count("shopping.item_saved") == 3


def test_list_rename_and_delete(client):
    grocery = client.post("/api/shopping-lists", json={"name": "Weekly"}).json()
    item = client.post(f"/api/shopping-lists/{grocery['id']}/items", json={"name": "Bread"}).json()
    renamed = client.put(f"/api/shopping-lists/{grocery['id']}", json={"name": "Party"}).json()
    assert renamed["name"] == "Party"
    assert client.delete(f"/api/shopping-items/{item['id']}").status_code == 200
    assert client.delete(f"/api/shopping-lists/{grocery['id']}").status_code == 200
    assert client.get(f"/api/shopping-lists/{grocery['id']}").status_code == 404
    assert client.get("/api/shopping-lists").json() == {"lists": []}


def test_shopping_validation(client):
    assert client.post("/api/shopping-lists", json={"name": "  "}).status_code == 422
    assert client.post("/api/shopping-lists/missing/items", json={"name": "Bread"}).status_code == 404
    assert client.put("/api/shopping-items/missing", json={"name": "Bread"}).status_code == 404


def test_corrupt_store_is_a_data_service_error(client, tmp_path):
    (tmp_path / SHOPPING_LISTS_FILE).write_text("{not json", encoding="utf-8")
    resp = client.get("/api/shopping-lists")
    assert resp.status_code == 502
    assert resp.json() == {"detail": "Could not reach the data service. Please try again."}


def test_recipe_favorites(client):
    soup = client.post("/api/recipes", json={"title": "Soup"}).json()
    client.post("/api/recipes", json={"title": "Salad"})
    assert soup["is_favorite"] is False
    assert client.get("/api/recipes/favorites").json() == {"favorites": []}

    starred = client.put(f"/api/recipes/{soup['id']}/favorite", json={"is_favorite": True})
    assert starred.status_code == 200, starred.text
    assert starred.json()["is_favorite"] is True
    # a regular edit keeps the star
    client.put(f"/api/recipes/{soup['id']}", json={"title": "Leek soup"})
    favorites = client.get("/api/recipes/favorites").json()["favorites"]
    assert [r["title"] for r in favorites] == ["Leek soup"]
    assert client.get(f"/api/recipes/{soup['id']}").json()["is_favorite"] is True

    client.put(f"/api/recipes/{soup['id']}/favorite", json={"is_favorite": False})
    assert client.get("/api/recipes/favorites").json() == {"favorites": []}
    assert client.put("/api/recipes/missing/favorite", json={"is_favorite": True}).status_code == 404
    assert client.put(f"/api/recipes/{soup['id']}/favorite", json={}).status_code == 422


def test_editing_purchased_item_keeps_purchase_time(client):
    grocery = client.post("/api/shopping-lists", json={"name": "Weekly"}).json()
    steak = client.post(f"/api/shopping-lists/{grocery['id']}/items",
                        json={"name": "Steak", "quantity": 1, "price": 20, "purchased": True,
                              "purchased_at": "2024-01-30T10:00:00Z"}).json()
    assert client.get("/api/shopping/week-spend").json()["week_spend"] == 0.0

    edited = client.put(f"/api/shopping-items/{steak['id']}",
                        json={"name": "Steak", "quantity": 2, "price": 20, "purchased": True}).json()
    assert edited["quantity"] == 2
    assert edited["purchased_at"] == "2024-01-30T10:00:00+00:00"
    assert client.get("/api/shopping/week-spend").json()["week_spend"] == 0.0

    # unticking and ticking again is a new purchase
    client.put(f"/api/shopping-items/{steak['id']}", json={"name": "Steak", "quantity": 2, "price": 20})
    again = client.put(f"/api/shopping-items/{steak['id']}",
                       json={"name": "Steak", "quantity": 2, "price": 20, "purchased": True}).json()
    assert again["purchased_at"] == "2024-02-07T12:00:00+00:00"
    assert client.get("/api/shopping/week-spend").json()["week_spend"] == 40.0
