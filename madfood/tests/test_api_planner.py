def test_calendar_month(client):
    client.put("/api/plans/2024-02-07", json={"meal_name": "Tacos", "estimated_cost": 12.5})
    resp = client.get("/api/calendar", params={"month": "2024-02-20"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["month"] == "2024-02-01"
    assert data["title"] == "February 2024"
    assert data["previous_month"] == "2024-01-01"
    assert data["next_month"] == "2024-03-01"
    assert data["weekday_labels"][0] == "Sun"
    assert len(data["weeks"]) == 5
    today = [c["date"] for week in data["weeks"] for c in week if c["is_today"]]
    assert today == ["2024-02-07"]
    assert data["plans"]["2024-02-07"]["meal_name"] == "Tacos"


def test_calendar_defaults_to_current_month(client):
    assert client.get("/api/calendar").json()["month"] == "2024-02-01"


def test_bad_date_is_rejected(client):
    assert client.get("/api/calendar", params={"month": "02/2024"}).status_code == 400
    assert client.put("/api/plans/tomorrow", json={"meal_name": "Soup"}).status_code == 400


def test_save_then_clear_day(client):
    resp = client.put("/api/plans/2024-02-08", json={"meal_name": "  Soup ", "already_have_in_pantry": True,
                                                     "purchased": True, "estimated_cost": -3})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["deleted"] is False
    assert body["plan"]["meal_name"] == "Soup"
    assert body["plan"]["purchased"] is False
    assert body["plan"]["estimated_cost"] == 0.0

    cleared = client.put("/api/plans/2024-02-08", json={"meal_name": "   "}).json()
    assert cleared == {"planned_date": "2024-02-08", "deleted": True, "plan": None}
    assert client.get("/api/plans", params={"month": "2024-02-01"}).json()["plans"] == []


def test_favorites_carry_recipe_titles(client):
    recipe = client.post("/api/recipes", json={"title": "Lasagna"}).json()
    client.put("/api/plans/2024-02-05", json={"recipe_id": recipe["id"], "is_favorite": True})
    client.put("/api/plans/2024-02-06", json={"meal_name": "Toast"})
    favorites = client.get("/api/plans/favorites").json()["favorites"]
    assert [(f["planned_date"], f["recipe_title"]) for f in favorites] == [("2024-02-05", "Lasagna")]


def test_week_estimate(client):
    client.put("/api/plans/2024-02-05", json={"meal_name": "A", "estimated_cost": 9.75})
    client.put("/api/plans/2024-02-10", json={"meal_name": "B", "estimated_cost": 2.5})
    client.put("/api/plans/2024-02-11", json={"meal_name": "C", "estimated_cost": 99})
    data = client.get("/api/plans/week-estimate").json()
    assert data == {"start": "2024-02-04", "end": "2024-02-10", "estimated_meal_cost": 12.25}


def test_dashboard(client):
    recipe = client.post("/api/recipes", json={"title": "Lasagna"}).json()
    client.put("/api/plans/2024-02-07", json={"meal_name": "Tacos", "estimated_cost": 8})
    client.put("/api/plans/2024-02-09", json={"recipe_id": recipe["id"], "estimated_cost": 4.25})
    grocery = client.post("/api/shopping-lists", json={"name": "Weekly"}).json()
    client.post(f"/api/shopping-lists/{grocery['id']}/items",
                json={"name": "Eggs", "quantity": 12, "price": 0.25, "purchased": True})

    data = client.get("/api/dashboard").json()
    assert data["today"] == "2024-02-07"
    assert data["today_label"] == "Wednesday, Feb 7"
    assert data["planned_days"] == 2
    assert data["next_planned_meal"] == {"planned_date": "2024-02-07", "meal_name": "Tacos"}
    assert data["next_available_planning_date"] == "2024-02-08"
    assert data["week_spend"] == 3.0
    assert data["week_spend_label"] == "$3.00"
    assert data["week_estimated_meal_cost"] == 12.25
    assert set(data["motivation"]) == {"quote", "encouragement"}


def test_activity_feed(client):
    client.put("/api/plans/2024-02-07", json={"meal_name": "Tacos"})
    client.put("/api/plans/2024-02-07", json={})
    data = client.get("/api/activity").json()
    assert [(e["type"], e["deleted"]) for e in data["events"]] == [("plan.saved", False), ("plan.saved", True)]
    assert client.get("/api/activity", params={"since": data["next_cursor"]}).json()["events"] == []
