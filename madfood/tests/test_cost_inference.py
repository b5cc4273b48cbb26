from datetime import datetime, timezone
import unittest

from madfood.domain.Ingredient import RecipeIngredient
from madfood.domain.PantryItem import PantryItem
from madfood.domain.PlannedMeal import PlannedMeal
from madfood.domain.ShoppingList import ShoppingItem
from madfood.logic.costs.inference import (
    build_price_index, infer_meal_cost, ingredient_line_cost, parse_numeric_quantity
)

OLDER = datetime(2024, 2, 1, tzinfo=timezone.utc)
NEWER = datetime(2024, 2, 5, tzinfo=timezone.utc)


class TestParseNumericQuantity(unittest.TestCase):

    def test_values(self):
        cases = {
            "2": 2.0,
            "1,5": 1.5,
            "2 cups": 2.0,
            ".5": 0.5,
            "a pinch": 1.0,
            "": 1.0,
            "   ": 1.0,
            "0": 1.0,
            "-3": 1.0,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parse_numeric_quantity(text), expected)
        self.assertEqual(parse_numeric_quantity(None), 1.0)


class TestPriceIndex(unittest.TestCase):

    def test_pantry_first_then_most_recent_shopping_price(self):
        pantry = [PantryItem("Flour", estimated_price=1.5), PantryItem("Eggs", estimated_price=0)]
        shopping = [
            ShoppingItem("flour", price=9, updated_at=NEWER),
            ShoppingItem("Eggs", price=0.3, updated_at=OLDER),
            ShoppingItem(" eggs ", price=0.5, updated_at=NEWER),
            ShoppingItem("Salt", price=0, updated_at=NEWER),
        ]
        index = build_price_index(pantry, shopping)
        self.assertEqual(index, {"flour": 1.5, "eggs": 0.5})

    def test_accepts_raw_rows(self):
        index = build_price_index([{"name": "Milk", "estimated_price": "2.00"}],
                                  [{"name": "Bread", "price": 3, "updated_at": "2024-02-05T00:00:00Z"}])
        self.assertEqual(index, {"milk": 2.0, "bread": 3.0})


    def test_naive_and_aware_updated_at_mix(self):
        shopping = [
            ShoppingItem("Milk", price=2, updated_at=datetime(2024, 2, 5)),
            ShoppingItem("milk", price=1.2, updated_at=OLDER),
            {"name": "Bread", "price": 3, "updated_at": "2024-02-05T00:00:00Z"},
            ShoppingItem("Bread", price=9),
        ]
        self.assertEqual(build_price_index([], shopping), {"milk": 2.0, "bread": 3.0})

class TestInferMealCost(unittest.TestCase):

    def setUp(self):
        self.index = {"flour": 1.50, "sugar": 0.80}
        self.ingredients = [RecipeIngredient("flour", "2"), RecipeIngredient("sugar", "")]

    def test_flour_and_sugar(self):
        meal = PlannedMeal(recipe_id="r1", estimated_cost=9.99)
        self.assertEqual(infer_meal_cost(meal, self.ingredients, self.index), 3.80)

    def test_falls_back_to_stored_estimate_when_nothing_matches(self):
        meal = PlannedMeal(recipe_id="r1", estimated_cost=9.99)
        self.assertEqual(infer_meal_cost(meal, [RecipeIngredient("saffron", "1")], self.index), 9.99)

    def test_partial_match_ignores_stored_estimate(self):
        meal = PlannedMeal(recipe_id="r1", estimated_cost=9.99)
        ingredients = [RecipeIngredient(" Flour ", "2"), RecipeIngredient("saffron", "1")]
        self.assertEqual(infer_meal_cost(meal, ingredients, self.index), 3.0)

    def test_meal_without_recipe_uses_stored_estimate(self):
        meal = PlannedMeal(meal_name="Takeout", estimated_cost=14.5)
        self.assertEqual(infer_meal_cost(meal, self.ingredients, self.index), 14.5)

    def test_ingredient_line_cost_accepts_dicts(self):
        self.assertEqual(ingredient_line_cost({"name": "SUGAR", "quantity": "3"}, self.index), 0.8 * 3)
        self.assertEqual(ingredient_line_cost({"name": "water"}, self.index), 0.0)


if __name__ == '__main__':
    unittest.main()
