"""Mock recipe catalog and user data for development and testing.

The catalog is small but covers every meal slot, both anti-inflammatory and
neutral dishes, and vegetable-heavy recipes that earn evidence claims.
"""

from __future__ import annotations


def _ing(name: str, quantity: float, unit: str, category: str) -> dict:
    return {"name": name, "quantity": quantity, "unit": unit, "category": category}


def get_mock_recipe_records() -> list[dict]:
    """Return raw catalog records (the shape a recipe store would hand over)."""
    return [
        {
            "id": "r001",
            "title": "Overnight Oats with Blueberries",
            "meal_types": ["breakfast"],
            "difficulty": "easy",
            "prep_time_minutes": 10,
            "cook_time_minutes": 0,
            "dietary_tags": ["vegetarian", "high_fiber"],
            "calories_per_serving": 380,
            "protein_g_per_serving": 14,
            "carbs_g_per_serving": 58,
            "fat_g_per_serving": 10,
            "fiber_g_per_serving": 9,
            "anti_inflammatory_score": 6,
            "ingredients": [
                _ing("Rolled oats", 60, "g", "grains"),
                _ing("Blueberries", 80, "g", "fruits"),
                _ing("Chia seeds", 10, "g", "seeds"),
                _ing("Almond milk", 200, "ml", "dairy_alternatives"),
                _ing("Cinnamon", 1, "tsp", "spices"),
            ],
        },
        {
            "id": "r002",
            "title": "Spinach and Mushroom Omelette",
            "meal_types": ["breakfast"],
            "difficulty": "medium",
            "prep_time_minutes": 10,
            "cook_time_minutes": 10,
            "dietary_tags": ["vegetarian", "gluten_free", "low_carb"],
            "calories_per_serving": 320,
            "protein_g_per_serving": 22,
            "carbs_g_per_serving": 6,
            "fat_g_per_serving": 22,
            "fiber_g_per_serving": 3,
            "anti_inflammatory_score": 4,
            "ingredients": [
                _ing("Eggs", 3, "pcs", "protein"),
                _ing("Spinach", 60, "g", "vegetables"),
                _ing("Mushrooms", 80, "g", "vegetables"),
                _ing("Olive oil", 1, "tbsp", "oils"),
            ],
        },
        {
            "id": "r003",
            "title": "White Toast with Jam",
            "meal_types": ["breakfast", "snack"],
            "difficulty": "easy",
            "prep_time_minutes": 5,
            "cook_time_minutes": 3,
            "dietary_tags": ["vegetarian"],
            "calories_per_serving": 290,
            "protein_g_per_serving": 7,
            "carbs_g_per_serving": 55,
            "fat_g_per_serving": 4,
            "fiber_g_per_serving": 1,
            "anti_inflammatory_score": -4,
            "ingredients": [
                _ing("White bread", 2, "slices", "grains"),
                _ing("Strawberry jam", 2, "tbsp", "condiments"),
            ],
        },
        {
            "id": "r004",
            "title": "Turmeric Salmon with Greens",
            "meal_types": ["lunch", "dinner"],
            "difficulty": "medium",
            "prep_time_minutes": 15,
            "cook_time_minutes": 20,
            "dietary_tags": ["gluten_free", "pescatarian", "high_protein"],
            "calories_per_serving": 540,
            "protein_g_per_serving": 38,
            "carbs_g_per_serving": 18,
            "fat_g_per_serving": 32,
            "fiber_g_per_serving": 6,
            "anti_inflammatory_score": 9,
            "ingredients": [
                _ing("Salmon fillet", 180, "g", "protein"),
                _ing("Turmeric", 1, "tsp", "spices"),
                _ing("Ginger", 1, "tbsp", "spices"),
                _ing("Kale", 80, "g", "vegetables"),
                _ing("Olive oil", 1, "tbsp", "oils"),
            ],
        },
        {
            "id": "r005",
            "title": "Lentil and Tomato Soup",
            "meal_types": ["lunch", "dinner"],
            "difficulty": "easy",
            "prep_time_minutes": 15,
            "cook_time_minutes": 35,
            "dietary_tags": ["vegan", "vegetarian", "high_fiber"],
            "calories_per_serving": 420,
            "protein_g_per_serving": 21,
            "carbs_g_per_serving": 62,
            "fat_g_per_serving": 8,
            "fiber_g_per_serving": 15,
            "anti_inflammatory_score": 6,
            "ingredients": [
                _ing("Lentils", 100, "g", "legumes"),
                _ing("Tomatoes", 200, "g", "vegetables"),
                _ing("Onions", 1, "pcs", "vegetables"),
                _ing("Carrots", 1, "pcs", "vegetables"),
                _ing("Cumin", 1, "tsp", "spices"),
            ],
        },
        {
            "id": "r006",
            "title": "Roasted Autumn Vegetable Bowl",
            "meal_types": ["lunch", "dinner"],
            "difficulty": "easy",
            "prep_time_minutes": 15,
            "cook_time_minutes": 40,
            "dietary_tags": ["vegan", "vegetarian", "gluten_free"],
            "calories_per_serving": 450,
            "protein_g_per_serving": 12,
            "carbs_g_per_serving": 60,
            "fat_g_per_serving": 16,
            "fiber_g_per_serving": 12,
            "anti_inflammatory_score": 7,
            "ingredients": [
                _ing("Butternut squash", 200, "g", "vegetables"),
                _ing("Brussels sprouts", 120, "g", "vegetables"),
                _ing("Red onion", 1, "pcs", "vegetables"),
                _ing("Beetroot", 1, "pcs", "vegetables"),
                _ing("Pumpkin seeds", 15, "g", "seeds"),
            ],
        },
        {
            "id": "r007",
            "title": "Beef Steak with Fries",
            "meal_types": ["dinner"],
            "difficulty": "medium",
            "prep_time_minutes": 10,
            "cook_time_minutes": 25,
            "dietary_tags": ["gluten_free", "high_protein"],
            "calories_per_serving": 880,
            "protein_g_per_serving": 52,
            "carbs_g_per_serving": 60,
            "fat_g_per_serving": 48,
            "fiber_g_per_serving": 5,
            "anti_inflammatory_score": -5,
            "ingredients": [
                _ing("Red meat steak", 250, "g", "protein"),
                _ing("Potatoes", 250, "g", "vegetables"),
                _ing("Butter", 20, "g", "dairy"),
            ],
        },
        {
            "id": "r008",
            "title": "Quinoa Tofu Stir-Fry",
            "meal_types": ["lunch", "dinner"],
            "difficulty": "medium",
            "prep_time_minutes": 20,
            "cook_time_minutes": 15,
            "dietary_tags": ["vegan", "vegetarian", "high_protein"],
            "calories_per_serving": 510,
            "protein_g_per_serving": 26,
            "carbs_g_per_serving": 58,
            "fat_g_per_serving": 18,
            "fiber_g_per_serving": 8,
            "anti_inflammatory_score": 5,
            "ingredients": [
                _ing("Quinoa", 80, "g", "grains"),
                _ing("Tofu", 150, "g", "protein"),
                _ing("Broccoli", 100, "g", "vegetables"),
                _ing("Bell pepper", 1, "pcs", "vegetables"),
                _ing("Soy sauce", 1, "tbsp", "condiments"),
                _ing("Cashews", 15, "g", "nuts"),
            ],
        },
        {
            "id": "r009",
            "title": "Mixed Nuts and Berries",
            "meal_types": ["snack"],
            "difficulty": "easy",
            "prep_time_minutes": 2,
            "cook_time_minutes": 0,
            "dietary_tags": ["vegan", "vegetarian", "gluten_free"],
            "calories_per_serving": 230,
            "protein_g_per_serving": 6,
            "carbs_g_per_serving": 14,
            "fat_g_per_serving": 17,
            "fiber_g_per_serving": 4,
            "anti_inflammatory_score": 7,
            "ingredients": [
                _ing("Mixed nuts", 30, "g", "nuts"),
                _ing("Blackberries", 60, "g", "fruits"),
                _ing("Walnuts", 10, "g", "nuts"),
            ],
        },
        {
            "id": "r010",
            "title": "Greek Yogurt with Honey",
            "meal_types": ["snack", "breakfast"],
            "difficulty": "easy",
            "prep_time_minutes": 3,
            "cook_time_minutes": 0,
            "dietary_tags": ["vegetarian", "gluten_free"],
            "calories_per_serving": 210,
            "protein_g_per_serving": 15,
            "carbs_g_per_serving": 24,
            "fat_g_per_serving": 6,
            "fiber_g_per_serving": 0,
            "anti_inflammatory_score": 1,
            "ingredients": [
                _ing("Greek yogurt", 170, "g", "dairy"),
                _ing("Honey", 1, "tbsp", "sweeteners"),
            ],
        },
        {
            "id": "r011",
            "title": "Slow-Braised Beef Bourguignon",
            "meal_types": ["dinner"],
            "difficulty": "hard",
            "prep_time_minutes": 40,
            "cook_time_minutes": 180,
            "dietary_tags": ["dairy_free"],
            "calories_per_serving": 720,
            "protein_g_per_serving": 48,
            "carbs_g_per_serving": 22,
            "fat_g_per_serving": 40,
            "fiber_g_per_serving": 4,
            "anti_inflammatory_score": -2,
            "ingredients": [
                _ing("Beef chuck", 250, "g", "protein"),
                _ing("Red wine", 150, "ml", "beverages"),
                _ing("Mushrooms", 100, "g", "vegetables"),
                _ing("Carrots", 1, "pcs", "vegetables"),
                _ing("Onions", 1, "pcs", "vegetables"),
            ],
        },
        {
            "id": "r012",
            "title": "Chickpea Spinach Curry",
            "meal_types": ["lunch", "dinner"],
            "difficulty": "medium",
            "prep_time_minutes": 15,
            "cook_time_minutes": 30,
            "dietary_tags": ["vegan", "vegetarian", "gluten_free", "high_fiber"],
            "calories_per_serving": 480,
            "protein_g_per_serving": 19,
            "carbs_g_per_serving": 56,
            "fat_g_per_serving": 17,
            "fiber_g_per_serving": 13,
            "anti_inflammatory_score": 7,
            "ingredients": [
                _ing("Chickpeas", 200, "g", "legumes"),
                _ing("Spinach", 100, "g", "vegetables"),
                _ing("Tomatoes", 150, "g", "vegetables"),
                _ing("Turmeric", 1, "tsp", "spices"),
                _ing("Ginger", 1, "tsp", "spices"),
                _ing("Coconut milk", 100, "ml", "dairy_alternatives"),
            ],
        },
    ]


def get_mock_recent_meal_ids() -> list[str]:
    """Recipe ids the mock user ate in the last 7 days."""
    return ["r003", "r005"]


def get_mock_user_profile_record() -> dict:
    """A moderately inflamed, vitamin-D-low adult who cooks at an intermediate level."""
    return {
        "dietary_preferences": ["vegetarian", "high_fiber"],
        "cooking_skill_level": "intermediate",
        "meal_prep_time": "medium",
        "daily_calories_target": 2000,
        "biomarkers": {
            "crp_level": 4.2,
            "cholesterol_total": 185,
            "glucose_fasting": 92,
            "vitamin_d": 24,
            "iron_serum": 85,
        },
    }


def get_mock_learning_profile_record() -> dict:
    return {
        "meal_preferences_learned": {
            "Spinach": 0.6,
            "Tomatoes": 0.5,
            "Salmon fillet": 0.4,
            "Blueberries": 0.7,
        },
        "novelty_tolerance": 0.6,
        "dietary_compliance_score": 82,
        "preference_confidence": 0.55,
        "interaction_count": 4,
    }
