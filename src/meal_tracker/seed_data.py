"""Seed tables for the reference catalog and the demo user.

Ingredient nutrition values are per 100 grams.
"""

INGREDIENTS = [
    {
        "id": 1,
        "name": "Chicken Breast",
        "category": "Protein",
        "calories": 165,
        "protein": 31,
        "carbs": 0,
        "fat": 3.6,
    },
    {
        "id": 2,
        "name": "Brown Rice",
        "category": "Grain",
        "calories": 112,
        "protein": 2.6,
        "carbs": 23.5,
        "fat": 0.9,
    },
    {
        "id": 3,
        "name": "Broccoli",
        "category": "Vegetable",
        "calories": 34,
        "protein": 2.8,
        "carbs": 6.6,
        "fat": 0.4,
    },
    {
        "id": 4,
        "name": "Salmon",
        "category": "Protein",
        "calories": 208,
        "protein": 20,
        "carbs": 0,
        "fat": 13,
    },
    {
        "id": 5,
        "name": "Avocado",
        "category": "Fruit",
        "calories": 160,
        "protein": 2,
        "carbs": 8.5,
        "fat": 14.7,
    },
    {
        "id": 6,
        "name": "Eggs",
        "category": "Protein",
        "calories": 155,
        "protein": 13,
        "carbs": 1.1,
        "fat": 11,
    },
    {
        "id": 7,
        "name": "Spinach",
        "category": "Vegetable",
        "calories": 23,
        "protein": 2.9,
        "carbs": 3.6,
        "fat": 0.4,
    },
    {
        "id": 8,
        "name": "Sweet Potato",
        "category": "Vegetable",
        "calories": 86,
        "protein": 1.6,
        "carbs": 20.1,
        "fat": 0.1,
    },
    {
        "id": 9,
        "name": "Olive Oil",
        "category": "Oil",
        "calories": 884,
        "protein": 0,
        "carbs": 0,
        "fat": 100,
    },
    {
        "id": 10,
        "name": "Quinoa",
        "category": "Grain",
        "calories": 120,
        "protein": 4.4,
        "carbs": 21.3,
        "fat": 1.9,
    },
    {
        "id": 11,
        "name": "Tomato",
        "category": "Vegetable",
        "calories": 18,
        "protein": 0.9,
        "carbs": 3.9,
        "fat": 0.2,
    },
    {
        "id": 12,
        "name": "Beef (lean)",
        "category": "Protein",
        "calories": 250,
        "protein": 26,
        "carbs": 0,
        "fat": 17,
    },
    {
        "id": 13,
        "name": "Pasta",
        "category": "Grain",
        "calories": 131,
        "protein": 5,
        "carbs": 25,
        "fat": 1.1,
    },
    {
        "id": 14,
        "name": "Cheese (cheddar)",
        "category": "Dairy",
        "calories": 402,
        "protein": 25,
        "carbs": 1.3,
        "fat": 33,
    },
    {
        "id": 15,
        "name": "Pizza Dough",
        "category": "Grain",
        "calories": 230,
        "protein": 8,
        "carbs": 45,
        "fat": 2,
    },
]

COOKING_METHODS = [
    {
        "id": 1,
        "name": "Raw",
        "calorie_multiplier": 1.0,
        "description": "Uncooked, natural state",
    },
    {
        "id": 2,
        "name": "Boiled",
        "calorie_multiplier": 0.95,
        "description": "Cooked in boiling water",
    },
    {
        "id": 3,
        "name": "Steamed",
        "calorie_multiplier": 0.98,
        "description": "Cooked with steam",
    },
    {
        "id": 4,
        "name": "Baked",
        "calorie_multiplier": 1.05,
        "description": "Cooked in an oven",
    },
    {
        "id": 5,
        "name": "Grilled",
        "calorie_multiplier": 1.02,
        "description": "Cooked over direct heat",
    },
    {
        "id": 6,
        "name": "Fried",
        "calorie_multiplier": 1.5,
        "description": "Cooked in oil",
    },
    {
        "id": 7,
        "name": "Roasted",
        "calorie_multiplier": 1.1,
        "description": "Cooked in an oven, typically with oil",
    },
    {
        "id": 8,
        "name": "Sautéed",
        "calorie_multiplier": 1.3,
        "description": "Cooked quickly in a small amount of oil",
    },
]

# Entries are (ingredient_id, grams, cooking_method_id).
PREMADE_MEALS = [
    {
        "id": 1,
        "name": "Grilled Chicken with Brown Rice and Broccoli",
        "category": "Healthy",
        "ingredients": [(1, 150, 5), (2, 100, 2), (3, 100, 3)],
    },
    {
        "id": 2,
        "name": "Salmon with Sweet Potato",
        "category": "Healthy",
        "ingredients": [(4, 150, 4), (8, 200, 4), (9, 10, None)],
    },
    {
        "id": 3,
        "name": "Vegetable Omelette",
        "category": "Breakfast",
        "ingredients": [(6, 150, 8), (7, 50, 8), (11, 50, 1), (9, 10, None)],
    },
    {
        "id": 4,
        "name": "Beef Pasta",
        "category": "Dinner",
        "ingredients": [(12, 120, 8), (13, 150, 2), (11, 80, 8), (9, 15, None)],
    },
    {
        "id": 5,
        "name": "Cheese Pizza",
        "category": "Fast Food",
        "ingredients": [(15, 200, 4), (14, 100, 4), (11, 50, 4)],
    },
]

DEMO_USER_ID = 1

DEMO_MEALS = [
    {
        "name": "Breakfast",
        "meal_type": "Breakfast",
        "time": "8:30 AM",
        "ingredients": [
            {"name": "Oatmeal with banana", "quantity": "250g", "calories": 250},
            {"name": "Black coffee", "quantity": "240ml", "calories": 5},
        ],
        "total_nutrition": {"calories": 320, "protein": 12, "carbs": 55, "fat": 5},
    },
    {
        "name": "Lunch",
        "meal_type": "Lunch",
        "time": "12:45 PM",
        "ingredients": [
            {
                "name": "Grilled chicken salad",
                "quantity": "350g",
                "calories": 400,
                "cooking_method": "Grilled",
            },
            {"name": "Whole grain bread", "quantity": "1 slice", "calories": 120},
        ],
        "total_nutrition": {"calories": 520, "protein": 40, "carbs": 30, "fat": 20},
    },
    {
        "name": "Dinner",
        "meal_type": "Dinner",
        "time": "7:30 PM",
        "ingredients": [
            {
                "name": "Salmon with vegetables",
                "quantity": "300g",
                "calories": 350,
                "cooking_method": "Baked",
            },
            {
                "name": "Brown rice",
                "quantity": "150g",
                "calories": 160,
                "cooking_method": "Boiled",
            },
        ],
        "total_nutrition": {"calories": 425, "protein": 35, "carbs": 25, "fat": 18},
    },
]

DEMO_HABITS = [
    {
        "name": "Drink 8 glasses of water",
        "description": "Stay hydrated throughout the day",
        "type": "hydration",
        "frequency": "daily",
        "time_of_day": "all-day",
        "streak_days": 5,
        "background_color": "blue",
    },
    {
        "name": "No processed sugar",
        "description": "Avoid foods with added sugar",
        "type": "diet",
        "frequency": "daily",
        "time_of_day": "all-day",
        "streak_days": 3,
        "background_color": "red",
    },
    {
        "name": "Take vitamins",
        "description": "Daily supplements",
        "type": "supplement",
        "frequency": "daily",
        "time_of_day": "morning",
        "streak_days": 10,
        "background_color": "green",
    },
]

DEMO_GOALS = [
    {
        "id": 1,
        "name": "Drink water (2L)",
        "current": 3,
        "target": 8,
        "unit": "glasses",
        "color": "bg-blue-500",
    },
    {
        "id": 2,
        "name": "Eat vegetables (300g)",
        "current": 150,
        "target": 300,
        "unit": "g",
        "color": "bg-green-500",
    },
    {
        "id": 3,
        "name": "Limit sugar (25g)",
        "current": 18,
        "target": 25,
        "unit": "g",
        "color": "bg-red-500",
    },
    {
        "id": 4,
        "name": "No junk food",
        "current": 1,
        "target": 1,
        "unit": "",
        "color": "bg-green-500",
        "completed": True,
    },
]

DEMO_CHALLENGES = [
    {
        "id": 1,
        "title": "7 Day Protein Challenge",
        "description": "Reach your daily protein goals for 7 consecutive days",
        "current": 3,
        "target": 7,
        "bg_color": "from-blue-500 to-indigo-600",
    },
    {
        "id": 2,
        "title": "Sugar Detox Week",
        "description": "Stay under 25g of added sugar each day for a week",
        "current": 4,
        "target": 7,
        "bg_color": "from-green-500 to-teal-600",
    },
    {
        "id": 3,
        "title": "Hydration Quest",
        "description": "Drink 2L of water daily for 10 consecutive days",
        "current": 6,
        "target": 10,
        "bg_color": "from-purple-500 to-pink-600",
    },
]
