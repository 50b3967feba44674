"""Built-in ingredient catalog and sample recipes used to seed an empty DB.

Nutrients are per 100 g. Sample recipe lines reference catalog ingredients by
name together with an amount in the ingredient's unit.
"""

INGREDIENTS_DATA = [
    {"name": "Rolled oats", "unit_name": "cup", "unit_grams": 80, "energy_kcal": 379, "protein": 13.2, "carbs": 67.7, "fat": 6.5},
    {"name": "Milk", "unit_name": "cup", "unit_grams": 244, "energy_kcal": 61, "protein": 3.2, "carbs": 4.8, "fat": 3.3},
    {"name": "Blueberries", "unit_name": "cup", "unit_grams": 148, "energy_kcal": 57, "protein": 0.7, "carbs": 14.5, "fat": 0.3},
    {"name": "Egg", "unit_name": "piece", "unit_grams": 50, "energy_kcal": 143, "protein": 12.6, "carbs": 0.7, "fat": 9.5},
    {"name": "Wholegrain bread", "unit_name": "slice", "unit_grams": 40, "energy_kcal": 247, "protein": 13.0, "carbs": 41.0, "fat": 3.4},
    {"name": "Greek yogurt", "unit_name": "cup", "unit_grams": 200, "energy_kcal": 97, "protein": 9.0, "carbs": 3.9, "fat": 5.0},
    {"name": "Honey", "unit_name": "tbsp", "unit_grams": 21, "energy_kcal": 304, "protein": 0.3, "carbs": 82.4, "fat": 0.0},
    {"name": "Chicken breast", "unit_name": "piece", "unit_grams": 170, "energy_kcal": 165, "protein": 31.0, "carbs": 0.0, "fat": 3.6},
    {"name": "Brown rice", "unit_name": "cup", "unit_grams": 195, "energy_kcal": 123, "protein": 2.7, "carbs": 25.6, "fat": 1.0},
    {"name": "Broccoli", "unit_name": "cup", "unit_grams": 91, "energy_kcal": 34, "protein": 2.8, "carbs": 6.6, "fat": 0.4},
    {"name": "Olive oil", "unit_name": "tbsp", "unit_grams": 13.5, "energy_kcal": 884, "protein": 0.0, "carbs": 0.0, "fat": 100.0},
    {"name": "Salmon fillet", "unit_name": "piece", "unit_grams": 150, "energy_kcal": 208, "protein": 20.4, "carbs": 0.0, "fat": 13.4},
    {"name": "Potato", "unit_name": "piece", "unit_grams": 173, "energy_kcal": 77, "protein": 2.0, "carbs": 17.5, "fat": 0.1},
    {"name": "Chickpeas", "unit_name": "cup", "unit_grams": 164, "energy_kcal": 164, "protein": 8.9, "carbs": 27.4, "fat": 2.6},
    {"name": "Tomato", "unit_name": "piece", "unit_grams": 123, "energy_kcal": 18, "protein": 0.9, "carbs": 3.9, "fat": 0.2},
    {"name": "Whole wheat pasta", "unit_name": "cup", "unit_grams": 140, "energy_kcal": 124, "protein": 5.3, "carbs": 26.5, "fat": 0.5},
]

RECIPES_DATA = [
    {
        "name": "Blueberry Oatmeal",
        "duration": 10,
        "description": "Simmer the oats in milk and top with blueberries.",
        "tags": "B",
        "ingredients": [("Rolled oats", 0.75), ("Milk", 1), ("Blueberries", 0.5)],
    },
    {
        "name": "Scrambled Eggs on Toast",
        "duration": 15,
        "description": "Scramble the eggs and serve on toasted bread.",
        "tags": "B",
        "ingredients": [("Egg", 3), ("Wholegrain bread", 2)],
    },
    {
        "name": "Yogurt with Honey",
        "duration": 5,
        "description": "Stir honey into the yogurt.",
        "tags": "BL",
        "ingredients": [("Greek yogurt", 1), ("Honey", 1)],
    },
    {
        "name": "Chicken Rice Bowl",
        "duration": 35,
        "description": "Grill the chicken, steam broccoli and serve over rice.",
        "tags": "LD",
        "ingredients": [("Chicken breast", 1), ("Brown rice", 1), ("Broccoli", 1), ("Olive oil", 0.5)],
    },
    {
        "name": "Chickpea Salad",
        "duration": 15,
        "description": "Toss chickpeas with tomato and olive oil.",
        "tags": "L",
        "ingredients": [("Chickpeas", 1), ("Tomato", 2), ("Olive oil", 1)],
    },
    {
        "name": "Baked Salmon with Potatoes",
        "duration": 45,
        "description": "Bake the salmon and potatoes with olive oil.",
        "tags": "D",
        "ingredients": [("Salmon fillet", 1), ("Potato", 2), ("Olive oil", 1)],
    },
    {
        "name": "Tomato Pasta",
        "duration": 25,
        "description": "Cook the pasta and toss with a quick tomato sauce.",
        "tags": "D",
        "ingredients": [("Whole wheat pasta", 2), ("Tomato", 3), ("Olive oil", 1)],
    },
]
