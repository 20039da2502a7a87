"""Curated grocery category keyword table.

The table is a single ordered sequence of (category, keywords) pairs.
Order is priority: the first category with a matching keyword wins, so
overrides must come before the broad categories they override
(Pantry's "peanut butter" before Fridge's "butter").
"""
from typing import Sequence, Tuple

# Drinks sits before Pantry, so cordial and squash syrups land in Drinks.
CATEGORY_KEYWORD_TABLE: Sequence[Tuple[str, Sequence[str]]] = (
    ("Baby / Kids", (
        "nappy", "nappies", "wipes", "formula", "baby", "kid",
    )),
    ("Toiletries", (
        "shampoo", "conditioner", "toothpaste", "brush", "floss", "razor",
        "shave", "deodorant", "lotion", "cream", "sun", "repellent",
        "vitamin", "medicine", "plaster", "bandage", "tissue",
        "toilet paper", "cotton", "perfume", "serum", "wash", "soap",
    )),
    ("Cleaning & Home", (
        "clean", "detergent", "bag", "foil", "wrap", "bin", "batteries",
        "bulb", "match", "lighter", "charcoal", "fire", "wood", "pool",
        "garden", "pet", "dog", "cat", "food", "litter", "liner", "sponge",
        "cloth", "mop", "broom", "bucket", "bleach", "softener", "polish",
        "dish", "laundry", "paper towel", "vanish", "dishwasher",
    )),
    ("Freezer", (
        "frozen", "ice", "ice cream", "pizza", "pie", "chips", "fry",
        "waffle", "mixed veg", "fish finger", "fish cake", "chicken strip",
        "nugget", "quick meal",
    )),
    ("Drinks", (
        "juice", "water", "soda", "coke", "tea", "coffee", "wine", "beer",
        "alcohol", "drink", "beverage", "squash", "cordial",
    )),
    ("Pantry", (
        "peanut butter", "rice", "pasta", "flour", "sugar", "oil", "sauce",
        "can", "tin", "jar", "cereal", "oats", "nut", "biscuit", "cracker",
        "chip", "chocolate", "sweet", "candy", "bar", "jam", "honey",
        "syrup", "vinegar", "mayo", "lentil", "bean", "chickpea", "couscous",
        "quinoa", "noodle", "soup", "cake", "cookie", "rusk", "mix", "jelly",
        "custard", "yeast", "baking",
    )),
    ("Fridge", (
        # Meat & seafood
        "chicken", "beef", "pork", "lamb", "steak", "mince", "sausage",
        "bacon", "ham", "salami", "chorizo", "fish", "salmon", "tuna",
        "prawn", "shrimp", "calamari", "mussel", "crab", "oyster", "meat",
        "rib", "burger", "patty", "fillet", "chop", "drumstick", "wing",
        "thigh", "breast", "schnitzel", "hake", "haddock", "sardine",
        "anchovy", "poloney", "vienna", "russian", "boerewors", "braai",
        # Dairy & eggs
        "milk", "cheese", "yoghurt", "butter", "cream", "egg", "cheddar",
        "mozzarella", "feta", "parmesan", "gouda", "brie", "camembert",
        "ricotta", "mascarpone", "paneer", "halloumi", "custard",
        "margarine",
        # Spreads
        "hummus", "dip", "olive", "pesto",
    )),
    ("Fresh Produce", (
        "apple", "banana", "orange", "fruit", "vegetable", "spinach", "corn",
        "pea", "avocado", "tomato", "potato", "onion", "garlic", "carrot",
        "broccoli", "lettuce", "cucumber", "pepper", "ginger", "lime",
        "lemon", "berry", "cherry", "grape", "melon", "mushroom", "squash",
        "zucchini", "brinjal", "aubergine", "cauliflower", "cabbage", "kale",
        "celery", "chili", "salad", "rocket", "baby marrow", "butternut",
        "pumpkin", "sweet potato", "gem", "bean", "sprout", "slaw", "mango",
        "watermelon", "naartjie", "clemengold", "granadilla", "pineapple",
        "kiwi", "pear", "peach", "plum", "nectarine", "apricot", "fig",
        "guava", "litchi", "papaya", "pomegranate", "quince", "raspberry",
        "strawberry", "blueberry", "asparagus", "artichoke", "herb", "basil",
        "parsley", "coriander", "mint", "thyme", "rosemary", "oregano",
    )),
    ("Bread & Bakery", (
        "bread", "bagel", "roll", "tortilla", "wrap", "bun", "muffin",
        "croissant", "pita", "panini", "toast", "loaf", "bake", "dough",
        "pastry", "pancake", "sourdough",
    )),
    ("Herbs & Spices", (
        "salt", "pepper", "cumin", "paprika", "spice", "cinnamon", "nutmeg",
        "turmeric", "curry", "garlic powder", "onion powder", "stock",
        "broth", "bullion",
    )),
)

# Categories kept in the store, with their display order.
CURATED_CATEGORIES: Sequence[Tuple[str, int]] = (
    ("Baby / Kids", 1),
    ("Bread & Bakery", 2),
    ("Cleaning & Home", 3),
    ("Drinks", 4),
    ("Freezer", 5),
    ("Fresh Produce", 6),
    ("Fridge", 7),
    ("Herbs & Spices", 8),
    ("Other", 9),
    ("Pantry", 10),
    ("Toiletries", 11),
)

LEGACY_CATEGORY_RENAMES = {
    "Produce": "Fresh Produce",
}
