"""Listes de choix partagées par le questionnaire et le formulaire admin"""

HOUSEHOLD_SIZES = ["1", "2", "3", "4+"]

DIETARY_STYLES = [
    "Balanced",
    "Protein-heavy",
    "Low carb",
    "Vegetarian",
    "Vegan",
    "Halal",
    "Gluten-free",
]

ALLERGIES = ["None", "Nuts", "Dairy", "Gluten", "Shellfish", "Eggs", "Soy"]

SPICE_LEVELS = ["Mild 😊", "Medium 🌶️", "Spicy 🔥"]

CUISINES = [
    "Italian",
    "South Asian",
    "Middle Eastern",
    "East Asian",
    "Caribbean",
    "Latin American",
    "African",
    "Mediterranean",
    "American",
    "Japanese",
    "Mexican",
]

COOK_TIMES = ["Under 20 minutes", "30–45 minutes", "Up to 1 hour", "No preference"]

COMFORT_LEVELS = ["Beginner", "Comfortable", "Confident"]

WANT_TO_GROW = ["Yes, I'd love to learn new things", "No, I'm happy with what I know"]

STORES = ["No Frills", "Loblaws", "Real Canadian Superstore", "FreshCo", "Metro"]

CATEGORIES = [
    "Produce",
    "Meat & Poultry",
    "Seafood",
    "Dairy & Eggs",
    "Bakery",
    "Frozen",
    "Pantry",
    "Snacks",
    "Beverages",
    "Deli",
    "Other",
]

ALL_STORES = "All"
DEFAULT_CATEGORY = "Other"
