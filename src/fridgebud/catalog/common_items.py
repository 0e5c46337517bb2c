"""Known grocery items used for quick-add and voice matching."""

from dataclasses import dataclass

from fridgebud.models import IngredientCategory, StorageLocation


@dataclass(frozen=True)
class CommonItem:
    """A predefined item with its usual category and storage location."""

    name: str
    category: IngredientCategory
    default_location: StorageLocation
    typical_freshness_days: int | None = None


COMMON_ITEMS: list[CommonItem] = [
    # Proteins
    CommonItem("Chicken breast", "protein", "fridge", 3),
    CommonItem("Chicken thighs", "protein", "fridge", 3),
    CommonItem("Ground beef", "protein", "fridge", 2),
    CommonItem("Salmon", "protein", "fridge", 2),
    CommonItem("Shrimp", "protein", "freezer", 90),
    CommonItem("Eggs", "protein", "fridge", 21),
    CommonItem("Tofu", "protein", "fridge", 7),
    CommonItem("Bacon", "protein", "fridge", 7),
    CommonItem("Sausage", "protein", "fridge", 5),
    # Vegetables
    CommonItem("Spinach", "vegetable", "fridge", 5),
    CommonItem("Broccoli", "vegetable", "fridge", 5),
    CommonItem("Bell peppers", "vegetable", "fridge", 7),
    CommonItem("Onions", "vegetable", "pantry", 30),
    CommonItem("Garlic", "vegetable", "pantry", 21),
    CommonItem("Tomatoes", "vegetable", "fridge", 7),
    CommonItem("Carrots", "vegetable", "fridge", 14),
    CommonItem("Zucchini", "vegetable", "fridge", 5),
    CommonItem("Mushrooms", "vegetable", "fridge", 5),
    CommonItem("Lettuce", "vegetable", "fridge", 5),
    CommonItem("Cucumber", "vegetable", "fridge", 7),
    CommonItem("Avocado", "vegetable", "fridge", 4),
    CommonItem("Potatoes", "vegetable", "pantry", 21),
    CommonItem("Sweet potatoes", "vegetable", "pantry", 21),
    # Fruits
    CommonItem("Bananas", "fruit", "pantry", 5),
    CommonItem("Apples", "fruit", "fridge", 14),
    CommonItem("Lemons", "fruit", "fridge", 14),
    CommonItem("Limes", "fruit", "fridge", 14),
    CommonItem("Berries", "fruit", "fridge", 4),
    # Dairy
    CommonItem("Milk", "dairy", "fridge", 7),
    CommonItem("Greek yogurt", "dairy", "fridge", 14),
    CommonItem("Butter", "dairy", "fridge", 30),
    CommonItem("Cheddar cheese", "dairy", "fridge", 21),
    CommonItem("Parmesan", "dairy", "fridge", 30),
    CommonItem("Feta cheese", "dairy", "fridge", 14),
    CommonItem("Cream cheese", "dairy", "fridge", 14),
    CommonItem("Heavy cream", "dairy", "fridge", 10),
    # Grains
    CommonItem("Rice", "grain", "pantry", 365),
    CommonItem("Pasta", "grain", "pantry", 365),
    CommonItem("Bread", "grain", "pantry", 5),
    CommonItem("Tortillas", "grain", "fridge", 14),
    CommonItem("Quinoa", "grain", "pantry", 365),
    CommonItem("Oats", "grain", "pantry", 365),
    # Condiments
    CommonItem("Soy sauce", "condiment", "pantry", 365),
    CommonItem("Olive oil", "condiment", "pantry", 365),
    CommonItem("Hot sauce", "condiment", "fridge", 180),
    CommonItem("Mayo", "condiment", "fridge", 60),
    CommonItem("Mustard", "condiment", "fridge", 180),
    CommonItem("Ketchup", "condiment", "fridge", 180),
    CommonItem("Salsa", "condiment", "fridge", 14),
    CommonItem("Hummus", "condiment", "fridge", 7),
    # Spices (always pantry, long shelf life)
    CommonItem("Salt", "spice", "pantry"),
    CommonItem("Black pepper", "spice", "pantry"),
    CommonItem("Cumin", "spice", "pantry"),
    CommonItem("Paprika", "spice", "pantry"),
    CommonItem("Italian seasoning", "spice", "pantry"),
    CommonItem("Chili flakes", "spice", "pantry"),
    # Frozen
    CommonItem("Frozen vegetables", "frozen", "freezer", 180),
    CommonItem("Frozen berries", "frozen", "freezer", 180),
    CommonItem("Ice cream", "frozen", "freezer", 60),
    # Beverages
    CommonItem("Orange juice", "beverage", "fridge", 7),
    CommonItem("Almond milk", "beverage", "fridge", 7),
    CommonItem("Coffee", "beverage", "pantry", 90),
]


def items_by_category() -> dict[str, list[CommonItem]]:
    """Group common items by category, preserving catalog order."""
    grouped: dict[str, list[CommonItem]] = {}
    for item in COMMON_ITEMS:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def find_common_item(name: str) -> CommonItem | None:
    """Look up a common item by case-insensitive name."""
    wanted = name.strip().lower()
    for item in COMMON_ITEMS:
        if item.name.lower() == wanted:
            return item
    return None


def get_recent_items(recent_names: list[str]) -> list[CommonItem]:
    """Resolve recently used names to catalog entries, dropping unknown names."""
    by_name = {item.name: item for item in COMMON_ITEMS}
    return [by_name[name] for name in recent_names if name in by_name]
