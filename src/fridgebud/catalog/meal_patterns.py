"""Default meal patterns: templates, not recipes."""

from fridgebud.models import IngredientCategory, IngredientSlot, MealComponent, MealPattern


def _items(role: str, *names: str, optional: bool = False) -> IngredientSlot:
    return IngredientSlot(role=role, specific_items=list(names), optional=optional)


def _categories(
    role: str, *categories: IngredientCategory, optional: bool = False
) -> IngredientSlot:
    return IngredientSlot(role=role, accepted_categories=list(categories), optional=optional)


DEFAULT_MEAL_PATTERNS: list[MealPattern] = [
    MealPattern(
        id="eggs-toast",
        name="Eggs & Toast",
        description="Simple breakfast staple",
        required_slots=[_items("eggs", "Eggs"), _items("bread", "Bread", "Tortillas")],
        flexible_slots=[_categories("cheese", "dairy", optional=True)],
        optional_upgrades=[
            _categories("vegetable", "vegetable", optional=True),
            _items("protein", "Bacon", "Sausage", optional=True),
        ],
        effort="minimal",
        meal_types=["breakfast"],
        tags=["quick", "breakfast", "classic"],
    ),
    MealPattern(
        id="stir-fry",
        name="Stir Fry",
        description="Protein and veggies over rice or noodles",
        required_slots=[_categories("protein", "protein"), _categories("vegetables", "vegetable")],
        flexible_slots=[
            _items("base", "Rice", "Pasta", "Quinoa", optional=True),
            _items("sauce", "Soy sauce", optional=True),
        ],
        optional_upgrades=[_items("aromatics", "Garlic", "Onions", optional=True)],
        effort="moderate",
        meal_types=["lunch", "dinner"],
        tags=["quick", "healthy", "versatile"],
    ),
    MealPattern(
        id="grain-bowl",
        name="Grain Bowl",
        description="Protein over grains with toppings",
        required_slots=[_categories("protein", "protein"), _items("grain", "Rice", "Quinoa")],
        flexible_slots=[_categories("vegetables", "vegetable", optional=True)],
        optional_upgrades=[
            _categories("sauce", "condiment", optional=True),
            _categories("cheese", "dairy", optional=True),
        ],
        effort="moderate",
        meal_types=["lunch", "dinner"],
        tags=["healthy", "meal-prep"],
    ),
    MealPattern(
        id="pasta-dish",
        name="Pasta Night",
        description="Pasta with protein and sauce",
        required_slots=[_items("pasta", "Pasta")],
        flexible_slots=[
            _categories("protein", "protein", optional=True),
            _categories("vegetables", "vegetable", optional=True),
        ],
        optional_upgrades=[
            _items("cheese", "Parmesan", "Feta cheese", optional=True),
            _items("cream", "Heavy cream", optional=True),
        ],
        effort="moderate",
        meal_types=["dinner"],
        tags=["comfort", "classic"],
    ),
    MealPattern(
        id="sheet-pan-dinner",
        name="Sheet Pan Dinner",
        description="Roasted protein with vegetables",
        required_slots=[
            _items("protein", "Chicken breast", "Chicken thighs", "Salmon", "Sausage"),
            _categories("vegetables", "vegetable"),
        ],
        flexible_slots=[_items("starch", "Potatoes", "Sweet potatoes", optional=True)],
        optional_upgrades=[_items("aromatics", "Garlic", "Onions", "Lemons", optional=True)],
        effort="moderate",
        meal_types=["dinner"],
        tags=["easy", "healthy", "one-pan"],
    ),
    MealPattern(
        id="tacos",
        name="Taco Night",
        description="Tacos with protein and toppings",
        required_slots=[_items("shell", "Tortillas"), _categories("protein", "protein")],
        flexible_slots=[
            _categories("toppings", "vegetable", optional=True),
            _categories("cheese", "dairy", optional=True),
        ],
        optional_upgrades=[
            _items("salsa", "Salsa", "Hot sauce", optional=True),
            _items("cream", "Greek yogurt", optional=True),
        ],
        effort="moderate",
        meal_types=["dinner"],
        tags=["fun", "family", "customizable"],
    ),
    MealPattern(
        id="salad-protein",
        name="Protein Salad",
        description="Greens with protein",
        required_slots=[_items("greens", "Spinach", "Lettuce"), _categories("protein", "protein")],
        flexible_slots=[_categories("vegetables", "vegetable", optional=True)],
        optional_upgrades=[
            _categories("cheese", "dairy", optional=True),
            _categories("dressing", "condiment", optional=True),
        ],
        effort="minimal",
        meal_types=["lunch", "dinner"],
        tags=["healthy", "light", "quick"],
    ),
    MealPattern(
        id="salmon-veg",
        name="Salmon & Vegetables",
        description="Pan-seared or baked salmon with sides",
        required_slots=[_items("salmon", "Salmon")],
        flexible_slots=[
            _categories("vegetables", "vegetable", optional=True),
            _items("grain", "Rice", "Quinoa", optional=True),
        ],
        optional_upgrades=[_items("citrus", "Lemons", "Limes", optional=True)],
        effort="moderate",
        meal_types=["dinner"],
        tags=["healthy", "omega-3", "fancy"],
    ),
    MealPattern(
        id="omelette",
        name="Omelette",
        description="Eggs with fillings",
        required_slots=[_items("eggs", "Eggs")],
        flexible_slots=[
            _categories("cheese", "dairy", optional=True),
            _categories("vegetables", "vegetable", optional=True),
        ],
        optional_upgrades=[_items("protein", "Bacon", "Sausage", optional=True)],
        effort="minimal",
        meal_types=["breakfast", "lunch", "dinner"],
        tags=["quick", "protein", "versatile"],
    ),
    MealPattern(
        id="sandwich",
        name="Sandwich",
        description="Classic sandwich",
        required_slots=[_items("bread", "Bread")],
        flexible_slots=[
            _categories("protein", "protein", "dairy", optional=True),
            _categories("vegetables", "vegetable", optional=True),
        ],
        optional_upgrades=[_items("spread", "Mayo", "Mustard", "Hummus", optional=True)],
        effort="minimal",
        meal_types=["lunch"],
        tags=["quick", "portable", "classic"],
    ),
    MealPattern(
        id="yogurt-bowl",
        name="Yogurt Bowl",
        description="Yogurt with toppings",
        required_slots=[_items("yogurt", "Greek yogurt")],
        flexible_slots=[
            _categories("fruit", "fruit", optional=True),
            _items("grain", "Oats", optional=True),
        ],
        effort="minimal",
        meal_types=["breakfast", "snack"],
        tags=["healthy", "quick", "light"],
    ),
    MealPattern(
        id="quesadilla",
        name="Quesadilla",
        description="Cheesy tortilla",
        required_slots=[_items("tortilla", "Tortillas"), _categories("cheese", "dairy")],
        flexible_slots=[_categories("protein", "protein", optional=True)],
        optional_upgrades=[
            _categories("vegetables", "vegetable", optional=True),
            _items("salsa", "Salsa", "Hot sauce", optional=True),
        ],
        effort="minimal",
        meal_types=["lunch", "dinner", "snack"],
        tags=["quick", "cheesy", "comfort"],
    ),
    MealPattern(
        id="fried-rice",
        name="Fried Rice",
        description="Quick rice dish with vegetables and protein",
        required_slots=[_items("rice", "Rice"), _items("eggs", "Eggs")],
        flexible_slots=[
            _categories("vegetables", "vegetable", optional=True),
            _categories("protein", "protein", optional=True),
        ],
        optional_upgrades=[_items("sauce", "Soy sauce", optional=True)],
        effort="moderate",
        meal_types=["lunch", "dinner"],
        tags=["quick", "use-leftovers", "filling"],
    ),
    MealPattern(
        id="smoothie",
        name="Smoothie",
        description="Blended fruit drink",
        required_slots=[
            _categories("fruit", "fruit"),
            _items("liquid", "Milk", "Almond milk", "Greek yogurt"),
        ],
        flexible_slots=[_items("greens", "Spinach", optional=True)],
        effort="minimal",
        meal_types=["breakfast", "snack"],
        tags=["healthy", "quick", "refreshing"],
    ),
    MealPattern(
        id="avocado-toast",
        name="Avocado Toast",
        description="Trendy but delicious",
        required_slots=[_items("bread", "Bread"), _items("avocado", "Avocado")],
        flexible_slots=[_items("eggs", "Eggs", optional=True)],
        optional_upgrades=[
            _items("heat", "Chili flakes", "Hot sauce", optional=True),
            _items("citrus", "Lemons", "Limes", optional=True),
        ],
        effort="minimal",
        meal_types=["breakfast", "lunch"],
        tags=["quick", "healthy", "trendy"],
    ),
    MealPattern(
        id="burrito-bowl",
        name="Burrito Bowl",
        description="Deconstructed burrito",
        required_slots=[_items("grain", "Rice"), _categories("protein", "protein")],
        flexible_slots=[
            _categories("vegetables", "vegetable", optional=True),
            _categories("cheese", "dairy", optional=True),
        ],
        optional_upgrades=[
            _items("salsa", "Salsa", optional=True),
            _items("cream", "Greek yogurt", optional=True),
        ],
        effort="moderate",
        meal_types=["lunch", "dinner"],
        tags=["filling", "customizable", "healthy"],
    ),
    MealPattern(
        id="mediterranean-chicken-salad",
        name="Mediterranean Chicken Salad",
        description="Fresh, hearty salad with lemon-herb chicken and homemade dressing",
        required_slots=[
            _items("protein", "Chicken breast", "Chicken thighs", "Chicken"),
            _items("greens", "Kale", "Spinach", "Mixed greens"),
        ],
        flexible_slots=[
            _items(
                "vegetables",
                "Red onion",
                "Onions",
                "Cucumber",
                "Cherry tomatoes",
                "Tomatoes",
                "Red pepper",
                "Bell peppers",
                optional=True,
            ),
            _items("cheese", "Goat cheese", "Feta cheese", optional=True),
        ],
        optional_upgrades=[
            _items("olives", "Olives", "Kalamata olives", optional=True),
            _items("nuts", "Pine nuts", "Almonds", "Walnuts", optional=True),
        ],
        components=[
            MealComponent(
                name="Lemon-Dijon Dressing",
                slots=[
                    _items("citrus", "Lemons", "Lemon juice"),
                    _items("mustard", "Dijon mustard", "Mustard"),
                    _items("garlic", "Garlic"),
                    _items("oil", "Olive oil", optional=True),
                    _items("sweetener", "Honey", optional=True),
                ],
            ),
            MealComponent(
                name="Herb Marinade",
                slots=[
                    _items("citrus", "Lemons", "Lemon juice"),
                    _items("garlic", "Garlic"),
                    _items(
                        "herbs",
                        "Thyme",
                        "Oregano",
                        "Basil",
                        "Dill",
                        "Fresh herbs",
                        "Italian herbs",
                    ),
                    _items("oil", "Olive oil", optional=True),
                ],
            ),
        ],
        effort="moderate",
        meal_types=["lunch", "dinner"],
        tags=["healthy", "fresh", "mediterranean", "salad"],
    ),
]


def get_patterns_by_meal_type(meal_type: str) -> list[MealPattern]:
    """Get default patterns applicable to a meal type."""
    return [p for p in DEFAULT_MEAL_PATTERNS if meal_type in p.meal_types]


def get_patterns_by_tag(tag: str) -> list[MealPattern]:
    """Get default patterns carrying a tag."""
    return [p for p in DEFAULT_MEAL_PATTERNS if tag in p.tags]
