"""Pytest configuration and shared fixtures."""

import pytest

from fridgebud.models import IngredientSlot, InventoryItem, MealPattern

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require external services)"
    )
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Inventory Fixtures
# =============================================================================


@pytest.fixture
def make_item():
    """Factory for inventory items with sensible defaults."""
    counter = {"n": 0}

    def _make(name: str, category: str = "other", **overrides) -> InventoryItem:
        counter["n"] += 1
        data = {
            "id": f"item-{counter['n']}",
            "name": name,
            "category": category,
            "location": "fridge",
            "quantity": "plenty",
            "freshness": "fresh",
            "confidence": "sure",
            "added_at": 1_700_000_000_000,
            "updated_at": 1_700_000_000_000,
        }
        data.update(overrides)
        return InventoryItem(**data)

    return _make


@pytest.fixture
def breakfast_inventory(make_item):
    """Eggs and bread, nothing else."""
    return [
        make_item("Eggs", "protein"),
        make_item("Bread", "grain", location="pantry"),
    ]


@pytest.fixture
def stocked_inventory(make_item):
    """A typical weeknight fridge with one item going off."""
    return [
        make_item("Chicken breast", "protein"),
        make_item("Broccoli", "vegetable", freshness="useSoon"),
        make_item("Rice", "grain", location="pantry"),
        make_item("Soy sauce", "condiment", location="pantry"),
        make_item("Eggs", "protein"),
        make_item("Milk", "dairy", quantity="low"),
    ]


# =============================================================================
# Meal Pattern Fixtures
# =============================================================================


@pytest.fixture
def eggs_toast_pattern():
    """Two required specific-item slots, no flexible slots."""
    return MealPattern(
        id="eggs-toast",
        name="Eggs & Toast",
        required_slots=[
            IngredientSlot(role="eggs", specific_items=["Eggs"]),
            IngredientSlot(role="bread", specific_items=["Bread", "Tortillas"]),
        ],
        effort="minimal",
        meal_types=["breakfast"],
    )


@pytest.fixture
def stir_fry_pattern():
    """Category-based required slots with no flexible slots."""
    return MealPattern(
        id="stir-fry",
        name="Stir Fry",
        required_slots=[
            IngredientSlot(role="protein", accepted_categories=["protein"]),
            IngredientSlot(role="vegetables", accepted_categories=["vegetable"]),
        ],
    )


@pytest.fixture
def pasta_pattern():
    """Three required slots."""
    return MealPattern(
        id="pasta",
        name="Pasta Night",
        required_slots=[
            IngredientSlot(role="pasta", specific_items=["Pasta"]),
            IngredientSlot(role="sauce", specific_items=["Marinara", "Pesto"]),
            IngredientSlot(role="cheese", specific_items=["Parmesan"]),
        ],
    )
