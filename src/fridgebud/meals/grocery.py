"""Shopping list suggestions derived from meal opportunities and stock levels."""

from dataclasses import dataclass, field

from fridgebud.logging_config import get_logger
from fridgebud.meals.opportunities import calculate_opportunities
from fridgebud.models import IngredientSlot, InventoryItem, MealPattern

logger = get_logger(__name__)

RUNNING_LOW_REASON = "Running low"


@dataclass
class GrocerySuggestion:
    """A candidate item for the shopping list."""

    name: str
    reason: str
    enables_meals: list[str] = field(default_factory=list)


def suggestion_name_for_slot(slot: IngredientSlot) -> str:
    """Name to shop for when a slot is missing."""
    if slot.specific_items:
        return slot.specific_items[0]
    return f"{slot.role} item"


def derive_grocery_suggestions(
    inventory: list[InventoryItem],
    patterns: list[MealPattern] | None = None,
) -> list[GrocerySuggestion]:
    """
    Suggest groceries that unlock meals or restock low items.

    Args:
        inventory: Current household inventory.
        patterns: Patterns to evaluate. Defaults to the built-in patterns.

    Returns:
        Suggestions ordered by how many meals each one enables.
    """
    suggestions: dict[str, GrocerySuggestion] = {}

    for opportunity in calculate_opportunities(inventory, patterns):
        if opportunity.friction_level != "oneAway":
            continue

        meal_name = opportunity.pattern.name
        for slot in opportunity.missing:
            name = suggestion_name_for_slot(slot)
            existing = suggestions.get(name)
            if existing is None:
                suggestions[name] = GrocerySuggestion(
                    name=name,
                    reason=f"Would enable {meal_name}",
                    enables_meals=[meal_name],
                )
            elif meal_name not in existing.enables_meals:
                existing.enables_meals.append(meal_name)
                existing.reason = f"Would enable {len(existing.enables_meals)} meals"

    for item in inventory:
        if item.quantity == "low" and item.name not in suggestions:
            suggestions[item.name] = GrocerySuggestion(name=item.name, reason=RUNNING_LOW_REASON)

    ranked = sorted(suggestions.values(), key=lambda s: len(s.enables_meals), reverse=True)
    logger.debug(f"Derived {len(ranked)} grocery suggestions")
    return ranked
