"""Meal matching, opportunity scoring and grocery suggestions."""

from fridgebud.meals.grocery import GrocerySuggestion, derive_grocery_suggestions
from fridgebud.meals.opportunities import (
    ComponentStatus,
    MealOpportunity,
    OpportunityCalculator,
    SlotMatch,
    calculate_opportunities,
    get_almost_ready,
    get_meals_using_aging_items,
    get_ready_meals,
    get_top_suggestions,
)
from fridgebud.meals.slots import find_candidates, satisfies

__all__ = [
    "ComponentStatus",
    "GrocerySuggestion",
    "MealOpportunity",
    "OpportunityCalculator",
    "SlotMatch",
    "calculate_opportunities",
    "derive_grocery_suggestions",
    "find_candidates",
    "get_almost_ready",
    "get_meals_using_aging_items",
    "get_ready_meals",
    "get_top_suggestions",
    "satisfies",
]
