"""Pydantic models for household inventory and meal patterns."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

IngredientCategory = Literal[
    "protein",
    "vegetable",
    "fruit",
    "dairy",
    "grain",
    "condiment",
    "spice",
    "beverage",
    "frozen",
    "other",
]
StorageLocation = Literal["fridge", "freezer", "pantry"]
QuantityLevel = Literal["plenty", "some", "low"]
FreshnessState = Literal["fresh", "good", "useSoon", "bad"]
ConfidenceLevel = Literal["sure", "unsure"]
EffortLevel = Literal["minimal", "moderate", "involved"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]
FrictionLevel = Literal["ready", "oneAway", "needsShopping"]


class InventoryItem(BaseModel):
    """An item currently stored in the household."""

    id: str
    name: str
    category: IngredientCategory = "other"
    location: StorageLocation = "fridge"
    quantity: QuantityLevel = "plenty"
    freshness: FreshnessState = "fresh"
    confidence: ConfidenceLevel = "sure"
    added_at: int = 0  # epoch milliseconds
    updated_at: int = 0


class IngredientSlot(BaseModel):
    """
    A role within a meal pattern, e.g. "protein" or "greens".

    A slot is satisfied either by one of ``specific_items`` (matched by name)
    or, when that list is empty, by any item in ``accepted_categories``.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    accepted_categories: list[IngredientCategory] = Field(default_factory=list)
    specific_items: list[str] = Field(default_factory=list)
    optional: bool = False


class MealComponent(BaseModel):
    """A named sub-recipe of a pattern, such as a dressing or marinade."""

    model_config = ConfigDict(frozen=True)

    name: str
    slots: list[IngredientSlot] = Field(default_factory=list)


class MealPattern(BaseModel):
    """A meal template: slots to fill rather than a fixed recipe."""

    id: str
    name: str
    description: str | None = None
    required_slots: list[IngredientSlot] = Field(default_factory=list)
    flexible_slots: list[IngredientSlot] = Field(default_factory=list)
    optional_upgrades: list[IngredientSlot] = Field(default_factory=list)
    components: list[MealComponent] | None = None
    effort: EffortLevel = "moderate"
    meal_types: list[MealType] = Field(default_factory=lambda: ["dinner"], min_length=1)
    tags: list[str] = Field(default_factory=list)
