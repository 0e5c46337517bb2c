"""API routes for meal opportunities and grocery suggestions."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from fridgebud.logging_config import get_logger
from fridgebud.meals import (
    MealOpportunity,
    calculate_opportunities,
    derive_grocery_suggestions,
    get_almost_ready,
    get_meals_using_aging_items,
    get_ready_meals,
    get_top_suggestions,
)
from fridgebud.models import (
    FrictionLevel,
    IngredientSlot,
    InventoryItem,
    MealComponent,
    MealPattern,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["meals"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class InventoryRequest(BaseModel):
    """Inventory snapshot to evaluate."""

    inventory: list[InventoryItem] = Field(default_factory=list)
    patterns: list[MealPattern] | None = Field(
        None, description="Meal patterns to evaluate; defaults to the built-in patterns"
    )


class SlotMatchResponse(BaseModel):
    """Inventory item chosen for a slot."""

    model_config = ConfigDict(from_attributes=True)

    slot: IngredientSlot
    item: InventoryItem


class ComponentStatusResponse(BaseModel):
    """Readiness of a pattern component."""

    model_config = ConfigDict(from_attributes=True)

    component: MealComponent
    satisfied: list[SlotMatchResponse]
    missing: list[IngredientSlot]
    ready: bool


class OpportunityResponse(BaseModel):
    """A scored meal opportunity."""

    model_config = ConfigDict(from_attributes=True)

    pattern: MealPattern
    score: int
    satisfied: list[SlotMatchResponse]
    missing: list[IngredientSlot]
    uses_aging_items: list[InventoryItem]
    friction_level: FrictionLevel
    component_statuses: list[ComponentStatusResponse] | None = None


class MealSuggestionsResponse(BaseModel):
    """Derived meal views for the home screen."""

    ready: list[OpportunityResponse]
    almost_ready: list[OpportunityResponse]
    uses_aging: list[OpportunityResponse]
    top_suggestions: list[OpportunityResponse]
    ready_count: int


class GrocerySuggestionResponse(BaseModel):
    """A suggested shopping list item."""

    name: str
    reason: str
    enables_meals: list[str] = Field(default_factory=list)


def _to_responses(opportunities: list[MealOpportunity]) -> list[OpportunityResponse]:
    return [OpportunityResponse.model_validate(o, from_attributes=True) for o in opportunities]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/meals/opportunities", response_model=list[OpportunityResponse])
async def list_opportunities(request: InventoryRequest) -> list[OpportunityResponse]:
    """Rank every meal pattern against the inventory."""
    opportunities = calculate_opportunities(request.inventory, request.patterns)
    return _to_responses(opportunities)


@router.post("/meals/suggestions", response_model=MealSuggestionsResponse)
async def meal_suggestions(request: InventoryRequest) -> MealSuggestionsResponse:
    """Ready, almost-ready and aging-item views over the ranked opportunities."""
    opportunities = calculate_opportunities(request.inventory, request.patterns)
    ready = get_ready_meals(opportunities)

    return MealSuggestionsResponse(
        ready=_to_responses(ready),
        almost_ready=_to_responses(get_almost_ready(opportunities)),
        uses_aging=_to_responses(get_meals_using_aging_items(opportunities)),
        top_suggestions=_to_responses(get_top_suggestions(opportunities)),
        ready_count=len(ready),
    )


@router.post("/grocery/suggestions", response_model=list[GrocerySuggestionResponse])
async def grocery_suggestions(request: InventoryRequest) -> list[GrocerySuggestionResponse]:
    """Suggest groceries that unlock meals or restock low items."""
    suggestions = derive_grocery_suggestions(request.inventory, request.patterns)
    logger.info(f"Returning {len(suggestions)} grocery suggestions")
    return [
        GrocerySuggestionResponse(name=s.name, reason=s.reason, enables_meals=s.enables_meals)
        for s in suggestions
    ]
