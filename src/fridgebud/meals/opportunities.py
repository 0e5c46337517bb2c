"""Meal opportunity scoring from on-hand inventory."""

import math
from dataclasses import dataclass

from fridgebud.catalog import DEFAULT_MEAL_PATTERNS
from fridgebud.logging_config import get_logger
from fridgebud.meals.slots import find_candidates
from fridgebud.models import (
    FrictionLevel,
    IngredientSlot,
    InventoryItem,
    MealComponent,
    MealPattern,
)

logger = get_logger(__name__)

AGING_FRESHNESS = frozenset({"useSoon", "bad"})

# Lower rank sorts first
FRICTION_RANK: dict[str, int] = {"ready": 0, "oneAway": 1, "needsShopping": 2}


@dataclass
class SlotMatch:
    """An inventory item chosen to fill a slot."""

    slot: IngredientSlot
    item: InventoryItem


@dataclass
class ComponentStatus:
    """Readiness of a single pattern component (dressing, marinade, ...)."""

    component: MealComponent
    satisfied: list[SlotMatch]
    missing: list[IngredientSlot]
    ready: bool


@dataclass
class MealOpportunity:
    """A meal pattern evaluated against the current inventory."""

    pattern: MealPattern
    score: int
    satisfied: list[SlotMatch]
    missing: list[IngredientSlot]
    uses_aging_items: list[InventoryItem]
    friction_level: FrictionLevel
    component_statuses: list[ComponentStatus] | None = None

    @property
    def uses_aging(self) -> bool:
        """Check if the meal would use up items that are going off."""
        return bool(self.uses_aging_items)


class OpportunityCalculator:
    """
    Scores meal patterns against an inventory snapshot.

    Score breakdown (0-100):
    - Required slots: up to 60 points, proportional to slots filled
    - Flexible slots: up to 20 points, or a flat 10 when a pattern has none
    - Aging bonus: 20 points when the meal uses an item marked useSoon/bad
    """

    REQUIRED_WEIGHT = 60
    FLEXIBLE_WEIGHT = 20
    NO_FLEXIBLE_SCORE = 10
    AGING_BONUS = 20

    def __init__(self, inventory: list[InventoryItem]):
        self.inventory = inventory
        self._aging_ids = {item.id for item in inventory if item.freshness in AGING_FRESHNESS}

    def calculate(self, patterns: list[MealPattern]) -> list[MealOpportunity]:
        """
        Evaluate every pattern and rank the results.

        Args:
            patterns: Meal patterns to evaluate.

        Returns:
            Opportunities ordered by friction tier, then score descending.
            Ties keep pattern order.
        """
        opportunities = [self.evaluate(pattern) for pattern in patterns]
        ranked = sorted(
            opportunities,
            key=lambda o: (FRICTION_RANK[o.friction_level], -o.score),
        )

        logger.debug(
            f"Calculated {len(ranked)} opportunities: "
            f"{sum(1 for o in ranked if o.friction_level == 'ready')} ready, "
            f"{sum(1 for o in ranked if o.friction_level == 'oneAway')} one away"
        )
        return ranked

    def evaluate(self, pattern: MealPattern) -> MealOpportunity:
        """Evaluate a single pattern against the inventory."""
        satisfied: list[SlotMatch] = []
        missing: list[IngredientSlot] = []
        aging_used: list[InventoryItem] = []

        for slot in pattern.required_slots:
            match = self._select(slot)
            if match is not None:
                satisfied.append(match)
                if match.item.id in self._aging_ids:
                    aging_used.append(match.item)
            elif not slot.optional:
                missing.append(slot)

        flexible_satisfied = 0
        for slot in pattern.flexible_slots:
            match = self._select(slot)
            if match is None:
                continue
            flexible_satisfied += 1
            satisfied.append(match)
            if match.item.id in self._aging_ids and all(
                used.id != match.item.id for used in aging_used
            ):
                aging_used.append(match.item)

        total_required = len(pattern.required_slots)
        score = self.score(
            total_required - len(missing),
            total_required,
            flexible_satisfied,
            len(pattern.flexible_slots),
            uses_aging=bool(aging_used),
        )

        component_statuses = None
        if pattern.components is not None:
            component_statuses = [self.component_status(c) for c in pattern.components]

        return MealOpportunity(
            pattern=pattern,
            score=score,
            satisfied=satisfied,
            missing=missing,
            uses_aging_items=aging_used,
            friction_level=self.friction(len(missing)),
            component_statuses=component_statuses,
        )

    def component_status(self, component: MealComponent) -> ComponentStatus:
        """Check a component's slots; every non-optional slot is required."""
        satisfied: list[SlotMatch] = []
        missing: list[IngredientSlot] = []

        for slot in component.slots:
            candidates = find_candidates(slot, self.inventory)
            if candidates:
                satisfied.append(SlotMatch(slot=slot, item=candidates[0]))
            elif not slot.optional:
                missing.append(slot)

        return ComponentStatus(
            component=component,
            satisfied=satisfied,
            missing=missing,
            ready=not missing,
        )

    def _select(self, slot: IngredientSlot) -> SlotMatch | None:
        """Pick the item for a slot, preferring items that need using soon."""
        candidates = find_candidates(slot, self.inventory)
        if not candidates:
            return None

        aging = next((c for c in candidates if c.id in self._aging_ids), None)
        return SlotMatch(slot=slot, item=aging or candidates[0])

    @classmethod
    def score(
        cls,
        satisfied_required: int,
        total_required: int,
        satisfied_flexible: int,
        total_flexible: int,
        uses_aging: bool,
    ) -> int:
        """Compute the 0-100 opportunity score."""
        required_score = (
            satisfied_required / total_required * cls.REQUIRED_WEIGHT
            if total_required > 0
            else cls.REQUIRED_WEIGHT
        )
        flexible_score = (
            satisfied_flexible / total_flexible * cls.FLEXIBLE_WEIGHT
            if total_flexible > 0
            else cls.NO_FLEXIBLE_SCORE
        )
        aging_bonus = cls.AGING_BONUS if uses_aging else 0

        # Round half up, not to even
        return int(math.floor(required_score + flexible_score + aging_bonus + 0.5))

    @staticmethod
    def friction(missing_count: int) -> FrictionLevel:
        """Classify how far a pattern is from being cookable."""
        if missing_count == 0:
            return "ready"
        if missing_count == 1:
            return "oneAway"
        return "needsShopping"


def calculate_opportunities(
    inventory: list[InventoryItem],
    patterns: list[MealPattern] | None = None,
) -> list[MealOpportunity]:
    """
    Rank meal opportunities for an inventory.

    Args:
        inventory: Current household inventory.
        patterns: Patterns to evaluate. Defaults to the built-in patterns.

    Returns:
        Ranked list of opportunities.
    """
    if patterns is None:
        patterns = DEFAULT_MEAL_PATTERNS
    return OpportunityCalculator(inventory).calculate(patterns)


def get_ready_meals(opportunities: list[MealOpportunity]) -> list[MealOpportunity]:
    """Meals that can be made with what is on hand."""
    return [o for o in opportunities if o.friction_level == "ready"]


def get_almost_ready(opportunities: list[MealOpportunity]) -> list[MealOpportunity]:
    """Meals that are one ingredient away."""
    return [o for o in opportunities if o.friction_level == "oneAway"]


def get_meals_using_aging_items(opportunities: list[MealOpportunity]) -> list[MealOpportunity]:
    """Makeable or nearly makeable meals that use aging items, most aging items first."""
    using_aging = [o for o in opportunities if o.uses_aging and o.friction_level != "needsShopping"]
    return sorted(using_aging, key=lambda o: len(o.uses_aging_items), reverse=True)


def get_top_suggestions(
    opportunities: list[MealOpportunity],
    limit: int = 5,
) -> list[MealOpportunity]:
    """
    Pick the meals worth suggesting first.

    Order: ready meals using aging items, other ready meals, then
    one-away meals using aging items.
    """
    ready = get_ready_meals(opportunities)
    almost = get_almost_ready(opportunities)

    suggestions = [o for o in ready if o.uses_aging]
    suggestions += [o for o in ready if not o.uses_aging]
    suggestions += [o for o in almost if o.uses_aging]
    return suggestions[:limit]
