"""Tests for meal opportunity scoring and ranking."""

import pytest

from fridgebud.catalog import DEFAULT_MEAL_PATTERNS
from fridgebud.meals import (
    OpportunityCalculator,
    calculate_opportunities,
    get_almost_ready,
    get_meals_using_aging_items,
    get_ready_meals,
    get_top_suggestions,
)
from fridgebud.meals.opportunities import FRICTION_RANK
from fridgebud.models import IngredientSlot, MealComponent, MealPattern


def _pattern(pattern_id: str, required=(), flexible=(), components=None) -> MealPattern:
    return MealPattern(
        id=pattern_id,
        name=pattern_id.replace("-", " ").title(),
        required_slots=list(required),
        flexible_slots=list(flexible),
        components=components,
    )


class TestScoring:
    """Tests for the 0-100 score formula."""

    def test_ready_without_flexible_slots(self, breakfast_inventory, eggs_toast_pattern):
        """Test 60 required + 10 flat flexible + 0 aging."""
        opportunity = OpportunityCalculator(breakfast_inventory).evaluate(eggs_toast_pattern)

        assert opportunity.friction_level == "ready"
        assert opportunity.score == 70
        assert opportunity.missing == []
        assert [m.item.name for m in opportunity.satisfied] == ["Eggs", "Bread"]

    def test_one_missing_is_one_away(self, make_item, eggs_toast_pattern):
        """Test a single missing required slot."""
        inventory = [make_item("Eggs", "protein")]

        opportunity = OpportunityCalculator(inventory).evaluate(eggs_toast_pattern)

        assert opportunity.friction_level == "oneAway"
        assert [slot.role for slot in opportunity.missing] == ["bread"]
        assert opportunity.score == 40

    def test_aging_flexible_item_adds_bonus(self, make_item):
        """Test an aging item in a flexible slot earns the bonus."""
        pattern = _pattern(
            "oatmeal",
            required=[IngredientSlot(role="oats", specific_items=["Oats"])],
            flexible=[IngredientSlot(role="milk", specific_items=["Milk"], optional=True)],
        )
        milk = make_item("Milk", "dairy", freshness="useSoon")
        inventory = [make_item("Oats", "grain"), milk]

        opportunity = OpportunityCalculator(inventory).evaluate(pattern)

        assert opportunity.uses_aging_items == [milk]
        assert opportunity.uses_aging
        assert opportunity.score == 100

    def test_everything_satisfied_with_aging_scores_100(self, make_item):
        """Test the maximum score."""
        pattern = _pattern(
            "full",
            required=[IngredientSlot(role="protein", accepted_categories=["protein"])],
            flexible=[
                IngredientSlot(role="veg", accepted_categories=["vegetable"]),
                IngredientSlot(role="grain", accepted_categories=["grain"]),
            ],
        )
        inventory = [
            make_item("Tofu", "protein", freshness="bad"),
            make_item("Kale", "vegetable"),
            make_item("Rice", "grain"),
        ]

        assert OpportunityCalculator(inventory).evaluate(pattern).score == 100

    def test_zero_required_slots_is_ready(self):
        """Test a pattern with no required slots is trivially ready."""
        pattern = _pattern("anything")

        opportunity = OpportunityCalculator([]).evaluate(pattern)

        assert opportunity.friction_level == "ready"
        assert opportunity.score == 70

    def test_partial_flexible(self, make_item):
        """Test flexible slots score proportionally."""
        pattern = _pattern(
            "bowl",
            required=[IngredientSlot(role="grain", specific_items=["Rice"])],
            flexible=[
                IngredientSlot(role="veg", accepted_categories=["vegetable"]),
                IngredientSlot(role="sauce", accepted_categories=["condiment"]),
            ],
        )
        inventory = [make_item("Rice", "grain"), make_item("Salsa", "condiment")]

        assert OpportunityCalculator(inventory).evaluate(pattern).score == 70

    def test_needs_shopping(self, make_item, pasta_pattern):
        """Test two or more missing slots."""
        opportunity = OpportunityCalculator([make_item("Pasta", "grain")]).evaluate(pasta_pattern)

        assert opportunity.friction_level == "needsShopping"
        assert len(opportunity.missing) == 2
        assert opportunity.score == 30

    def test_optional_required_slot_not_missing(self, make_item):
        """Test an optional required slot never counts as missing."""
        pattern = _pattern(
            "toast",
            required=[
                IngredientSlot(role="bread", specific_items=["Bread"]),
                IngredientSlot(role="butter", specific_items=["Butter"], optional=True),
            ],
        )

        opportunity = OpportunityCalculator([make_item("Bread", "grain")]).evaluate(pattern)

        assert opportunity.missing == []
        assert opportunity.friction_level == "ready"

    @pytest.mark.parametrize(
        "args,expected",
        [
            ((3, 8, 0, 0, False), 33),  # 22.5 + 10 rounds half up
            ((1, 3, 0, 0, False), 30),
            ((2, 3, 1, 3, True), 67),
            ((0, 0, 0, 0, False), 70),
            ((4, 4, 2, 2, True), 100),
            ((0, 2, 0, 2, False), 0),
        ],
    )
    def test_score_formula(self, args, expected):
        """Test the score formula directly."""
        satisfied_req, total_req, satisfied_flex, total_flex, aging = args
        score = OpportunityCalculator.score(
            satisfied_req, total_req, satisfied_flex, total_flex, uses_aging=aging
        )
        assert score == expected


class TestSlotSelection:
    """Tests for which inventory item fills a slot."""

    def test_prefers_aging_item(self, make_item, stir_fry_pattern):
        """Test an aging candidate wins over an earlier fresh one."""
        inventory = [
            make_item("Chicken breast", "protein"),
            make_item("Tofu", "protein", freshness="useSoon"),
            make_item("Kale", "vegetable"),
        ]

        opportunity = OpportunityCalculator(inventory).evaluate(stir_fry_pattern)

        assert opportunity.satisfied[0].item.name == "Tofu"
        assert [i.name for i in opportunity.uses_aging_items] == ["Tofu"]

    def test_first_candidate_without_aging(self, make_item, stir_fry_pattern):
        """Test inventory order decides among fresh candidates."""
        inventory = [
            make_item("Chicken breast", "protein"),
            make_item("Tofu", "protein"),
            make_item("Kale", "vegetable"),
        ]

        opportunity = OpportunityCalculator(inventory).evaluate(stir_fry_pattern)

        assert opportunity.satisfied[0].item.name == "Chicken breast"
        assert opportunity.uses_aging_items == []

    def test_aging_item_not_duplicated(self, make_item):
        """Test an item used by required and flexible slots is listed once."""
        pattern = _pattern(
            "double",
            required=[IngredientSlot(role="protein", accepted_categories=["protein"])],
            flexible=[IngredientSlot(role="more", accepted_categories=["protein"])],
        )
        inventory = [make_item("Tofu", "protein", freshness="useSoon")]

        opportunity = OpportunityCalculator(inventory).evaluate(pattern)

        assert len(opportunity.uses_aging_items) == 1


class TestComponents:
    """Tests for per-component readiness."""

    def test_component_readiness_reported_separately(self, make_item):
        """Test components do not change the top-level score."""
        pattern = _pattern(
            "salad",
            required=[IngredientSlot(role="greens", specific_items=["Lettuce"])],
            components=[
                MealComponent(
                    name="Dressing",
                    slots=[
                        IngredientSlot(role="oil", specific_items=["Olive oil"]),
                        IngredientSlot(role="acid", specific_items=["Lemons"]),
                        IngredientSlot(role="herb", specific_items=["Basil"], optional=True),
                    ],
                ),
                MealComponent(
                    name="Topping",
                    slots=[IngredientSlot(role="cheese", specific_items=["Feta cheese"])],
                ),
            ],
        )
        inventory = [make_item("Lettuce", "vegetable"), make_item("Olive oil", "condiment")]

        opportunity = OpportunityCalculator(inventory).evaluate(pattern)

        assert opportunity.score == 70
        assert opportunity.friction_level == "ready"
        dressing, topping = opportunity.component_statuses
        assert not dressing.ready
        assert [s.role for s in dressing.missing] == ["acid"]
        assert [m.item.name for m in dressing.satisfied] == ["Olive oil"]
        assert not topping.ready

    def test_no_components(self, breakfast_inventory, eggs_toast_pattern):
        """Test patterns without components report None."""
        opportunity = OpportunityCalculator(breakfast_inventory).evaluate(eggs_toast_pattern)
        assert opportunity.component_statuses is None

    def test_default_multi_component_pattern(self, make_item):
        """Test the built-in pattern with a dressing and a marinade."""
        pattern = next(p for p in DEFAULT_MEAL_PATTERNS if p.components)

        opportunity = OpportunityCalculator([make_item("Olive oil", "condiment")]).evaluate(
            pattern
        )

        assert len(opportunity.component_statuses) == len(pattern.components)


class TestRanking:
    """Tests for global ordering of opportunities."""

    def test_friction_then_score(self, stocked_inventory):
        """Test no lower tier precedes a higher one and scores fall within a tier."""
        ranked = calculate_opportunities(stocked_inventory)

        ranks = [FRICTION_RANK[o.friction_level] for o in ranked]
        assert ranks == sorted(ranks)
        for previous, current in zip(ranked, ranked[1:]):
            if previous.friction_level == current.friction_level:
                assert previous.score >= current.score

    def test_scores_in_bounds(self, stocked_inventory):
        """Test every score stays within 0-100."""
        for opportunity in calculate_opportunities(stocked_inventory):
            assert 0 <= opportunity.score <= 100

    def test_stable_for_ties(self):
        """Test equal friction and score keep pattern order."""
        patterns = [_pattern("first"), _pattern("second"), _pattern("third")]

        ranked = calculate_opportunities([], patterns)

        assert [o.pattern.id for o in ranked] == ["first", "second", "third"]

    def test_idempotent(self, stocked_inventory):
        """Test repeated calculation gives identical output."""
        first = calculate_opportunities(stocked_inventory)
        second = calculate_opportunities(stocked_inventory)
        assert first == second

    def test_defaults_to_builtin_patterns(self, stocked_inventory):
        """Test None patterns means the default catalog."""
        ranked = calculate_opportunities(stocked_inventory)
        assert {o.pattern.id for o in ranked} == {p.id for p in DEFAULT_MEAL_PATTERNS}

    def test_empty_pattern_list(self, stocked_inventory):
        """Test an explicit empty pattern list yields nothing."""
        assert calculate_opportunities(stocked_inventory, []) == []


class TestDerivedViews:
    """Tests for ready, almost-ready, aging and top suggestion views."""

    @pytest.fixture
    def opportunities(self, make_item):
        patterns = [
            _pattern("ready-fresh", required=[IngredientSlot(role="r", specific_items=["Rice"])]),
            _pattern(
                "ready-aging", required=[IngredientSlot(role="s", specific_items=["Spinach"])]
            ),
            _pattern(
                "one-away-aging",
                required=[
                    IngredientSlot(role="s", specific_items=["Spinach"]),
                    IngredientSlot(role="f", specific_items=["Feta cheese"]),
                ],
            ),
            _pattern(
                "one-away-fresh",
                required=[
                    IngredientSlot(role="r", specific_items=["Rice"]),
                    IngredientSlot(role="b", specific_items=["Beans"]),
                ],
            ),
            _pattern(
                "shopping-aging",
                required=[
                    IngredientSlot(role="s", specific_items=["Spinach"]),
                    IngredientSlot(role="x", specific_items=["Saffron"]),
                    IngredientSlot(role="y", specific_items=["Lobster"]),
                ],
            ),
        ]
        inventory = [
            make_item("Rice", "grain"),
            make_item("Spinach", "vegetable", freshness="useSoon"),
        ]
        return calculate_opportunities(inventory, patterns)

    def test_ready(self, opportunities):
        """Test the ready view."""
        assert [o.pattern.id for o in get_ready_meals(opportunities)] == [
            "ready-aging",
            "ready-fresh",
        ]

    def test_almost_ready(self, opportunities):
        """Test the one-away view."""
        assert [o.pattern.id for o in get_almost_ready(opportunities)] == [
            "one-away-aging",
            "one-away-fresh",
        ]

    def test_using_aging_excludes_needs_shopping(self, opportunities):
        """Test aging view skips meals that need shopping."""
        ids = [o.pattern.id for o in get_meals_using_aging_items(opportunities)]
        assert ids == ["ready-aging", "one-away-aging"]

    def test_using_aging_sorted_by_count(self, make_item):
        """Test meals using more aging items come first."""
        patterns = [
            _pattern("one", required=[IngredientSlot(role="a", specific_items=["Kale"])]),
            _pattern(
                "two",
                required=[
                    IngredientSlot(role="a", specific_items=["Kale"]),
                    IngredientSlot(role="b", specific_items=["Milk"]),
                ],
            ),
        ]
        inventory = [
            make_item("Kale", "vegetable", freshness="useSoon"),
            make_item("Milk", "dairy", freshness="bad"),
        ]

        ranked = calculate_opportunities(inventory, patterns)

        assert [o.pattern.id for o in get_meals_using_aging_items(ranked)] == ["two", "one"]

    def test_top_suggestions_order(self, opportunities):
        """Test ready+aging, then ready, then one-away+aging."""
        ids = [o.pattern.id for o in get_top_suggestions(opportunities)]
        assert ids == ["ready-aging", "ready-fresh", "one-away-aging"]

    def test_top_suggestions_capped(self):
        """Test the default cap of five."""
        patterns = [_pattern(f"p{i}") for i in range(8)]
        assert len(get_top_suggestions(calculate_opportunities([], patterns))) == 5

    def test_top_suggestions_custom_limit(self, opportunities):
        """Test a custom cap."""
        assert len(get_top_suggestions(opportunities, limit=1)) == 1
