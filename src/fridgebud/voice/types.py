"""Result shapes for voice command parsing."""

from dataclasses import dataclass, field
from typing import Any, Literal

from fridgebud.models import (
    EffortLevel,
    IngredientCategory,
    MealType,
    QuantityLevel,
    StorageLocation,
)

VoiceIntent = Literal["add_items", "remove_items", "create_pattern", "edit_pattern", "unknown"]

PATTERN_INTENTS = frozenset({"create_pattern", "edit_pattern"})


# =============================================================================
# Keyword parser output
# =============================================================================


@dataclass
class ParsedItem:
    """An item recognized by the keyword parser."""

    name: str
    category: IngredientCategory
    location: StorageLocation
    quantity: QuantityLevel
    confidence: float
    ambiguous: bool = False
    alternatives: list[str] | None = None


@dataclass
class ParsedPattern:
    """A meal pattern request recognized by the keyword parser."""

    name: str | None = None
    target_pattern: str | None = None  # pattern to modify, for edits
    add_ingredients: list[str] | None = None
    remove_ingredients: list[str] | None = None


@dataclass
class ParsedVoiceInput:
    """Keyword parser result."""

    intent: VoiceIntent
    confidence: float
    raw: str
    items: list[ParsedItem] | None = None
    pattern: ParsedPattern | None = None
    extracted_location: StorageLocation | None = None


# =============================================================================
# Unified result (LLM output, or keyword output converted to the same shape)
# =============================================================================


@dataclass
class LLMParsedItem:
    """An item in the unified parse result."""

    name: str
    category: IngredientCategory
    location: StorageLocation
    quantity: QuantityLevel
    confidence: float
    matched_known_item: str | None = None
    possible_duplicate: bool = False
    duplicate_item_id: str | None = None
    reasoning: str = ""
    location_overridden: bool = False
    original_location: StorageLocation | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON object shape the LLM is asked to produce."""
        return {
            "name": self.name,
            "matchedKnownItem": self.matched_known_item,
            "category": self.category,
            "location": self.location,
            "quantity": self.quantity,
            "confidence": self.confidence,
            "possibleDuplicate": self.possible_duplicate,
            "duplicateItemId": self.duplicate_item_id,
            "reasoning": self.reasoning,
            "locationOverridden": self.location_overridden,
            "originalLocation": self.original_location,
        }


@dataclass
class LLMParsedPattern:
    """A meal pattern payload in the unified parse result."""

    name: str
    matched_existing_pattern: str | None = None
    ingredients: list[str] = field(default_factory=list)
    remove_ingredients: list[str] = field(default_factory=list)
    effort: EffortLevel = "moderate"
    meal_types: list[MealType] = field(default_factory=lambda: ["dinner"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON object shape the LLM is asked to produce."""
        return {
            "name": self.name,
            "matchedExistingPattern": self.matched_existing_pattern,
            "ingredients": list(self.ingredients),
            "removeIngredients": list(self.remove_ingredients),
            "effort": self.effort,
            "mealTypes": list(self.meal_types),
        }


@dataclass
class LLMParseResult:
    """Unified voice parse result, whichever parser produced it."""

    intent: VoiceIntent
    confidence: float
    items: list[LLMParsedItem] = field(default_factory=list)
    pattern: LLMParsedPattern | None = None
    extracted_location: StorageLocation | None = None
    warnings: list[str] = field(default_factory=list)
    raw: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase JSON shape used by the LLM and API clients."""
        return {
            "intent": self.intent,
            "confidence": self.confidence,
            "items": [item.to_dict() for item in self.items],
            "pattern": self.pattern.to_dict() if self.pattern else None,
            "extractedLocation": self.extracted_location,
            "warnings": list(self.warnings),
            "raw": self.raw,
        }
