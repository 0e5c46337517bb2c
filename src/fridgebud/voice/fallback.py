"""Convert keyword parser results into the unified LLM result shape."""

from fridgebud.models import InventoryItem
from fridgebud.voice.keyword_parser import parse_voice_input
from fridgebud.voice.types import (
    PATTERN_INTENTS,
    LLMParsedItem,
    LLMParsedPattern,
    LLMParseResult,
    ParsedItem,
    ParsedPattern,
    ParsedVoiceInput,
)

LOW_CONFIDENCE_THRESHOLD = 0.5
KNOWN_ITEM_CONFIDENCE = 0.9

LOW_CONFIDENCE_WARNING = "Low confidence - parsed with fallback method"
MISSING_PATTERN_NAME_WARNING = "Recipe name not recognized"


def _convert_item(item: ParsedItem, current_inventory: list[InventoryItem]) -> LLMParsedItem:
    wanted = item.name.lower()
    duplicate = next((inv for inv in current_inventory if inv.name.lower() == wanted), None)

    if item.ambiguous:
        reasoning = f"Ambiguous match - alternatives: {', '.join(item.alternatives or [])}"
    else:
        reasoning = "Matched via keyword parser"

    return LLMParsedItem(
        name=item.name,
        matched_known_item=item.name if item.confidence >= KNOWN_ITEM_CONFIDENCE else None,
        category=item.category,
        location=item.location,
        quantity=item.quantity,
        confidence=item.confidence,
        possible_duplicate=duplicate is not None,
        duplicate_item_id=duplicate.id if duplicate else None,
        reasoning=reasoning,
        location_overridden=False,
    )


def _convert_pattern(pattern: ParsedPattern) -> LLMParsedPattern | None:
    name = pattern.name or pattern.target_pattern
    if not name:
        return None

    # Effort and meal types are not inferred by the keyword parser
    return LLMParsedPattern(
        name=name,
        matched_existing_pattern=pattern.target_pattern,
        ingredients=list(pattern.add_ingredients or []),
        remove_ingredients=list(pattern.remove_ingredients or []),
        effort="moderate",
        meal_types=["dinner"],
    )


def convert_keyword_result(
    keyword_result: ParsedVoiceInput,
    current_inventory: list[InventoryItem],
) -> LLMParseResult:
    """
    Convert a keyword parse into the unified result shape.

    Args:
        keyword_result: Output of the keyword parser.
        current_inventory: Household inventory, used to flag duplicates.

    Returns:
        Unified result carrying the original transcript in ``raw``.
    """
    items = [_convert_item(item, current_inventory) for item in keyword_result.items or []]
    warnings: list[str] = []

    pattern = None
    if keyword_result.intent in PATTERN_INTENTS and keyword_result.pattern is not None:
        pattern = _convert_pattern(keyword_result.pattern)
        if pattern is None:
            warnings.append(MISSING_PATTERN_NAME_WARNING)

    if keyword_result.confidence < LOW_CONFIDENCE_THRESHOLD:
        warnings.append(LOW_CONFIDENCE_WARNING)

    return LLMParseResult(
        intent=keyword_result.intent,
        confidence=keyword_result.confidence,
        items=items,
        pattern=pattern,
        extracted_location=keyword_result.extracted_location,
        warnings=warnings,
        raw=keyword_result.raw,
    )


def get_fallback_parse_result(
    transcription: str,
    current_inventory: list[InventoryItem],
    recent_items: list[str] | None = None,
) -> LLMParseResult:
    """Parse a transcript with the keyword parser and return the unified shape."""
    return convert_keyword_result(parse_voice_input(transcription, recent_items), current_inventory)
