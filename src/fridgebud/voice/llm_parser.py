"""Prompt building and strict validation of LLM voice-parse responses."""

import json
import math
import re
from typing import Any

from fridgebud.catalog import COMMON_ITEMS
from fridgebud.logging_config import get_logger
from fridgebud.models import InventoryItem, MealPattern
from fridgebud.voice.types import (
    PATTERN_INTENTS,
    LLMParsedItem,
    LLMParsedPattern,
    LLMParseResult,
)

logger = get_logger(__name__)


# =============================================================================
# Prompts
# =============================================================================

LLM_SYSTEM_PROMPT = """You are a kitchen inventory assistant for a fridge-mounted household terminal. Parse voice commands about food items and meal patterns.

RULES:
1. Extract the primary action: "add_items" (putting items into storage), "remove_items" (using/discarding items), "create_pattern" (saving a new meal idea), "edit_pattern" (changing an existing meal idea), or "unknown"
2. Extract ALL food items mentioned, even if grammar is imperfect or items are listed without commas
3. For each item, determine:
   - name: Canonical name (e.g., "Chicken breast" not "some chicken")
   - matchedKnownItem: If it matches a known item, use that exact name; otherwise null
   - category: protein | vegetable | fruit | dairy | grain | condiment | spice | beverage | frozen | other
   - location: fridge | freezer | pantry (infer from item type using typical storage, NOT what user says if incorrect)
   - quantity: plenty | some | low (default: "plenty" for adds, infer from context)
   - confidence: 0.0-1.0 (how certain you are about this extraction)
   - possibleDuplicate: true if item appears to already exist in the provided inventory
   - duplicateItemId: the ID of the existing inventory item if duplicate, otherwise null
   - reasoning: brief explanation of your decisions (especially for location overrides or duplicates)
   - locationOverridden: true if you changed location from what user said to what's typical
   - originalLocation: only set if locationOverridden is true, the location user requested
4. Use KNOWN ITEMS list for matching - prefer exact matches when possible
5. For items not in known list, infer category and typical location based on food type
6. Handle natural speech patterns like "milk eggs cumin and apples" or "some chicken, rice"
7. Spices ALWAYS go in pantry, dairy ALWAYS in fridge, frozen items ALWAYS in freezer
8. For create_pattern/edit_pattern, fill "pattern" and leave "items" as an empty array

OUTPUT FORMAT: Valid JSON only, no markdown, no explanation outside JSON."""


def build_user_prompt(
    transcription: str,
    current_inventory: list[InventoryItem],
    patterns: list[MealPattern] | None = None,
) -> str:
    """
    Build the user message for the chat completion.

    Args:
        transcription: Voice transcript to parse.
        current_inventory: Items already in the household, for duplicate detection.
        patterns: Existing meal patterns, for edit matching.

    Returns:
        Prompt text including the expected JSON schema.
    """
    known_items = "\n".join(
        f"- {item.name} ({item.category}, typically {item.default_location})"
        for item in COMMON_ITEMS
    )

    if current_inventory:
        inventory_list = "\n".join(
            f"- {item.name} (id: {item.id}, {item.location}, {item.quantity})"
            for item in current_inventory
        )
    else:
        inventory_list = "(empty)"

    pattern_list = "\n".join(f"- {p.name}" for p in patterns) if patterns else "(none)"

    return f"""KNOWN ITEMS (with default locations):
{known_items}

CURRENT INVENTORY:
{inventory_list}

EXISTING MEAL PATTERNS:
{pattern_list}

VOICE INPUT: "{transcription}"

Parse this and return JSON matching this exact schema:
{{
  "intent": "add_items" | "remove_items" | "create_pattern" | "edit_pattern" | "unknown",
  "confidence": number between 0 and 1,
  "items": [
    {{
      "name": "string - canonical item name",
      "matchedKnownItem": "string or null - exact name from known items if matched",
      "category": "protein|vegetable|fruit|dairy|grain|condiment|spice|beverage|frozen|other",
      "location": "fridge|freezer|pantry",
      "quantity": "plenty|some|low",
      "confidence": number between 0 and 1,
      "possibleDuplicate": boolean,
      "duplicateItemId": "string or null",
      "reasoning": "string explaining your decisions",
      "locationOverridden": boolean,
      "originalLocation": "fridge|freezer|pantry or null if not overridden"
    }}
  ],
  "pattern": {{
    "name": "string - meal name",
    "matchedExistingPattern": "string or null - exact name from existing meal patterns",
    "ingredients": ["item names to add"],
    "removeIngredients": ["item names to remove"],
    "effort": "minimal|moderate|involved",
    "mealTypes": ["breakfast|lunch|dinner|snack"]
  }} or null,
  "extractedLocation": "fridge|freezer|pantry or null if not specified",
  "warnings": ["array of strings for any issues or notes"]
}}"""


# =============================================================================
# Response Validation
# =============================================================================

VALID_CATEGORIES = frozenset(
    {
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
    }
)
VALID_LOCATIONS = frozenset({"fridge", "freezer", "pantry"})
VALID_QUANTITIES = frozenset({"plenty", "some", "low"})
VALID_INTENTS = frozenset(
    {"add_items", "remove_items", "create_pattern", "edit_pattern", "unknown"}
)
VALID_EFFORTS = frozenset({"minimal", "moderate", "involved"})
VALID_MEAL_TYPES = frozenset({"breakfast", "lunch", "dinner", "snack"})

DEFAULT_ITEM_CONFIDENCE = 0.5

_CODE_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def _is_number(value: Any) -> bool:
    """Finite int/float, excluding bools."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _enum(value: Any, allowed: frozenset[str], default: Any) -> Any:
    return value if isinstance(value, str) and value in allowed else default


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v.strip() for v in value if isinstance(v, str) and v.strip()]


def _validate_item(data: dict[str, Any]) -> LLMParsedItem | None:
    """Validate a single item; None when it has no usable name."""
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    confidence = data.get("confidence")
    confidence = (
        float(min(1.0, max(0.0, confidence)))
        if _is_number(confidence)
        else DEFAULT_ITEM_CONFIDENCE
    )

    reasoning = data.get("reasoning")
    return LLMParsedItem(
        name=name.strip(),
        matched_known_item=_optional_str(data.get("matchedKnownItem")),
        category=_enum(data.get("category"), VALID_CATEGORIES, "other"),
        location=_enum(data.get("location"), VALID_LOCATIONS, "fridge"),
        quantity=_enum(data.get("quantity"), VALID_QUANTITIES, "plenty"),
        confidence=confidence,
        possible_duplicate=data.get("possibleDuplicate") is True,
        duplicate_item_id=_optional_str(data.get("duplicateItemId")),
        reasoning=reasoning if isinstance(reasoning, str) else "",
        location_overridden=data.get("locationOverridden") is True,
        original_location=_enum(data.get("originalLocation"), VALID_LOCATIONS, None),
    )


def _validate_pattern(data: Any) -> LLMParsedPattern | None:
    """Validate the pattern payload; None without a usable name."""
    if not isinstance(data, dict):
        return None

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    meal_types = data.get("mealTypes")
    if not isinstance(meal_types, list):
        meal_types = []
    meal_types = [m for m in meal_types if isinstance(m, str) and m in VALID_MEAL_TYPES]
    # A pattern always applies to at least one meal type
    if not meal_types:
        meal_types = ["dinner"]

    return LLMParsedPattern(
        name=name.strip(),
        matched_existing_pattern=_optional_str(data.get("matchedExistingPattern")),
        ingredients=_string_list(data.get("ingredients")),
        remove_ingredients=_string_list(data.get("removeIngredients")),
        effort=_enum(data.get("effort"), VALID_EFFORTS, "moderate"),
        meal_types=meal_types,
    )


def validate_llm_response(response: Any) -> LLMParseResult | None:
    """
    Validate and sanitize a decoded LLM response.

    Structural problems (wrong intent, confidence or items type) reject the
    whole response. Problems inside an item fall back to safe defaults, and
    items without a name are skipped.

    Args:
        response: Decoded JSON value of any type.

    Returns:
        Normalized result with an empty ``raw``, or None to signal that the
        caller must fall back to keyword parsing.
    """
    if not isinstance(response, dict):
        logger.debug("Rejecting LLM response: not an object")
        return None

    intent = response.get("intent")
    if not isinstance(intent, str) or intent not in VALID_INTENTS:
        logger.debug(f"Rejecting LLM response: invalid intent {intent!r}")
        return None

    confidence = response.get("confidence")
    if not _is_number(confidence) or not 0 <= confidence <= 1:
        logger.debug(f"Rejecting LLM response: invalid confidence {confidence!r}")
        return None

    raw_items = response.get("items")
    if not isinstance(raw_items, list):
        logger.debug("Rejecting LLM response: items is not an array")
        return None

    items = []
    for raw_item in raw_items:
        if not isinstance(raw_item, dict):
            continue
        item = _validate_item(raw_item)
        if item is not None:
            items.append(item)

    pattern = _validate_pattern(response.get("pattern")) if intent in PATTERN_INTENTS else None

    warnings = response.get("warnings")
    warnings = [w for w in warnings if isinstance(w, str)] if isinstance(warnings, list) else []

    return LLMParseResult(
        intent=intent,
        confidence=float(confidence),
        items=items,
        pattern=pattern,
        extracted_location=_enum(response.get("extractedLocation"), VALID_LOCATIONS, None),
        warnings=warnings,
    )


def parse_llm_response(response_text: Any, raw_transcription: str) -> LLMParseResult | None:
    """
    Decode raw model output and validate it.

    Args:
        response_text: Model message content, optionally wrapped in a markdown code fence.
        raw_transcription: Original transcript to attach to the result.

    Returns:
        Validated result, or None when the text is not valid JSON or fails validation.
    """
    if not isinstance(response_text, str):
        return None

    json_str = response_text.strip()
    fenced = _CODE_FENCE_RE.search(json_str)
    if fenced:
        json_str = fenced.group(1).strip()

    try:
        decoded = json.loads(json_str)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Failed to decode LLM response: {e}")
        return None

    result = validate_llm_response(decoded)
    if result is None:
        logger.warning("LLM response failed validation")
        return None

    result.raw = raw_transcription
    return result
