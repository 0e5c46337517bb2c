"""Keyword-based intent detection and entity extraction for voice commands."""

import re

from fridgebud.catalog import COMMON_ITEMS
from fridgebud.logging_config import get_logger
from fridgebud.models import QuantityLevel, StorageLocation
from fridgebud.voice.types import ParsedItem, ParsedPattern, ParsedVoiceInput, VoiceIntent

logger = get_logger(__name__)


# =============================================================================
# Trigger Phrases
# =============================================================================

# fmt: off
INTENT_TRIGGERS: dict[VoiceIntent, list[str]] = {
    "add_items": [
        # Simple starts
        "add", "adding",
        # General add
        "bought", "picked up", "got", "added", "have", "restocked",
        "brought home", "just got", "grabbed", "stocked up on",
        "put", "putting", "store", "storing",
        # Location-specific add
        "add to fridge", "add to freezer", "add to pantry",
        "put in fridge", "put in freezer", "put in pantry",
        "putting in fridge", "putting in freezer", "putting in pantry",
        "store in fridge", "store in freezer", "store in pantry",
        "fridge has", "freezer has", "pantry has",
        "add to the fridge", "add to the freezer", "add to the pantry",
        "put in the fridge", "put in the freezer", "put in the pantry",
        "to the fridge", "to the freezer", "to the pantry",
        "to our fridge", "to our freezer", "to our pantry",
        "to my fridge", "to my freezer", "to my pantry",
        "in the fridge", "in the freezer", "in the pantry",
        "in our fridge", "in our freezer", "in our pantry",
    ],
    "remove_items": [
        # General remove
        "used", "used up", "finished", "threw out", "tossed",
        "gone", "out of", "ran out", "expired", "bad", "eaten",
        "remove", "removing", "take out", "took out",
        # Location-specific remove
        "remove from fridge", "remove from freezer", "remove from pantry",
        "take out of fridge", "take out of freezer", "take out of pantry",
        "took from fridge", "took from freezer", "took from pantry",
        "grab from fridge", "grab from freezer", "grab from pantry",
        "remove from the fridge", "remove from the freezer", "remove from the pantry",
        "no more", "all out of", "none left", "ran out of",
    ],
    "create_pattern": [
        "new recipe", "new meal", "add recipe", "add meal",
        "create recipe", "save recipe", "save meal", "create meal",
        "make a recipe", "make a new recipe", "new meal pattern",
    ],
    "edit_pattern": [
        "change recipe", "edit recipe", "update recipe", "modify recipe",
        "add to recipe", "remove from recipe", "change meal", "edit meal",
        "update meal", "modify meal", "change the recipe", "edit the recipe",
    ],
}
# fmt: on

ADD_FIRST_WORDS = frozenset({"add", "adding", "put", "putting", "store"})
REMOVE_FIRST_WORDS = frozenset({"remove", "removing", "used", "finished", "threw"})

ADD_LOCATION_RE = re.compile(r"\b(to|in)\s+(the\s+|our\s+|my\s+)?(fridge|freezer|pantry)\b")
REMOVE_LOCATION_RE = re.compile(r"\bfrom\s+(the\s+|our\s+|my\s+)?(fridge|freezer|pantry)\b")

# fmt: off
# Checked in order: plenty, some, low
QUANTITY_PATTERNS: dict[QuantityLevel, list[str]] = {
    "plenty": [
        "a lot", "lots", "tons", "bunch", "big bag", "large", "full",
        "dozen", "gallon", "pack", "case", "box", "bag",
    ],
    "some": ["some", "a few", "couple", "a bit", "small", "half"],
    "low": [
        "last", "almost out", "running low", "little bit", "nearly out",
        "just a little", "not much",
    ],
}
# fmt: on

# fmt: off
# Checked in order: fridge, freezer, pantry
LOCATION_PATTERNS: dict[StorageLocation, list[str]] = {
    "fridge": [
        "fridge", "refrigerator", "in the fridge", "to the fridge",
        "in fridge", "to fridge", "from fridge", "from the fridge",
    ],
    "freezer": [
        "freezer", "frozen", "in the freezer", "to the freezer",
        "in freezer", "to freezer", "from freezer", "from the freezer",
    ],
    "pantry": [
        "pantry", "cabinet", "cupboard", "shelf", "in the pantry",
        "to the pantry", "in pantry", "to pantry", "from pantry", "from the pantry",
    ],
}
# fmt: on

# fmt: off
STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "must", "shall", "can", "need",
    "dare", "ought", "used", "i", "we", "you", "he", "she", "it", "they",
    "me", "us", "him", "her", "them", "my", "our", "your", "his", "its",
    "their", "this", "that", "these", "those", "what", "which", "who",
    "whom", "whose", "where", "when", "why", "how", "all", "each", "every",
    "both", "few", "more", "most", "other", "some", "such", "no", "nor",
    "not", "only", "own", "same", "so", "than", "too", "very", "just",
    "also", "now", "here", "there", "then", "once", "already", "always",
    "up", "out", "into", "over", "after", "before", "under", "again",
    "further", "put", "get", "got", "take", "took",
})
# fmt: on

# fmt: off
# Food modifiers kept even when they would otherwise be filtered
KEEP_WORDS = frozenset({
    "chicken", "ground", "greek", "bell", "cream", "ice", "frozen",
    "almond", "orange", "sweet", "black", "italian", "olive", "soy",
    "heavy", "feta", "cheddar",
})
# fmt: on

MAX_FALLBACK_TOKENS = 5
NO_ITEMS_CONFIDENCE_CAP = 0.4
NO_PATTERN_NAME_CONFIDENCE_CAP = 0.5

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_PUNCTUATION_EXCEPT_COMMA_RE = re.compile(r"[^\w\s,]")
_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_SPLIT_RE = re.compile(r"[\s,]+")
_PATTERN_NAME_RES = [
    re.compile(r"\bcalled\s+(.+?)(?:\s+with\s+.*)?$"),
    re.compile(r"\bnamed\s+(.+?)(?:\s+with\s+.*)?$"),
]
_RECIPE_NAME_RE = re.compile(r"\brecipe\s+(\w+(?:\s+(?!with\b)\w+)?)")
_RECIPE_NAME_SKIP = frozenset({"called", "named", "with", "for"})
_WITH_RE = re.compile(r"\bwith\s+(.+)")
_INGREDIENT_SPLIT_RE = re.compile(r",|\sand\s")


# =============================================================================
# Helper Functions
# =============================================================================


def normalize(text: str) -> str:
    """Lowercase, strip punctuation and collapse whitespace."""
    text = _PUNCTUATION_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def capitalize(text: str) -> str:
    """Capitalize the first letter of each word."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def extract_location(text: str) -> StorageLocation | None:
    """Find the storage location mentioned anywhere in the text."""
    normalized = normalize(text)
    for location, patterns in LOCATION_PATTERNS.items():
        if any(pattern in normalized for pattern in patterns):
            return location
    return None


def extract_quantity(text: str) -> QuantityLevel:
    """Find the quantity level mentioned in the text, defaulting to plenty."""
    normalized = normalize(text)
    for quantity, patterns in QUANTITY_PATTERNS.items():
        if any(pattern in normalized for pattern in patterns):
            return quantity
    return "plenty"


def detect_intent(text: str) -> tuple[VoiceIntent, float]:
    """
    Score every actionable intent and pick the best.

    Args:
        text: Transcript (normalized or raw).

    Returns:
        Tuple of (intent, confidence). Confidence is 0.3 for unknown.
    """
    normalized = normalize(text)
    words = normalized.split(" ")
    first_word = words[0] if words else ""

    scores: dict[VoiceIntent, int] = {intent: 0 for intent in INTENT_TRIGGERS}

    for intent, triggers in INTENT_TRIGGERS.items():
        for trigger in triggers:
            word_count = len(trigger.split(" "))
            if normalized.startswith(trigger + " ") or normalized == trigger:
                scores[intent] += 3 + word_count
            elif trigger in normalized:
                # Longer triggers are more specific
                scores[intent] += word_count

    if ADD_LOCATION_RE.search(normalized) and "from" not in normalized:
        scores["add_items"] += 2
    if REMOVE_LOCATION_RE.search(normalized):
        scores["remove_items"] += 2

    if first_word in ADD_FIRST_WORDS:
        scores["add_items"] += 3
    if first_word in REMOVE_FIRST_WORDS:
        scores["remove_items"] += 3

    best_intent: VoiceIntent = "unknown"
    best_score = 0
    for intent, score in scores.items():
        if score > best_score:
            best_intent, best_score = intent, score

    confidence = min(0.95, 0.5 + best_score * 0.1) if best_score > 0 else 0.3
    return best_intent, confidence


def match_item(spoken: str, recent_items: list[str] | None = None) -> ParsedItem:
    """
    Match a spoken item name against the known item catalog.

    Args:
        spoken: Item name as heard.
        recent_items: Recently used item names, preferred on ambiguous matches.

    Returns:
        The matched item, or a custom "other" item when nothing matches.
    """
    recent_items = recent_items or []
    normalized = normalize(spoken)

    if normalized:
        for known in COMMON_ITEMS:
            if normalize(known.name) == normalized:
                return ParsedItem(
                    name=known.name,
                    category=known.category,
                    location=known.default_location,
                    quantity="plenty",
                    confidence=1.0,
                )

        partial = [
            known
            for known in COMMON_ITEMS
            if normalized in normalize(known.name) or normalize(known.name) in normalized
        ]

        if len(partial) == 1:
            return ParsedItem(
                name=partial[0].name,
                category=partial[0].category,
                location=partial[0].default_location,
                quantity="plenty",
                confidence=0.9,
            )

        if partial:
            alternatives = [known.name for known in partial]
            recent = next((known for known in partial if known.name in recent_items), None)
            chosen = recent or partial[0]
            return ParsedItem(
                name=chosen.name,
                category=chosen.category,
                location=chosen.default_location,
                quantity="plenty",
                confidence=0.85 if recent else 0.7,
                ambiguous=True,
                alternatives=alternatives,
            )

    return ParsedItem(
        name=capitalize(spoken.strip()),
        category="other",
        location="fridge",
        quantity="plenty",
        confidence=0.5,
    )


def _matches_known_item(words: str) -> bool:
    return any(
        words in normalize(known.name) or normalize(known.name) in words for known in COMMON_ITEMS
    )


def extract_item_names(text: str) -> list[str]:
    """
    Pull candidate item names out of a transcript.

    Known catalog names found verbatim win. Otherwise trigger, location and
    quantity phrases are stripped and the remaining tokens are matched
    greedily, two words before one.
    """
    normalized = normalize(text)

    direct = [known.name for known in COMMON_ITEMS if normalize(known.name) in normalized]
    if direct:
        return direct

    cleaned = normalized
    phrase_groups = [
        *INTENT_TRIGGERS.values(),
        *LOCATION_PATTERNS.values(),
        *QUANTITY_PATTERNS.values(),
    ]
    for phrases in phrase_groups:
        for phrase in phrases:
            cleaned = cleaned.replace(phrase, " ", 1)

    words = [
        word
        for word in _TOKEN_SPLIT_RE.split(cleaned)
        if len(word) >= 2 and (word not in STOP_WORDS or word in KEEP_WORDS)
    ]

    matched: list[str] = []
    i = 0
    while i < len(words):
        if i < len(words) - 1:
            two_words = f"{words[i]} {words[i + 1]}"
            if any(two_words in normalize(known.name) for known in COMMON_ITEMS):
                matched.append(two_words)
                i += 2
                continue

        if _matches_known_item(words[i]) or words[i] in KEEP_WORDS:
            matched.append(words[i])
        i += 1

    return matched if matched else words[:MAX_FALLBACK_TOKENS]


def extract_pattern_name(text: str) -> str | None:
    """Find a recipe name from "called X", "named X" or "recipe X"."""
    normalized = normalize(text)

    for pattern in _PATTERN_NAME_RES:
        match = pattern.search(normalized)
        if match and match.group(1).strip():
            return capitalize(match.group(1).strip())

    match = _RECIPE_NAME_RE.search(normalized)
    if match and match.group(1).split(" ")[0] not in _RECIPE_NAME_SKIP:
        return capitalize(match.group(1).strip())

    return None


def extract_pattern_ingredients(text: str) -> list[str]:
    """Split a "with A, B and C" clause into catalog item names."""
    lowered = _PUNCTUATION_EXCEPT_COMMA_RE.sub("", text.lower())
    lowered = _WHITESPACE_RE.sub(" ", lowered).strip()

    match = _WITH_RE.search(lowered)
    if not match:
        return []

    parts = (part.strip() for part in _INGREDIENT_SPLIT_RE.split(match.group(1)))
    return [match_item(part).name for part in parts if part]


# =============================================================================
# Main Parser Function
# =============================================================================


def parse_voice_input(text: str, recent_items: list[str] | None = None) -> ParsedVoiceInput:
    """
    Parse a voice transcript into an intent plus items or a pattern.

    Args:
        text: Raw transcript.
        recent_items: Recently used item names for disambiguation.

    Returns:
        ParsedVoiceInput with ``raw`` set to the original text.
    """
    normalized = normalize(text)
    intent, confidence = detect_intent(normalized)
    extracted_location = extract_location(normalized)

    result = ParsedVoiceInput(
        intent=intent,
        confidence=confidence,
        raw=text,
        extracted_location=extracted_location,
    )

    if intent in ("add_items", "remove_items"):
        quantity: QuantityLevel = (
            "low" if intent == "remove_items" else extract_quantity(normalized)
        )
        items = []
        for name in extract_item_names(normalized):
            item = match_item(name, recent_items)
            item.quantity = quantity
            item.location = extracted_location or item.location
            items.append(item)
        result.items = items

        if items:
            avg_item_confidence = sum(i.confidence for i in items) / len(items)
            result.confidence = (result.confidence + avg_item_confidence) / 2
        else:
            result.confidence = min(result.confidence, NO_ITEMS_CONFIDENCE_CAP)

    elif intent in ("create_pattern", "edit_pattern"):
        name = extract_pattern_name(normalized)
        ingredients = extract_pattern_ingredients(text)

        if intent == "create_pattern":
            result.pattern = ParsedPattern(name=name, add_ingredients=ingredients)
        else:
            is_remove = "remove from" in normalized or "take out" in normalized
            result.pattern = ParsedPattern(
                target_pattern=name,
                add_ingredients=None if is_remove else ingredients,
                remove_ingredients=ingredients if is_remove else None,
            )

        if name is None:
            result.confidence = min(result.confidence, NO_PATTERN_NAME_CONFIDENCE_CAP)

    else:
        names = extract_item_names(normalized)
        if names:
            result.items = [match_item(name, recent_items) for name in names]

    logger.debug(
        f"Keyword parse: intent={result.intent} confidence={result.confidence:.2f} "
        f"items={len(result.items or [])}"
    )
    return result


def get_parse_result_summary(result: ParsedVoiceInput) -> str:
    """Human-readable one-line summary of a parse result."""
    if result.intent in ("add_items", "remove_items"):
        if not result.items:
            return "No items recognized"
        verb = "Adding" if result.intent == "add_items" else "Removing"
        return f"{verb}: {', '.join(item.name for item in result.items)}"

    if result.intent == "create_pattern":
        if not result.pattern or not result.pattern.name:
            return "Create new recipe (name not recognized)"
        return f"New recipe: {result.pattern.name}"

    if result.intent == "edit_pattern":
        if not result.pattern or not result.pattern.target_pattern:
            return "Edit recipe (which one?)"
        return f"Edit: {result.pattern.target_pattern}"

    return 'Could not understand. Try: "Add chicken to fridge" or "Used the milk"'
