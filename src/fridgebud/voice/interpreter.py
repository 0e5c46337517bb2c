"""Voice command interpretation: LLM first, keyword parser as the safety net."""

from fridgebud.logging_config import get_logger
from fridgebud.models import InventoryItem, MealPattern
from fridgebud.voice.client import LLMClientError, OpenAIChatClient
from fridgebud.voice.fallback import get_fallback_parse_result
from fridgebud.voice.llm_parser import LLM_SYSTEM_PROMPT, build_user_prompt, parse_llm_response
from fridgebud.voice.types import LLMParseResult

logger = get_logger(__name__)

# Below this confidence an item-less LLM answer is double-checked with keywords
LOW_LLM_CONFIDENCE = 0.3

NOT_CONFIGURED_WARNING = "Used fallback parser - LLM not configured"
API_ERROR_WARNING = "Used fallback parser due to API error"
INVALID_RESPONSE_WARNING = "Used fallback parser - invalid API response format"
SUPPLEMENTED_WARNING = "Supplemented with fallback parser due to low confidence"


class VoiceInterpreter:
    """
    Turns a transcript into a unified parse result.

    The LLM path is tried first when a client is configured. Any client
    failure or rejected response falls back to the keyword parser, so
    callers always get a result.
    """

    def __init__(self, client: OpenAIChatClient | None = None):
        self.client = client

    async def interpret(
        self,
        transcription: str,
        current_inventory: list[InventoryItem],
        recent_items: list[str] | None = None,
        patterns: list[MealPattern] | None = None,
    ) -> LLMParseResult:
        """
        Interpret a voice transcript.

        Args:
            transcription: Text from the transcription service.
            current_inventory: Household inventory for duplicate detection.
            recent_items: Recently used item names for disambiguation.
            patterns: Existing meal patterns, offered to the LLM for edits.

        Returns:
            Unified parse result. Warnings say when and why the fallback was used.
        """
        if self.client is None:
            return self._fallback(
                transcription, current_inventory, recent_items, NOT_CONFIGURED_WARNING
            )

        try:
            content = await self.client.complete(
                LLM_SYSTEM_PROMPT,
                build_user_prompt(transcription, current_inventory, patterns),
            )
        except LLMClientError as e:
            logger.warning(f"LLM parsing failed, falling back to keyword parser: {e}")
            return self._fallback(transcription, current_inventory, recent_items, API_ERROR_WARNING)

        result = parse_llm_response(content, transcription)
        if result is None:
            logger.warning("Invalid LLM response format, falling back to keyword parser")
            return self._fallback(
                transcription, current_inventory, recent_items, INVALID_RESPONSE_WARNING
            )

        if result.confidence < LOW_LLM_CONFIDENCE and not result.items:
            fallback = get_fallback_parse_result(transcription, current_inventory, recent_items)
            if fallback.items:
                logger.info("Low confidence LLM result, using keyword parser items instead")
                fallback.warnings.append(SUPPLEMENTED_WARNING)
                return fallback

        logger.info(f"LLM parse: intent={result.intent} items={len(result.items)}")
        return result

    @staticmethod
    def _fallback(
        transcription: str,
        current_inventory: list[InventoryItem],
        recent_items: list[str] | None,
        warning: str,
    ) -> LLMParseResult:
        result = get_fallback_parse_result(transcription, current_inventory, recent_items)
        result.warnings.append(warning)
        return result
