"""Voice command parsing: keyword parser, LLM validation and fallback."""

from fridgebud.voice.client import LLMClientError, LLMConfigurationError, OpenAIChatClient
from fridgebud.voice.fallback import convert_keyword_result, get_fallback_parse_result
from fridgebud.voice.interpreter import VoiceInterpreter
from fridgebud.voice.keyword_parser import (
    get_parse_result_summary,
    match_item,
    parse_voice_input,
)
from fridgebud.voice.llm_parser import (
    LLM_SYSTEM_PROMPT,
    build_user_prompt,
    parse_llm_response,
    validate_llm_response,
)
from fridgebud.voice.types import (
    LLMParsedItem,
    LLMParsedPattern,
    LLMParseResult,
    ParsedItem,
    ParsedPattern,
    ParsedVoiceInput,
    VoiceIntent,
)

__all__ = [
    "LLM_SYSTEM_PROMPT",
    "LLMClientError",
    "LLMConfigurationError",
    "LLMParsedItem",
    "LLMParsedPattern",
    "LLMParseResult",
    "OpenAIChatClient",
    "ParsedItem",
    "ParsedPattern",
    "ParsedVoiceInput",
    "VoiceIntent",
    "VoiceInterpreter",
    "build_user_prompt",
    "convert_keyword_result",
    "get_fallback_parse_result",
    "get_parse_result_summary",
    "match_item",
    "parse_llm_response",
    "parse_voice_input",
    "validate_llm_response",
]
