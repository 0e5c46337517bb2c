"""API routes for voice command parsing."""

from collections.abc import AsyncIterator
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from fridgebud.config import get_settings
from fridgebud.logging_config import get_logger
from fridgebud.models import InventoryItem, MealPattern
from fridgebud.voice import (
    OpenAIChatClient,
    VoiceInterpreter,
    get_fallback_parse_result,
    parse_llm_response,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/voice", tags=["voice"])


class ParseVoiceRequest(BaseModel):
    """Transcript plus the household context needed to interpret it."""

    transcription: str = Field(min_length=1)
    current_inventory: list[InventoryItem] = Field(default_factory=list)
    recent_items: list[str] = Field(default_factory=list)
    patterns: list[MealPattern] | None = None


class ValidateResponseRequest(BaseModel):
    """Raw model output to validate."""

    content: str
    transcription: str = ""


async def get_voice_interpreter() -> AsyncIterator[VoiceInterpreter]:
    """Provide an interpreter, with an LLM client only when a key is configured."""
    client = OpenAIChatClient() if get_settings().llm_enabled else None
    try:
        yield VoiceInterpreter(client)
    finally:
        if client is not None:
            await client.close()


@router.post("/parse")
async def parse_voice(
    request: ParseVoiceRequest,
    interpreter: Annotated[VoiceInterpreter, Depends(get_voice_interpreter)],
) -> dict[str, Any]:
    """Interpret a transcript, falling back to keyword parsing when needed."""
    result = await interpreter.interpret(
        request.transcription,
        request.current_inventory,
        request.recent_items,
        request.patterns,
    )
    return result.to_dict()


@router.post("/parse/keyword")
async def parse_voice_keyword(request: ParseVoiceRequest) -> dict[str, Any]:
    """Interpret a transcript with the keyword parser only."""
    result = get_fallback_parse_result(
        request.transcription,
        request.current_inventory,
        request.recent_items,
    )
    return result.to_dict()


@router.post("/validate")
async def validate_model_output(request: ValidateResponseRequest) -> dict[str, Any]:
    """Validate raw LLM output against the voice parse schema."""
    result = parse_llm_response(request.content, request.transcription)
    if result is None:
        logger.info("Rejected model output submitted for validation")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Model output rejected; use the keyword parser instead",
        )
    return result.to_dict()
