"""OpenAI chat completions client for voice parsing."""

import asyncio
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from fridgebud.config import get_settings
from fridgebud.logging_config import get_logger

logger = get_logger(__name__)


class LLMClientError(Exception):
    """Base exception for LLM client errors."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class LLMConfigurationError(LLMClientError):
    """Raised when no API key is configured."""


class OpenAIChatClient:
    """Minimal async client for the OpenAI chat completions endpoint."""

    BACKOFF_BASE = 0.5
    BACKOFF_MAX = 4

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.api_url = api_url or settings.openai_api_url
        self.model = model or settings.openai_model
        self.timeout = timeout if timeout is not None else settings.llm_timeout
        self.max_retries = max_retries if max_retries is not None else settings.llm_max_retries
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens
        self._client: httpx.AsyncClient | None = None

        if not self.api_key:
            raise LLMConfigurationError("OpenAI API key is not configured")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        """POST with retries on timeouts and network errors, bounded by ``timeout`` overall."""
        client = await self._get_client()

        @retry(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.BACKOFF_BASE, max=self.BACKOFF_MAX),
            reraise=True,
        )
        async def _do_request() -> httpx.Response:
            return await client.post(self.api_url, json=payload)

        try:
            # The deadline covers every attempt and the backoff between them
            async with asyncio.timeout(self.timeout):
                return await _do_request()
        except TimeoutError as e:
            logger.error(f"OpenAI request exceeded {self.timeout}s")
            raise LLMClientError(f"Request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.error(f"OpenAI request failed after {self.max_retries} attempts: {e}")
            raise LLMClientError(f"Request failed: {e.__class__.__name__}") from e

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run a chat completion and return the message content.

        Args:
            system_prompt: System message.
            user_prompt: User message.

        Returns:
            Content of the first choice.

        Raises:
            LLMClientError: On transport errors, HTTP errors or an empty response.
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        response = await self._post(payload)

        if response.status_code >= 400:
            error_detail = response.text[:500] if response.text else "No details"
            logger.error(f"OpenAI API error {response.status_code}: {error_detail}")
            raise LLMClientError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
                response=error_detail,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMClientError("API returned a non-JSON body", response.status_code) from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None

        if not isinstance(content, str) or not content.strip():
            raise LLMClientError("Empty response from OpenAI", response.status_code, data)

        return content
