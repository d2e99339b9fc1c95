"""
Text completion clients.

The color resolver and advice generator only need "prompt in, text out".
Two implementations are provided:

- OpenAICompletionClient: live chat-completions call through AsyncOpenAI.
  One attempt per call; every failure is raised as CompletionError.
- StubCompletionClient: deterministic canned responses for tests, and
  the client used when no API key is configured (it then always fails,
  so every caller takes its static fallback).
"""

from collections import deque
from typing import Deque, Iterable, List, Optional, Protocol, Union

from openai import AsyncOpenAI, OpenAIError

from config.settings import Settings
from core.logging import get_logger
from styling.errors import CompletionError

logger = get_logger(__name__)


_SYSTEM_PROMPT = (
    "You are a fashion styling assistant for a clothing store. "
    "Answer concisely and follow the requested output format exactly."
)


class TextCompletionClient(Protocol):
    """Capability interface for a single-shot text completion."""

    async def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        ...

    async def ping(self) -> bool:
        ...


# =============================================================================
# Live client
# =============================================================================

class OpenAICompletionClient:
    """Chat-completions client backed by the OpenAI SDK."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        timeout: float = 30.0,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self._model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            raise CompletionError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise CompletionError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise CompletionError("OpenAI returned an empty completion")
        return content.strip()

    async def ping(self) -> bool:
        """Send a tiny request to check the key and endpoint. Never raises."""
        try:
            await self.complete("Hello, this is a test.", max_tokens=5, temperature=0.0)
            return True
        except CompletionError as e:
            logger.warning("OpenAI connectivity check failed", error=str(e))
            return False


# =============================================================================
# Deterministic stub
# =============================================================================

StubResponse = Union[str, Exception]


class StubCompletionClient:
    """
    Returns queued responses in order.

    A queued Exception is raised (wrapped in CompletionError unless it
    already is one). When the queue is empty the client fails, or returns
    ``default`` if one was given. Every prompt is recorded in ``prompts``.
    """

    def __init__(
        self,
        responses: Optional[Iterable[StubResponse]] = None,
        default: Optional[str] = None,
    ):
        self._responses: Deque[StubResponse] = deque(responses or [])
        self._default = default
        self.prompts: List[str] = []

    async def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        self.prompts.append(prompt)
        if self._responses:
            response = self._responses.popleft()
        elif self._default is not None:
            response = self._default
        else:
            raise CompletionError("No completion available")

        if isinstance(response, CompletionError):
            raise response
        if isinstance(response, Exception):
            raise CompletionError(str(response)) from response
        return response

    async def ping(self) -> bool:
        return bool(self._responses) or self._default is not None


def build_completion_client(settings: Settings) -> TextCompletionClient:
    """Pick the live client when AI is configured, the failing stub otherwise."""
    if not settings.is_ai_configured:
        logger.info(
            "Style AI not configured, using static fallbacks",
            style_ai_enabled=settings.style_ai_enabled,
        )
        return StubCompletionClient()
    return OpenAICompletionClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout_seconds,
        base_url=settings.openai_base_url,
    )
