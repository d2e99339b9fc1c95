"""
Color coordination resolver.

Asks the AI client for colors that coordinate with a base color. Any
failure (transport, non-2xx, empty or unparseable answer) is absorbed
and the static fallback palette is returned instead.
"""

from typing import List

from config.constants import FALLBACK_COLORS
from core.logging import get_logger
from styling.ai_client import TextCompletionClient
from styling.errors import CompletionError

logger = get_logger(__name__)


COLOR_PROMPT_TEMPLATE = (
    "List 6 to 8 color names that coordinate well with {color} clothing. "
    "Respond with only the color names as a comma-separated list, "
    "for example: black, white, navy."
)

_MAX_TOKENS = 60
_TEMPERATURE = 0.7


def parse_color_list(text: str) -> List[str]:
    """Split a comma-separated answer into uppercase tokens of 2+ characters."""
    colors: List[str] = []
    for part in text.split(","):
        token = part.strip().strip(".").upper()
        if len(token) > 1:
            colors.append(token)
    return colors


class ColorResolver:
    """Suggests coordinating colors for a base color."""

    def __init__(self, client: TextCompletionClient):
        self._client = client

    async def suggest_colors(self, base_color: str) -> List[str]:
        """
        Return coordinating color names (uppercase).

        Makes exactly one completion call, no retry. Returns a copy of
        FALLBACK_COLORS when the call fails or yields no usable tokens.
        """
        prompt = COLOR_PROMPT_TEMPLATE.format(color=base_color.strip().lower())
        try:
            raw = await self._client.complete(prompt, max_tokens=_MAX_TOKENS, temperature=_TEMPERATURE)
        except CompletionError as e:
            logger.warning("Color suggestion failed, using fallback palette", base_color=base_color, error=str(e))
            return list(FALLBACK_COLORS)

        colors = parse_color_list(raw)
        if not colors:
            logger.warning("Color suggestion unparseable, using fallback palette", base_color=base_color, raw=raw[:200])
            return list(FALLBACK_COLORS)

        logger.debug("Color suggestions", base_color=base_color, colors=colors)
        return colors
