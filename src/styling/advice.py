"""
Fashion advice generator.

Builds a stylist prompt around a product and an optional shopper
question. When the AI call fails the answer is produced from a fixed
template covering the same four topics, filled in from the product's
color and category only, so it is fully deterministic.
"""

from typing import Dict, Optional

from config.constants import WARM_COLOR_TOKENS
from core.logging import get_logger
from styling.ai_client import TextCompletionClient
from styling.errors import CompletionError

logger = get_logger(__name__)


DEFAULT_QUESTION = "Give complete styling advice for this item."

ADVICE_TOPICS = (
    "Jewelry & Accessories",
    "Occasions & Settings",
    "Color Coordination",
    "Styling Techniques",
)

ADVICE_PROMPT_TEMPLATE = """You are a professional fashion stylist.

Item: {product_name}
Color: {color}
Category: {category}

Shopper's question: {question}

Answer the question for this item and cover these four topics:
1. Jewelry & Accessories - which metals and accessories suit it
2. Occasions & Settings - where and when to wear it
3. Color Coordination - colors that work with it
4. Styling Techniques - how to wear it (layering, tucking, proportions)

Write 50-100 words of friendly prose. Do not use markdown."""

_MAX_TOKENS = 250
_TEMPERATURE = 0.7


# =============================================================================
# Fallback template
# =============================================================================

_OCCASIONS: Dict[str, str] = {
    "BAGS": "from daytime errands to dinner out",
    "BLAZERS": "office days, meetings and smart-casual evenings",
    "DRESSES/JUMPSUITS": "weddings, dinners and weekend brunches",
    "JACKETS": "casual outings and cooler evenings",
    "SHIRTS": "the office as well as relaxed weekends",
    "SHOES": "everyday wear or dressed-up events",
    "SWEATERS": "autumn and winter days, at work or at home",
    "WAISTCOATS": "formal events and polished smart-casual looks",
    "SKIRTS": "work, parties and weekend plans",
    "T-SHIRT/TOPS": "casual days and relaxed get-togethers",
}

_TECHNIQUES: Dict[str, str] = {
    "BAGS": "Let it be the focal point and keep other accessories minimal.",
    "BLAZERS": "Wear it open over a fitted top, or push the sleeves up for a relaxed feel.",
    "DRESSES/JUMPSUITS": "Add a belt to define the waist and layer a jacket when it cools down.",
    "JACKETS": "Balance it with slimmer pieces underneath and roll the cuffs for a casual look.",
    "SHIRTS": "Try a half tuck, or knot it at the waist over a high-rise skirt.",
    "SHOES": "Let the shoe set the tone and match the formality of the rest of the outfit.",
    "SWEATERS": "Tuck the front into a high waist or layer a collared shirt underneath.",
    "WAISTCOATS": "Wear it over a crisp shirt, or on its own as a sleeveless top.",
    "SKIRTS": "Pair it with a tucked-in top to highlight the waist.",
    "T-SHIRT/TOPS": "Tuck it in for shape, or layer a blazer or jacket over it.",
}

_DEFAULT_OCCASIONS = "a wide range of everyday and special occasions"
_DEFAULT_TECHNIQUE = "Keep the proportions balanced and build the outfit around this piece."


def is_warm_color(color: str) -> bool:
    key = (color or "").upper()
    return any(token in key for token in WARM_COLOR_TOKENS)


def fallback_advice(color: str, category: str, product_name: str) -> str:
    """Deterministic advice for when the AI is unavailable."""
    color_label = (color or "").strip().lower() or "this"
    key = (category or "").strip().upper()
    if is_warm_color(color):
        metals = "Gold jewelry and warm-toned accessories like tan leather"
        pairings = "cream, camel, olive and denim blue"
    else:
        metals = "Silver jewelry and cool-toned accessories like black or grey leather"
        pairings = "white, grey, navy and soft pastels"

    return (
        f"Styling your {color_label} {product_name}:\n"
        f"{ADVICE_TOPICS[0]}: {metals} complement the {color_label} tone.\n"
        f"{ADVICE_TOPICS[1]}: It works well for {_OCCASIONS.get(key, _DEFAULT_OCCASIONS)}.\n"
        f"{ADVICE_TOPICS[2]}: Pair it with {pairings}, or keep it classic with black and white.\n"
        f"{ADVICE_TOPICS[3]}: {_TECHNIQUES.get(key, _DEFAULT_TECHNIQUE)}"
    )


class AdviceGenerator:
    """Produces styling advice for a product, with a template fallback."""

    def __init__(self, client: TextCompletionClient):
        self._client = client

    @staticmethod
    def build_prompt(color: str, category: str, product_name: str, question: Optional[str]) -> str:
        question = (question or "").strip() or DEFAULT_QUESTION
        return ADVICE_PROMPT_TEMPLATE.format(
            product_name=product_name,
            color=color,
            category=category,
            question=question,
        )

    async def generate_advice(
        self,
        color: str,
        category: str,
        product_name: str,
        question: Optional[str] = None,
    ) -> str:
        prompt = self.build_prompt(color, category, product_name, question)
        try:
            return await self._client.complete(prompt, max_tokens=_MAX_TOKENS, temperature=_TEMPERATURE)
        except CompletionError as e:
            logger.warning(
                "Advice generation failed, using template",
                product_name=product_name,
                category=category,
                error=str(e),
            )
            return fallback_advice(color, category, product_name)
