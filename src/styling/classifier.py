"""
Conversational classifier for the style assistant chat.

Classifies a message into greeting / thanks / goodbye / category request /
open question with an ordered list of keyword rules (first match wins),
then dispatches: small talk gets a canned reply, category requests go to
the product matcher, open questions go to the advice generator.
"""

from typing import Callable, List, Optional, Tuple

from core.logging import get_logger
from styling.advice import AdviceGenerator
from styling.matcher import ProductMatcher
from styling.models import ClassifiedIntent, IntentKind, Product, RecommendationResult

logger = get_logger(__name__)


# =============================================================================
# Keyword tables
# =============================================================================

_GREETINGS = {"hello", "hi", "hey"}
_GOODBYES = {"bye", "goodbye", "see you"}

# Noun as typed by shoppers -> canonical category token. "t-shirts" must
# come before "shirts".
_CATEGORY_NOUNS: List[Tuple[str, str]] = [
    ("bags", "bags"),
    ("shoes", "shoes"),
    ("dresses", "dresses/jumpsuits"),
    ("jumpsuits", "dresses/jumpsuits"),
    ("jackets", "jackets"),
    ("blazers", "blazers"),
    ("t-shirts", "t-shirt/tops"),
    ("tops", "t-shirt/tops"),
    ("shirts", "shirts"),
    ("sweaters", "sweaters"),
    ("skirts", "skirts"),
    ("waistcoats", "waistcoats"),
]

_CATEGORY_PHRASES: List[Tuple[str, str]] = [
    (f"{prefix} {noun}", category)
    for noun, category in _CATEGORY_NOUNS
    for prefix in ("other", "show me", "more")
]


def _normalize(message: str) -> str:
    return (message or "").strip().lower()


def _category_for(text: str) -> Optional[str]:
    for phrase, category in _CATEGORY_PHRASES:
        if phrase in text:
            return category
    return None


# =============================================================================
# Ordered rules
# =============================================================================

def _is_greeting(text: str) -> bool:
    # "hi " keeps its trailing space so "high waisted" is not a greeting
    return text in _GREETINGS or text.startswith("hello") or text.startswith("hi ")


def _is_thanks(text: str) -> bool:
    return "thank" in text


def _is_goodbye(text: str) -> bool:
    return text in _GOODBYES or "talk later" in text


_Rule = Tuple[Callable[[str], bool], Callable[[str], ClassifiedIntent]]

_RULES: List[_Rule] = [
    (_is_greeting, lambda text: ClassifiedIntent(IntentKind.GREETING)),
    (_is_thanks, lambda text: ClassifiedIntent(IntentKind.THANKS)),
    (_is_goodbye, lambda text: ClassifiedIntent(IntentKind.GOODBYE)),
    (
        lambda text: _category_for(text) is not None,
        lambda text: ClassifiedIntent(IntentKind.CATEGORY_REQUEST, category=_category_for(text)),
    ),
]


def classify(message: str) -> ClassifiedIntent:
    """Classify a chat message. Case-insensitive, surrounding whitespace ignored."""
    text = _normalize(message)
    for predicate, build in _RULES:
        if predicate(text):
            return build(text)
    return ClassifiedIntent(IntentKind.OPEN_QUESTION, text=(message or "").strip())


# =============================================================================
# Dispatch
# =============================================================================

def canned_reply(kind: IntentKind, product: Product) -> str:
    if kind == IntentKind.GREETING:
        return (
            f"Hello! I can help you style your {product.name}. Ask me for style tips, "
            f"or say something like \"show me shoes\" to see matching items."
        )
    if kind == IntentKind.THANKS:
        return f"You're welcome! Enjoy your {product.name}. Let me know if you need more ideas."
    if kind == IntentKind.GOODBYE:
        return "Goodbye! Come back any time you need styling help."
    raise ValueError(f"No canned reply for intent {kind.value}")


class ChatDispatcher:
    """Routes a classified chat message to the right responder."""

    def __init__(self, matcher: ProductMatcher, advice: AdviceGenerator):
        self._matcher = matcher
        self._advice = advice

    async def respond(self, reference: Product, message: str) -> RecommendationResult:
        intent = classify(message)
        logger.info(
            "Classified chat message",
            product_id=reference.product_id,
            intent=intent.kind.value,
            category=intent.category,
        )

        if intent.kind == IntentKind.CATEGORY_REQUEST:
            return await self._matcher.match_product(reference, intent.category)

        if intent.kind == IntentKind.OPEN_QUESTION:
            text = await self._advice.generate_advice(
                color=reference.color,
                category=reference.category.name,
                product_name=reference.name,
                question=intent.text,
            )
            return RecommendationResult(message=text, products=[])

        return RecommendationResult(message=canned_reply(intent.kind, reference), products=[])
