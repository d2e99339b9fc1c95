"""
Style assistant routes.

POST /recommendations  - complementary products for a reference product
POST /chat             - chat about a reference product

Both return {success, message, recommendedProducts}. Failures, including
an unknown product id, come back as HTTP 400 with success=false and an
empty product list.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.schemas import ChatRequest, RecommendationRequest, StyleAssistantResponse
from core.logging import get_logger
from styling.errors import ProductNotFoundError
from styling.models import RecommendationResult
from styling.service import StyleRecommendationService, get_style_service

logger = get_logger(__name__)

router = APIRouter(tags=["Style Assistant"])

_TIPS_PHRASES = ("style tips", "fashion tips")


def _error_response(prefix: str, error: Exception) -> JSONResponse:
    body = StyleAssistantResponse.failure(f"{prefix}: {error}")
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


@router.post(
    "/recommendations",
    response_model=StyleAssistantResponse,
    summary="Products that pair with a reference product",
)
async def get_recommendations(
    request: RecommendationRequest,
    service: StyleRecommendationService = Depends(get_style_service),
):
    prefix = "Error getting recommendations"
    try:
        result = await service.get_matching_products(request.product_id, request.category_filter)
    except ProductNotFoundError as e:
        return _error_response(prefix, e)
    except Exception as e:
        logger.exception("Recommendation failed", product_id=request.product_id)
        return _error_response(prefix, e)
    return StyleAssistantResponse.from_result(result)


@router.post(
    "/chat",
    response_model=StyleAssistantResponse,
    summary="Chat with the style assistant about a product",
)
async def chat(
    request: ChatRequest,
    service: StyleRecommendationService = Depends(get_style_service),
):
    """
    Empty messages and requests for style/fashion tips get styling advice;
    everything else goes through the chat classifier.
    """
    prefix = "Error processing chat message"
    message = (request.user_message or "").strip()
    try:
        result = await _route_chat(service, request.product_id, message)
    except ProductNotFoundError as e:
        return _error_response(prefix, e)
    except Exception as e:
        logger.exception("Chat failed", product_id=request.product_id)
        return _error_response(prefix, e)
    return StyleAssistantResponse.from_result(result)


async def _route_chat(
    service: StyleRecommendationService, product_id: int, message: str
) -> RecommendationResult:
    if not message:
        return await service.get_fashion_advice(product_id, None)
    if any(phrase in message.lower() for phrase in _TIPS_PHRASES):
        return await service.get_fashion_advice(product_id, message)
    return await service.process_chat_message(product_id, message)
