"""
FastAPI Application Factory.

Usage:
    # Development
    uvicorn api.app:create_app --factory --reload

    # Production
    uvicorn api.app:app --host 0.0.0.0 --port 8080
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import get_settings
from core.logging import configure_logging, get_logger
from core.middleware import RequestTracingMiddleware


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    On startup: configure logging, build the style service and check the
    AI connection. A failed check only logs a warning; requests still
    work on static fallbacks.
    """
    settings = get_settings()

    configure_logging(
        json_logs=settings.is_production,
        log_level="DEBUG" if settings.debug else "INFO",
    )

    logger.info(
        "Starting style assistant API",
        environment=settings.environment,
        port=settings.port,
        catalog_backend=settings.catalog_backend,
        ai_configured=settings.is_ai_configured,
    )

    try:
        from styling.service import get_style_service
        service = get_style_service()
        if settings.is_ai_configured:
            if await service.check_ai_connection():
                logger.info("Connected to OpenAI API", model=settings.openai_model)
            else:
                logger.warning("Could not connect to OpenAI API, style suggestions will use fallbacks")
    except Exception as e:
        logger.warning(f"Could not initialize style service: {e}")

    yield

    logger.info("Shutting down style assistant API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title="Style Assistant API",
        description="""
        Style recommendations for a clothing store.

        ## Main Endpoints

        - `POST /recommendations` - products that pair with a reference product
        - `POST /chat` - chat with the style assistant about a product

        ## Health Checks

        - `/health` - Basic health check
        - `/health/detailed` - Catalog and AI connectivity
        - `/live` - Liveness probe
        """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # =========================================================================
    # Middleware (order matters - first added = outermost)
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestTracingMiddleware)

    # =========================================================================
    # Routes
    # =========================================================================

    from api.routes.health import router as health_router
    app.include_router(health_router)

    from api.routes.style_assistant import router as style_router
    app.include_router(style_router)

    return app


# Create default app instance for uvicorn
# Usage: uvicorn api.app:app
app = create_app()


def main() -> None:
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("api.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
