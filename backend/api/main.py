"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, backend.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api import api_router
from backend.api.deps.dependencies import get_service_cache
from backend.api.error_handlers import register_exception_handlers
from backend.configs import get_settings
from backend.core.agentic_system.code_analysis_agent import register_analysis_prompts
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")
    settings = get_settings()

    # Startup
    logger.info(
        "AI providers: OpenAI=%s Gemini=%s",
        settings.ai.openai_model, settings.ai.gemini_model,
    )
    logger.info("GitHub token configured: %s", bool(settings.github.token))
    if settings.observability.enable_tracing:
        register_analysis_prompts(settings.ai)

    yield

    # Shutdown
    await get_service_cache().aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="MonkeyCode API",
        description="Browse GitHub repositories and explain source files with OpenAI or Gemini",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    # Register all routers under /api
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "backend.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
