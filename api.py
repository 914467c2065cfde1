"""
Interview Question HTTP API Server

FastAPI server exposing AI-generated interview questions with a
deterministic fallback when the upstream model is unavailable.

Endpoints:
- POST /api/next-question - Generate the next interview question
- GET / - Liveness text
- GET /health - Health check
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import sentry_sdk
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.httpx import HttpxIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from config import Settings, settings as default_settings
from models import GenerationRequest, HealthResponse, Question
from services import QuestionService

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
HEALTH_ROUTES = ("/", "/health")


# =============================================================================
# Observability
# =============================================================================

def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def init_sentry(settings: Settings) -> bool:
    """Initialize Sentry if a DSN is configured. Returns True when enabled."""
    if not settings.sentry_dsn:
        logger.info("SENTRY_DSN not set, Sentry monitoring disabled")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=1.0,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            StarletteIntegration(transaction_style="endpoint"),
            HttpxIntegration(),
            LoggingIntegration(
                level=logging.INFO,  # Capture INFO+ as breadcrumbs
                event_level=logging.ERROR,  # Create events for ERROR+
            ),
        ],
        # Filter out health check noise from traces
        traces_sampler=lambda ctx: 0.0 if ctx.get("name") in HEALTH_ROUTES else 1.0,
        release=f"interview-question-service@{API_VERSION}",
    )
    logger.info(f"Sentry initialized (environment: {settings.sentry_environment})")
    return True


# =============================================================================
# Dependencies
# =============================================================================

def get_question_service(request: Request) -> QuestionService:
    """Question service built for this app at startup."""
    return request.app.state.question_service


# =============================================================================
# FastAPI Application
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    question_service: Optional[QuestionService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment-loaded instance
        question_service: Pre-built service, mainly for tests

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings
    service = question_service or QuestionService(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info("[API] Starting interview question API server")
        logger.info(f"[API] Using model: {settings.gemini_model}")
        if not service.upstream_configured:
            logger.warning("[API] GEMINI_API_KEY not set, all questions will use the fallback")
        yield
        logger.info("[API] Shutting down interview question API server")

    app = FastAPI(
        title="Interview Question API",
        description="AI interview question generation with deterministic fallback",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.question_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness text."""
        return "Backend server is running successfully 🚀"

    @app.get("/health", response_model=HealthResponse)
    async def health_check(service: QuestionService = Depends(get_question_service)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=API_VERSION,
            upstream_configured=service.upstream_configured,
        )

    # =========================================================================
    # Question Endpoints
    # =========================================================================

    @app.post("/api/next-question", response_model=Question)
    async def next_question(
        body: Optional[GenerationRequest] = None,
        service: QuestionService = Depends(get_question_service),
    ):
        """
        Generate the next interview question.

        Always answers 200 with a Question. Upstream failures are absorbed
        and answered with a templated fallback question.
        """
        return await service.next_question(body if body is not None else GenerationRequest())

    return app


configure_logging(default_settings)
init_sentry(default_settings)

app = create_app()


# =============================================================================
# Main Entry Point
# =============================================================================

def start_server(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False):
    """Start the FastAPI server."""
    uvicorn.run(
        "api:app",
        host=host or default_settings.host,
        port=port or default_settings.port,
        reload=reload,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    start_server()
