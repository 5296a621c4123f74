"""
Solution Content Service - FastAPI Backend

Main entry point for the backend API server.
Exposes the content normalization engine to the admin editor and the
storefront renderer.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from backend.api.routes import router
from backend.core.config import settings
from solution_content.logging_config import get_logger, logfire_enabled, setup_logging

setup_logging(
    service_name=settings.logfire_service_name,
    level="DEBUG" if settings.debug else settings.log_level,
    use_logfire=settings.use_logfire,
)
logger = get_logger(__name__)


# =============================================================================
# Lifespan Manager
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and shutdown."""
    logger.info("Starting Solution Content Backend")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Legacy anchor tolerance: {settings.legacy_anchor_tolerance}")

    yield

    logger.info("Shutting down backend")


# =============================================================================
# FastAPI App
# =============================================================================


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
## Solution Content API

Normalization engine for solution page content.

### Features:
- Canonical task cards, one per usage scene
- Migration of legacy grouped lists into task cards
- Body map anchor resolution and editor operations
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# =============================================================================
# CORS Middleware
# =============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Include Routers
# =============================================================================


app.include_router(router, prefix="/api", tags=["API"])


# =============================================================================
# Logfire FastAPI Instrumentation
# =============================================================================

if logfire_enabled():
    import logfire

    logfire.instrument_fastapi(app)
    logger.info("Logfire: FastAPI instrumented")


# =============================================================================
# Root Redirect
# =============================================================================


@app.get("/", include_in_schema=False)
async def root_redirect():
    """Redirect root to API docs."""
    return RedirectResponse(url="/docs")


# =============================================================================
# Main Entry Point
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
