"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from generation.provider import AgentContentProvider
from observability.logfire_config import LogfireConfig
from api.routes import content_router, generate_router, template_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting DeathNote API Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    # Provider client lives for the whole process and is injected per request
    app.state.content_provider = AgentContentProvider.from_settings(settings)

    logfire.info(
        "DeathNote API Server startup complete",
        provider_configured=app.state.content_provider.is_configured,
    )

    yield

    # Shutdown
    await app.state.content_provider.aclose()
    app.state.content_provider = None
    logfire.info("Shutting down DeathNote API Server")


# Initialize FastAPI app
app = FastAPI(
    title="DeathNote API",
    description="Backend API for DeathNote - final message composition and content generation",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same {"error": ...} shape as other client errors."""
    logfire.warning(
        "Invalid request body",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check(request: Request) -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    The service stays healthy without a provider; content then comes
    from the fallback library.
    """
    provider = getattr(request.app.state, "content_provider", None)
    provider_configured = bool(provider and provider.is_configured)

    return {
        "status": "healthy",
        "service": "deathnote-api",
        "version": "1.0.0",
        "provider": "configured" if provider_configured else "fallback-only",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "DeathNote API",
        "version": "1.0.0",
        "description": "Backend API for final message content generation",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Content generation (provider with fallback)
app.include_router(generate_router)

# Fallback template catalog
app.include_router(template_router)

# Simulated draft and extraction endpoints
app.include_router(content_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
