"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rebalance_advisor.api.routers import (
    analysis_router,
    portfolios_router,
    profiles_router,
    tolerances_router,
)
from rebalance_advisor.config.logging_config import setup_logging
from rebalance_advisor.config.settings import get_settings
from rebalance_advisor.core.exceptions import AppError, ImportFailedError, NotFoundError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    yield
    # Shutdown (in-memory state is simply dropped)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Portfolio gap analysis and rebalancing recommendations for advisors",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(profiles_router)
app.include_router(tolerances_router)
app.include_router(portfolios_router)
app.include_router(analysis_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    content = {"error": exc.code, "message": exc.message}
    if isinstance(exc, ImportFailedError):
        content["errors"] = exc.errors
        content["warnings"] = exc.warnings
    return JSONResponse(status_code=status_code, content=content)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
