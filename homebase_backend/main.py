"""Homebase Tenant Onboarding Service - Main Application Entry Point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .core.exceptions import HomebaseException
from .core.logging import (
    LoggingMiddleware,
    RequestIdMiddleware,
    get_logger,
    setup_logging,
    shutdown_logging,
)
from .database import init_db

# Import routers
from .modules.auth.routers import router as profiles_router
from .modules.property_management.routers import areas_router
from .modules.property_management.routers import router as properties_router
from .modules.tenant_management.routers import invites_router
from .modules.tenant_management.routers import router as tenants_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    setup_logging()
    logger.info("Starting Homebase application...")
    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Debug mode: {settings.app_debug}")
    if settings.app_env == "development":
        await init_db()
    yield
    # Shutdown
    logger.info("Shutting down Homebase application...")
    shutdown_logging()


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description="Property areas and tenant onboarding through invite links",
    version=settings.api_version,
    docs_url="/api/docs" if settings.app_debug else None,
    redoc_url="/api/redoc" if settings.app_debug else None,
    openapi_url="/api/openapi.json" if settings.app_debug else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging runs inside the transaction id middleware
if settings.log_requests:
    app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIdMiddleware)


# Global exception handler
@app.exception_handler(HomebaseException)
async def homebase_exception_handler(request: Request, exc: HomebaseException):
    """Handle Homebase-specific exceptions."""
    if exc.status_code >= 500:
        logger.error(
            exc.message,
            extra={"error_type": type(exc).__name__, "details": exc.details},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "error": exc.message,
            "data": None,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Render body and query validation failures in the response envelope.

    Rejected input values are left out; they may not be JSON serializable.
    """
    errors = [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "Request validation failed",
            "error": errors,
            "data": None,
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Internal server error",
            "error": str(exc) if settings.app_debug else "Internal server error",
            "data": None,
        },
    )


# Health check endpoint
@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.api_version,
        "env": settings.app_env,
    }


# Profiles
app.include_router(profiles_router, prefix=settings.api_prefix)

# Properties and their areas
app.include_router(properties_router, prefix=settings.api_prefix)
app.include_router(areas_router, prefix=settings.api_prefix)

# Invites and tenant views
app.include_router(invites_router, prefix=settings.api_prefix)
app.include_router(tenants_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "homebase_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.app_debug,
    )
