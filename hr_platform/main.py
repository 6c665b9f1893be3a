"""
HR Platform API - FastAPI Application Entry Point.

Candidate and skill directory: search candidates by name and skills,
manage the skill catalogue and who holds which skill.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from hr_platform.core.config import settings
from hr_platform.core.database import close_db, init_db
from hr_platform.core.exceptions import APIException
from hr_platform.core.logging import RequestIDMiddleware, get_logger, setup_logging
from hr_platform.core.rate_limit import limiter
from hr_platform.api.routes import api_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler: startup and shutdown."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
    if settings.environment == "development":
        # Outside development the schema is owned by Alembic migrations
        await init_db()
        logger.info("database_initialized")

    yield

    await close_db()
    logger.info("shutting_down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Candidate and skill directory with filtered, sorted, paginated search",
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Request ID correlation
app.add_middleware(RequestIDMiddleware)

# CORS middleware, explicit methods and headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Total-Count", "X-Request-ID", "Location"],
)


# Exception handlers
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Render domain errors (not found, conflict, bad request)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log unexpected exceptions in full and return a sanitized message."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": str(exc),
            },
        )

    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
        },
    )


# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hr_platform.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
