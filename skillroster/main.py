"""
Skill Roster API - FastAPI Application Entry Point.

Users log in, browse the skill catalogue and manage the skills they claim.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from skillroster.core.config import settings
from skillroster.core.database import async_session_maker, close_db, init_db, reset_schema
from skillroster.core.exceptions import APIException
from skillroster.core.logging import RequestIDMiddleware, get_logger, setup_logging
from skillroster.core.rate_limit import limiter
from skillroster.api.routes import api_router
from skillroster.services.seed_service import SeedService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler — startup and shutdown."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)

    if settings.db_reset_on_startup:
        await reset_schema()
        logger.warning("database_schema_reset")
    else:
        await init_db()
        logger.info("database_initialized")

    if settings.seed_on_startup:
        async with async_session_maker() as db:
            await SeedService().seed(db)

    yield

    await close_db()
    logger.info("shutting_down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="User accounts and the skills they claim",
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter

# Request ID correlation
app.add_middleware(RequestIDMiddleware)

# CORS middleware — explicit methods and headers, not wildcards
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)


# Exception handlers
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    content = {"error": exc.message, "code": exc.code}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    """Render throttled requests in the common error shape."""
    logger.warning("rate_limited", path=request.url.path, limit=exc.detail)
    return JSONResponse(
        status_code=429,
        content={"error": f"Rate limit exceeded: {exc.detail}", "code": "RATE_LIMITED"},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures in the common error shape."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions — log full detail, return sanitized message."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": str(exc) if settings.debug else "Internal Server Error",
            "code": "INTERNAL_ERROR",
        },
    )


# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "skillroster.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
