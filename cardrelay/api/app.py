"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .routes import (
    auth_router,
    boards_router,
    cards_router,
    destinations_router,
    users_router,
)
from ..bootstrap import open_database, setup_container
from ..container import get_container

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    container = get_container()
    database = None
    if not container.is_configured:
        database = open_database(container.settings)
        await database.create_all()
        logger.info("Database ready")
    setup_container(database, container)
    yield
    # Shutdown
    if database is not None:
        await database.dispose()


async def rate_limit_exceeded(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Reject a request over the per-client limit."""
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(status_code=429, content={"detail": RATE_LIMIT_MESSAGE})


def create_app(
    title: str = "Card Relay API",
    version: str = "1.0.0",
    cors_origins: list[str] | None = None,
    rate_limit: Optional[str] = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        title: API title
        version: API version
        cors_origins: Allowed CORS origins
        rate_limit: Per-client limit such as "100/900 seconds" (default from settings)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title=title,
        version=version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    settings = get_container().settings
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[rate_limit or settings.get_rate_limit()],
        enabled=settings.rate_limit_enabled,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded)
    app.add_middleware(SlowAPIMiddleware)

    # Add CORS middleware
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
            max_age=86400,
        )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Path only: bodies, headers and query strings may carry credentials
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.0f}ms"
        )
        return response

    # Include routers
    app.include_router(auth_router)
    app.include_router(destinations_router)
    app.include_router(users_router)
    app.include_router(boards_router)
    app.include_router(cards_router)

    @app.get("/health")
    @limiter.exempt
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "version": version}

    return app
