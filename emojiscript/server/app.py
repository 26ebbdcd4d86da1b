"""FastAPI application factory for the transpile playground API."""

from __future__ import annotations

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from emojiscript import __version__
from emojiscript.config import Settings, get_settings
from emojiscript.observability.logging import get_logger
from emojiscript.server.ratelimit import RateLimiter
from emojiscript.server.routes import router
from emojiscript.service import TranspileCache, TranspileService

logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


def create_app(
    settings: Optional[Settings] = None,
    *,
    cache: Optional[TranspileCache] = None,
    limiter: Optional[RateLimiter] = None,
) -> FastAPI:
    """Build the API application.

    Args:
        settings: Runtime settings, ``get_settings()`` when omitted
        cache: Response cache shared by every request of this app
        limiter: Per-client rate limiter
    """
    settings = settings or get_settings()
    if cache is None:
        cache = TranspileCache(max_size=settings.cache_max_size, ttl=settings.cache_ttl_seconds)
    if limiter is None:
        limiter = RateLimiter(
            max_requests=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )

    app = FastAPI(title=settings.api_title, version=__version__)
    app.state.settings = settings
    app.state.limiter = limiter
    app.state.service = TranspileService(
        cache,
        max_code_length=settings.max_code_length,
        default_target=settings.default_target,
    )

    health_path = f"{settings.api_prefix}/health"

    @app.middleware("http")
    async def rate_limit(request: Request, call_next):
        if request.url.path != health_path and request.method != "OPTIONS":
            client = request.client.host if request.client else "unknown"
            allowed, reason = limiter.hit(client)
            if not allowed:
                logger.warning("%s for %s", reason, client)
                return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE})
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})

    # CORS goes on last so it wraps the rate limiter and answers preflights first.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(router, prefix=settings.api_prefix, tags=["transpile"])
    return app


__all__ = ["create_app", "RATE_LIMIT_MESSAGE"]
