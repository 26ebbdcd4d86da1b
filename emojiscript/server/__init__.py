"""HTTP API for the transpile playground."""

from .app import create_app
from .ratelimit import RateLimiter

__all__ = ["create_app", "RateLimiter"]
