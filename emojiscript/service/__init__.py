"""Request handling shared by the HTTP server and the CLI."""

from .cache import TranspileCache, cache_key
from .models import ExampleProgram, HealthResponse, TranspileRequest, TranspileResponse, ValidateResponse
from .transpile import TranspileService, detect_markup, validate_code

__all__ = [
    "TranspileCache",
    "cache_key",
    "ExampleProgram",
    "HealthResponse",
    "TranspileRequest",
    "TranspileResponse",
    "ValidateResponse",
    "TranspileService",
    "detect_markup",
    "validate_code",
]
