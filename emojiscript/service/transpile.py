"""Transpile service: the layer between a client and the two transpilers.

The service validates input, picks the emoji or markup path, and caches
successful responses.  It owns no process-wide state: the cache is passed
in by whoever builds the service.
"""

from __future__ import annotations

import time
from typing import Iterable, Optional

from emojiscript.emoji import transpile_emoji
from emojiscript.errors import EmptyOutputError, InputValidationError
from emojiscript.markup import Flavor, transpile_markup
from emojiscript.observability.logging import get_logger
from emojiscript.service.cache import TranspileCache, cache_key
from emojiscript.service.models import TranspileRequest, TranspileResponse, ValidateResponse

logger = get_logger(__name__)

MAX_CODE_LENGTH = 100_000

UNSAFE_INPUT_PATTERNS = ("eval(", "exec(", "__import__", "subprocess", "os.system")

MARKUP_MARKERS = ("<print", "<var", "<let", "<const", "<function", "<loop", "<if", "<class")


def detect_markup(code: str) -> bool:
    """True when the source looks like the tag syntax rather than emoji."""
    lowered = code.lower()
    return any(marker in lowered for marker in MARKUP_MARKERS)


def validate_code(code: str) -> ValidateResponse:
    """Cheap structural check: non-empty, balanced braces and parentheses."""
    errors = []
    if not code:
        errors.append("Code cannot be empty")

    if code.count("{") != code.count("}"):
        errors.append("Unbalanced braces")
    if code.count("(") != code.count(")"):
        errors.append("Unbalanced parentheses")

    return ValidateResponse(valid=not errors, errors=errors)


class TranspileService:
    """Validate, dispatch and cache transpile requests."""

    def __init__(
        self,
        cache: Optional[TranspileCache] = None,
        *,
        max_code_length: int = MAX_CODE_LENGTH,
        default_target: str = Flavor.JAVASCRIPT.value,
        unsafe_patterns: Iterable[str] = UNSAFE_INPUT_PATTERNS,
    ):
        self.cache = cache
        self.max_code_length = max_code_length
        self.default_target = default_target
        self.unsafe_patterns = tuple(unsafe_patterns)

    def validate_input(self, code: str) -> None:
        if not code:
            raise InputValidationError("code cannot be empty")
        if len(code) > self.max_code_length:
            raise InputValidationError("code exceeds maximum length")

        lowered = code.lower()
        for pattern in self.unsafe_patterns:
            if pattern in lowered:
                raise InputValidationError("unsafe pattern detected")

    def resolve_target(self, target: Optional[str]) -> Flavor:
        try:
            return Flavor.coerce(target or self.default_target)
        except ValueError as exc:
            raise InputValidationError(str(exc)) from exc

    def transpile(self, request: TranspileRequest) -> TranspileResponse:
        """Transpile one request.

        Raises :class:`InputValidationError` for rejected input and
        :class:`EmptyOutputError` when a transpiler yields nothing.  Markup
        errors are not raised: they come back as ``success=False`` with
        the partial output, every error and every warning.
        """
        started = time.perf_counter()

        self.validate_input(request.code)
        flavor = self.resolve_target(request.target_language)
        use_markup = request.use_markup or detect_markup(request.code)

        key = cache_key(request.code, flavor.value, use_markup)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %s", key[:12])
                response = cached.model_copy(deep=True)
                response.metadata["cached"] = True
                return response

        warnings = []
        if use_markup:
            result = transpile_markup(request.code, flavor)
            if not result.ok:
                logger.info("Markup transpile failed with %d errors", len(result.errors))
                return TranspileResponse(
                    success=False,
                    output=result.output,
                    target_language=flavor.value,
                    errors=result.errors,
                    warnings=result.warnings,
                    used_markup=True,
                )
            output = result.output
            warnings = result.warnings
        else:
            output = transpile_emoji(request.code)

        if not output.strip():
            raise EmptyOutputError("Empty output")

        response = TranspileResponse(
            success=True,
            output=output,
            target_language=flavor.value,
            warnings=warnings,
            used_markup=use_markup,
            metadata={
                "transpileTime": round((time.perf_counter() - started) * 1000),
                "cached": False,
            },
        )
        if self.cache is not None:
            self.cache.set(key, response.model_copy(deep=True))
        return response


__all__ = [
    "TranspileService",
    "detect_markup",
    "validate_code",
    "MAX_CODE_LENGTH",
    "UNSAFE_INPUT_PATTERNS",
    "MARKUP_MARKERS",
]
