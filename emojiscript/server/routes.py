from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from emojiscript import __version__
from emojiscript.errors import EmptyOutputError, InputValidationError
from emojiscript.observability.logging import get_logger
from emojiscript.server.examples import examples_for
from emojiscript.service import (
    ExampleProgram,
    HealthResponse,
    TranspileRequest,
    TranspileService,
    ValidateResponse,
    validate_code,
)

router = APIRouter()
logger = get_logger(__name__)


def get_service(request: Request) -> TranspileService:
    return request.app.state.service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__)


@router.post("/transpile")
async def transpile(
    payload: TranspileRequest,
    service: TranspileService = Depends(get_service),
):
    """Transpile emoji or markup source.

    Markup errors come back as 400 with the full response body so the
    client can still show the partial output.
    """
    try:
        response = service.transpile(payload)
    except InputValidationError as exc:
        logger.info("Rejected transpile request: %s", exc.message)
        return error_response(400, exc.message)
    except EmptyOutputError as exc:
        logger.warning("Transpiler produced no output")
        return error_response(500, exc.message)

    status_code = 200 if response.success else 400
    return JSONResponse(status_code=status_code, content=response.model_dump(by_alias=True))


@router.post("/validate", response_model=ValidateResponse)
async def validate(payload: TranspileRequest) -> ValidateResponse:
    return validate_code(payload.code)


@router.get("/examples", response_model=List[ExampleProgram])
async def examples(syntax: str = Query("emoji")) -> List[ExampleProgram]:
    return examples_for(syntax)


__all__ = ["router", "get_service"]
