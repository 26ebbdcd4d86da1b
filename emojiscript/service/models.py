"""Request/response models shared by the service, the server and the CLI."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranspileRequest(BaseModel):
    """Request to transpile emoji or markup source."""

    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(default="", description="Source program")
    target_language: Optional[str] = Field(
        default=None, alias="targetLanguage", description="javascript (default) or typescript"
    )
    use_markup: bool = Field(
        default=False, alias="useMarkup", description="Force the markup transpiler"
    )


class TranspileResponse(BaseModel):
    """Response from a transpile request."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    output: str = ""
    target_language: str = Field(default="javascript", alias="targetLanguage")
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    used_markup: bool = Field(default=False, alias="usedMarkup")


class ValidateResponse(BaseModel):
    """Result of the brace/parenthesis balance check."""

    valid: bool
    errors: List[str] = Field(default_factory=list)


class ExampleProgram(BaseModel):
    """One entry of the example catalogue."""

    title: str
    description: str
    code: str
    syntax: str
    category: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


__all__ = [
    "TranspileRequest",
    "TranspileResponse",
    "ValidateResponse",
    "ExampleProgram",
    "HealthResponse",
]
