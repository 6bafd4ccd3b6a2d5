"""
Response schemas for the API.

Activities are passed through as plain dicts so fields the model invented
reach the client unchanged.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class AnalyzeTranscriptResponse(BaseModel):
    """Trades extracted from a transcript."""
    activities: list[dict[str, Any]] = Field(default_factory=list, description="Validated trade candidates")


class ValidateDirectionsResponse(BaseModel):
    """Candidates after direction validation."""
    activities: list[dict[str, Any]] = Field(default_factory=list, description="Validated trade candidates")
    corrections: int = Field(default=0, ge=0, description="Number of directions changed")


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints."""
    error: str
    raw: Optional[str] = Field(None, description="Unparseable model output, when that was the problem")
    details: Optional[str] = None
