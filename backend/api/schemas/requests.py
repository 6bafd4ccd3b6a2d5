"""
Request schemas for the API.

These define the expected input structure for API endpoints.
Using Pydantic v2 for validation and serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class AnalyzeTranscriptRequest(BaseModel):
    """Request to extract trades from a chat transcript.

    The transcript is checked in the route rather than by the schema so a
    bad value gets the same 400 error body as a missing one.
    """
    transcript: Any = Field(default=None, description="Raw chat transcript text")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"transcript": "Bosera: Bosera bid 10mm DKS 52\nPaul: @ 100\nBosera: Done"}
            ]
        }
    }


class ValidateDirectionsRequest(BaseModel):
    """Request to re-check candidate directions without calling the LLM."""
    transcript: str = Field(..., description="Raw chat transcript text")
    activities: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Trade candidates as returned by /analyze-transcript",
    )
