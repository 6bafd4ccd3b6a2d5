"""Pipeline state definition for LangGraph."""

from datetime import datetime
from typing import TypedDict


class PipelineState(TypedDict, total=False):
    """State that flows through the LangGraph pipeline."""

    # Input
    transcript: str

    # Stage 1: Trade extraction (model output as dicts)
    candidates: list[dict]

    # Stage 2: Direction validation (TradeCandidate wire dicts)
    activities: list[dict]
    corrections: int

    # Processing metadata
    processing_start: str  # ISO timestamp

    # Error tracking
    errors: list[dict]  # List[ProcessingError]


def create_initial_state(transcript: str) -> PipelineState:
    """Create initial pipeline state.

    Args:
        transcript: Chat transcript to analyse.

    Returns:
        Initial PipelineState dict.
    """
    return PipelineState(
        transcript=transcript,
        candidates=[],
        activities=[],
        corrections=0,
        processing_start=datetime.utcnow().isoformat(),
        errors=[],
    )
