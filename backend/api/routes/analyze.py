"""
Analyze Route

Extracts trades from a chat transcript and validates their directions.
"""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.api.deps import get_app_settings, get_trade_extractor
from backend.api.schemas import (
    AnalyzeTranscriptRequest,
    AnalyzeTranscriptResponse,
    ErrorResponse,
    ValidateDirectionsRequest,
    ValidateDirectionsResponse,
)
from bondcrm.config.settings import Settings
from bondcrm.llm.chains import INVALID_JSON_MESSAGE
from bondcrm.models import ErrorSeverity, TradeCandidate
from bondcrm.pipeline.graph import run_analysis_async
from bondcrm.pipeline.nodes.trade_extraction import TradeExtractor
from bondcrm.validation import validate_candidates

logger = structlog.get_logger(__name__)

router = APIRouter()


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    body = ErrorResponse(error=error, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/analyze-transcript",
    response_model=AnalyzeTranscriptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_transcript(
    request: AnalyzeTranscriptRequest,
    extractor: TradeExtractor = Depends(get_trade_extractor),
    settings: Settings = Depends(get_app_settings),
):
    """
    Extract trade activities from a chat transcript.

    The LLM proposes trades; each proposed direction is then re-checked
    against the client's own lines of the transcript and corrected when
    the bid/offer wording says otherwise.

    Returns:
        AnalyzeTranscriptResponse with the validated activities
    """
    transcript = request.transcript
    if not transcript or not isinstance(transcript, str):
        return _error(400, "Missing or invalid transcript")

    result = await run_analysis_async(
        transcript,
        extractor=extractor,
        institutions=settings.validation_known_institutions,
    )

    if result.failed:
        error = next(e for e in result.errors if e.severity != ErrorSeverity.WARNING)
        details = error.details or {}
        logger.error("analyze_transcript_failed", stage=error.stage, message=error.message)

        if error.message == INVALID_JSON_MESSAGE and "raw" in details:
            return _error(500, INVALID_JSON_MESSAGE, raw=details["raw"])

        return _error(
            500,
            error.message or "AI analysis failed",
            details=f"{details.get('exception_type', 'Error')}: {error.message}",
        )

    return AnalyzeTranscriptResponse(activities=[a.to_wire() for a in result.activities])


@router.post("/validate-directions", response_model=ValidateDirectionsResponse)
async def validate_directions(
    request: ValidateDirectionsRequest,
    settings: Settings = Depends(get_app_settings),
) -> ValidateDirectionsResponse:
    """
    Re-check trade directions against a transcript without calling the LLM.

    Useful after a user edits candidates by hand.
    """
    candidates = [TradeCandidate.model_validate(a) for a in request.activities]
    validated = validate_candidates(
        request.transcript,
        candidates,
        settings.validation_known_institutions,
    )
    corrections = sum(1 for a, b in zip(candidates, validated) if a.direction != b.direction)

    return ValidateDirectionsResponse(
        activities=[c.to_wire() for c in validated],
        corrections=corrections,
    )
