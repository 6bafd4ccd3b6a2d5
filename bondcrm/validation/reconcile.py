"""Reconcile model-proposed directions with rule-based evidence."""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from bondcrm.models import ConfidenceLevel, TradeCandidate, TradeDirection

from .context import extract_activity_context
from .patterns import classify_direction

logger = structlog.get_logger(__name__)

CORRECTION_NOTE = " [Auto-corrected from {original} to {corrected}]"


def reconcile_candidate(
    candidate: TradeCandidate,
    original_direction: str | None,
    result: TradeDirection,
) -> TradeCandidate:
    """Apply the rule-based direction to a candidate when they disagree.

    Args:
        candidate: Candidate as proposed by the extraction model.
        original_direction: Direction the model proposed.
        result: Direction derived from the candidate's transcript slice.

    Returns:
        The same candidate when there is nothing to correct, otherwise a copy
        with the new direction, medium confidence and an audit note.
    """
    if result == TradeDirection.UNKNOWN or result.value == original_direction:
        return candidate

    note = CORRECTION_NOTE.format(
        original=original_direction or "NONE",
        corrected=result.value,
    )

    return candidate.model_copy(
        update={
            "notes": (candidate.notes or "") + note,
            "direction": result.value,
            "confidence": ConfidenceLevel.MEDIUM.value,
        }
    )


def validate_candidates(
    transcript: str | None,
    candidates: Iterable[TradeCandidate | Mapping[str, Any]],
    institutions: Iterable[str] | None = None,
) -> list[TradeCandidate]:
    """Re-check every candidate's direction against its own slice of the transcript.

    Candidates are independent of each other. Inputs are never mutated and
    the output keeps the input order and length.

    Args:
        transcript: Full chat transcript.
        candidates: Candidates from the extraction model (models or raw dicts).
        institutions: Known institution names for the classifier.

    Returns:
        Validated candidates.
    """
    names = tuple(institutions) if institutions is not None else None
    validated: list[TradeCandidate] = []

    for item in candidates:
        candidate = item if isinstance(item, TradeCandidate) else TradeCandidate.model_validate(item)

        context = extract_activity_context(transcript, candidate.client_name)
        result = classify_direction(context, names)
        reconciled = reconcile_candidate(candidate, candidate.direction, result)

        if reconciled is not candidate:
            logger.info(
                "direction_auto_corrected",
                client_name=candidate.client_name,
                original=candidate.direction,
                corrected=reconciled.direction,
            )

        validated.append(reconciled)

    return validated
