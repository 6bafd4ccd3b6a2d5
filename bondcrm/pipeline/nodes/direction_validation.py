"""Direction validation pipeline node."""

from collections.abc import Iterable

import structlog

from bondcrm.config.settings import get_settings
from bondcrm.models import TradeCandidate
from bondcrm.pipeline.state import PipelineState
from bondcrm.validation import validate_candidates

logger = structlog.get_logger(__name__)


def validate_directions_node(
    state: PipelineState,
    institutions: Iterable[str] | None = None,
) -> PipelineState:
    """Check each candidate's direction against the transcript.

    Args:
        state: Current pipeline state with candidates.
        institutions: Known institution names. Defaults to settings.

    Returns:
        State update with validated activities and the correction count.
    """
    candidates = [TradeCandidate.model_validate(c) for c in state.get("candidates", [])]

    logger.info("direction_validation_node_start", num_candidates=len(candidates))

    if institutions is None:
        institutions = get_settings().validation_known_institutions

    validated = validate_candidates(state["transcript"], candidates, institutions)
    corrections = sum(
        1 for before, after in zip(candidates, validated) if before.direction != after.direction
    )

    logger.info("direction_validation_node_complete", corrections=corrections)

    return {
        "activities": [c.to_wire() for c in validated],
        "corrections": corrections,
    }
