"""Trade extraction pipeline node."""

import uuid
from collections.abc import Callable

import structlog

from bondcrm.llm.chains import LLMChainError, run_trade_extraction_chain
from bondcrm.models import ErrorSeverity
from bondcrm.pipeline.state import PipelineState

logger = structlog.get_logger(__name__)

TradeExtractor = Callable[[str], list[dict]]


def extract_trades_node(
    state: PipelineState,
    extractor: TradeExtractor | None = None,
) -> PipelineState:
    """Ask the extraction model for trade candidates.

    Args:
        state: Current pipeline state with transcript.
        extractor: Transcript -> candidate dicts. Defaults to the LLM chain.

    Returns:
        State update with candidates, or an error record on failure.
    """
    logger.info("trade_extraction_node_start")

    extractor = extractor or run_trade_extraction_chain

    try:
        candidates = extractor(state["transcript"])

        logger.info("trade_extraction_node_complete", num_candidates=len(candidates))

        return {"candidates": list(candidates)}

    except Exception as e:
        logger.exception("trade_extraction_node_error")

        details = {"exception_type": type(e).__name__}
        if isinstance(e, LLMChainError) and e.raw is not None:
            details["raw"] = e.raw

        error = {
            "error_id": f"extract_err_{uuid.uuid4().hex[:8]}",
            "severity": ErrorSeverity.ERROR.value,
            "stage": "trade_extraction",
            "message": str(e),
            "details": details,
            "recoverable": False,
        }

        return {
            "candidates": [],
            "errors": state.get("errors", []) + [error],
        }
