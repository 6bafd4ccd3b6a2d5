"""LangGraph workflow definition for the transcript analysis pipeline."""

from collections.abc import Iterable
from datetime import datetime

import structlog
from langgraph.graph import END, START, StateGraph

from bondcrm.models import AnalysisResult, ErrorSeverity, ProcessingError, TradeCandidate
from bondcrm.pipeline.nodes import extract_trades_node, validate_directions_node
from bondcrm.pipeline.nodes.trade_extraction import TradeExtractor
from bondcrm.pipeline.state import PipelineState, create_initial_state

logger = structlog.get_logger(__name__)


def should_continue_after_extraction(state: PipelineState) -> str:
    """Determine if processing should continue after trade extraction.

    Args:
        state: Current pipeline state.

    Returns:
        'continue' if extraction succeeded, 'error' otherwise.
    """
    if any(e.get("severity") != ErrorSeverity.WARNING.value for e in state.get("errors", [])):
        logger.warning("pipeline_stopping_extraction_failed")
        return "error"
    return "continue"


def build_pipeline(
    extractor: TradeExtractor | None = None,
    institutions: Iterable[str] | None = None,
) -> StateGraph:
    """Build the LangGraph workflow for transcript analysis.

    Args:
        extractor: Transcript -> candidate dicts. Defaults to the LLM chain.
        institutions: Known institution names for validation. Defaults to settings.

    Returns:
        StateGraph ready to compile.
    """
    logger.info("building_pipeline")

    known = tuple(institutions) if institutions is not None else None

    def trade_extraction(state: PipelineState) -> PipelineState:
        return extract_trades_node(state, extractor=extractor)

    def direction_validation(state: PipelineState) -> PipelineState:
        return validate_directions_node(state, institutions=known)

    workflow = StateGraph(PipelineState)

    workflow.add_node("trade_extraction", trade_extraction)
    workflow.add_node("direction_validation", direction_validation)

    workflow.add_edge(START, "trade_extraction")

    # Nothing to validate when extraction failed
    workflow.add_conditional_edges(
        "trade_extraction",
        should_continue_after_extraction,
        {
            "continue": "direction_validation",
            "error": END,
        },
    )

    workflow.add_edge("direction_validation", END)

    logger.info("pipeline_built")

    return workflow


def create_pipeline_app(
    extractor: TradeExtractor | None = None,
    institutions: Iterable[str] | None = None,
):
    """Create compiled pipeline application.

    Returns:
        Compiled LangGraph application.
    """
    workflow = build_pipeline(extractor, institutions)
    return workflow.compile()


def _elapsed_seconds(state: dict) -> float | None:
    started = state.get("processing_start")
    if not started:
        return None
    return round((datetime.utcnow() - datetime.fromisoformat(started)).total_seconds(), 3)


def _to_result(state: dict) -> AnalysisResult:
    return AnalysisResult(
        activities=[TradeCandidate.model_validate(a) for a in state.get("activities", [])],
        corrections=state.get("corrections", 0),
        errors=[ProcessingError.model_validate(e) for e in state.get("errors", [])],
    )


def run_analysis(
    transcript: str,
    extractor: TradeExtractor | None = None,
    institutions: Iterable[str] | None = None,
) -> AnalysisResult:
    """Extract and validate the trades in a chat transcript.

    Args:
        transcript: Raw chat transcript.
        extractor: Transcript -> candidate dicts. Defaults to the LLM chain.
        institutions: Known institution names for validation.

    Returns:
        AnalysisResult with validated activities and any errors.
    """
    logger.info("pipeline_starting", transcript_length=len(transcript))

    app = create_pipeline_app(extractor, institutions)
    state = app.invoke(create_initial_state(transcript))
    result = _to_result(state)

    logger.info(
        "pipeline_complete",
        activities=len(result.activities),
        corrections=result.corrections,
        errors=len(result.errors),
        duration_seconds=_elapsed_seconds(state),
    )

    return result


async def run_analysis_async(
    transcript: str,
    extractor: TradeExtractor | None = None,
    institutions: Iterable[str] | None = None,
) -> AnalysisResult:
    """Execute the pipeline asynchronously.

    Returns:
        AnalysisResult with validated activities and any errors.
    """
    logger.info("pipeline_starting_async", transcript_length=len(transcript))

    app = create_pipeline_app(extractor, institutions)
    state = await app.ainvoke(create_initial_state(transcript))
    result = _to_result(state)

    logger.info(
        "pipeline_complete_async",
        activities=len(result.activities),
        duration_seconds=_elapsed_seconds(state),
    )

    return result
