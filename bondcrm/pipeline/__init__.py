"""Pipeline orchestration module."""

from .graph import build_pipeline, create_pipeline_app, run_analysis, run_analysis_async
from .state import PipelineState

__all__ = ["PipelineState", "build_pipeline", "create_pipeline_app", "run_analysis", "run_analysis_async"]
