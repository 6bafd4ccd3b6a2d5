"""Pydantic data models for trade extraction."""

from .enums import ActivityStatus, ConfidenceLevel, ErrorSeverity, TradeDirection
from .trade import TradeCandidate
from .activity import ActivityRecord, parse_leading_float
from .report import AnalysisResult, ProcessingError

__all__ = [
    # Enums
    "TradeDirection",
    "ConfidenceLevel",
    "ActivityStatus",
    "ErrorSeverity",
    # Trades
    "TradeCandidate",
    # Activities
    "ActivityRecord",
    "parse_leading_float",
    # Results
    "AnalysisResult",
    "ProcessingError",
]
