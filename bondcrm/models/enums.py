"""Enumeration types for the trade models."""

from enum import Enum


class TradeDirection(str, Enum):
    """Direction of the client counterparty in a trade."""

    BUY = "BUY"
    SELL = "SELL"
    TWO_WAY = "TWO-WAY"
    # Internal only: no confident signal, keep whatever the model said
    UNKNOWN = "UNKNOWN"


class ConfidenceLevel(str, Enum):
    """Confidence attached to an extracted trade."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActivityStatus(str, Enum):
    """Lifecycle status of an imported activity."""

    ENQUIRY = "ENQUIRY"


class ErrorSeverity(str, Enum):
    """Severity levels for processing errors."""

    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
