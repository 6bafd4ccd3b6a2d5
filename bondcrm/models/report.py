"""Models for the analysis result."""

from pydantic import BaseModel, Field

from .enums import ErrorSeverity
from .trade import TradeCandidate


class ProcessingError(BaseModel):
    """Record of a processing error or warning."""

    error_id: str = Field(..., description="Unique error identifier")
    severity: ErrorSeverity = Field(..., description="Error severity level")
    stage: str = Field(..., description="Pipeline stage where error occurred")
    message: str = Field(..., description="Error message")
    details: dict | None = Field(None, description="Additional error details")
    recoverable: bool = Field(default=True, description="Whether processing continued")


class AnalysisResult(BaseModel):
    """Outcome of analysing one transcript."""

    activities: list[TradeCandidate] = Field(default_factory=list, description="Validated trades")
    corrections: int = Field(default=0, ge=0, description="Directions overridden by the validator")
    errors: list[ProcessingError] = Field(default_factory=list, description="Processing errors")

    @property
    def failed(self) -> bool:
        return any(e.severity != ErrorSeverity.WARNING for e in self.errors)
