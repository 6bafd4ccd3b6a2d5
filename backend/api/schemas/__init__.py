"""API schemas package."""

from .requests import AnalyzeTranscriptRequest, ValidateDirectionsRequest
from .responses import AnalyzeTranscriptResponse, ErrorResponse, ValidateDirectionsResponse

__all__ = [
    # Requests
    "AnalyzeTranscriptRequest",
    "ValidateDirectionsRequest",
    # Responses
    "AnalyzeTranscriptResponse",
    "ValidateDirectionsResponse",
    "ErrorResponse",
]
