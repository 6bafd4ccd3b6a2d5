"""Activity log record built from a reviewed trade candidate."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import ActivityStatus
from .trade import TradeCandidate

_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_leading_float(value: Any) -> float | None:
    """Read the numeric prefix of a value ("10MM" -> 10.0), or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return None
    return float(match.group(1))


class ActivityRecord(BaseModel):
    """An activity ready to be written to the desk's activity log."""

    model_config = ConfigDict(populate_by_name=True)

    client_name: str = Field("UNKNOWN", alias="clientName")
    activity_type: str = Field("Bloomberg Chat", alias="activityType")
    isin: str = ""
    ticker: str = ""
    size: float = 0.0
    currency: str = "USD"
    price: float | None = None
    direction: str = ""
    status: ActivityStatus = ActivityStatus.ENQUIRY
    notes: str = "Imported from AI analysis"
    created_by: str = Field(..., alias="createdBy")

    @classmethod
    def from_candidate(
        cls,
        candidate: TradeCandidate,
        imported_by: str,
        default_currency: str = "USD",
    ) -> "ActivityRecord":
        """Map a candidate onto an activity, filling blanks with import defaults.

        Args:
            candidate: Validated trade candidate.
            imported_by: Name or email of the user importing the activity.
            default_currency: Currency used when the candidate has none.

        Returns:
            ActivityRecord with AI-import defaults applied.
        """
        # A zero or unreadable price means "no price"
        price = parse_leading_float(candidate.price) or None

        return cls(
            client_name=candidate.client_name or "UNKNOWN",
            isin=str(candidate.isin or ""),
            ticker=str(candidate.ticker or ""),
            size=parse_leading_float(candidate.size) or 0.0,
            currency=str(candidate.currency or default_currency),
            price=price,
            direction=candidate.direction or "",
            notes=candidate.notes or "Imported from AI analysis",
            created_by=f"{imported_by} (AI Import)",
        )
