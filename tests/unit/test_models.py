"""Unit tests for Pydantic models."""

import pytest

from bondcrm.models import (
    ActivityRecord,
    ActivityStatus,
    AnalysisResult,
    ConfidenceLevel,
    ErrorSeverity,
    ProcessingError,
    TradeCandidate,
    TradeDirection,
    parse_leading_float,
)


class TestTradeCandidate:
    """Tests for TradeCandidate model."""

    def test_camel_case_aliases(self):
        candidate = TradeCandidate.model_validate({"clientName": "ABC FUND", "bondName": "Apple 2.5% 2030"})
        assert candidate.client_name == "ABC FUND"
        assert candidate.bond_name == "Apple 2.5% 2030"

    def test_to_wire_keeps_only_present_keys(self):
        data = {"clientName": "ABC FUND", "direction": "SELL", "size": 10}
        assert TradeCandidate.model_validate(data).to_wire() == data

    def test_scalars_coerced_to_text(self):
        candidate = TradeCandidate.model_validate({"clientName": 123, "direction": 1, "confidence": 0.9})
        assert candidate.client_name == "123"
        assert candidate.direction == "1"
        assert candidate.confidence == "0.9"

    def test_loose_passthrough_fields(self):
        candidate = TradeCandidate.model_validate({"size": "10MM", "price": [99, 100]})
        assert candidate.size == "10MM"
        assert candidate.price == [99, 100]

    def test_empty_candidate(self):
        candidate = TradeCandidate()
        assert candidate.client_name is None
        assert candidate.to_wire() == {}


class TestActivityRecord:
    """Tests for ActivityRecord mapping."""

    def test_from_candidate(self):
        candidate = TradeCandidate.model_validate(
            {
                "clientName": "ABC FUND",
                "isin": "US0378331005",
                "ticker": "AAPL",
                "size": "10MM",
                "price": "98.75",
                "direction": "SELL",
                "notes": "Client asking for bid",
            }
        )

        record = ActivityRecord.from_candidate(candidate, "jane@desk.com")

        assert record.client_name == "ABC FUND"
        assert record.activity_type == "Bloomberg Chat"
        assert record.size == 10.0
        assert record.price == 98.75
        assert record.currency == "USD"
        assert record.status == ActivityStatus.ENQUIRY
        assert record.notes == "Client asking for bid"
        assert record.created_by == "jane@desk.com (AI Import)"

    def test_defaults_for_empty_candidate(self):
        record = ActivityRecord.from_candidate(TradeCandidate(), "paul", default_currency="EUR")

        assert record.client_name == "UNKNOWN"
        assert record.isin == ""
        assert record.ticker == ""
        assert record.size == 0.0
        assert record.price is None
        assert record.currency == "EUR"
        assert record.direction == ""
        assert record.notes == "Imported from AI analysis"

    def test_zero_price_is_no_price(self):
        record = ActivityRecord.from_candidate(TradeCandidate(price=0), "paul")
        assert record.price is None

    def test_wire_shape(self):
        record = ActivityRecord.from_candidate(TradeCandidate(client_name="X"), "paul")
        data = record.model_dump(by_alias=True, mode="json")

        assert data["clientName"] == "X"
        assert data["activityType"] == "Bloomberg Chat"
        assert data["status"] == "ENQUIRY"
        assert data["createdBy"] == "paul (AI Import)"


class TestParseLeadingFloat:
    """Tests for numeric prefix parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (10, 10.0),
            (98.75, 98.75),
            ("10MM", 10.0),
            (" 12.5bp", 12.5),
            ("-3", -3.0),
            (".5", 0.5),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
        ],
    )
    def test_values(self, value, expected):
        assert parse_leading_float(value) == expected


class TestAnalysisResult:
    """Tests for AnalysisResult."""

    def test_not_failed_without_errors(self):
        assert not AnalysisResult().failed

    def test_warning_is_not_failure(self):
        warning = ProcessingError(
            error_id="w1",
            severity=ErrorSeverity.WARNING,
            stage="trade_extraction",
            message="odd output",
        )
        assert not AnalysisResult(errors=[warning]).failed

    def test_error_is_failure(self):
        error = ProcessingError(
            error_id="e1",
            severity=ErrorSeverity.ERROR,
            stage="trade_extraction",
            message="boom",
            recoverable=False,
        )
        assert AnalysisResult(errors=[error]).failed


class TestEnums:
    """Tests for enum values."""

    def test_trade_directions(self):
        assert TradeDirection.TWO_WAY.value == "TWO-WAY"
        assert TradeDirection.UNKNOWN.value == "UNKNOWN"

    def test_confidence_levels(self):
        assert ConfidenceLevel.MEDIUM.value == "medium"
