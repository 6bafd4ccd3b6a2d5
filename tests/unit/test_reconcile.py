"""Unit tests for direction reconciliation."""

from bondcrm.models import TradeCandidate, TradeDirection
from bondcrm.validation import reconcile_candidate, validate_candidates


def _candidate(**fields) -> TradeCandidate:
    return TradeCandidate.model_validate(fields)


class TestReconcileCandidate:
    """Tests for the override policy on a single candidate."""

    def test_disagreement_overrides(self):
        candidate = _candidate(clientName="ABC", direction="BUY", notes="Client asking for bid", confidence="high")

        result = reconcile_candidate(candidate, "BUY", TradeDirection.SELL)

        assert result.direction == "SELL"
        assert result.confidence == "medium"
        assert result.notes == "Client asking for bid [Auto-corrected from BUY to SELL]"

    def test_missing_notes_get_annotation(self):
        candidate = _candidate(direction="SELL", confidence="low")

        result = reconcile_candidate(candidate, "SELL", TradeDirection.TWO_WAY)

        assert result.notes == " [Auto-corrected from SELL to TWO-WAY]"
        assert result.confidence == "medium"

    def test_missing_direction_is_filled(self):
        result = reconcile_candidate(_candidate(), None, TradeDirection.BUY)

        assert result.direction == "BUY"
        assert result.notes == " [Auto-corrected from NONE to BUY]"

    def test_unknown_never_overrides(self):
        candidate = _candidate(direction="BUY", confidence="high")

        result = reconcile_candidate(candidate, "BUY", TradeDirection.UNKNOWN)

        assert result is candidate
        assert result.direction == "BUY"

    def test_unknown_leaves_missing_direction_alone(self):
        result = reconcile_candidate(_candidate(), None, TradeDirection.UNKNOWN)
        assert result.direction is None

    def test_agreement_is_untouched(self):
        candidate = _candidate(direction="SELL", notes="color", confidence="high")

        result = reconcile_candidate(candidate, "SELL", TradeDirection.SELL)

        assert result is candidate
        assert result.notes == "color"
        assert result.confidence == "high"

    def test_input_not_mutated(self):
        candidate = _candidate(direction="BUY", confidence="high")

        reconcile_candidate(candidate, "BUY", TradeDirection.SELL)

        assert candidate.direction == "BUY"
        assert candidate.confidence == "high"
        assert candidate.notes is None


class TestValidateCandidates:
    """Tests for batch validation over a transcript."""

    def test_asking_for_bid_scenario(self):
        transcript = "Client: what's your bid on 5MM XYZ bond?"
        [result] = validate_candidates(transcript, [{"clientName": "CLIENT", "direction": "BUY", "confidence": "high"}])

        assert result.direction == "SELL"
        assert result.confidence == "medium"
        assert "[Auto-corrected from BUY to SELL]" in result.notes

    def test_institution_bid_agrees(self, bosera_transcript):
        candidate = {"clientName": "BOSERA", "direction": "BUY", "confidence": "high", "size": 10}

        [result] = validate_candidates(bosera_transcript, [candidate])

        assert result.to_wire() == candidate

    def test_two_way_scenario(self):
        transcript = "I need a two-way quote on 20MM Microsoft 3.5s"
        [result] = validate_candidates(transcript, [{"clientName": "", "direction": "SELL", "confidence": "high"}])

        assert result.direction == "TWO-WAY"
        assert result.confidence == "medium"

    def test_no_signal_keeps_original(self):
        transcript = "Morning, quiet market today. Will call later."
        [result] = validate_candidates(transcript, [{"clientName": "ABC", "direction": "BUY"}])

        assert result.direction == "BUY"
        assert result.notes is None

    def test_each_candidate_uses_own_context(self, desk_transcript):
        candidates = [
            {"clientName": "FIDELITY", "direction": "BUY", "confidence": "high"},
            {"clientName": "VANGUARD", "direction": "BUY", "confidence": "high"},
        ]

        results = validate_candidates(desk_transcript, candidates)

        assert [r.direction for r in results] == ["SELL", "BUY"]
        assert [r.confidence for r in results] == ["medium", "high"]

    def test_cardinality_and_order(self, desk_transcript):
        candidates = [
            {"clientName": name, "direction": "SELL"}
            for name in ["VANGUARD", "NOBODY", "FIDELITY", "", "VANGUARD"]
        ]

        results = validate_candidates(desk_transcript, candidates)

        assert len(results) == len(candidates)
        assert [r.client_name for r in results] == ["VANGUARD", "NOBODY", "FIDELITY", "", "VANGUARD"]

    def test_idempotent(self, desk_transcript):
        candidates = [
            {"clientName": "FIDELITY", "direction": "BUY", "notes": "n"},
            {"clientName": "VANGUARD", "direction": "TWO-WAY"},
        ]

        first = [c.to_wire() for c in validate_candidates(desk_transcript, candidates)]
        second = [c.to_wire() for c in validate_candidates(desk_transcript, candidates)]

        assert first == second

    def test_revalidating_output_changes_nothing(self, desk_transcript):
        candidates = [{"clientName": "FIDELITY", "direction": "BUY"}]

        once = validate_candidates(desk_transcript, candidates)
        twice = validate_candidates(desk_transcript, once)

        assert [c.to_wire() for c in once] == [c.to_wire() for c in twice]

    def test_input_dicts_not_mutated(self, desk_transcript):
        candidates = [{"clientName": "FIDELITY", "direction": "BUY"}]

        validate_candidates(desk_transcript, candidates)

        assert candidates == [{"clientName": "FIDELITY", "direction": "BUY"}]

    def test_extra_fields_pass_through(self, desk_transcript):
        candidate = {
            "clientName": "FIDELITY",
            "direction": "BUY",
            "isin": "US0378331005",
            "bondName": "XYZ 4.5% 2030",
            "price": 98.5,
            "deskBook": "CREDIT-EM",
        }

        [result] = validate_candidates(desk_transcript, [candidate])
        wire = result.to_wire()

        assert wire["isin"] == "US0378331005"
        assert wire["bondName"] == "XYZ 4.5% 2030"
        assert wire["price"] == 98.5
        assert wire["deskBook"] == "CREDIT-EM"

    def test_malformed_candidates_do_not_raise(self):
        transcript = "what's your bid on the 2030s?"
        candidates = [{}, {"clientName": None, "direction": None}, {"clientName": 42, "direction": 7}]

        results = validate_candidates(transcript, candidates)

        assert len(results) == 3
        assert all(r.direction == "SELL" for r in results)

    def test_empty_client_uses_full_transcript(self):
        transcript = "Desk: morning\nsomeone: can you offer me 5mm?"
        [result] = validate_candidates(transcript, [{"clientName": "", "direction": "SELL"}])

        assert result.direction == "BUY"

    def test_custom_institutions(self):
        transcript = "Nomura: Nomura bid 5mm XYZ\nPaul: done"
        candidates = [{"clientName": "NOMURA", "direction": "SELL"}]

        assert validate_candidates(transcript, candidates)[0].direction == "SELL"
        assert validate_candidates(transcript, candidates, ["Nomura"])[0].direction == "BUY"

    def test_empty_batch(self):
        assert validate_candidates("anything", []) == []
