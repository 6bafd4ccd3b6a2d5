"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def desk_transcript() -> str:
    """Bloomberg-style chat with two clients on the same desk."""
    return """FIDELITY: morning, what's your bid on 5mm XYZ 4.5% 2030s?
Paul: 98.50 for 5mm
VANGUARD: can you offer me 10mm ABC 3.25% 2028s?
Paul: 101.25 offer
Paul: anything else today?"""


@pytest.fixture
def bosera_transcript() -> str:
    """Institution stating its own bid, dealer confirms."""
    return "Bosera: Bosera bid 10mm DKS 52\nPaul: @ 100\nBosera: Done"


@pytest.fixture
def make_extractor():
    """Build a deterministic stand-in for the LLM extraction chain."""

    def _make(candidates: list[dict] | None = None, error: Exception | None = None):
        calls: list[str] = []

        def extractor(transcript: str) -> list[dict]:
            calls.append(transcript)
            if error is not None:
                raise error
            # Fresh dicts each call so tests can compare runs
            return [dict(c) for c in (candidates or [])]

        extractor.calls = calls
        return extractor

    return _make
