"""Rule-based trade direction classifier.

Reads bid/offer phrasing the way a bond desk does:
- a client ASKING for your bid wants to sell, a client STATING a bid wants to buy
- a client ASKING for your offer wants to buy, a client STATING an offer wants to sell

Rules are tried in a fixed order and the first match wins. Two-way language
beats everything; stated bids/offers are checked before requests because
"I bid 10mm" is unambiguous while request phrasing can also match loosely.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

import structlog

from bondcrm.models.enums import TradeDirection

logger = structlog.get_logger(__name__)

# Counterparties that quote without a pronoun ("Bosera bid 10mm")
DEFAULT_KNOWN_INSTITUTIONS: tuple[str, ...] = (
    "Bosera",
    "Fidelity",
    "BlackRock",
    "eFund",
    "Vanguard",
    "PIMCO",
    "JPMorgan",
    "State Street",
    "Invesco",
)


# =============================================================================
# Patterns
# =============================================================================

# ASCII word boundaries, so CJK text right before a phrase still leaves a boundary
_FLAGS = re.IGNORECASE | re.ASCII

TWO_WAY_PATTERNS = (
    re.compile(r"\b(two-?way|both sides|bid and offer|bid-offer)\b", _FLAGS),
)

# "I bid", "we bid", "ABC bid 10 ..."
MAKING_BID_PATTERNS = (
    re.compile(r"\b(i bid|we bid|[a-z]+ bid \d+|client bid)\b", _FLAGS),
)

# "I offer", "we offer", "ABC offers 5 ..."
MAKING_OFFER_PATTERNS = (
    re.compile(r"\b(i offer|we offer|[a-z]+ offers? \d+|client offers?)\b", _FLAGS),
)

# "what's your bid", "can you bid me", "need a bid"
ASKING_BID_PATTERNS = (
    re.compile(
        r"\b(what'?s? (is )?your bid|can you bid|give me a bid|show me (a|your) bid)\b",
        _FLAGS,
    ),
    re.compile(r"\b(where('?s| is) your bid|need a bid)\b", _FLAGS),
)

# "what's your offer", "offer me", "where's your ask"
ASKING_OFFER_PATTERNS = (
    re.compile(
        r"\b(what'?s? (is )?your (offer|ask)|can you offer|give me an offer|offer me)\b",
        _FLAGS,
    ),
    re.compile(
        r"\b(where('?s| is) your (offer|ask)|show me (an|your) (offer|ask))\b",
        _FLAGS,
    ),
)


@dataclass(frozen=True)
class DirectionRule:
    """A named group of patterns that implies one direction."""

    name: str
    patterns: tuple[re.Pattern, ...]
    result: TradeDirection

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


def _institution_pattern(institutions: tuple[str, ...], verb: str) -> re.Pattern | None:
    names = [re.escape(name.strip().lower()) for name in institutions if name and name.strip()]
    if not names:
        return None
    return re.compile(rf"\b({'|'.join(names)}) {verb}\b", _FLAGS)


@lru_cache(maxsize=32)
def build_rule_table(institutions: tuple[str, ...] = DEFAULT_KNOWN_INSTITUTIONS) -> tuple[DirectionRule, ...]:
    """Build the ordered rule table for a set of known institutions.

    Args:
        institutions: Counterparty names recognised before "bid"/"offer(s)".

    Returns:
        Rules in evaluation order.
    """
    making_bid = MAKING_BID_PATTERNS
    making_offer = MAKING_OFFER_PATTERNS

    institution_bid = _institution_pattern(institutions, "bid")
    if institution_bid is not None:
        making_bid = making_bid + (institution_bid,)

    institution_offer = _institution_pattern(institutions, "offers?")
    if institution_offer is not None:
        making_offer = making_offer + (institution_offer,)

    return (
        DirectionRule("two_way", TWO_WAY_PATTERNS, TradeDirection.TWO_WAY),
        DirectionRule("making_bid", making_bid, TradeDirection.BUY),
        DirectionRule("making_offer", making_offer, TradeDirection.SELL),
        DirectionRule("asking_bid", ASKING_BID_PATTERNS, TradeDirection.SELL),
        DirectionRule("asking_offer", ASKING_OFFER_PATTERNS, TradeDirection.BUY),
    )


def match_direction_rule(
    text: str | None,
    institutions: Iterable[str] | None = None,
) -> tuple[TradeDirection, str | None]:
    """Classify text and report which rule decided it.

    Args:
        text: Transcript slice to read.
        institutions: Known institution names. Defaults to DEFAULT_KNOWN_INSTITUTIONS.

    Returns:
        Tuple of (direction, rule_name). rule_name is None for UNKNOWN.
    """
    if not text:
        return TradeDirection.UNKNOWN, None

    names = DEFAULT_KNOWN_INSTITUTIONS if institutions is None else tuple(institutions)
    lowered = text.lower()

    for rule in build_rule_table(names):
        if rule.matches(lowered):
            return rule.result, rule.name

    return TradeDirection.UNKNOWN, None


def classify_direction(
    text: str | None,
    institutions: Iterable[str] | None = None,
) -> TradeDirection:
    """Infer the client's direction from bid/offer phrasing.

    Returns:
        BUY, SELL, TWO-WAY, or UNKNOWN when nothing matched.
    """
    direction, _ = match_direction_rule(text, institutions)
    return direction
