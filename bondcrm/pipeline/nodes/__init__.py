"""Pipeline node implementations."""

from .trade_extraction import extract_trades_node
from .direction_validation import validate_directions_node

__all__ = [
    "extract_trades_node",
    "validate_directions_node",
]
