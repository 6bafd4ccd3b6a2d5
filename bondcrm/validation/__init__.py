"""Deterministic trade direction validation."""

from .context import extract_activity_context
from .patterns import (
    DEFAULT_KNOWN_INSTITUTIONS,
    DirectionRule,
    build_rule_table,
    classify_direction,
    match_direction_rule,
)
from .reconcile import reconcile_candidate, validate_candidates

__all__ = [
    "DEFAULT_KNOWN_INSTITUTIONS",
    "DirectionRule",
    "build_rule_table",
    "classify_direction",
    "match_direction_rule",
    "extract_activity_context",
    "reconcile_candidate",
    "validate_candidates",
]
