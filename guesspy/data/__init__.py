"""Data loading and built-in word data for GuessPy."""

from guesspy.data.loading import (
    MatchCase,
    load_audit_words,
    load_match_cases,
    load_variant_groups,
)
from guesspy.data.variant_groups import BUILTIN_VARIANT_GROUPS

__all__ = [
    "BUILTIN_VARIANT_GROUPS",
    "MatchCase",
    "load_audit_words",
    "load_match_cases",
    "load_variant_groups",
]
