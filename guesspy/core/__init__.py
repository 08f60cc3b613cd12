"""Core matching logic for GuessPy."""

from .config import Config, load_config
from .edit_distance import edit_distance, edit_threshold, within_edit_threshold
from .evaluator import (
    GuessEvaluator,
    check_forbidden,
    get_default_evaluator,
    is_matching_guess,
    is_word_in_list,
)
from .normalizer import normalize, tokenize
from .phonetic import metaphone, same_phonetic_key, soundex
from .types import MatchDecision, MatchPolicy, MatchStage, VariantGroup
from .variants import VariantDictionary

__all__ = [
    "Config",
    "GuessEvaluator",
    "MatchDecision",
    "MatchPolicy",
    "MatchStage",
    "VariantDictionary",
    "VariantGroup",
    "check_forbidden",
    "edit_distance",
    "edit_threshold",
    "get_default_evaluator",
    "is_matching_guess",
    "is_word_in_list",
    "load_config",
    "metaphone",
    "normalize",
    "same_phonetic_key",
    "soundex",
    "tokenize",
    "within_edit_threshold",
]
