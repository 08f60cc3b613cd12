"""GuessPy - guess matching for word-guessing party games.

Decide whether a freeform guess counts as the secret word, tolerating case,
spacing, regional spellings, typos and sound-alike spellings.
"""

from loguru import logger

from guesspy.core import (
    Config,
    GuessEvaluator,
    MatchDecision,
    MatchPolicy,
    MatchStage,
    VariantDictionary,
    check_forbidden,
    is_matching_guess,
    is_word_in_list,
    load_config,
    normalize,
)
from guesspy.utils.logging import setup_logger

# Library callers opt in to log records; the command line tool enables them
logger.disable("guesspy")

__version__ = "0.1.0"
__all__ = [
    "Config",
    "GuessEvaluator",
    "MatchDecision",
    "MatchPolicy",
    "MatchStage",
    "VariantDictionary",
    "check_forbidden",
    "is_matching_guess",
    "is_word_in_list",
    "load_config",
    "normalize",
    "setup_logger",
]
