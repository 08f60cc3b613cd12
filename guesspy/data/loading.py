"""Loading of variant files, match case catalogues and audit word lists."""

from loguru import logger
from pydantic import BaseModel, ValidationError
from wordfreq import top_n_list
import yaml

from guesspy.utils import expand_file_path


class MatchCase(BaseModel):
    """One expected outcome from a case catalogue."""

    guess: str
    target: str
    expected: bool
    note: str | None = None


def _read_lines(filepath: str, description: str) -> list[str]:
    """Read stripped, non-comment lines, logging a hint on failure."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return [
                line.strip() for line in f if line.strip() and not line.strip().startswith("#")
            ]
    except FileNotFoundError:
        logger.error(f"✗ {description} not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def load_variant_groups(filepath: str | None, verbose: bool = False) -> list[tuple[str, ...]]:
    """Load extra variant groups from file.

    One group per line, spellings separated by commas::

        # regional
        kerb, curb
        ice cream, icecream

    Raises:
        ValueError: If a line holds fewer than two spellings
    """
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    groups = []
    for line in _read_lines(filepath, "Variant file"):
        spellings = tuple(s.strip() for s in line.split(",") if s.strip())
        if len(spellings) < 2:
            logger.error(f"✗ Variant group needs at least two spellings: '{line}'")
            raise ValueError(f"Invalid variant group in {filepath}: '{line}'")
        groups.append(spellings)

    if verbose:
        logger.info(f"  Loaded {len(groups)} variant groups from {filepath}")
    return groups


def load_match_cases(filepath: str) -> list[MatchCase]:
    """Load a YAML list of ``{guess, target, expected}`` cases.

    Raises:
        ValueError: If the document is not a list or an entry is malformed
    """
    filepath = expand_file_path(filepath) or filepath
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"✗ Case file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except yaml.YAMLError as e:
        logger.error(f"✗ Invalid YAML in case file {filepath}: {e}")
        raise

    if not isinstance(document, list):
        raise ValueError(f"Case file {filepath} must contain a list of cases")

    cases = []
    for position, entry in enumerate(document, start=1):
        try:
            cases.append(MatchCase.model_validate(entry))
        except ValidationError as e:
            logger.error(f"✗ Case #{position} in {filepath} is malformed: {e}")
            raise ValueError(f"Invalid case #{position} in {filepath}") from e
    return cases


def load_audit_words(top_n: int, min_word_length: int = 3, verbose: bool = False) -> list[str]:
    """Load the most frequent English words for a false-positive audit.

    Only purely alphabetic words of at least ``min_word_length`` letters are
    kept, so contractions and numbers do not pollute the pairs.
    """
    if verbose:
        logger.info(f"  Loading top {top_n} English words from wordfreq...")

    try:
        words = top_n_list("en", top_n)
    except Exception as e:
        logger.error(f"✗ Failed to load word frequencies: {e}")
        logger.error("  Try reinstalling: pip install wordfreq")
        raise RuntimeError("Failed to load audit word list") from e

    kept = list(dict.fromkeys(w for w in words if w.isalpha() and len(w) >= min_word_length))
    if verbose:
        logger.info(f"  Kept {len(kept)} alphabetic words of {min_word_length}+ letters")
    return kept
