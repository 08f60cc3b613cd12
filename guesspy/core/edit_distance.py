"""Bounded edit distance and the length-scaled acceptance threshold."""

from rapidfuzz.distance import OSA, Levenshtein


def edit_threshold(length: int, chars_per_edit: int = 4, min_edits: int = 1) -> int:
    """Return how many edits a word of the given length may differ by.

    One edit per ``chars_per_edit`` characters, never fewer than ``min_edits``
    for a non-empty word. Non-decreasing in ``length``.

    Args:
        length: Length of the longer of the two words being compared
        chars_per_edit: Characters that earn one extra allowed edit
        min_edits: Floor for any non-empty word

    Returns:
        Maximum accepted edit distance (0 for empty words)
    """
    if chars_per_edit < 1:
        raise ValueError(f"chars_per_edit must be >= 1, got {chars_per_edit}")
    if min_edits < 1:
        raise ValueError(f"min_edits must be >= 1, got {min_edits}")
    if length <= 0:
        return 0
    return max(min_edits, length // chars_per_edit)


def edit_distance(
    a: str,
    b: str,
    max_distance: int | None = None,
    transpositions: bool = True,
) -> int:
    """Compute the edit distance between two strings.

    Insertions, deletions and substitutions cost one. With ``transpositions``
    an adjacent swap ("teh" -> "the") also costs one (optimal string alignment).

    When ``max_distance`` is given, computation stops as soon as the distance is
    known to exceed it and ``max_distance + 1`` is returned.

    Args:
        a: First string
        b: Second string
        max_distance: Optional bound for early exit
        transpositions: Whether adjacent transpositions count as one edit

    Returns:
        Edit distance, or ``max_distance + 1`` if the bound was exceeded
    """
    metric = OSA if transpositions else Levenshtein
    return metric.distance(a, b, score_cutoff=max_distance)


def within_edit_threshold(
    a: str,
    b: str,
    chars_per_edit: int = 4,
    min_edits: int = 1,
    transpositions: bool = True,
    scale: int = 1,
) -> bool:
    """Check whether two normalized words are within the typo threshold.

    The threshold comes from :func:`edit_threshold` applied to the longer word,
    multiplied by ``scale``. Empty words never match here.
    """
    if not a or not b:
        return False
    threshold = scale * edit_threshold(max(len(a), len(b)), chars_per_edit, min_edits)
    return edit_distance(a, b, max_distance=threshold, transpositions=transpositions) <= threshold
