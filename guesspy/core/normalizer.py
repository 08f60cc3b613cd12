"""Text normalization for guess comparison."""

import unicodedata

# Unicode major categories kept in a normalized word: letters, marks, numbers.
# Marks stay because Indic vowel signs and viramas are part of the letter.
_KEPT_CATEGORIES = frozenset("LMN")


def normalize(text: str) -> str:
    """Canonicalize raw guess or target text into a comparable word.

    Lowercases, then drops whitespace, hyphens, punctuation and symbols so that
    "Air-Plane", "air plane" and "airplane" all become "airplane". The result is
    NFC-composed and normalizing it again returns it unchanged.

    Args:
        text: Raw text as typed or transcribed

    Returns:
        Normalized word (may be empty)
    """
    if not text:
        return ""
    lowered = unicodedata.normalize("NFC", text).lower()
    kept = "".join(ch for ch in lowered if unicodedata.category(ch)[0] in _KEPT_CATEGORIES)
    return unicodedata.normalize("NFC", kept)


def tokenize(text: str) -> list[str]:
    """Split text into word tokens on whitespace and hyphens.

    Tokens that normalize to nothing (stray punctuation) are dropped.
    """
    tokens = []
    for chunk in text.replace("-", " ").split():
        if normalize(chunk):
            tokens.append(chunk)
    return tokens
