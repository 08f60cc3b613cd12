"""Phonetic encoding for sound-alike guesses.

- Metaphone: consonant skeleton following Lawrence Philips' original rules.
  "doughnut" and "donut" both encode to "TNT".
- Soundex: first letter plus three consonant digits. Looser than Metaphone,
  so it is opt-in.

Only the letters A-Z are encoded; anything else is ignored. A word with no
encodable letters has an empty key, and empty keys never match.
"""

from typing import Callable, Iterable

from guesspy.core.types import PhoneticAlgorithm

_VOWELS = frozenset("AEIOU")
_FRONT_VOWELS = frozenset("EIY")
# Letters that absorb a following H into a digraph
_H_ABSORBERS = frozenset("CSPTG")
_SILENT_INITIAL_PAIRS = ("AE", "GN", "KN", "PN", "WR")

# Soundex digit mapping, indexed by ord(letter) - ord("A")
_SOUNDEX_DIGITS = "01230120022455012623010202"


def _ascii_letters(word: str) -> str:
    return "".join(ch for ch in word.upper() if "A" <= ch <= "Z")


def _prepare_metaphone(letters: str) -> str:
    """Collapse doubled letters and apply the word-initial exceptions."""
    collapsed = [letters[0]]
    for ch in letters[1:]:
        if ch == collapsed[-1] and ch != "C":
            continue
        collapsed.append(ch)
    word = "".join(collapsed)

    if word[:2] in _SILENT_INITIAL_PAIRS:
        word = word[1:]
    elif word[0] == "X":
        word = "S" + word[1:]
    elif word[:2] == "WH":
        word = "W" + word[2:]

    if word.endswith("MB"):
        word = word[:-1]
    return word


def metaphone(word: str) -> str:
    """Encode a word with the original Metaphone algorithm.

    Args:
        word: Word to encode (case-insensitive)

    Returns:
        Metaphone key, empty if the word has no letters A-Z
    """
    letters = _ascii_letters(word)
    if not letters:
        return ""
    word = _prepare_metaphone(letters)

    key: list[str] = []
    last = len(word) - 1
    for i, ch in enumerate(word):
        prev = word[i - 1] if i > 0 else ""
        nxt = word[i + 1] if i < last else ""
        after = word[i + 2] if i + 1 < last else ""

        if ch in _VOWELS:
            if i == 0:
                key.append(ch)
        elif ch == "C":
            if nxt == "H":
                key.append("K" if prev == "S" else "X")
            elif nxt == "I" and after == "A":
                key.append("X")
            elif nxt in _FRONT_VOWELS:
                if prev != "S":
                    key.append("S")
            else:
                key.append("K")
        elif ch == "D":
            key.append("J" if nxt == "G" and after in _FRONT_VOWELS else "T")
        elif ch == "G":
            if nxt == "H" and after and after not in _VOWELS:
                continue
            if nxt == "N" and (i + 1 == last or word[i + 2 :] == "ED"):
                continue
            if prev == "D" and nxt in _FRONT_VOWELS:
                continue
            key.append("J" if nxt in _FRONT_VOWELS else "K")
        elif ch == "H":
            if prev in _H_ABSORBERS:
                continue
            if prev in _VOWELS and nxt not in _VOWELS:
                continue
            key.append("H")
        elif ch == "K":
            if prev != "C":
                key.append("K")
        elif ch == "P":
            key.append("F" if nxt == "H" else "P")
        elif ch == "Q":
            key.append("K")
        elif ch == "S":
            if nxt == "H" or (nxt == "I" and after in ("O", "A")):
                key.append("X")
            else:
                key.append("S")
        elif ch == "T":
            if nxt == "I" and after in ("O", "A"):
                key.append("X")
            elif nxt == "H":
                key.append("0")
            elif not (nxt == "C" and after == "H"):
                key.append("T")
        elif ch == "V":
            key.append("F")
        elif ch in ("W", "Y"):
            if nxt in _VOWELS:
                key.append(ch)
        elif ch == "X":
            key.append("KS")
        elif ch == "Z":
            key.append("S")
        else:
            # B F J L M N R sound as written
            key.append(ch)

    return "".join(key)


def soundex(word: str, length: int = 4) -> str:
    """Encode a word with American Soundex.

    Similar-sounding words get the same code, e.g. "Robert" and "Rupert" -> "R163".

    Args:
        word: Word to encode (case-insensitive)
        length: Code length including the leading letter

    Returns:
        Soundex code padded with zeros, empty if the word has no letters A-Z
    """
    letters = _ascii_letters(word)
    if not letters:
        return ""

    first = letters[0]
    code = [first]
    last_digit = _SOUNDEX_DIGITS[ord(first) - ord("A")]
    for ch in letters[1:]:
        # H and W do not separate letters with the same code
        if ch in ("H", "W"):
            continue
        digit = _SOUNDEX_DIGITS[ord(ch) - ord("A")]
        if digit != "0" and digit != last_digit:
            code.append(digit)
        last_digit = digit

    return ("".join(code) + "0" * length)[:length]


ENCODERS: dict[PhoneticAlgorithm, Callable[[str], str]] = {
    "metaphone": metaphone,
    "soundex": soundex,
}


def same_phonetic_key(
    a: str,
    b: str,
    algorithms: Iterable[PhoneticAlgorithm] = ("metaphone",),
    min_key_length: int = 1,
) -> bool:
    """Check whether two words share a non-empty phonetic key.

    Args:
        a: First normalized word
        b: Second normalized word
        algorithms: Encoders to try, in order; any agreement is a match
        min_key_length: Shortest key that may count as a match

    Returns:
        True if some algorithm encodes both words identically
    """
    for algorithm in algorithms:
        encode = ENCODERS[algorithm]
        key_a = encode(a)
        if len(key_a) >= max(min_key_length, 1) and key_a == encode(b):
            return True
    return False
