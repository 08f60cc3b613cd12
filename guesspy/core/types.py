"""Type definitions for GuessPy."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class MatchStage(Enum):
    """Pipeline stage that accepted a guess."""

    EXACT = "exact"
    VARIANT = "variant"
    EDIT_DISTANCE = "edit_distance"
    PHONETIC = "phonetic"


PhoneticAlgorithm = Literal["metaphone", "soundex"]


class MatchDecision(BaseModel):
    """Outcome of evaluating one guess against one target.

    Truthy when the guess matched, so it can be used directly in conditions.
    """

    matched: bool
    stage: MatchStage | None = None
    guess: str = ""
    target: str = ""

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return self.matched


class VariantGroup(BaseModel):
    """Named set of normalized spellings treated as the same word."""

    name: str = Field(min_length=1)
    spellings: frozenset[str]

    model_config = {"frozen": True}


class MatchPolicy(BaseModel):
    """Tunable settings of the matching pipeline."""

    chars_per_edit: int = Field(4, ge=1, description="Word length that earns one allowed edit")
    min_edits: int = Field(1, ge=1, description="Edits always tolerated for non-empty words")
    allow_transpositions: bool = Field(True, description="Count adjacent swaps as one edit")
    phonetic_algorithms: tuple[PhoneticAlgorithm, ...] = ("metaphone",)
    # Sound-alike spellings still have to look roughly alike
    phonetic_edit_scale: int = Field(
        2, ge=1, description="Multiple of the typo threshold a phonetic match may differ by"
    )
    min_phonetic_key_length: int = Field(
        3, ge=1, description="Shortest phonetic key that counts as a match"
    )
    enable_variants: bool = True
    enable_edit_distance: bool = True
    enable_phonetic: bool = True

    model_config = {"frozen": True}
