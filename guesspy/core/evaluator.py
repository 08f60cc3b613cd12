"""Guess evaluation pipeline.

A guess is compared with the target through four stages, cheapest and most
precise first. The first stage that accepts wins:

1. exact match of the normalized forms
2. curated variant groups (colour/color, donut/doughnut)
3. edit distance within a length-scaled threshold (airplan/airplane)
4. phonetic key (sound-alike spellings nobody curated)
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from guesspy.core.edit_distance import within_edit_threshold
from guesspy.core.normalizer import normalize, tokenize
from guesspy.core.phonetic import same_phonetic_key
from guesspy.core.types import MatchDecision, MatchPolicy, MatchStage
from guesspy.core.variants import VariantDictionary
from guesspy.data.variant_groups import BUILTIN_VARIANT_GROUPS

# Endings that turn a forbidden word into a plural or past tense form
_INFLECTIONS = ("s", "es", "d", "ed", "ing")


class GuessEvaluator:
    """Decides whether a guess counts as the target word.

    The evaluator holds only immutable state (policy and variant dictionary),
    so a single instance can serve concurrent callers.
    """

    def __init__(
        self,
        variants: VariantDictionary | None = None,
        policy: MatchPolicy | None = None,
    ):
        self.variants = variants if variants is not None else VariantDictionary(
            BUILTIN_VARIANT_GROUPS
        )
        self.policy = policy if policy is not None else MatchPolicy()

    @classmethod
    def from_policy(
        cls,
        policy: MatchPolicy,
        extra_groups: Iterable[Iterable[str]] = (),
    ) -> GuessEvaluator:
        """Build an evaluator over the built-in groups plus any extra groups."""
        variants = VariantDictionary([*BUILTIN_VARIANT_GROUPS, *extra_groups])
        return cls(variants=variants, policy=policy)

    def _run_stages(self, guess: str, target: str) -> MatchStage | None:
        """Run the stages in order on normalized words and return the accepting one."""
        if not guess or not target:
            return None
        if guess == target:
            return MatchStage.EXACT

        policy = self.policy
        if policy.enable_variants and self.variants.same_group(guess, target):
            return MatchStage.VARIANT
        if policy.enable_edit_distance and within_edit_threshold(
            guess,
            target,
            chars_per_edit=policy.chars_per_edit,
            min_edits=policy.min_edits,
            transpositions=policy.allow_transpositions,
        ):
            return MatchStage.EDIT_DISTANCE
        if policy.enable_phonetic and self._sounds_alike(guess, target):
            return MatchStage.PHONETIC
        return None

    def _sounds_alike(self, guess: str, target: str) -> bool:
        """Phonetic match gated on key length and a widened edit threshold.

        Short keys such as "KM" (come, game) or "BK" (book, bike) are shared by
        too many unrelated words to decide anything on their own.
        """
        policy = self.policy
        if not same_phonetic_key(
            guess,
            target,
            policy.phonetic_algorithms,
            min_key_length=policy.min_phonetic_key_length,
        ):
            return False
        return within_edit_threshold(
            guess,
            target,
            chars_per_edit=policy.chars_per_edit,
            min_edits=policy.min_edits,
            transpositions=policy.allow_transpositions,
            scale=policy.phonetic_edit_scale,
        )

    def evaluate(self, guess: str, target: str) -> MatchDecision:
        """Evaluate a raw guess against a raw target.

        Never raises for text input. An empty guess (or one that normalizes to
        nothing) matches nothing, not even an empty target: a blank submission
        is never a correct answer.

        Args:
            guess: Guess as submitted by the player
            target: Target word from the card

        Returns:
            MatchDecision with the accepting stage, if any
        """
        normalized_guess = normalize(guess)
        normalized_target = normalize(target)
        stage = self._run_stages(normalized_guess, normalized_target)

        if stage is None:
            logger.debug(f"'{guess}' vs '{target}': no match")
        else:
            logger.debug(f"'{guess}' vs '{target}': matched by {stage.value}")

        return MatchDecision(
            matched=stage is not None,
            stage=stage,
            guess=normalized_guess,
            target=normalized_target,
        )

    def is_match(self, guess: str, target: str) -> bool:
        """Return True if the guess counts as the target."""
        return self.evaluate(guess, target).matched

    def is_word_in_list(self, word: str, words: Iterable[str]) -> bool:
        """Return True if the word matches any entry of the list."""
        return any(self.is_match(word, candidate) for candidate in words)

    def check_forbidden(self, text: str, forbidden: Iterable[str]) -> list[str]:
        """Find forbidden words used in a clue.

        A forbidden word is found when a run of consecutive clue tokens, joined,
        normalizes to the same word or to a spelling in the same variant group,
        optionally followed by a plural or past tense ending. So "air plane" and
        "airplanes" in a clue catch "airplane". Typo and phonetic tolerance are
        not applied to clues.

        Args:
            text: Clue text
            forbidden: Forbidden words for the current card

        Returns:
            Forbidden words found, as given and in input order, without repeats
        """
        tokens = [normalize(token) for token in tokenize(text)]
        found: list[str] = []
        for word in forbidden:
            normalized = normalize(word)
            if word in found or not normalized:
                continue
            if self._clue_uses(tokens, normalized):
                found.append(word)
        return found

    def _clue_uses(self, tokens: list[str], word: str) -> bool:
        group = self.variants.group_of(word)
        limit = max(len(s) for s in group.spellings) if group else len(word)
        limit += max(len(suffix) for suffix in _INFLECTIONS)
        for start in range(len(tokens)):
            joined = ""
            for token in tokens[start:]:
                joined += token
                if len(joined) > limit:
                    break
                if self._is_form_of(joined, word):
                    return True
        return False

    def _is_form_of(self, joined: str, word: str) -> bool:
        """Check a joined token run against a word, allowing an inflection suffix."""
        if self.variants.same_group(joined, word):
            return True
        return any(
            joined.endswith(suffix)
            and len(joined) > len(suffix)
            and self.variants.same_group(joined[: -len(suffix)], word)
            for suffix in _INFLECTIONS
        )


_DEFAULT_EVALUATOR = GuessEvaluator()


def get_default_evaluator() -> GuessEvaluator:
    """Return the process-wide evaluator over the built-in variant groups."""
    return _DEFAULT_EVALUATOR


def is_matching_guess(guess: str, target: str) -> bool:
    """Return True if the guess counts as the target word."""
    return _DEFAULT_EVALUATOR.is_match(guess, target)


def is_word_in_list(word: str, words: Iterable[str]) -> bool:
    """Return True if the word matches any entry of the list."""
    return _DEFAULT_EVALUATOR.is_word_in_list(word, words)


def check_forbidden(text: str, forbidden: Iterable[str]) -> list[str]:
    """Return the forbidden words used in a clue."""
    return _DEFAULT_EVALUATOR.check_forbidden(text, forbidden)
