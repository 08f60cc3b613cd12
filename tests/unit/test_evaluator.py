"""Unit tests for the guess evaluation pipeline.

Tests verify match decisions and the stage that produced them. Each test has
exactly one assertion.
"""

import itertools

from loguru import logger
import pytest

from guesspy.core import (
    GuessEvaluator,
    MatchPolicy,
    MatchStage,
    VariantDictionary,
    check_forbidden,
    is_matching_guess,
    is_word_in_list,
)

WORDS = [
    "airplane",
    "Air-Plane",
    "colour",
    "color",
    "gray",
    "grey",
    "donut",
    "doughnut",
    "car",
    "cat",
    "dog",
    "house",
    "home",
    "theatre",
    "red",
    "blue",
    "",
    "  ",
]


class TestRequiredScenarios:
    """Guesses that must be accepted or rejected exactly as listed."""

    @pytest.mark.parametrize(
        "guess, target",
        [
            ("AIRPLANE", "airplane"),
            ("Air-Plane", "airplane"),
            ("air plane", "airplane"),
            ("airplan", "airplane"),
            ("colour", "color"),
            ("color", "colour"),
            ("gray", "grey"),
            ("grey", "gray"),
            ("donut", "doughnut"),
            ("doughnut", "donut"),
        ],
    )
    def test_accepts(self, guess: str, target: str) -> None:
        """Case, spacing, typo and spelling variants count as the word."""
        assert is_matching_guess(guess, target)

    @pytest.mark.parametrize("guess, target", [("car", "airplane"), ("cat", "dog")])
    def test_rejects(self, guess: str, target: str) -> None:
        """Unrelated words are rejected despite shared letters."""
        assert not is_matching_guess(guess, target)


class TestCatalogue:
    """Further expected outcomes for common guesses."""

    @pytest.mark.parametrize(
        "guess, target",
        [
            ("aeroplane", "airplane"),
            ("theatre", "theater"),
            ("airplne", "airplane"),
            ("colr", "color"),
            ("  airplane  ", "airplane"),
        ],
    )
    def test_accepts(self, guess: str, target: str) -> None:
        """Known spellings and small typos are accepted."""
        assert is_matching_guess(guess, target)

    @pytest.mark.parametrize(
        "guess, target",
        [("house", "home"), ("red", "blue"), ("mountain", "airplane"), ("apple", "orange")],
    )
    def test_rejects(self, guess: str, target: str) -> None:
        """Different words of similar length are rejected."""
        assert not is_matching_guess(guess, target)

    @pytest.mark.parametrize(
        "guess, target",
        [
            ("great", "court"),
            ("very", "four"),
            ("said", "city"),
            ("come", "game"),
            ("bread", "bird"),
            ("phone", "fan"),
            ("pizza", "piece"),
            ("book", "bike"),
            ("that", "thought"),
            ("their", "three"),
            ("right", "read"),
            ("many", "money"),
            ("life", "love"),
            ("part", "pretty"),
        ],
    )
    def test_rejects_common_words_with_shared_consonants(self, guess: str, target: str) -> None:
        """Common words that only share a consonant skeleton are rejected."""
        assert not is_matching_guess(guess, target)


class TestProperties:
    """Properties that hold for every input."""

    @pytest.mark.parametrize("guess, target", list(itertools.product(WORDS, repeat=2)))
    def test_is_symmetric(self, guess: str, target: str) -> None:
        """Swapping guess and target never changes the decision."""
        assert is_matching_guess(guess, target) == is_matching_guess(target, guess)

    @pytest.mark.parametrize("word", [w for w in WORDS if w.strip()])
    def test_word_matches_itself(self, word: str) -> None:
        """Any non-empty word matches itself."""
        assert is_matching_guess(word, word)

    @pytest.mark.parametrize(
        "variant", ["ELEPHANT", "Ele-Phant", " ele phant ", "e-l-e-p-h-a-n-t"]
    )
    def test_spacing_and_case_variants_match(self, variant: str) -> None:
        """Casing, spacing and hyphenation of the same letters always match."""
        assert is_matching_guess(variant, "elephant")

    @pytest.mark.parametrize("target", ["", "airplane", "   "])
    def test_empty_guess_matches_nothing(self, target: str) -> None:
        """An empty guess is never accepted, not even against an empty target."""
        assert not is_matching_guess("", target)

    def test_punctuation_only_guess_matches_nothing(self) -> None:
        """A guess with nothing left after normalization is never accepted."""
        assert not is_matching_guess("?!", "?!")


class TestDecisionStages:
    """Test which stage accepts a guess."""

    @pytest.fixture(name="evaluator")
    def fixture_evaluator(self) -> GuessEvaluator:
        return GuessEvaluator()

    def test_exact_stage_for_case_difference(self, evaluator: GuessEvaluator) -> None:
        """Case-only differences are exact after normalization."""
        assert evaluator.evaluate("AIRPLANE", "airplane").stage is MatchStage.EXACT

    def test_variant_stage_for_regional_pair(self, evaluator: GuessEvaluator) -> None:
        """Curated pairs are decided by the variant stage before edit distance."""
        assert evaluator.evaluate("colour", "color").stage is MatchStage.VARIANT

    def test_edit_distance_stage_for_typo(self, evaluator: GuessEvaluator) -> None:
        """Single-letter omission is decided by edit distance."""
        assert evaluator.evaluate("airplan", "airplane").stage is MatchStage.EDIT_DISTANCE

    def test_phonetic_stage_for_uncurated_sound_alike(self, evaluator: GuessEvaluator) -> None:
        """Sound-alike spellings outside the dictionary fall to the phonetic stage."""
        assert evaluator.evaluate("fotograf", "photograph").stage is MatchStage.PHONETIC

    def test_no_stage_when_rejected(self, evaluator: GuessEvaluator) -> None:
        """Rejected guesses carry no stage."""
        assert evaluator.evaluate("cat", "dog").stage is None

    def test_decision_is_truthy_on_match(self, evaluator: GuessEvaluator) -> None:
        """A matching decision can be used as a boolean."""
        assert evaluator.evaluate("grey", "gray")

    def test_decision_carries_normalized_words(self, evaluator: GuessEvaluator) -> None:
        """The decision reports the normalized guess."""
        assert evaluator.evaluate("Air-Plane", "airplane").guess == "airplane"


class TestPolicy:
    """Test policy switches on the pipeline."""

    def test_donut_still_matches_without_variants(self) -> None:
        """The phonetic stage backs up the curated dictionary."""
        evaluator = GuessEvaluator(policy=MatchPolicy(enable_variants=False))
        assert evaluator.is_match("donut", "doughnut")

    def test_donut_still_matches_without_phonetic(self) -> None:
        """The curated dictionary backs up the phonetic stage."""
        evaluator = GuessEvaluator(policy=MatchPolicy(enable_phonetic=False))
        assert evaluator.is_match("donut", "doughnut")

    def test_disabled_edit_distance_rejects_typos(self) -> None:
        """Without edit distance, an uncurated typo is rejected."""
        evaluator = GuessEvaluator(
            policy=MatchPolicy(enable_edit_distance=False, enable_phonetic=False)
        )
        assert not evaluator.is_match("airplne", "airplane")

    def test_stricter_threshold_rejects_two_edits(self) -> None:
        """Eight characters per edit leaves one edit for eight letters."""
        evaluator = GuessEvaluator(
            policy=MatchPolicy(chars_per_edit=8, enable_phonetic=False)
        )
        assert not evaluator.is_match("airpla", "airplane")

    def test_phonetic_stage_needs_similar_spelling(self) -> None:
        """A shared key is not enough when the spellings are far apart."""
        evaluator = GuessEvaluator(policy=MatchPolicy(min_phonetic_key_length=1))
        assert not evaluator.is_match("great", "court")

    def test_short_keys_can_be_allowed(self) -> None:
        """Lowering the key length floor lets two-consonant keys decide."""
        evaluator = GuessEvaluator(policy=MatchPolicy(min_phonetic_key_length=2))
        assert evaluator.evaluate("come", "game").stage is MatchStage.PHONETIC

    def test_custom_variants_are_used(self) -> None:
        """An injected dictionary replaces the built-in one."""
        evaluator = GuessEvaluator(variants=VariantDictionary([("kerb", "curb")]))
        assert evaluator.evaluate("kerb", "curb").stage is MatchStage.VARIANT

    def test_from_policy_keeps_builtin_groups(self) -> None:
        """Extra groups are added on top of the built-in ones."""
        evaluator = GuessEvaluator.from_policy(MatchPolicy(), [("kerb", "curb")])
        assert evaluator.variants.same_group("colour", "color")


class TestWordInList:
    """Test matching against a list of words."""

    def test_finds_variant_in_list(self) -> None:
        """A regional spelling is found among list entries."""
        assert is_word_in_list("colour", ["sky", "color"])

    def test_rejects_word_absent_from_list(self) -> None:
        """Unrelated words are not found."""
        assert not is_word_in_list("cat", ["dog", "airplane"])

    def test_empty_list_contains_nothing(self) -> None:
        """Nothing matches an empty list."""
        assert not is_word_in_list("cat", [])


class TestCheckForbidden:
    """Test forbidden word detection in clues."""

    def test_finds_forbidden_word(self) -> None:
        """A forbidden word used verbatim is reported."""
        assert check_forbidden("It flies in the sky", ["fly", "sky"]) == ["sky"]

    def test_ignores_case_and_punctuation(self) -> None:
        """Case and punctuation do not hide a forbidden word."""
        assert check_forbidden("Look up at the SKY!", ["sky"]) == ["sky"]

    def test_finds_regional_spelling(self) -> None:
        """Spelling a forbidden word the other way is still caught."""
        assert check_forbidden("a bright colour", ["color"]) == ["color"]

    def test_finds_multi_word_forbidden_term(self) -> None:
        """Forbidden phrases are matched against consecutive tokens."""
        assert check_forbidden("a cold ice-cream cone", ["ice cream"]) == ["ice cream"]

    def test_finds_compound_written_apart(self) -> None:
        """A closed compound split in the clue is caught."""
        assert check_forbidden("you fly in an air plane", ["airplane"]) == ["airplane"]

    def test_finds_plural_form(self) -> None:
        """A plural ending does not hide a forbidden word."""
        assert check_forbidden("two airplanes", ["airplane"]) == ["airplane"]

    def test_finds_plural_of_regional_spelling(self) -> None:
        """Plural of the other regional spelling is caught."""
        assert check_forbidden("so many colours", ["color"]) == ["color"]

    def test_finds_past_tense_form(self) -> None:
        """A past tense ending does not hide a forbidden word."""
        assert check_forbidden("the cow jumped over", ["jump"]) == ["jump"]

    def test_finds_progressive_form(self) -> None:
        """An -ing ending does not hide a forbidden word."""
        assert check_forbidden("she is singing", ["sing"]) == ["sing"]

    def test_does_not_flag_substrings(self) -> None:
        """A forbidden word inside a longer word is not a violation."""
        assert not check_forbidden("concatenate the strings", ["cat"])

    def test_does_not_flag_near_misses(self) -> None:
        """Typo tolerance does not apply to clues."""
        assert not check_forbidden("it is big", ["it's"])

    def test_reports_in_forbidden_order_without_repeats(self) -> None:
        """Results follow the forbidden list and list each word once."""
        assert check_forbidden("wings and sky and wings", ["sky", "wings", "sky"]) == [
            "sky",
            "wings",
        ]


class TestLibraryLogging:
    """Test that library use stays quiet."""

    def test_evaluation_emits_no_records_by_default(self) -> None:
        """Evaluating a guess outside the command line tool logs nothing."""
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG")
        try:
            GuessEvaluator().evaluate("colour", "color")
        finally:
            logger.remove(handler_id)
        assert messages == []
