"""Unit tests for running case catalogues."""

from guesspy.core import GuessEvaluator, MatchStage
from guesspy.data import MatchCase
from guesspy.processing import run_cases

CASES = [
    MatchCase(guess="colour", target="color", expected=True),
    MatchCase(guess="cat", target="dog", expected=False),
    MatchCase(guess="house", target="home", expected=True, note="different words"),
]


class TestRunCases:
    """Test run_cases behavior."""

    def test_counts_all_cases(self) -> None:
        """Every case is counted."""
        assert run_cases(CASES, GuessEvaluator()).total == 3

    def test_counts_passing_cases(self) -> None:
        """Cases whose decision agrees with the expectation pass."""
        assert run_cases(CASES, GuessEvaluator()).passed == 2

    def test_records_failing_case(self) -> None:
        """A disagreeing case is kept with its decision."""
        failure = run_cases(CASES, GuessEvaluator()).failures[0]
        assert failure.case.guess == "house"

    def test_failure_carries_decision(self) -> None:
        """The stored decision shows the pipeline rejected the guess."""
        failure = run_cases(CASES, GuessEvaluator()).failures[0]
        assert failure.decision.stage is None

    def test_success_rate(self) -> None:
        """Success rate is a percentage of passing cases."""
        result = run_cases(CASES[:2], GuessEvaluator(), verbose=True)
        assert result.success_rate == 100.0

    def test_empty_catalogue_has_full_success(self) -> None:
        """No cases means nothing failed."""
        assert run_cases([], GuessEvaluator()).success_rate == 100.0

    def test_variant_case_passes_by_variant_stage(self) -> None:
        """The evaluator decides regional spellings in the variant stage."""
        assert GuessEvaluator().evaluate(CASES[0].guess, CASES[0].target).stage is MatchStage.VARIANT
