"""Integration tests for the bundled match case catalogue."""

from pathlib import Path

from guesspy.__main__ import main
from guesspy.core import GuessEvaluator
from guesspy.data import load_match_cases
from guesspy.processing import run_cases

CASE_FILE = Path(__file__).parent.parent / "data" / "match_cases.yml"


class TestCaseCatalogue:
    """Run the shipped catalogue through the full pipeline."""

    def test_catalogue_loads(self) -> None:
        """The catalogue file parses into cases."""
        assert len(load_match_cases(str(CASE_FILE))) > 0

    def test_every_case_passes(self) -> None:
        """The default evaluator agrees with every catalogued outcome."""
        result = run_cases(load_match_cases(str(CASE_FILE)), GuessEvaluator())
        assert [f.case for f in result.failures] == []

    def test_cli_reports_success(self, capsys) -> None:
        """The case runner exits cleanly when all cases pass."""
        assert main(["--cases", str(CASE_FILE)]) == 0

    def test_cli_reports_failure(self, tmp_path) -> None:
        """A failing case gives a non-zero exit code."""
        case_file = tmp_path / "cases.yml"
        case_file.write_text("- {guess: cat, target: dog, expected: true}\n")
        assert main(["--cases", str(case_file)]) == 1
