"""Run a catalogue of expected match outcomes."""

import time

from loguru import logger
from pydantic import BaseModel, Field

from guesspy.core import GuessEvaluator, MatchDecision
from guesspy.data import MatchCase


class CaseFailure(BaseModel):
    """A case whose decision disagreed with its expectation."""

    case: MatchCase
    decision: MatchDecision


class CaseRunResult(BaseModel):
    """Outcome of running a case catalogue."""

    total: int = 0
    passed: int = 0
    failures: list[CaseFailure] = Field(default_factory=list)
    elapsed_time: float = Field(0.0, ge=0)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def success_rate(self) -> float:
        return self.passed / self.total * 100 if self.total else 100.0


def run_cases(
    cases: list[MatchCase], evaluator: GuessEvaluator, verbose: bool = False
) -> CaseRunResult:
    """Evaluate every case and collect the ones that disagree.

    Args:
        cases: Cases to evaluate
        evaluator: Evaluator under test
        verbose: Log each passing case as well as failures

    Returns:
        CaseRunResult with counts and failures
    """
    start_time = time.time()
    result = CaseRunResult(total=len(cases))

    for index, case in enumerate(cases, start=1):
        decision = evaluator.evaluate(case.guess, case.target)
        if decision.matched == case.expected:
            result.passed += 1
            if verbose:
                stage = decision.stage.value if decision.stage else "none"
                logger.info(f"✓ Case {index}: '{case.guess}' vs '{case.target}' ({stage})")
            continue

        result.failures.append(CaseFailure(case=case, decision=decision))
        expectation = "SHOULD" if case.expected else "SHOULD NOT"
        logger.warning(f"✗ Case {index}: '{case.guess}' {expectation} match '{case.target}'")
        if decision.stage is not None:
            logger.warning(f"  Accepted by {decision.stage.value} stage")
        if case.note:
            logger.warning(f"  Note: {case.note}")

    result.elapsed_time = time.time() - start_time
    return result
