"""False-positive audit over common English words.

Every pair of distinct common words is a pair the game should reject, so any
pair accepted by a fuzzy stage shows where the policy is too permissive.
"""

from multiprocessing import Pool
from pathlib import Path
import sys
import time
from typing import Any, TextIO

from loguru import logger
from pydantic import BaseModel, Field
from tqdm import tqdm
import yaml

from guesspy.core import Config, GuessEvaluator, MatchStage
from guesspy.processing.worker_context import WorkerContext, get_worker_state, init_worker

AcceptedPair = tuple[str, str, str]


class AuditResult(BaseModel):
    """Outcome of a false-positive audit."""

    words_checked: int = 0
    pairs_checked: int = 0
    accepted: dict[str, list[tuple[str, str]]] = Field(default_factory=dict)
    elapsed_time: float = Field(0.0, ge=0)

    @property
    def accepted_count(self) -> int:
        return sum(len(pairs) for pairs in self.accepted.values())


def _accepted_pairs_for(
    index: int, words: tuple[str, ...], evaluator: GuessEvaluator
) -> list[AcceptedPair]:
    """Evaluate word ``index`` against every later word."""
    first = words[index]
    accepted = []
    for second in words[index + 1 :]:
        decision = evaluator.evaluate(first, second)
        # Exact hits are spellings that normalize alike, not policy leaks
        if decision.matched and decision.stage is not MatchStage.EXACT:
            accepted.append((first, second, decision.stage.value))
    return accepted


def audit_worker(index: int) -> list[AcceptedPair]:
    """Worker entry point: audit one word against all later words."""
    context, evaluator = get_worker_state()
    return _accepted_pairs_for(index, context.words, evaluator)


def _audit_multiprocessing(context: WorkerContext, jobs: int, verbose: bool) -> list[AcceptedPair]:
    if verbose:
        logger.info(f"  Using {jobs} parallel workers")

    accepted: list[AcceptedPair] = []
    with Pool(processes=jobs, initializer=init_worker, initargs=(context,)) as pool:
        results = pool.imap_unordered(audit_worker, range(len(context.words)), chunksize=16)
        if verbose:
            results_iter: Any = tqdm(
                results, total=len(context.words), desc="Auditing words", unit="word"
            )
        else:
            results_iter = results
        for pairs in results_iter:
            accepted.extend(pairs)
    return accepted


def _audit_single_threaded(context: WorkerContext, verbose: bool) -> list[AcceptedPair]:
    evaluator = context.build_evaluator()
    indexes: Any = range(len(context.words))
    if verbose:
        indexes = tqdm(indexes, desc="Auditing words", unit="word")

    accepted: list[AcceptedPair] = []
    for index in indexes:
        accepted.extend(_accepted_pairs_for(index, context.words, evaluator))
    return accepted


def run_audit(
    words: list[str],
    config: Config,
    extra_groups: list[tuple[str, ...]] | None = None,
) -> AuditResult:
    """Evaluate every pair of distinct words and collect the accepted ones.

    Args:
        words: Distinct words; each pair of them should be rejected
        config: Configuration with matching policy and worker count
        extra_groups: Variant groups to add to the built-in ones

    Returns:
        AuditResult with accepted pairs grouped by stage
    """
    start_time = time.time()
    context = WorkerContext.from_config(words, config, extra_groups or [])

    if config.jobs > 1 and len(words) > 1:
        accepted = _audit_multiprocessing(context, config.jobs, config.verbose)
    else:
        accepted = _audit_single_threaded(context, config.verbose)

    by_stage: dict[str, list[tuple[str, str]]] = {}
    for first, second, stage in sorted(accepted):
        by_stage.setdefault(stage, []).append((first, second))

    return AuditResult(
        words_checked=len(words),
        pairs_checked=len(words) * (len(words) - 1) // 2,
        accepted=dict(sorted(by_stage.items())),
        elapsed_time=time.time() - start_time,
    )


def write_audit_report(result: AuditResult, output: str | Path | None) -> None:
    """Write the audit result as YAML to a file, or stdout when no path is given."""
    report = {
        "summary": {
            "words": result.words_checked,
            "pairs": result.pairs_checked,
            "accepted": result.accepted_count,
            "by_stage": {stage: len(pairs) for stage, pairs in result.accepted.items()},
        },
        "accepted": {
            stage: [list(pair) for pair in pairs] for stage, pairs in result.accepted.items()
        },
    }

    if output is None:
        _dump_yaml(report, sys.stdout)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            _dump_yaml(report, f)
    except OSError as e:
        logger.error(f"✗ Could not write audit report {output_path}: {e}")
        raise


def _dump_yaml(report: dict, stream: TextIO) -> None:
    try:
        yaml.safe_dump(
            report,
            stream,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    except yaml.YAMLError as e:
        logger.error(f"✗ YAML serialization error in audit report: {e}")
        raise
