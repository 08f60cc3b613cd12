"""Worker context for multiprocessing without global state."""

from dataclasses import dataclass
import threading

from guesspy.core import Config, GuessEvaluator, MatchPolicy


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for audit workers.

    Workers rebuild their own evaluator from this context, so only plain,
    picklable data crosses the process boundary.

    Attributes:
        words: Audit words, in the order pairs are generated
        policy: Matching policy to evaluate pairs with
        extra_groups: Variant groups loaded on top of the built-in ones
    """

    words: tuple[str, ...]
    policy: MatchPolicy
    extra_groups: tuple[tuple[str, ...], ...]

    @classmethod
    def from_config(
        cls, words: list[str], config: Config, extra_groups: list[tuple[str, ...]]
    ) -> "WorkerContext":
        """Create WorkerContext from the audit words and config."""
        return cls(
            words=tuple(words),
            policy=config.match_policy(),
            extra_groups=tuple(extra_groups),
        )

    def build_evaluator(self) -> GuessEvaluator:
        """Build an evaluator for this context."""
        return GuessEvaluator.from_policy(self.policy, self.extra_groups)


# Thread-local storage for worker state
_worker_state = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context and its evaluator.

    Args:
        context: WorkerContext to store in thread-local storage
    """
    _worker_state.context = context
    _worker_state.evaluator = context.build_evaluator()


def get_worker_state() -> tuple[WorkerContext, GuessEvaluator]:
    """Get the current worker's context and evaluator.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_state.context, _worker_state.evaluator
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
