"""Main entry point for the guesspy package."""

import sys

from loguru import logger

from guesspy.cli import create_parser
from guesspy.core import Config, GuessEvaluator, load_config
from guesspy.data import load_audit_words, load_match_cases, load_variant_groups
from guesspy.processing import run_audit, run_cases, write_audit_report
from guesspy.utils import add_log_file_handler, format_time, setup_logger


def _evaluate_pair(evaluator: GuessEvaluator, guess: str, target: str) -> int:
    decision = evaluator.evaluate(guess, target)
    if decision.matched:
        print(f"MATCH ({decision.stage.value}): '{guess}' -> '{target}'")
        return 0
    print(f"NO MATCH: '{guess}' -> '{target}'")
    return 1


def _run_case_file(evaluator: GuessEvaluator, config: Config) -> int:
    cases = load_match_cases(config.cases)
    result = run_cases(cases, evaluator, verbose=config.verbose)

    logger.info("")
    logger.info("===== CASE RESULTS =====")
    logger.info(f"✓ Passed: {result.passed}/{result.total}")
    logger.info(f"✗ Failed: {result.failed}/{result.total}")
    logger.info(f"  Success rate: {result.success_rate:.1f}%")
    logger.info(f"  Time: {format_time(result.elapsed_time)}")
    print(f"{result.passed}/{result.total} cases passed")
    return 0 if not result.failures else 1


def _run_audit(config: Config, extra_groups: list[tuple[str, ...]]) -> int:
    words = load_audit_words(config.top_n, config.min_word_length, verbose=config.verbose)
    result = run_audit(words, config, extra_groups)
    write_audit_report(result, config.output)

    if config.verbose:
        logger.info(
            f"  {result.accepted_count} of {result.pairs_checked} pairs accepted "
            f"in {format_time(result.elapsed_time)}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logger.enable("guesspy")
    try:
        return _run(argv)
    finally:
        logger.disable("guesspy")


def _run(argv: list[str] | None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    pair_given = args.guess is not None and args.target is not None
    if args.guess is not None and args.target is None:
        parser.error("A guess needs a target to compare against")
    if not (pair_given or config.cases or config.audit):
        parser.error("Must give GUESS TARGET, --cases or --audit")

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Chars per edit: {config.chars_per_edit}")
        logger.info(f"  Minimum edits: {config.min_edits}")
        logger.info(f"  Transpositions: {config.allow_transpositions}")
        logger.info(f"  Phonetic: {', '.join(config.phonetic)}")
        if config.variants:
            logger.info(f"  Variant file: {config.variants}")
        logger.info("")

    try:
        extra_groups = load_variant_groups(config.variants, verbose=config.verbose)
        evaluator = GuessEvaluator.from_policy(config.match_policy(), extra_groups)

        exit_code = 0
        if pair_given:
            exit_code = max(exit_code, _evaluate_pair(evaluator, args.guess, args.target))
        if config.cases:
            exit_code = max(exit_code, _run_case_file(evaluator, config))
        if config.audit:
            exit_code = max(exit_code, _run_audit(config, extra_groups))
        return exit_code
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        raise


if __name__ == "__main__":
    sys.exit(main())
