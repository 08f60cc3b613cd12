"""Command-line interface for the GuessPy project."""

import argparse
from multiprocessing import cpu_count


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="guesspy",
        description="Decide whether a guess counts as the target word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate a single guess (exit code 0 on match, 1 otherwise)
  %(prog)s "air plane" airplane

  # Run a catalogue of expected outcomes
  %(prog)s --cases tests/data/match_cases.yml -v

  # Look for false positives among the 2000 most common English words
  %(prog)s --audit --top-n 2000 -o reports/audit.yml -v

  # Stricter typo tolerance plus Soundex as a second phonetic key
  %(prog)s --chars-per-edit 5 --phonetic metaphone --phonetic soundex colr color

Variant file format (one group per line, comma separated):
  kerb, curb
  ice cream, icecream

Case file format (YAML list):
  - guess: AIRPLANE
    target: airplane
    expected: true

Example config.json:
{
  "chars_per_edit": 4,
  "min_edits": 1,
  "phonetic": ["metaphone"],
  "variants": "settings/variants.txt",
  "top_n": 1000,
  "verbose": true
}
        """,
    )

    parser.add_argument("guess", nargs="?", help="Guess to evaluate")
    parser.add_argument("target", nargs="?", help="Target word to evaluate against")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument("--variants", type=str, help="File with extra variant groups")

    # Runs
    parser.add_argument("--cases", type=str, help="YAML file of expected match outcomes")
    parser.add_argument(
        "--audit",
        action="store_true",
        help="Report pairs of common words the matcher would accept",
    )
    parser.add_argument(
        "--top-n", type=int, help="Number of common words to audit", default=1000
    )
    parser.add_argument(
        "--min-word-length", type=int, help="Shortest word included in an audit", default=3
    )
    parser.add_argument(
        "-o", "--output", type=str, help="Audit report path (YAML, default: stdout)"
    )

    # Matching policy
    parser.add_argument(
        "--chars-per-edit",
        type=int,
        help="Word length that earns one allowed edit",
        default=4,
    )
    parser.add_argument(
        "--min-edits",
        type=int,
        help="Edits always tolerated for non-empty words",
        default=1,
    )
    parser.add_argument(
        "--no-transpositions",
        action="store_true",
        help="Count adjacent swaps as two edits instead of one",
    )
    parser.add_argument(
        "--phonetic",
        action="append",
        choices=["metaphone", "soundex"],
        help="Phonetic encoder to compare (repeatable, default: metaphone)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log output to this file")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel audit workers (default: {cpu_count()})",
    )

    return parser
