"""Command-line interface for GuessPy."""

from guesspy.cli.parser import create_parser

__all__ = ["create_parser"]
