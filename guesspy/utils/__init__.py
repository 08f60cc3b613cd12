"""Utility functions for GuessPy."""

from guesspy.utils.helpers import expand_file_path, format_time
from guesspy.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "add_log_file_handler",
    "expand_file_path",
    "format_time",
    "setup_logger",
]
