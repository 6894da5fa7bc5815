"""Utility functions for commonstrip."""

from commonstrip.utils.constants import Constants
from commonstrip.utils.helpers import expand_file_path, remove_span
from commonstrip.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "remove_span",
    "setup_logger",
]
