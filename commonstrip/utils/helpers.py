"""Shared utility functions for commonstrip."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def remove_span(text: str, start: int, length: int) -> str:
    """Return text with length characters removed starting at start."""
    return text[:start] + text[start + length :]
