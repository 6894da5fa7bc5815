"""Iterative longest-common-substring removal."""

from .driver import RemovalDriver, remove_common_substrings
from .events import RemovalEvent, RemovalResult, StopReason
from .pipeline import run_removal
from .removal_logging import format_event

__all__ = [
    "RemovalDriver",
    "RemovalEvent",
    "RemovalResult",
    "StopReason",
    "format_event",
    "remove_common_substrings",
    "run_removal",
]
