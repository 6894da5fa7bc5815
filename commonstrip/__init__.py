"""commonstrip - Longest common substring removal.

Repeatedly find the longest substring two strings share, using an
Aho-Corasick automaton over one of them, and remove it from both.
"""

from .automaton import build_automaton, enumerate_substrings, find_longest_match
from .core import Config, OffsetPolicy, load_config
from .removal import (
    RemovalDriver,
    RemovalEvent,
    RemovalResult,
    StopReason,
    remove_common_substrings,
    run_removal,
)

__version__ = "0.1.0"
__all__ = [
    "Config",
    "OffsetPolicy",
    "RemovalDriver",
    "RemovalEvent",
    "RemovalResult",
    "StopReason",
    "build_automaton",
    "enumerate_substrings",
    "find_longest_match",
    "load_config",
    "remove_common_substrings",
    "run_removal",
]
