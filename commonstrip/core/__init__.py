"""Core configuration and types for commonstrip."""

from .config import Config, load_config
from .types import MatchEntry, OffsetPolicy

__all__ = [
    "Config",
    "MatchEntry",
    "OffsetPolicy",
    "load_config",
]
