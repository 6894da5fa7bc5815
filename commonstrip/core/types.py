"""Type definitions for commonstrip."""

from enum import Enum

# Type alias for automaton output entries: (pattern_text, origin_offset_in_source)
MatchEntry = tuple[str, int]


class OffsetPolicy(str, Enum):
    """Where a matched pattern is removed from the source string."""

    LITERAL = "literal"  # First literal occurrence of the text in source
    ORIGIN = "origin"  # Offset recorded when the pattern was registered
