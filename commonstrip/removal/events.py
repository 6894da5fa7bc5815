"""Data models for removal events and run results."""

from enum import Enum

from pydantic import BaseModel, Field

from commonstrip.core.types import OffsetPolicy


class StopReason(Enum):
    """Why the removal loop stopped."""

    NO_MATCH = "no_match"
    NOT_IN_SOURCE = "not_in_source"
    ROUND_LIMIT = "round_limit"


class RemovalEvent(BaseModel):
    """One common substring removed from both strings."""

    round: int
    text: str
    target_offset: int  # Where it was removed from the target
    source_offset: int  # Where it was removed from the source
    origin_offset: int  # Offset recorded in the automaton for the match
    source_length: int  # Source length after removal
    target_length: int  # Target length after removal

    @property
    def length(self) -> int:
        """Number of characters removed from each string."""
        return len(self.text)


class RemovalResult(BaseModel):
    """Outcome of a complete removal run."""

    initial_source: str
    initial_target: str
    source: str  # Final source
    target: str  # Final target
    max_length: int
    offset_policy: OffsetPolicy
    stop_reason: StopReason
    events: list[RemovalEvent] = Field(default_factory=list)

    @property
    def rounds(self) -> int:
        """Number of rounds that removed something."""
        return len(self.events)

    @property
    def removed_characters(self) -> int:
        """Characters removed from each string over the whole run."""
        return sum(event.length for event in self.events)
