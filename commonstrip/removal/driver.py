"""Iterative removal of the longest common substring from two strings."""

from collections.abc import Iterator

from commonstrip.automaton import (
    LongestMatch,
    build_automaton,
    enumerate_substrings,
    find_longest_match,
)
from commonstrip.core.types import OffsetPolicy
from commonstrip.removal.events import RemovalEvent, RemovalResult, StopReason
from commonstrip.removal.removal_logging import (
    log_automaton_built,
    log_removal,
    log_round_start,
    log_stop,
)
from commonstrip.utils.helpers import remove_span


class RemovalDriver:
    """Repeatedly removes the longest shared substring from source and target.

    Every round indexes the substrings of the current source in a fresh
    automaton, scans the target for the longest of them, and removes one
    occurrence from each string. The loop ends at the first round that finds
    nothing, or when max_rounds removals have been made.

    Attributes:
        source: Current source string (the pattern basis)
        target: Current target string (the scanned text)
        max_length: Longest substring length indexed per round
        offset_policy: How the removal offset in source is chosen
        max_rounds: Optional cap on the number of removals
        stop_reason: Set once iteration has finished
    """

    def __init__(
        self,
        source: str,
        target: str,
        max_length: int,
        offset_policy: OffsetPolicy = OffsetPolicy.LITERAL,
        max_rounds: int | None = None,
    ) -> None:
        if max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {max_length}")
        if max_rounds is not None and max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {max_rounds}")

        self.initial_source = source
        self.initial_target = target
        self.source = source
        self.target = target
        self.max_length = max_length
        self.offset_policy = OffsetPolicy(offset_policy)
        self.max_rounds = max_rounds
        self.stop_reason: StopReason | None = None
        self._round = 0

    def find_match(self) -> LongestMatch | None:
        """Build this round's automaton and scan the target with it."""
        automaton = build_automaton(enumerate_substrings(self.source, self.max_length))
        log_automaton_built(self._round, automaton)
        return find_longest_match(automaton, self.target)

    def locate_in_source(self, match: LongestMatch) -> int:
        """Offset in source to remove the match from, or -1 if absent."""
        if self.offset_policy == OffsetPolicy.ORIGIN:
            end = match.origin_offset + match.length
            if self.source[match.origin_offset : end] == match.pattern:
                return match.origin_offset
            return -1
        return self.source.find(match.pattern)

    def iter_removals(self) -> Iterator[RemovalEvent]:
        """Run rounds until none removes anything, yielding each removal.

        stop_reason is set when the generator is exhausted.
        """
        self.stop_reason = None
        self._round = 1

        while True:
            log_round_start(self._round, self.source, self.target)
            match = self.find_match()
            if match is None:
                self._stop(StopReason.NO_MATCH)
                return

            # A pending match past the cap is left in place
            if self.max_rounds is not None and self._round > self.max_rounds:
                self._stop(StopReason.ROUND_LIMIT)
                return

            source_offset = self.locate_in_source(match)
            if source_offset < 0:
                self._stop(StopReason.NOT_IN_SOURCE, match.pattern)
                return

            self.target = remove_span(self.target, match.target_offset, match.length)
            self.source = remove_span(self.source, source_offset, match.length)

            event = RemovalEvent(
                round=self._round,
                text=match.pattern,
                target_offset=match.target_offset,
                source_offset=source_offset,
                origin_offset=match.origin_offset,
                source_length=len(self.source),
                target_length=len(self.target),
            )
            log_removal(event)
            yield event
            self._round += 1

    def run(self) -> RemovalResult:
        """Run the loop to completion and collect the result."""
        return self.build_result(list(self.iter_removals()))

    def build_result(self, events: list[RemovalEvent]) -> RemovalResult:
        """Collect the current state and events into a RemovalResult."""
        return RemovalResult(
            initial_source=self.initial_source,
            initial_target=self.initial_target,
            source=self.source,
            target=self.target,
            max_length=self.max_length,
            offset_policy=self.offset_policy,
            stop_reason=self.stop_reason,
            events=events,
        )

    def _stop(self, reason: StopReason, pattern: str | None = None) -> None:
        self.stop_reason = reason
        log_stop(self._round, reason, pattern)


def remove_common_substrings(
    source: str,
    target: str,
    max_length: int,
    offset_policy: OffsetPolicy = OffsetPolicy.LITERAL,
    max_rounds: int | None = None,
) -> RemovalResult:
    """Remove longest common substrings from source and target until none remain.

    Args:
        source: String whose substrings are indexed each round
        target: String scanned for those substrings
        max_length: Longest substring length considered
        offset_policy: How the removal offset in source is chosen
        max_rounds: Optional cap on the number of removals

    Returns:
        RemovalResult with the events and the final strings
    """
    driver = RemovalDriver(source, target, max_length, offset_policy, max_rounds)
    return driver.run()
