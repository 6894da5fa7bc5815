"""Scanning a target string through a built automaton."""

from collections.abc import Iterator
from dataclasses import dataclass

from commonstrip.automaton.trie import ROOT, Automaton


@dataclass(frozen=True)
class LongestMatch:
    """The single longest pattern found in a scan."""

    pattern: str
    target_offset: int  # Start of the occurrence in the scanned text
    origin_offset: int  # Offset recorded when the pattern was registered

    @property
    def length(self) -> int:
        """Length of the matched pattern."""
        return len(self.pattern)


def iter_matches(automaton: Automaton, text: str) -> Iterator[tuple[str, int, int]]:
    """Yield every pattern occurrence in text.

    Occurrences come in scan order (by end position) and, for one end
    position, in the order of the node's output list.

    Args:
        automaton: Automaton with failure links built
        text: Text to scan

    Yields:
        (pattern, start_offset_in_text, origin_offset) tuples
    """
    if not automaton.is_built:
        raise RuntimeError("Automaton not built. Call build_failure_links() first.")

    state = ROOT
    for i, ch in enumerate(text):
        state = automaton.step(state, ch)
        for pattern, origin in automaton.nodes[state].output:
            yield pattern, i - len(pattern) + 1, origin


def find_longest_match(automaton: Automaton, text: str) -> LongestMatch | None:
    """Find the longest registered pattern that occurs in text.

    Only a strictly longer occurrence replaces the current best, so the first
    occurrence to reach the maximum length wins.

    Args:
        automaton: Automaton with failure links built
        text: Text to scan

    Returns:
        The winning match, or None if no pattern occurs in text
    """
    best: LongestMatch | None = None
    best_length = 0

    for pattern, start, origin in iter_matches(automaton, text):
        if len(pattern) > best_length:
            best_length = len(pattern)
            best = LongestMatch(pattern, start, origin)

    return best
