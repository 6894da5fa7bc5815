"""Enumeration of the substrings indexed by each round's automaton."""

from collections.abc import Iterator

from commonstrip.core.types import MatchEntry


def enumerate_substrings(text: str, max_length: int) -> Iterator[MatchEntry]:
    """Yield every substring of text up to max_length, longest first.

    Within one length, substrings are yielded left to right. This is the order
    patterns are registered in the automaton, so it decides which of several
    equal-length matches wins.

    e.g., ('abc', 2) -> ('ab', 0), ('bc', 1), ('a', 0), ('b', 1), ('c', 2)

    Args:
        text: String to enumerate
        max_length: Longest substring length to produce

    Yields:
        (substring, start_offset) pairs
    """
    text_length = len(text)
    for length in range(min(max_length, text_length), 0, -1):
        for start in range(text_length - length + 1):
            yield text[start : start + length], start
