"""Unit tests for the round-by-round removal loop."""

import pytest

from commonstrip.automaton import LongestMatch
from commonstrip.core import OffsetPolicy
from commonstrip.removal import (
    RemovalDriver,
    RemovalEvent,
    StopReason,
    remove_common_substrings,
)


def _common_substrings(source: str, target: str, max_length: int) -> set[str]:
    """Brute force: substrings of source up to max_length that occur in target."""
    return {
        source[start : start + length]
        for length in range(1, max_length + 1)
        for start in range(len(source) - length + 1)
        if source[start : start + length] in target
    }


class TestScenarios:
    """End-to-end removal scenarios."""

    def test_reversed_letters_removed_one_at_a_time(self) -> None:
        """XYZ / ZYXW removes Z, then Y, then X."""
        result = remove_common_substrings("XYZ", "ZYXW", 3)
        assert result.events == [
            RemovalEvent(
                round=1,
                text="Z",
                target_offset=0,
                source_offset=2,
                origin_offset=2,
                source_length=2,
                target_length=3,
            ),
            RemovalEvent(
                round=2,
                text="Y",
                target_offset=0,
                source_offset=1,
                origin_offset=1,
                source_length=1,
                target_length=2,
            ),
            RemovalEvent(
                round=3,
                text="X",
                target_offset=0,
                source_offset=0,
                origin_offset=0,
                source_length=0,
                target_length=1,
            ),
        ]

    def test_reversed_letters_final_state(self) -> None:
        """XYZ / ZYXW ends with an empty source and 'W'."""
        result = remove_common_substrings("XYZ", "ZYXW", 3)
        assert (result.source, result.target, result.stop_reason) == (
            "",
            "W",
            StopReason.NO_MATCH,
        )

    def test_empty_source_has_no_events(self) -> None:
        """An empty source stops immediately."""
        result = remove_common_substrings("", "ANY", 5)
        assert (result.rounds, result.stop_reason) == (0, StopReason.NO_MATCH)

    def test_empty_target_has_no_events(self) -> None:
        """An empty target stops immediately."""
        result = remove_common_substrings("ANY", "", 5)
        assert result.rounds == 0

    def test_repeated_characters_single_removal(self) -> None:
        """AAAA / AA removes 'AA' once and empties the target."""
        result = remove_common_substrings("AAAA", "AA", 4)
        assert [(e.text, e.target_offset, e.source_offset) for e in result.events] == [
            ("AA", 0, 0)
        ]
        assert (result.source, result.target) == ("AA", "")

    def test_sample_strings(self) -> None:
        """The sample pair removes CGTACG and then T."""
        result = remove_common_substrings("ATCGTACGTA", "CGTACGTGCG", 6)
        assert [(e.text, e.target_offset, e.origin_offset) for e in result.events] == [
            ("CGTACG", 0, 2),
            ("T", 0, 1),
        ]
        assert (result.source, result.target) == ("ATA", "GCG")


class TestProperties:
    """Invariants that hold for any input."""

    CASES = [
        ("ATCGTACGTA", "CGTACGTGCG", 6),
        ("banana", "ananas", 3),
        ("abcabcabc", "cabcab", 4),
        ("mississippi", "missouri", 2),
        ("AAAA", "AAAAAAA", 10),
        ("XYZ", "ZYXW", 1),
    ]

    @pytest.mark.parametrize("source,target,max_length", CASES)
    def test_lengths_shrink_by_match_length(self, source, target, max_length) -> None:
        """Each removal shortens both strings by exactly the match length."""
        source_length, target_length = len(source), len(target)
        for event in RemovalDriver(source, target, max_length).iter_removals():
            source_length -= event.length
            target_length -= event.length
            assert (event.source_length, event.target_length) == (
                source_length,
                target_length,
            )

    @pytest.mark.parametrize("source,target,max_length", CASES)
    def test_no_common_substring_left(self, source, target, max_length) -> None:
        """After the loop ends, source and target share no character."""
        result = remove_common_substrings(source, target, max_length)
        assert not _common_substrings(result.source, result.target, max_length)

    @pytest.mark.parametrize("source,target,max_length", CASES)
    def test_each_match_is_longest(self, source, target, max_length) -> None:
        """No common substring is longer than the one removed in a round."""
        driver = RemovalDriver(source, target, max_length)
        before = (driver.source, driver.target)
        for event in driver.iter_removals():
            common = _common_substrings(before[0], before[1], max_length)
            assert event.length == max(len(s) for s in common)
            before = (driver.source, driver.target)

    @pytest.mark.parametrize("source,target,max_length", CASES)
    def test_removed_text_matches_positions(self, source, target, max_length) -> None:
        """The removed spans of both strings hold the matched text."""
        driver = RemovalDriver(source, target, max_length)
        before = (driver.source, driver.target)
        for event in driver.iter_removals():
            end = event.length
            assert before[0][event.source_offset : event.source_offset + end] == event.text
            assert before[1][event.target_offset : event.target_offset + end] == event.text
            before = (driver.source, driver.target)

    @pytest.mark.parametrize("source,target,max_length", CASES)
    def test_runs_are_deterministic(self, source, target, max_length) -> None:
        """Identical inputs give identical events."""
        first = remove_common_substrings(source, target, max_length)
        second = remove_common_substrings(source, target, max_length)
        assert first.events == second.events


class TestOffsetPolicy:
    """Test how the removal offset in source is chosen."""

    def test_literal_policy_uses_first_occurrence(self) -> None:
        """LITERAL removes from the first occurrence, whatever the origin."""
        driver = RemovalDriver("ABXAB", "AB", 2)
        assert driver.locate_in_source(LongestMatch("AB", 0, 3)) == 0

    def test_origin_policy_uses_recorded_offset(self) -> None:
        """ORIGIN removes from the offset the match was indexed at."""
        driver = RemovalDriver("ABXAB", "AB", 2, offset_policy=OffsetPolicy.ORIGIN)
        assert driver.locate_in_source(LongestMatch("AB", 0, 3)) == 3

    def test_origin_policy_rejects_stale_offset(self) -> None:
        """ORIGIN reports an offset that no longer holds the text as absent."""
        driver = RemovalDriver("ABXAB", "AB", 2, offset_policy=OffsetPolicy.ORIGIN)
        assert driver.locate_in_source(LongestMatch("AB", 0, 1)) == -1

    def test_policies_agree_on_repeated_text(self) -> None:
        """Both policies remove the same span for a repeated substring."""
        literal = remove_common_substrings("ABXAB", "QAB", 2)
        origin = remove_common_substrings("ABXAB", "QAB", 2, offset_policy="origin")
        assert literal.events == origin.events

    def test_repeated_text_reports_both_offsets(self) -> None:
        """Events record the removal offset and the recorded origin."""
        result = remove_common_substrings("ABXAB", "QAB", 2)
        event = result.events[0]
        assert (event.source_offset, event.origin_offset) == (0, 0)


class TestStopping:
    """Test the ways the loop ends."""

    def test_round_limit_stops_early(self) -> None:
        """max_rounds caps the number of removals."""
        result = remove_common_substrings("XYZ", "ZYXW", 3, max_rounds=2)
        assert (result.rounds, result.stop_reason, result.source, result.target) == (
            2,
            StopReason.ROUND_LIMIT,
            "X",
            "XW",
        )

    def test_round_limit_equal_to_removals_reports_no_match(self) -> None:
        """A cap reached exactly when nothing is left still ends with NO_MATCH."""
        result = remove_common_substrings("XYZ", "ZYXW", 3, max_rounds=3)
        assert (result.rounds, result.stop_reason, result.source, result.target) == (
            3,
            StopReason.NO_MATCH,
            "",
            "W",
        )

    def test_match_missing_from_source_stops(self, monkeypatch) -> None:
        """A match whose text is not in source ends the loop without changes."""
        driver = RemovalDriver("ABC", "QQ", 2)
        monkeypatch.setattr(driver, "find_match", lambda: LongestMatch("QQ", 0, 0))
        result = driver.run()
        assert (result.rounds, result.stop_reason, result.source, result.target) == (
            0,
            StopReason.NOT_IN_SOURCE,
            "ABC",
            "QQ",
        )

    def test_stop_reason_unset_before_iteration(self) -> None:
        """stop_reason is only known once iteration ends."""
        driver = RemovalDriver("ab", "ab", 2)
        assert driver.stop_reason is None

    def test_removed_characters_total(self) -> None:
        """removed_characters sums the lengths of all removals."""
        result = remove_common_substrings("XYZ", "ZYXW", 3)
        assert result.removed_characters == 3


class TestValidation:
    """Test argument validation."""

    def test_rejects_zero_max_length(self) -> None:
        """max_length must be positive."""
        with pytest.raises(ValueError):
            RemovalDriver("a", "a", 0)

    def test_rejects_zero_max_rounds(self) -> None:
        """max_rounds must be positive when given."""
        with pytest.raises(ValueError):
            RemovalDriver("a", "a", 1, max_rounds=0)

    def test_rejects_unknown_offset_policy(self) -> None:
        """Only known offset policies are accepted."""
        with pytest.raises(ValueError):
            RemovalDriver("a", "a", 1, offset_policy="middle")
