"""Logging helpers for the removal loop."""

from loguru import logger

from commonstrip.automaton import Automaton
from commonstrip.removal.events import RemovalEvent, StopReason


def format_event(event: RemovalEvent) -> str:
    """Describe a removal in one line."""
    return (
        f'Pattern "{event.text}" found at index {event.target_offset} in the second string, '
        f"and at index {event.origin_offset} in the first string."
    )


def log_round_start(round_number: int, source: str, target: str) -> None:
    """Log the strings a round starts from."""
    logger.debug(f"[Round {round_number}] source={source!r} target={target!r}")


def log_automaton_built(round_number: int, automaton: Automaton) -> None:
    """Log the size of a freshly built automaton."""
    logger.debug(
        f"[Round {round_number}] automaton: {automaton.pattern_count} patterns, "
        f"{len(automaton)} nodes"
    )


def log_removal(event: RemovalEvent) -> None:
    """Log a removal event."""
    logger.info(f"[Round {event.round}] {format_event(event)}")
    if event.source_offset != event.origin_offset:
        logger.debug(
            f"[Round {event.round}] removed from source at index {event.source_offset} "
            f"(recorded origin {event.origin_offset})"
        )
    logger.debug(
        f"[Round {event.round}] lengths now source={event.source_length} "
        f"target={event.target_length}"
    )


def log_stop(round_number: int, reason: StopReason, pattern: str | None = None) -> None:
    """Log why the loop stopped."""
    if reason == StopReason.NOT_IN_SOURCE:
        logger.warning(
            f"⚠️  Matched pattern {pattern!r} not found in source at round {round_number}; "
            "stopping"
        )
    elif reason == StopReason.ROUND_LIMIT:
        logger.info(f"  Round limit reached after {round_number - 1} removals")
    else:
        logger.debug(f"[Round {round_number}] no common substring left")
