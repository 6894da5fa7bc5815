"""Run a configured removal and report on it."""

import time

from loguru import logger
from tqdm import tqdm

from commonstrip.core import Config
from commonstrip.removal.driver import RemovalDriver
from commonstrip.removal.events import RemovalResult
from commonstrip.reports import write_report


def _estimate_max_rounds(config: Config) -> int:
    """Upper bound on removals: each one shortens both strings by at least 1."""
    bound = min(len(config.source), len(config.target))
    if config.max_rounds is not None:
        bound = min(bound, config.max_rounds)
    return bound


def run_removal(config: Config) -> RemovalResult:
    """Run the removal loop described by config.

    Shows a progress bar over rounds in verbose mode and writes a report when
    config.output is set.

    Args:
        config: Configuration object

    Returns:
        RemovalResult of the run
    """
    start_time = time.time()

    driver = RemovalDriver(
        config.source,
        config.target,
        config.max_length,
        offset_policy=config.offset_policy,
        max_rounds=config.max_rounds,
    )

    events_iter = driver.iter_removals()
    if config.verbose:
        logger.info(f"  Source: {len(config.source)} chars, target: {len(config.target)} chars")
        events_iter = tqdm(
            events_iter,
            total=_estimate_max_rounds(config),
            desc="  Removing common substrings",
            unit="round",
            leave=False,
        )

    events = list(events_iter)
    result = driver.build_result(events)

    if config.verbose:
        elapsed = time.time() - start_time
        logger.info(
            f"  {result.rounds} removals, {result.removed_characters} characters "
            f"from each string ({elapsed:.2f}s)"
        )
        logger.info(f"  Final source: {result.source!r}")
        logger.info(f"  Final target: {result.target!r}")

    if config.output:
        write_report(result, config.output, config.report_format)
        if config.verbose:
            logger.info(f"  Report written to {config.output}")

    return result
