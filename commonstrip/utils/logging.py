"""Logger setup for commonstrip."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the global loguru logger.

    Removes the default handler and installs a single stderr sink whose level
    depends on the flags: DEBUG when debug is set, INFO when verbose is set,
    WARNING otherwise.

    Args:
        verbose: Show informational progress messages
        debug: Show per-round automaton details
    """
    logger.remove()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.add(sys.stderr, level=level, format="{message}", colorize=False)
