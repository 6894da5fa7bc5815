"""Constants used throughout the commonstrip codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Defaults for the removal loop
    DEFAULT_MAX_LENGTH = 6
    """Default maximum pattern length indexed per round."""

    DEFAULT_SOURCE = "ATCGTACGTA"
    """Sample source string used when none is supplied."""

    DEFAULT_TARGET = "CGTACGTGCG"
    """Sample target string used when none is supplied."""

    # Automaton layout
    ROOT_INDEX = 0
    """Arena index of the automaton root node."""

    # Reporting
    BANNER_WIDTH = 60
    """Width of the separator lines in verbose console output."""

    REPORT_FORMATS = ("yaml", "text")
    """Report formats accepted by the report writer."""
