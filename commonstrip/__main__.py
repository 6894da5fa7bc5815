"""Main entry point for commonstrip."""

from loguru import logger

from commonstrip.cli import create_parser
from commonstrip.core import load_config
from commonstrip.removal import format_event, run_removal
from commonstrip.utils.constants import Constants
from commonstrip.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * Constants.BANNER_WIDTH)
        logger.info("commonstrip - Longest Common Substring Removal")
        logger.info("=" * Constants.BANNER_WIDTH)
        logger.info("")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Source: {config.source!r}")
        logger.info(f"  Target: {config.target!r}")
        logger.info(f"  Max pattern length: {config.max_length}")
        logger.info(f"  Offset policy: {config.offset_policy.value}")
        if config.max_rounds:
            logger.info(f"  Max rounds: {config.max_rounds}")
        if config.output:
            logger.info(f"  Report: {config.output} ({config.report_format})")
        logger.info("")


def _run_with_error_handling(config) -> None:
    """Run the removal loop and print each removal."""
    try:
        result = run_removal(config)
        for event in result.events:
            print(format_event(event))
        if config.verbose:
            logger.info("")
            logger.info("=" * Constants.BANNER_WIDTH)
            logger.info(f"✓ Finished ({result.stop_reason.value})")
            logger.info("=" * Constants.BANNER_WIDTH)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * Constants.BANNER_WIDTH)
            logger.error("✗ Processing failed")
            logger.error("=" * Constants.BANNER_WIDTH)
        raise


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _print_config_summary(config)

    _run_with_error_handling(config)


if __name__ == "__main__":
    main()
