"""
CLI entry point for grant-catalog.

Usage:
    python -m grant_catalog
    python -m grant_catalog --at 2025-01-14 --no-browser
    python -m grant_catalog --output-format json --json-logs
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

import structlog

from .browser import BrowserSession
from .catalog import GrantCatalog
from .config.loader import Settings, load_settings
from .core.clock import now_in_zone, parse_reference_time
from .report import build_report, grants_to_json

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def setup_logging(level: str = "INFO", json_output: bool = False):
    """Configure structured logging on stderr."""
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    if json_output:
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def parse_args(argv: Optional[list[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="List open grant opportunities with Japanese formatting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List grants open now (Asia/Tokyo)
  python -m grant_catalog

  # Evaluate deadlines at a fixed time, without launching a browser
  python -m grant_catalog --at 2025-01-14 --no-browser

  # JSON output for other tools
  python -m grant_catalog --output-format json

  # Use custom config file
  python -m grant_catalog --config /path/to/grant_catalog.yml
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML config file",
    )

    parser.add_argument(
        "--timezone",
        type=str,
        help="Zone used for the reference time (default: Asia/Tokyo)",
    )

    parser.add_argument(
        "--at",
        type=str,
        help="Reference time for deadline checks (default: now)",
    )

    parser.add_argument(
        "--output-format",
        choices=["text", "json"],
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't launch the headless browser",
    )

    parser.add_argument(
        "--headed",
        action="store_true",
        help="Launch the browser with a visible window",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs as JSON (for production)",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args) -> Settings:
    """Apply command line flags on top of loaded settings."""
    if args.timezone:
        settings.timezone = args.timezone
    if args.output_format:
        settings.output_format = args.output_format
    if args.no_browser:
        settings.launch_browser = False
    if args.headed:
        settings.headless = False
    if args.log_level:
        settings.log_level = args.log_level
    if args.json_logs:
        settings.json_logs = True
    settings.validate()
    return settings


async def main_async(settings: Settings, at: Optional[str] = None):
    """Async main function."""
    logger = structlog.get_logger(__name__)

    if at:
        reference_time = parse_reference_time(at, settings.timezone)
    else:
        reference_time = now_in_zone(settings.timezone)

    logger.info(
        "starting_grant_catalog",
        reference_time=reference_time.isoformat(),
        timezone=settings.timezone,
        browser=settings.launch_browser,
    )

    async with BrowserSession(
        headless=settings.headless,
        args=settings.browser_args,
        enabled=settings.launch_browser,
    ):
        catalog = GrantCatalog()
        grants = catalog.evaluate(reference_time)

        if settings.output_format == "json":
            print(grants_to_json(grants, reference_time))
        else:
            print(build_report(grants, reference_time))

    logger.info("listing_complete", grants=len(grants))
    return grants


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    args = parse_args(argv)

    # Version check
    if args.version:
        from . import __version__
        print(f"grant-catalog {__version__}")
        sys.exit(0)

    # Config loading logs too; route it to stderr before settings are known
    setup_logging(args.log_level or "INFO", args.json_logs)

    try:
        settings = apply_overrides(load_settings(args.config), args)
    except (FileNotFoundError, ValueError) as e:
        structlog.get_logger(__name__).error("invalid_configuration", error=str(e))
        sys.exit(1)

    setup_logging(settings.log_level, settings.json_logs)

    try:
        asyncio.run(main_async(settings, args.at))
        sys.exit(0)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger = structlog.get_logger(__name__)
        logger.exception("fatal_error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
