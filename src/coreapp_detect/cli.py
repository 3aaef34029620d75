"""Command-line interface for .NET Core project detection."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from ._internal.logging import configure_logging
from ._internal.settings import get_settings
from .detector import DotNetCoreDetector
from .errors import DetectionError
from .output import format_json, format_result
from .types import PortExtraction, SelectionPolicy

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="coreapp-detect",
        description="Detect a .NET Core project and print its project path, name and HTTP ports",
    )

    parser.add_argument(
        "source_path",
        nargs="?",
        default=None,
        help="Directory to scan",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    parser.add_argument(
        "--target-framework",
        dest="target_framework",
        default=None,
        help="Target framework to detect (default: COREAPP_DETECT_TARGET_FRAMEWORK or net5.0)",
    )

    parser.add_argument(
        "--policy",
        choices=[p.value for p in SelectionPolicy],
        default=None,
        help="Project file to use when several exist (default: last)",
    )

    parser.add_argument(
        "--port-extraction",
        dest="port_extraction",
        choices=[m.value for m in PortExtraction],
        default=None,
        help="How ports are read from application URLs (default: authority)",
    )

    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["line", "json"],
        default="line",
        help="Output format (default: line)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code: 0 if a project was detected, 1 otherwise.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid settings: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(log_level="DEBUG" if args.verbose else settings.log_level, log_file=settings.log_file)

    if args.source_path is None:
        logger.warning("Source path is missing in the argument")
        return 1

    # CLI flags take precedence over environment settings
    overrides: dict[str, object] = {}
    if args.target_framework:
        overrides["target_framework"] = args.target_framework
    if args.policy:
        overrides["policy"] = SelectionPolicy(args.policy)
    if args.port_extraction:
        overrides["port_extraction"] = PortExtraction(args.port_extraction)
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        logger.debug("Scanning %s", args.source_path)
        result = DotNetCoreDetector(settings=settings).detect(args.source_path)
    except DetectionError as e:
        logger.error("Error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130

    if not result.detected:
        return 1

    if args.output_format == "json":
        print(format_json(result.config))
    else:
        print(format_result(result.config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
