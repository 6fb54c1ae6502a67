"""
Zaqar CLI - Command line interface for scanning logs.

Provides commands for:
- Running a scan of all configured logs (default)
- Configuration validation
- Listing configured sources
"""

import argparse
import sys

from zaqar import __version__
from zaqar.collector import Collector
from zaqar.config import DEFAULT_CONFIG_PATH, Config, load_config
from zaqar.core import ZaqarError
from zaqar.logging_config import get_logger, setup_logging
from zaqar.plugins import create_notifier
from zaqar.supervisor import create_supervisor

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> Config | None:
    """Load configuration, printing the error and returning None on failure."""
    try:
        return load_config(args.config)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def cmd_run(args: argparse.Namespace) -> int:
    """Scan every configured log and send one report per log."""
    config = _load(args)
    if config is None:
        return 1

    notifier_type = config.notifier.type
    notifier_config = config.notifier.config
    if args.dry_run:
        notifier_type, notifier_config = "console", {}

    try:
        notifier = create_notifier(notifier_type, notifier_config)
        collector = Collector(notifier, config.subject_template)
        supervisor = create_supervisor(config.sources(), collector)
        supervisor.run()
        return 0
    except ZaqarError as e:
        logger.critical("Fatal error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.critical("Fatal error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_config_validate(args: argparse.Namespace) -> int:
    """Validate configuration file."""
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"✗ Configuration invalid: {e}", file=sys.stderr)
        return 1

    matcher_count = sum(len(log.matchers) for log in config.logs.values())
    print(f"✓ Configuration valid: {args.config}")
    print(f"  - {len(config.logs)} log(s) configured")
    print(f"  - {matcher_count} matcher(s) configured")
    print(f"  - Notifier: {config.notifier.type}")
    return 0


def cmd_source_list(args: argparse.Namespace) -> int:
    """List all configured sources."""
    config = _load(args)
    if config is None:
        return 1

    print(f"Configured logs ({len(config.logs)}):\n")
    for i, source in enumerate(config.sources(), 1):
        print(f"{i}. {source.name}")
        print(f"   Path:     {source.path}")
        if not source.matchers:
            print("   Matchers: (none)")
        for spec in source.matchers:
            print(f"   Matcher:  {spec.kind} {spec.criteria!r}")
        print()

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="zaqar",
        description="Zaqar - Scan log files and report matching lines"
    )
    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help=f"Path to configuration file (default: config.yaml, falls back to {DEFAULT_CONFIG_PATH})"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Turn on debug logging"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: INFO, or DEBUG with --debug)"
    )
    parser.add_argument(
        "--log-file",
        help="Optional log file path (logs to stderr if not specified)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.set_defaults(subcommand=None, dry_run=False)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Scan all configured logs (default)")
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print reports to the console instead of sending them"
    )

    # Config commands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="subcommand")
    config_subparsers.add_parser("validate", help="Validate configuration file")

    # Source commands
    source_parser = subparsers.add_parser("source", help="Source management")
    source_subparsers = source_parser.add_subparsers(dest="subcommand")
    source_subparsers.add_parser("list", help="List all configured logs")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, debug=args.debug, log_file=args.log_file)

    if args.command in (None, "run"):
        return cmd_run(args)

    if args.command == "config":
        if args.subcommand == "validate":
            return cmd_config_validate(args)
        parser.print_help()
        return 0

    if args.command == "source":
        if args.subcommand == "list":
            return cmd_source_list(args)
        parser.print_help()
        return 0

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
