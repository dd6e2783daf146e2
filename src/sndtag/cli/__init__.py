"""Command-line interface for sndtag.

This package provides the 'sndtag' command-line tool with subcommands:
    show: Read and display the tags of audio files
    config: Show or initialise the configuration file

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .utils import setup_logging
from .commands import cmd_show, cmd_config

__all__ = [
    "main",
    "cmd_show",
    "cmd_config",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options. Defaults are suppressed so that a
    # subcommand does not reset options given before it.
    parent_parser = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        help="Path to configuration file (default: ~/.sndtag/sndtag.toml)",
    )
    parent_parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of tables",
    )

    parser = argparse.ArgumentParser(
        prog="sndtag",
        usage="sndtag <command> [options]",
        description="sndtag - Read tags from RIFF/WAVE and ID3v1 audio files",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # show
    # ──────────────────────────────
    show_parser = subparsers.add_parser(
        "show",
        help="Show the tags of audio files",
        usage="sndtag show <files> [options]",
        description="Read each file without seeking and print its tags",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    show_parser.add_argument("files", nargs="+", help="Audio files to read")
    show_parser.add_argument(
        "--skip-unknown",
        action="store_true",
        help="Skip chunks with unrecognized IDs instead of failing",
    )
    show_parser.add_argument(
        "--no-pad",
        action="store_true",
        help="Do not consume the pad byte after odd-length chunks",
    )
    show_parser.set_defaults(func=cmd_show)

    # ──────────────────────────────
    # config
    # ──────────────────────────────
    config_parser = subparsers.add_parser(
        "config",
        help="Show or initialise the configuration",
        usage="sndtag config [--init [--force]]",
        description="Print the effective configuration or write the defaults",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        help="Write the default configuration file",
    )
    config_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing configuration file with --init",
    )
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args()
    for name, default in (("log_level", None), ("config", None), ("json", False)):
        if not hasattr(args, name):
            setattr(args, name, default)

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
