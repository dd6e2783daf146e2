"""Show command - Display the tags of one or more audio files."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table

from ...config import Config
from ...exceptions import SndTagError
from ...options import ParserOptions, UnknownChunkPolicy
from ...sniffer import sniff
from ..schemas import ErrorResponse, FileTags, ShowResponse
from ..utils import ExitCode, json_output


def build_options(args: argparse.Namespace, config: Config) -> ParserOptions:
    """Combine the configuration file with command line overrides."""
    options = config.parser_options()
    if args.skip_unknown:
        options = dataclasses.replace(options, unknown_chunks=UnknownChunkPolicy.SKIP)
    if args.no_pad:
        options = dataclasses.replace(options, pad_odd_chunks=False)
    return options


def read_tags(path: Path, options: ParserOptions) -> FileTags:
    """Read one file, turning parse and I/O failures into an error entry."""
    try:
        with open(path, "rb") as f:
            handle = sniff(f, options)
            metadata = handle.parse()
    except (SndTagError, OSError) as e:
        logging.debug(f"Failed to read {path}", exc_info=True)
        return FileTags(
            path=str(path),
            status="error",
            error=type(e).__name__,
            message=str(e),
        )
    return FileTags(
        path=str(path),
        status="ok",
        format=handle.family,
        tags=metadata.to_dict(),
    )


def print_tags(console: Console, result: FileTags, sort_keys: bool) -> None:
    if result.status == "error":
        console.print(f"[red]✗ {result.path}: {result.message}[/red]")
        return

    table = Table(title=f"{result.path} ({result.format})", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="magenta")

    items = result.tags.items()
    if sort_keys:
        items = sorted(items)
    for key, value in items:
        table.add_row(key, value)

    if not result.tags:
        console.print(f"[yellow]{result.path}: no tags found[/yellow]")
    else:
        console.print(table)


def cmd_show(args: argparse.Namespace) -> None:
    """Read and display tags.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)

    config = Config(args.config)
    try:
        options = build_options(args, config)
    except ValueError as e:
        if use_json:
            json_output(
                ErrorResponse(error="invalid_config", message=str(e)),
                ExitCode.INVALID_CONFIG,
            )
        logging.error(f"Invalid configuration in {config.config_path}: {e}")
        sys.exit(ExitCode.INVALID_CONFIG)

    results: List[FileTags] = []
    for name in args.files:
        path = Path(name)
        logging.info(f"Reading tags from: {path}")
        result = read_tags(path, options)
        results.append(result)
        print_tags(console, result, config.get_sort_keys())

    failed = sum(1 for result in results if result.status == "error")
    exit_code = ExitCode.ERROR if failed else ExitCode.SUCCESS

    if use_json:
        json_output(
            ShowResponse(
                status="completed_with_errors" if failed else "success",
                files=results,
            ),
            exit_code,
        )

    if failed:
        console.print(f"\n[yellow]Failed to read {failed} of {len(results)} files[/yellow]")
        sys.exit(exit_code)
