"""Config command - Show or initialise the configuration file."""

import argparse
import copy
import sys

import tomli_w
from rich.console import Console
from rich.syntax import Syntax

from ...config import Config
from ..schemas import ConfigResponse, ErrorResponse
from ..utils import ExitCode, json_output


def cmd_config(args: argparse.Namespace) -> None:
    """Print the effective configuration, or write the defaults with --init.

    Args:
        args: Parsed command-line arguments
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    config = Config(args.config)

    if args.init:
        if config.config_path.exists() and not args.force:
            message = f"Config file already exists: {config.config_path} (use --force to overwrite)"
            if use_json:
                json_output(ErrorResponse(error="invalid_input", message=message), ExitCode.INVALID_INPUT)
            console.print(f"[red]Error: {message}[/red]")
            sys.exit(ExitCode.INVALID_INPUT)

        config.data = copy.deepcopy(Config.DEFAULT_CONFIG)
        if not config.save(force=True):
            message = f"Could not write config file: {config.config_path}"
            if use_json:
                json_output(ErrorResponse(error="write_failed", message=message), ExitCode.ERROR)
            console.print(f"[red]Error: {message}[/red]")
            sys.exit(ExitCode.ERROR)
        console.print(f"[green]✓[/green] Wrote default configuration to {config.config_path}")

    if use_json:
        json_output(ConfigResponse(config_path=str(config.config_path), config=config.data))

    console.print(f"[cyan]Configuration file:[/cyan] {config.config_path}\n")
    console.print(Syntax(tomli_w.dumps(config.data), "toml"))
