"""CLI command implementations.

Each module in this package implements a specific sndtag subcommand:
    show.py: Read and display the tags of audio files
    config.py: Show or initialise the configuration file
"""

from .show import cmd_show
from .config import cmd_config

__all__ = [
    "cmd_show",
    "cmd_config",
]
