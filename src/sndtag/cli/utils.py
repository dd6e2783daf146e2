"""Utility functions for CLI operations."""

import logging
import sys
from enum import IntEnum

from pydantic import BaseModel


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    INVALID_INPUT = 2
    INVALID_CONFIG = 3


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(response: BaseModel, exit_code: int = ExitCode.SUCCESS) -> None:
    """Print a response model as JSON and exit with ``exit_code``."""
    print(response.model_dump_json(indent=2, exclude_none=True))
    sys.exit(exit_code)
