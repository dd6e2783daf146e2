"""Configuration management for sndtag.

Handles loading and saving the parser and output preferences used by the
command line tool. The configuration is a TOML file, by default
``~/.sndtag/sndtag.toml``.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

from .constants import SKIP_BLOCK_SIZE
from .options import ParserOptions, UnknownChunkPolicy


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.sndtag on all platforms)
    """
    return Path.home() / ".sndtag"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "sndtag.toml"


class Config:
    """Configuration manager for parser and output settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "parser": {
            # "strict" fails on chunk ids outside the allow-list,
            # "skip" discards them and carries on
            "unknown_chunks": UnknownChunkPolicy.STRICT.value,
            # Consume the RIFF pad byte after odd-length chunks
            "pad_odd_chunks": True,
            # Block size used when discarding audio data
            "skip_block_size": SKIP_BLOCK_SIZE,
        },
        "output": {
            # Print tags sorted by name instead of stream order
            "sort_keys": False,
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use (default: ~/.sndtag/sndtag.toml)
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
                # Merge with defaults (in case new keys were added)
                self._merge_config(self.data, loaded_data)
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.warning(f"Error loading config {self.config_path}: {e}")
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logging.warning(f"Error saving config {self.config_path}: {e}")
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Parser settings
    def get_unknown_chunks(self) -> str:
        return self.data["parser"]["unknown_chunks"]

    def set_unknown_chunks(self, policy: str) -> None:
        """Set the unknown chunk policy.

        Raises:
            ValueError: If policy is not "strict" or "skip"
        """
        self.data["parser"]["unknown_chunks"] = UnknownChunkPolicy(policy).value
        self._dirty = True

    def get_pad_odd_chunks(self) -> bool:
        return self.data["parser"]["pad_odd_chunks"]

    def set_pad_odd_chunks(self, pad: bool) -> None:
        self.data["parser"]["pad_odd_chunks"] = bool(pad)
        self._dirty = True

    def get_skip_block_size(self) -> int:
        return self.data["parser"]["skip_block_size"]

    def set_skip_block_size(self, size: int) -> None:
        """Set the discard block size.

        Raises:
            ValueError: If size is not positive
        """
        if size <= 0:
            raise ValueError("Skip block size must be positive")
        self.data["parser"]["skip_block_size"] = size
        self._dirty = True

    # Output settings
    def get_sort_keys(self) -> bool:
        return self.data["output"]["sort_keys"]

    def set_sort_keys(self, sort_keys: bool) -> None:
        self.data["output"]["sort_keys"] = bool(sort_keys)
        self._dirty = True

    def parser_options(self) -> ParserOptions:
        """Build the ParserOptions described by this configuration.

        Raises:
            ValueError: If the file holds an invalid policy or block size
        """
        return ParserOptions(
            unknown_chunks=self.get_unknown_chunks(),
            pad_odd_chunks=self.get_pad_odd_chunks(),
            skip_block_size=self.get_skip_block_size(),
        )
