"""Tests for Config and ParserOptions."""

import pytest

from sndtag.config import Config, get_config_path
from sndtag.constants import SKIP_BLOCK_SIZE
from sndtag.options import ParserOptions, UnknownChunkPolicy


class TestParserOptions:
    """Test ParserOptions validation."""

    def test_defaults(self):
        options = ParserOptions()
        assert options.unknown_chunks is UnknownChunkPolicy.STRICT
        assert options.strict
        assert options.pad_odd_chunks is True
        assert options.skip_block_size == SKIP_BLOCK_SIZE

    def test_policy_from_string(self):
        options = ParserOptions(unknown_chunks="skip")
        assert options.unknown_chunks is UnknownChunkPolicy.SKIP
        assert not options.strict

    def test_invalid_policy(self):
        with pytest.raises(ValueError, match="Invalid unknown chunk policy"):
            ParserOptions(unknown_chunks="lenient")

    @pytest.mark.parametrize("size", [0, -1, 1.5])
    def test_invalid_block_size(self, size):
        with pytest.raises(ValueError, match="Skip block size"):
            ParserOptions(skip_block_size=size)

    def test_frozen(self):
        options = ParserOptions()
        with pytest.raises(AttributeError):
            options.pad_odd_chunks = False


class TestConfig:
    """Test the TOML configuration."""

    def test_default_path(self):
        assert get_config_path().name == "sndtag.toml"
        assert get_config_path().parent.name == ".sndtag"

    def test_defaults_without_file(self, tmp_path):
        config = Config(tmp_path / "missing.toml")
        assert config.get_unknown_chunks() == "strict"
        assert config.get_pad_odd_chunks() is True
        assert config.get_skip_block_size() == SKIP_BLOCK_SIZE
        assert config.get_sort_keys() is False
        assert not config.is_dirty()

    def test_defaults_not_shared(self, tmp_path):
        """Changing one config does not modify the class defaults."""
        config = Config(tmp_path / "missing.toml")
        config.set_unknown_chunks("skip")
        assert Config.DEFAULT_CONFIG["parser"]["unknown_chunks"] == "strict"

    def test_save_and_load(self, tmp_path):
        config_path = tmp_path / "nested" / "sndtag.toml"

        config1 = Config(config_path)
        config1.set_unknown_chunks("skip")
        config1.set_pad_odd_chunks(False)
        config1.set_skip_block_size(4096)
        assert config1.is_dirty()
        assert config1.save()
        assert not config1.is_dirty()

        config2 = Config(config_path)
        assert config2.get_unknown_chunks() == "skip"
        assert config2.get_pad_odd_chunks() is False
        assert config2.get_skip_block_size() == 4096

    def test_save_clean_config_is_noop(self, tmp_path):
        config_path = tmp_path / "sndtag.toml"
        config = Config(config_path)
        assert config.save()
        assert not config_path.exists()

    def test_partial_file_merged_with_defaults(self, tmp_path):
        config_path = tmp_path / "sndtag.toml"
        config_path.write_text('[parser]\nunknown_chunks = "skip"\n')
        config = Config(config_path)
        assert config.get_unknown_chunks() == "skip"
        assert config.get_pad_odd_chunks() is True
        assert config.get_sort_keys() is False

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path):
        config_path = tmp_path / "sndtag.toml"
        config_path.write_text("[parser\n")
        config = Config(config_path)
        assert config.get_unknown_chunks() == "strict"

    def test_invalid_policy_rejected(self, tmp_path):
        config = Config(tmp_path / "missing.toml")
        with pytest.raises(ValueError):
            config.set_unknown_chunks("lenient")

    def test_invalid_block_size_rejected(self, tmp_path):
        config = Config(tmp_path / "missing.toml")
        with pytest.raises(ValueError, match="must be positive"):
            config.set_skip_block_size(0)

    def test_parser_options(self, tmp_path):
        config = Config(tmp_path / "missing.toml")
        config.set_unknown_chunks("skip")
        config.set_pad_odd_chunks(False)
        options = config.parser_options()
        assert options == ParserOptions(
            unknown_chunks=UnknownChunkPolicy.SKIP,
            pad_odd_chunks=False,
        )

    def test_parser_options_from_bad_file(self, tmp_path):
        config_path = tmp_path / "sndtag.toml"
        config_path.write_text('[parser]\nunknown_chunks = "lenient"\n')
        config = Config(config_path)
        with pytest.raises(ValueError):
            config.parser_options()
