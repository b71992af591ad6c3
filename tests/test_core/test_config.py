"""
Tests for Configuration Module

Tests for updl/core/config.py
"""

import pytest
import json

from updl.core.config import (
    CompilerConfig,
    CyclePolicy,
    get_config,
    get_default_config,
    load_config,
    save_config,
    set_config,
)
from updl.core.exceptions import InvalidConfigError


class TestCompilerConfig:
    """Tests for CompilerConfig class."""

    def test_default_config(self):
        """Test default configuration creation."""
        config = get_default_config()

        assert config.cycle_policy == CyclePolicy.TRUNCATE
        assert config.results_space_type == "results"
        assert config.results_suffix == "-results"
        assert config.updl_category == "UPDL"

    def test_config_from_dict(self):
        """Test creating config from dictionary."""
        config = CompilerConfig.from_dict({
            "cycle_policy": "error",
            "results_suffix": "-end",
        })

        assert config.cycle_policy == CyclePolicy.ERROR
        assert config.results_suffix == "-end"
        assert config.results_space_type == "results"

    def test_unknown_cycle_policy(self):
        """Test that an unknown policy is rejected."""
        with pytest.raises(InvalidConfigError) as exc_info:
            CompilerConfig.from_dict({"cycle_policy": "ignore"})

        assert "allowed" in exc_info.value.details

    def test_empty_results_suffix(self):
        """Test that the synthetic scene id must differ from its space id."""
        with pytest.raises(InvalidConfigError):
            CompilerConfig.from_dict({"results_suffix": ""})

    def test_config_to_dict(self):
        """Test converting config to dictionary."""
        config_dict = get_default_config().to_dict()

        assert config_dict["cycle_policy"] == "truncate"
        assert "verbose_logging" not in config_dict
        assert set(config_dict) == {"cycle_policy", "results_space_type", "results_suffix", "updl_category"}
        assert CompilerConfig.from_dict(config_dict) == get_default_config()


class TestLoadSaveConfig:
    """Tests for config loading and saving."""

    def test_load_config_from_file(self, temp_dir):
        """Test loading config from JSON file."""
        config_path = temp_dir / "updl_config.json"
        config_path.write_text(json.dumps({"cycle_policy": "error"}))

        config = load_config(str(config_path))

        assert config.cycle_policy == CyclePolicy.ERROR

    def test_load_config_missing_file(self, temp_dir):
        """Test loading config from non-existent file returns default."""
        config = load_config(temp_dir / "nonexistent.json")

        assert config == get_default_config()

    def test_load_config_invalid_json(self, temp_dir):
        """Test that broken JSON raises InvalidConfigError."""
        config_path = temp_dir / "broken.json"
        config_path.write_text("{cycle_policy: ")

        with pytest.raises(InvalidConfigError):
            load_config(config_path)

    def test_load_config_not_an_object(self, temp_dir):
        """Test that a JSON array is not accepted as config."""
        config_path = temp_dir / "list.json"
        config_path.write_text("[]")

        with pytest.raises(InvalidConfigError):
            load_config(config_path)

    def test_save_config(self, temp_dir):
        """Test saving config to file."""
        config = CompilerConfig(cycle_policy=CyclePolicy.ERROR)
        config_path = temp_dir / "nested" / "saved_config.json"

        save_config(config, str(config_path))

        saved_data = json.loads(config_path.read_text())
        assert saved_data["cycle_policy"] == "error"
        assert load_config(config_path) == config


class TestGlobalConfig:
    """Tests for the process-wide config."""

    def test_set_and_get_config(self):
        config = CompilerConfig(results_suffix="-done")
        set_config(config)

        assert get_config() is config
