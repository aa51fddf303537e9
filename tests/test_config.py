"""Tests for the Config module."""

import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.config.loader import ConfigLoader, load_config
from fixture_engine.constraints.percentage import Percentage
from fixture_engine.errors import ConfigurationError


class TestGeneratorConfig:
    """Tests for GeneratorConfig model."""

    def test_default_values(self):
        config = GeneratorConfig()

        assert config.min_string_length == 16
        assert config.max_string_length == 256
        assert config.min_sequence_length == 8
        assert config.max_sequence_length == 32
        assert config.encoding == "utf-16-le"
        assert config.null_chance == Percentage(0)
        assert config.seed is None

    def test_char_width(self):
        assert GeneratorConfig().char_width == 2
        assert GeneratorConfig(encoding="utf-8").char_width == 1
        assert GeneratorConfig(encoding="utf-32-le").char_width == 4

    def test_null_chance_coercion(self):
        assert GeneratorConfig(null_chance=40).null_chance == Percentage(40)
        assert GeneratorConfig(null_chance=0.4).null_chance == Percentage(0.4)

    def test_invalid_null_chance(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(null_chance=400)

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(min_string_length=10, max_string_length=5)

        with pytest.raises(ValidationError):
            GeneratorConfig(min_sequence_length=10, max_sequence_length=5)

    def test_equal_bounds_allowed(self):
        config = GeneratorConfig(min_sequence_length=4, max_sequence_length=4)
        assert config.min_sequence_length == config.max_sequence_length

    def test_negative_length_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(min_string_length=-1)

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(encoding="no-such-codec")

    def test_bom_encoding_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(encoding="utf-16")

    def test_assignment_validated(self):
        config = GeneratorConfig()
        with pytest.raises(ValidationError):
            config.max_string_length = 1

    def test_to_dict(self):
        data = GeneratorConfig(null_chance=25, seed=9).to_dict()
        assert data["null_chance"] == 0.25
        assert data["seed"] == 9


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_and_save_config(self):
        config = GeneratorConfig(max_string_length=64, null_chance=10, seed=5)
        loader = ConfigLoader()

        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "nested" / "config.yaml"
            loader.save_file(config, filepath)

            saved = yaml.safe_load(filepath.read_text())
            assert "generator" in saved

            loaded = loader.load_file(filepath)
            assert loaded == config

    def test_load_from_string(self):
        yaml_content = """
generator:
  min_string_length: 2
  max_string_length: 8
  null_chance: 0.5
"""
        config = ConfigLoader().load_from_string(yaml_content)

        assert config.min_string_length == 2
        assert config.max_string_length == 8
        assert config.null_chance == Percentage(50)

    def test_top_level_settings(self):
        config = ConfigLoader().load_from_string("max_sequence_length: 12\n")
        assert config.max_sequence_length == 12

    def test_empty_document(self):
        assert ConfigLoader().load_from_string("") == GeneratorConfig()

    def test_unknown_keys_rejected(self):
        with pytest.raises(ConfigurationError, match="max_lenght"):
            ConfigLoader().load_from_string("generator:\n  max_lenght: 3\n")

    def test_invalid_values_rejected(self):
        with pytest.raises(ConfigurationError, match="Invalid config"):
            ConfigLoader().load_from_string("generator:\n  min_string_length: 9\n  max_string_length: 2\n")

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_from_string("- 1\n- 2\n")

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load_file("/nonexistent/config.yaml")

    def test_load_config_function(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "config.yaml"
            filepath.write_text("generator:\n  encoding: utf-8\n")

            config = load_config(filepath)
            assert config.encoding == "utf-8"
