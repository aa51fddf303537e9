"""Configuration loader for reading engine settings from YAML files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.errors import ConfigurationError


class ConfigLoader:
    """Loads generator configurations from YAML files."""

    def load_file(self, path: Path | str) -> GeneratorConfig:
        """Load a configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded GeneratorConfig instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_config(data)

    def load_from_string(self, content: str) -> GeneratorConfig:
        """Load a configuration from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded GeneratorConfig instance
        """
        return self._parse_config(yaml.safe_load(content))

    def _parse_config(self, data: Any) -> GeneratorConfig:
        """Parse configuration data from YAML structure.

        Settings may sit at the top level or under a ``generator`` key.
        """
        if data is None:
            return GeneratorConfig()
        if not isinstance(data, dict):
            raise ConfigurationError("Config must be a YAML mapping")

        settings = data.get("generator", data)
        if not isinstance(settings, dict):
            raise ConfigurationError("'generator' must be a YAML mapping")

        unknown = set(settings) - set(GeneratorConfig.model_fields)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        try:
            return GeneratorConfig(**settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config: {e}") from e

    def save_file(self, config: GeneratorConfig, path: Path | str) -> None:
        """Save a configuration to a YAML file.

        Args:
            config: The configuration to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump({"generator": config.to_dict()}, f, default_flow_style=False, sort_keys=False)


def load_config(path: Path | str) -> GeneratorConfig:
    """Convenience function to load a configuration from a file.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded GeneratorConfig instance
    """
    loader = ConfigLoader()
    return loader.load_file(path)
