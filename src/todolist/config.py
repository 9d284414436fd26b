"""Configuration management for the todolist application."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ConfigModel:
    """Settings for storage and display."""

    # Storage
    db_path: str = "db.json"

    # Display preferences
    no_color: bool = False

    # Interactive view
    poll_interval_ms: int = 250
    viewport_height: int = 16
    viewport_width: int = 106

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "db_path": self.db_path,
            "no_color": self.no_color,
            "poll_interval_ms": self.poll_interval_ms,
            "viewport_height": self.viewport_height,
            "viewport_width": self.viewport_width,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys.

        Raises:
            ValueError: If the document is not a mapping or a known key
                has a value of the wrong type.
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        values = {k: v for k, v in data.items() if k in known}
        defaults = cls()
        for name, value in values.items():
            expected = type(getattr(defaults, name))
            # bool is a subclass of int, so integers need an explicit check
            if (expected is int and isinstance(value, bool)) or not isinstance(value, expected):
                raise ValueError(
                    f"config key '{name}' must be {expected.__name__}, got {type(value).__name__}"
                )

        return cls(**values)


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConfigModel:
    """Load configuration from a YAML file, or return the defaults.

    A missing, unreadable or invalid file falls back to the defaults.
    """
    if config_path is None:
        return ConfigModel()

    config_path = Path(config_path)
    if not config_path.exists():
        logger.info(f"Config file {config_path} not found, using defaults")
        return ConfigModel()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = ConfigModel.from_yaml(f.read())
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return ConfigModel()

    logger.info(f"Loaded configuration from {config_path}")
    return config
