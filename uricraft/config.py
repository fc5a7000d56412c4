"""
Config system - Layered configuration for URI helpers.

Merge precedence (later overrides earlier):
defaults < config files (JSON/YAML) < .env file < environment < overrides
"""

from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os

import yaml
from dotenv import dotenv_values

from .faults import ConfigInvalidFault

logger = logging.getLogger("uricraft.config")


@dataclass
class UriConfig:
    """
    Settings used when building links for a site.

    Attributes:
        base_url: Prefix for generated links (e.g. "https://example.com")
        index_basename: Basename dropped from links when strip_index is set
        strip_index: Whether to drop index_basename from generated links
    """
    base_url: str = ""
    index_basename: str = "index.html"
    strip_index: bool = True


_FIELD_TYPES = {
    "base_url": str,
    "index_basename": str,
    "strip_index": bool,
}


class UriConfigLoader:
    """
    Loads and merges URI configuration from multiple sources.

    Example:
        config = UriConfigLoader.load(
            paths=["config/uri.yaml"],
            env_file=".env",
        ).to_config()
    """

    def __init__(self, env_prefix: str = "URI_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = asdict(UriConfig())

    @classmethod
    def load(
        cls,
        paths: Optional[list[str]] = None,
        env_prefix: str = "URI_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "UriConfigLoader":
        """
        Load configuration from all sources.

        Args:
            paths: Config file paths (.json, .yaml or .yml)
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Configured UriConfigLoader instance
        """
        loader = cls(env_prefix=env_prefix)

        for path in paths or []:
            loader._load_file(Path(path))

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader.config_data.update(overrides)

        return loader

    def _load_file(self, path: Path):
        """Load config from a JSON or YAML file."""
        if not path.exists():
            logger.debug("Config file %s not found, skipping", path)
            return

        with open(path) as f:
            if path.suffix == ".json":
                data = json.load(f)
            elif path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                logger.warning("Unsupported config file type: %s", path)
                return

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigInvalidFault(
                str(path), f"expected a mapping, got {type(data).__name__}"
            )
        if data:
            self.config_data.update(data)
            logger.debug("Loaded config from %s", path)

    def _load_env_file(self, path: str):
        """Load config from .env file."""
        if not Path(path).exists():
            logger.debug(".env file %s not found, skipping", path)
            return

        for key, value in dotenv_values(path).items():
            if value is not None:
                self._set_from_env(key, value)

    def _load_from_env(self):
        """Load config from environment variables."""
        for key, value in os.environ.items():
            self._set_from_env(key, value)

    def _set_from_env(self, key: str, value: str):
        if not key.startswith(self.env_prefix):
            return
        name = key[len(self.env_prefix):].lower()
        if _FIELD_TYPES.get(name) is bool:
            value = self._parse_value(value)
        self.config_data[name] = value

    def _parse_value(self, value: str) -> Any:
        """Parse a boolean string, keep anything else as text."""
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False
        return value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config_data.get(key, default)

    def to_config(self) -> UriConfig:
        """
        Validate merged data and build a UriConfig.

        Unknown keys are ignored.

        Raises:
            ConfigInvalidFault: If a known key has the wrong type
        """
        kwargs = {}
        for field in fields(UriConfig):
            if field.name not in self.config_data:
                continue
            value = self.config_data[field.name]
            expected = _FIELD_TYPES[field.name]
            if not isinstance(value, expected):
                raise ConfigInvalidFault(
                    field.name,
                    f"expected {expected.__name__}, got {type(value).__name__}",
                )
            kwargs[field.name] = value
        return UriConfig(**kwargs)
