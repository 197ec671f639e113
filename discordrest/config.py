"""
Configuration management for discordrest.

Configuration is loaded from (in priority order):
1. Environment variables (highest priority)
2. Config file (discordrest/config.yaml)
3. Defaults (lowest priority)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CDN_URL = "https://cdn.discordapp.com"
DEFAULT_MEDIA_PROXY_URL = "https://media.discordapp.net"


@dataclass
class CDNConfig:
    """CDN host configuration."""
    cdn: str = DEFAULT_CDN_URL
    media_proxy: str = DEFAULT_MEDIA_PROXY_URL


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"


@dataclass
class RESTConfig:
    """Main configuration container."""
    cdn: CDNConfig = field(default_factory=CDNConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    load_errors: list[str] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "RESTConfig":
        """
        Load configuration from file and environment variables.

        Args:
            config_path: Optional path to config.yaml file

        Returns:
            Loaded RESTConfig instance
        """
        config = cls()

        if config_path is None:
            config_path = Path(__file__).parent / "config.yaml"

        if config_path.exists():
            config._load_from_file(config_path)

        config._load_from_env()

        return config

    def _load_from_file(self, path: Path) -> None:
        """Load configuration from YAML file."""
        logger.debug(f"Loading configuration from {path}")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            self.load_errors.append(f"Config file {path} must contain a mapping")
            return

        cdn_data = self._section(data, "cdn")
        if "cdn" in cdn_data:
            self.cdn.cdn = cdn_data["cdn"]
        if "media_proxy" in cdn_data:
            self.cdn.media_proxy = cdn_data["media_proxy"]

        logging_data = self._section(data, "logging")
        if "level" in logging_data:
            self.logging.level = str(logging_data["level"])

    def _section(self, data: dict, name: str) -> dict:
        """Return a mapping section of the file, recording a non-mapping value."""
        section = data.get(name) or {}
        if not isinstance(section, dict):
            self.load_errors.append(f"Config section '{name}' must be a mapping")
            return {}
        return section

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        if cdn_url := os.getenv("DISCORDREST_CDN_URL"):
            self.cdn.cdn = cdn_url
        if media_proxy_url := os.getenv("DISCORDREST_MEDIA_PROXY_URL"):
            self.cdn.media_proxy = media_proxy_url
        if level := os.getenv("DISCORDREST_LOG_LEVEL"):
            self.logging.level = level

    def validate(self) -> list[str]:
        """
        Validate the configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = list(self.load_errors)

        for name, value in (("CDN URL", self.cdn.cdn), ("Media proxy URL", self.cdn.media_proxy)):
            if not value:
                errors.append(f"{name} is required")
            elif not isinstance(value, str) or not value.startswith(("http://", "https://")):
                errors.append(f"{name} must start with http:// or https://")

        return errors


# Global config instance (lazy loaded)
_config: Optional[RESTConfig] = None


def get_config() -> RESTConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = RESTConfig.load()
    return _config


def reload_config(config_path: Optional[Path] = None) -> RESTConfig:
    """Reload configuration from disk."""
    global _config
    _config = RESTConfig.load(config_path)
    return _config
