"""
discordrest

Typed helpers for the Discord HTTP API. Organized into:
- cdn: CDN URL building for avatars, icons, banners, stickers and emojis
- config: YAML/environment configuration of the CDN hosts
- logging_config: package logger setup
"""

from typing import Optional

from .cdn import (
    CDN,
    AssetKind,
    ImageFormat,
    ImageURLOptions,
    CDNRangeError,
    calculate_user_default_avatar_index,
)
from .config import CDNConfig, RESTConfig, get_config, reload_config
from .logging_config import get_logger, set_log_level

__version__ = "0.1.0"


def create_cdn(config: Optional[RESTConfig] = None) -> CDN:
    """
    Create a CDN builder from configuration.

    Args:
        config: Loaded configuration (default: the global configuration)

    Returns:
        CDN builder bound to the configured hosts

    Raises:
        ValueError: If the configuration does not validate
    """
    if config is None:
        config = get_config()
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    set_log_level(config.logging.level)
    return CDN.from_config(config.cdn)


__all__ = [
    # CDN
    'CDN',
    'AssetKind',
    'ImageFormat',
    'ImageURLOptions',
    'CDNRangeError',
    'calculate_user_default_avatar_index',
    'create_cdn',
    # Configuration
    'CDNConfig',
    'RESTConfig',
    'get_config',
    'reload_config',
    # Logging
    'get_logger',
    'set_log_level',
]
