"""
Discord CDN Utilities

Provides the CDN URL builder and its format allow-lists.
"""

from .formats import (
    ImageFormat,
    ImageURLOptions,
    CDNRangeError,
    ALLOWED_EXTENSIONS,
    ALLOWED_STICKER_EXTENSIONS,
    ALLOWED_SIZES,
    is_animated_hash,
    validate_extension,
    validate_size,
)
from .builder import (
    CDN,
    AssetKind,
    AssetRoute,
    ASSET_ROUTES,
    calculate_user_default_avatar_index,
)

__all__ = [
    # Builder
    'CDN',
    'AssetKind',
    'AssetRoute',
    'ASSET_ROUTES',
    'calculate_user_default_avatar_index',
    # Formats
    'ImageFormat',
    'ImageURLOptions',
    'CDNRangeError',
    'ALLOWED_EXTENSIONS',
    'ALLOWED_STICKER_EXTENSIONS',
    'ALLOWED_SIZES',
    'is_animated_hash',
    'validate_extension',
    'validate_size',
]
