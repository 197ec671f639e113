"""
Image format allow-lists for the Discord CDN

Provides the accepted extensions and sizes, the option container used by
the URL builder, and the validation helpers that reject anything else.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from ..logging_config import get_logger

logger = get_logger(__name__)


class ImageFormat(str, Enum):
    """File extensions served by the CDN."""
    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    GIF = "gif"
    LOTTIE = "json"


ALLOWED_EXTENSIONS: Tuple[str, ...] = ("webp", "png", "jpg", "jpeg", "gif")
ALLOWED_STICKER_EXTENSIONS: Tuple[str, ...] = ("png", "json", "gif")
ALLOWED_SIZES: Tuple[int, ...] = (16, 32, 64, 128, 256, 512, 1024, 2048, 4096)

DEFAULT_EXTENSION = "webp"
ANIMATED_HASH_PREFIX = "a_"


class CDNRangeError(ValueError):
    """Raised when an extension or size is outside the allowed set."""

    def __init__(self, kind: str, value: Any, allowed: Iterable[Any]):
        self.kind = kind
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid {kind} provided: {value}\n"
            f"Must be one of: {', '.join(str(a) for a in self.allowed)}"
        )


@dataclass(frozen=True)
class ImageURLOptions:
    """
    Formatting options for a CDN URL.

    Attributes:
        extension: File extension; the route's default when None
        size: Requested edge length, one of ALLOWED_SIZES
        force_static: Ignore the animated hash marker
        animated: Request the animated variant explicitly
    """
    extension: Optional[str] = None
    size: Optional[int] = None
    force_static: bool = False
    animated: Optional[bool] = None


def is_animated_hash(asset_hash: str) -> bool:
    """Check whether a hash carries the animated marker."""
    return asset_hash.startswith(ANIMATED_HASH_PREFIX)


def validate_extension(extension: Any, allowed: Iterable[str] = ALLOWED_EXTENSIONS) -> str:
    """
    Normalize and check an extension against an allow-list.

    Args:
        extension: Extension string or ImageFormat (without dot)
        allowed: Accepted extensions

    Returns:
        The lower-cased extension

    Raises:
        CDNRangeError: If the extension is not allowed
    """
    allowed = tuple(allowed)
    if isinstance(extension, Enum):
        extension = extension.value
    normalized = str(extension).lower()
    if normalized not in allowed:
        logger.debug(f"Rejected extension {extension!r}")
        raise CDNRangeError("extension", extension, allowed)
    return normalized


def validate_size(size: Optional[int], allowed: Iterable[int] = ALLOWED_SIZES) -> Optional[int]:
    """
    Check a size against the allowed discrete set.

    Args:
        size: Requested size, or None when not supplied
        allowed: Accepted sizes

    Returns:
        The size unchanged

    Raises:
        CDNRangeError: If the size is supplied and not allowed
    """
    if size is None:
        return None
    allowed = tuple(allowed)
    # bool is an int subclass and 512.0 == 512; only real ints pass
    if isinstance(size, bool) or not isinstance(size, int) or size not in allowed:
        logger.debug(f"Rejected size {size!r}")
        raise CDNRangeError("size", size, allowed)
    return size
