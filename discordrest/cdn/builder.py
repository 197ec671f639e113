"""
Discord CDN URL builder for discordrest

Builds URLs for avatars, icons, banners, stickers, emojis and the other
media assets served from the CDN and media proxy hosts.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .formats import (
    ALLOWED_EXTENSIONS,
    ALLOWED_STICKER_EXTENSIONS,
    DEFAULT_EXTENSION,
    ImageURLOptions,
    is_animated_hash,
    validate_extension,
    validate_size,
)

# Application that owns the sticker pack store assets
STICKER_PACK_BANNER_APPLICATION_ID = "710982414301790216"

Snowflake = Union[str, int]


class AssetKind(str, Enum):
    """Asset categories served by the CDN."""
    APP_ASSET = "app_asset"
    APP_ICON = "app_icon"
    AVATAR = "avatar"
    AVATAR_DECORATION = "avatar_decoration"
    BANNER = "banner"
    CHANNEL_ICON = "channel_icon"
    DEFAULT_AVATAR = "default_avatar"
    DISCOVERY_SPLASH = "discovery_splash"
    EMOJI = "emoji"
    GUILD_MEMBER_AVATAR = "guild_member_avatar"
    GUILD_MEMBER_BANNER = "guild_member_banner"
    GUILD_SCHEDULED_EVENT_COVER = "guild_scheduled_event_cover"
    GUILD_TAG_BADGE = "guild_tag_badge"
    ICON = "icon"
    ROLE_ICON = "role_icon"
    SOUNDBOARD_SOUND = "soundboard_sound"
    SPLASH = "splash"
    STICKER = "sticker"
    STICKER_PACK_BANNER = "sticker_pack_banner"
    TEAM_ICON = "team_icon"


@dataclass(frozen=True)
class AssetRoute:
    """
    Path template and defaults for one asset kind.

    Attributes:
        template: Route with ``{}`` placeholders for each path segment
        dynamic: Whether the last segment is a hash that may mark animation
        extension: Extension forced for the route, or None to honour options
        default_extension: Extension used when options leave it unset
        allowed_extensions: Extensions accepted for the route
        media_proxy_extensions: Extensions served from the media proxy host
        has_extension: False for routes served without a file extension
    """
    template: str
    dynamic: bool = False
    extension: Optional[str] = None
    default_extension: str = DEFAULT_EXTENSION
    allowed_extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS
    media_proxy_extensions: Tuple[str, ...] = ()
    has_extension: bool = True

    @property
    def segment_count(self) -> int:
        return self.template.count("{}")


ASSET_ROUTES: Dict[AssetKind, AssetRoute] = {
    AssetKind.APP_ASSET: AssetRoute("/app-assets/{}/{}"),
    AssetKind.APP_ICON: AssetRoute("/app-icons/{}/{}"),
    AssetKind.AVATAR: AssetRoute("/avatars/{}/{}", dynamic=True),
    AssetKind.AVATAR_DECORATION: AssetRoute("/avatar-decoration-presets/{}", extension="png"),
    AssetKind.BANNER: AssetRoute("/banners/{}/{}", dynamic=True),
    AssetKind.CHANNEL_ICON: AssetRoute("/channel-icons/{}/{}"),
    AssetKind.DEFAULT_AVATAR: AssetRoute("/embed/avatars/{}", extension="png"),
    AssetKind.DISCOVERY_SPLASH: AssetRoute("/discovery-splashes/{}/{}"),
    AssetKind.EMOJI: AssetRoute("/emojis/{}"),
    AssetKind.GUILD_MEMBER_AVATAR: AssetRoute("/guilds/{}/users/{}/avatars/{}", dynamic=True),
    AssetKind.GUILD_MEMBER_BANNER: AssetRoute("/guilds/{}/users/{}/banners/{}", dynamic=True),
    AssetKind.GUILD_SCHEDULED_EVENT_COVER: AssetRoute("/guild-events/{}/{}"),
    AssetKind.GUILD_TAG_BADGE: AssetRoute("/guild-tag-badges/{}/{}"),
    AssetKind.ICON: AssetRoute("/icons/{}/{}", dynamic=True),
    AssetKind.ROLE_ICON: AssetRoute("/role-icons/{}/{}"),
    AssetKind.SOUNDBOARD_SOUND: AssetRoute("/soundboard-sounds/{}", has_extension=False),
    AssetKind.SPLASH: AssetRoute("/splashes/{}/{}"),
    AssetKind.STICKER: AssetRoute(
        "/stickers/{}",
        default_extension="png",
        allowed_extensions=ALLOWED_STICKER_EXTENSIONS,
        media_proxy_extensions=("gif",),
    ),
    AssetKind.STICKER_PACK_BANNER: AssetRoute(
        f"/app-assets/{STICKER_PACK_BANNER_APPLICATION_ID}/store/{{}}"
    ),
    AssetKind.TEAM_ICON: AssetRoute("/team-icons/{}/{}"),
}


def calculate_user_default_avatar_index(
    user_id: Snowflake,
    discriminator: Optional[Union[str, int]] = None
) -> int:
    """
    Calculate the index of the default avatar for a user.

    Users on the unique username system get ``(user_id >> 22) % 6``; users
    with a legacy non-zero discriminator get ``discriminator % 5``.

    Args:
        user_id: The user's snowflake
        discriminator: Legacy discriminator ("0" or None when migrated)

    Returns:
        Index accepted by CDN.default_avatar
    """
    if discriminator is not None and int(discriminator) != 0:
        return int(discriminator) % 5
    return (int(user_id) >> 22) % 6


def _coerce_options(
    options: Optional[Union[ImageURLOptions, str]],
    overrides: Dict[str, Any]
) -> ImageURLOptions:
    """Merge an options object (or bare extension) with keyword overrides."""
    if options is None:
        options = ImageURLOptions()
    elif isinstance(options, (str, Enum)):
        options = ImageURLOptions(extension=options)
    if overrides:
        options = replace(options, **overrides)
    return options


class CDN:
    """
    Builder for Discord CDN URLs.

    Holds only the two base URLs; every method is a pure function of its
    arguments. Each asset method accepts an ImageURLOptions instance and/or
    the same fields as keyword arguments (extension, size, force_static,
    animated).
    """

    def __init__(self, cdn: str, media_proxy: str):
        """
        Initialize the builder.

        Args:
            cdn: Base URL of the CDN host
            media_proxy: Base URL of the media proxy host
        """
        if not cdn:
            raise ValueError("CDN base URL is required")
        if not media_proxy:
            raise ValueError("Media proxy base URL is required")
        self._cdn = cdn.rstrip("/")
        self._media_proxy = media_proxy.rstrip("/")

    @classmethod
    def from_config(cls, config: Any) -> "CDN":
        """Create a builder from a CDNConfig (or anything with cdn/media_proxy)."""
        return cls(config.cdn, config.media_proxy)

    @property
    def cdn(self) -> str:
        return self._cdn

    @property
    def media_proxy(self) -> str:
        return self._media_proxy

    def __repr__(self) -> str:
        return f"CDN(cdn={self._cdn!r}, media_proxy={self._media_proxy!r})"

    def url_for(
        self,
        kind: Union[AssetKind, str],
        *segments: Snowflake,
        options: Optional[Union[ImageURLOptions, str]] = None,
        **overrides: Any
    ) -> str:
        """
        Build the URL for any asset kind from its route table entry.

        Args:
            kind: The asset kind
            *segments: Path segments in template order (ids, then hash)
            options: Formatting options or a bare extension
            **overrides: ImageURLOptions fields overriding ``options``

        Returns:
            Fully qualified URL

        Raises:
            CDNRangeError: If the extension or size is not allowed
        """
        route = ASSET_ROUTES[AssetKind(kind)]
        if len(segments) != route.segment_count:
            raise TypeError(
                f"{AssetKind(kind).value} takes {route.segment_count} path segment(s), "
                f"got {len(segments)}"
            )

        path = route.template.format(*segments)
        if not route.has_extension:
            return f"{self._cdn}{path}"

        opts = _coerce_options(options, overrides)
        if route.extension is not None:
            opts = replace(opts, extension=route.extension)

        if route.dynamic:
            return self._dynamic_make_url(path, str(segments[-1]), opts, route)
        return self._make_url(path, opts, route)

    def _dynamic_make_url(
        self,
        path: str,
        asset_hash: str,
        options: ImageURLOptions,
        route: AssetRoute
    ) -> str:
        """Build a URL whose animated flag follows the hash marker."""
        animated = not options.force_static and is_animated_hash(asset_hash)
        return self._make_url(path, replace(options, animated=animated), route)

    def _make_url(self, path: str, options: ImageURLOptions, route: AssetRoute) -> str:
        """Validate options, then join base, path, extension and query."""
        extension = options.extension if options.extension is not None else route.default_extension
        extension = validate_extension(extension, route.allowed_extensions)
        size = validate_size(options.size)

        base = self._media_proxy if extension in route.media_proxy_extensions else self._cdn

        query = []
        if options.animated and not options.force_static:
            query.append("animated=true")
        if size is not None:
            query.append(f"size={size}")

        url = f"{base}{path}.{extension}"
        if query:
            url += "?" + "&".join(query)
        return url

    def app_asset(self, application_id: Snowflake, asset_hash: str, options=None, **kwargs) -> str:
        """Generate an app asset URL for a client's rich presence asset."""
        return self.url_for(AssetKind.APP_ASSET, application_id, asset_hash, options=options, **kwargs)

    def app_icon(self, application_id: Snowflake, icon_hash: str, options=None, **kwargs) -> str:
        """Generate an app icon URL for a client's icon."""
        return self.url_for(AssetKind.APP_ICON, application_id, icon_hash, options=options, **kwargs)

    def avatar(self, user_id: Snowflake, avatar_hash: str, options=None, **kwargs) -> str:
        """
        Generate a user avatar URL.

        An ``a_`` hash adds ``animated=true`` unless force_static is set,
        whichever extension is requested, so ``extension="png"`` gives
        ``.png?animated=true``. The same holds for banners, guild icons
        and guild member avatars and banners.
        """
        return self.url_for(AssetKind.AVATAR, user_id, avatar_hash, options=options, **kwargs)

    def avatar_decoration(self, asset: str, options=None, **kwargs) -> str:
        """Generate an avatar decoration preset URL (always png)."""
        return self.url_for(AssetKind.AVATAR_DECORATION, asset, options=options, **kwargs)

    def banner(self, id: Snowflake, banner_hash: str, options=None, **kwargs) -> str:
        """Generate a user or guild banner URL."""
        return self.url_for(AssetKind.BANNER, id, banner_hash, options=options, **kwargs)

    def channel_icon(self, channel_id: Snowflake, icon_hash: str, options=None, **kwargs) -> str:
        """Generate a group DM icon URL."""
        return self.url_for(AssetKind.CHANNEL_ICON, channel_id, icon_hash, options=options, **kwargs)

    def default_avatar(self, index: int) -> str:
        """
        Generate a default avatar URL.

        Args:
            index: Default avatar index, see calculate_user_default_avatar_index
        """
        return self.url_for(AssetKind.DEFAULT_AVATAR, index)

    def user_default_avatar(
        self,
        user_id: Snowflake,
        discriminator: Optional[Union[str, int]] = None
    ) -> str:
        """Generate the default avatar URL a user without an avatar is shown."""
        return self.default_avatar(calculate_user_default_avatar_index(user_id, discriminator))

    def discovery_splash(self, guild_id: Snowflake, splash_hash: str, options=None, **kwargs) -> str:
        return self.url_for(AssetKind.DISCOVERY_SPLASH, guild_id, splash_hash, options=options, **kwargs)

    def emoji(self, emoji_id: Snowflake, options=None, **kwargs) -> str:
        """
        Generate an emoji URL.

        Emoji ids carry no hash, so animation is only requested through
        ``animated=True`` or a ``gif`` extension. A bare extension string
        is accepted in place of options.
        """
        return self.url_for(AssetKind.EMOJI, emoji_id, options=options, **kwargs)

    def guild_member_avatar(
        self, guild_id: Snowflake, user_id: Snowflake, avatar_hash: str, options=None, **kwargs
    ) -> str:
        """Generate a guild member avatar URL."""
        return self.url_for(
            AssetKind.GUILD_MEMBER_AVATAR, guild_id, user_id, avatar_hash, options=options, **kwargs
        )

    def guild_member_banner(
        self, guild_id: Snowflake, user_id: Snowflake, banner_hash: str, options=None, **kwargs
    ) -> str:
        """Generate a guild member banner URL."""
        return self.url_for(
            AssetKind.GUILD_MEMBER_BANNER, guild_id, user_id, banner_hash, options=options, **kwargs
        )

    def guild_scheduled_event_cover(
        self, scheduled_event_id: Snowflake, cover_hash: str, options=None, **kwargs
    ) -> str:
        return self.url_for(
            AssetKind.GUILD_SCHEDULED_EVENT_COVER, scheduled_event_id, cover_hash, options=options, **kwargs
        )

    def guild_tag_badge(self, guild_id: Snowflake, badge_hash: str, options=None, **kwargs) -> str:
        """Generate a guild tag badge URL."""
        return self.url_for(AssetKind.GUILD_TAG_BADGE, guild_id, badge_hash, options=options, **kwargs)

    def icon(self, id: Snowflake, icon_hash: str, options=None, **kwargs) -> str:
        """Generate a guild icon URL."""
        return self.url_for(AssetKind.ICON, id, icon_hash, options=options, **kwargs)

    def role_icon(self, role_id: Snowflake, role_icon_hash: str, options=None, **kwargs) -> str:
        return self.url_for(AssetKind.ROLE_ICON, role_id, role_icon_hash, options=options, **kwargs)

    def splash(self, guild_id: Snowflake, splash_hash: str, options=None, **kwargs) -> str:
        return self.url_for(AssetKind.SPLASH, guild_id, splash_hash, options=options, **kwargs)

    def sticker(self, sticker_id: Snowflake, extension: Optional[str] = None, options=None, **kwargs) -> str:
        """
        Generate a sticker URL.

        Stickers default to png; ``gif`` stickers are served from the media
        proxy host. Lottie stickers use ``json``.
        """
        if extension is not None:
            kwargs["extension"] = extension
        return self.url_for(AssetKind.STICKER, sticker_id, options=options, **kwargs)

    def sticker_pack_banner(self, banner_id: Snowflake, options=None, **kwargs) -> str:
        """Generate a sticker pack banner URL."""
        return self.url_for(AssetKind.STICKER_PACK_BANNER, banner_id, options=options, **kwargs)

    def team_icon(self, team_id: Snowflake, icon_hash: str, options=None, **kwargs) -> str:
        return self.url_for(AssetKind.TEAM_ICON, team_id, icon_hash, options=options, **kwargs)

    def soundboard_sound(self, sound_id: Snowflake) -> str:
        """Generate a soundboard sound URL (served without an extension)."""
        return self.url_for(AssetKind.SOUNDBOARD_SOUND, sound_id)
