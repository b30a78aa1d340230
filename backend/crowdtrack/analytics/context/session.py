"""Session context: device, runtime and environment state.

Recomputed for every event. The only cached input is the preferred
content size category, which the caller reads from its
``ContentSizeCategoryObserver`` and passes in.
"""

from datetime import datetime
from typing import List, Optional

from crowdtrack.analytics.properties import Properties, prefix
from crowdtrack.core.config import Settings
from crowdtrack.schemas.device import DeviceIdiom, DeviceInfo
from crowdtrack.schemas.user import RemoteConfig, User

SESSION_PREFIX = "session_"

_DEVICE_FORMATS = {
    DeviceIdiom.PHONE: "phone",
    DeviceIdiom.PAD: "tablet",
    DeviceIdiom.TV: "tv",
    DeviceIdiom.UNSPECIFIED: "unspecified",
}

_CLIENT_PLATFORMS = {
    DeviceIdiom.PHONE: "ios",
    DeviceIdiom.PAD: "ios",
    DeviceIdiom.TV: "tvos",
    DeviceIdiom.UNSPECIFIED: "unspecified",
}


def enabled_features(config: Optional[RemoteConfig], feature_prefix: str) -> Optional[List[str]]:
    """Sorted names of the enabled feature flags under ``feature_prefix``."""
    if config is None:
        return None
    return sorted(
        name for name, enabled in config.features.items() if enabled and name.startswith(feature_prefix)
    )


def current_variants(config: Optional[RemoteConfig]) -> Optional[List[str]]:
    """Sorted A/B experiment assignments, or ``None`` without a config."""
    if config is None:
        return None
    return sorted(config.ab_experiments_array)


def session_properties(
    device: DeviceInfo,
    *,
    distinct_id: str,
    settings: Settings,
    now: datetime,
    config: Optional[RemoteConfig] = None,
    logged_in_user: Optional[User] = None,
    content_size_category: Optional[str] = None,
    ref_tag: Optional[str] = None,
    referrer_credit: Optional[str] = None,
) -> Properties:
    """Build the ``session_``-prefixed bag.

    Args:
        device: Device snapshot taken for this event.
        distinct_id: Stable per-install identifier.
        settings: Source of the static client constants.
        now: Event time.
        config: Remote config, if the host has pushed one.
        logged_in_user: Current user, if any.
        content_size_category: Cached preferred text size.
        ref_tag: Navigation ref tag for this event.
        referrer_credit: Ref tag credited from cookie storage.

    Returns:
        A bag with every session key present.
    """
    props: Properties = {
        "apple_pay_capable": device.apple_pay_capable,
        "apple_pay_device": device.apple_pay_device,
        "cellular_connection": device.cellular_radio,
        "client_type": "native",
        "current_variants": current_variants(config),
        "display_language": device.language,
        "device_format": _DEVICE_FORMATS[device.idiom],
        "device_manufacturer": device.manufacturer,
        "device_model": device.model,
        "device_orientation": device.orientation.value,
        "device_distinct_id": distinct_id,
        "enabled_features": enabled_features(config, settings.FEATURE_FLAG_PREFIX),
        "is_voiceover_running": device.is_voiceover_running,
        "mp_lib": settings.MP_LIB,
        "os": device.system_name,
        "os_version": device.system_version,
        "time": now.timestamp(),
        "app_build_number": settings.APP_BUILD_NUMBER,
        "app_release_version": settings.APP_RELEASE_VERSION,
        "screen_width": int(device.screen_width) if device.screen_width is not None else None,
        "user_agent": settings.USER_AGENT,
        "user_logged_in": logged_in_user is not None,
        "wifi_connection": device.is_wifi,
        "client_platform": _CLIENT_PLATFORMS[device.idiom],
        "preferred_content_size_category": content_size_category,
        "ref_tag": ref_tag,
        "referrer_credit": referrer_credit,
    }
    return prefix(props, SESSION_PREFIX)
