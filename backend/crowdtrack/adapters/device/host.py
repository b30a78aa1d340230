"""Device info read from the Python host.

Useful for server-side and command-line clients: the OS fields come from
``platform`` and the display language from the process locale. Mobile-only
fields keep their neutral defaults.
"""

import locale
import platform
from typing import Optional

from crowdtrack.schemas.device import DeviceIdiom, DeviceInfo


def _language() -> Optional[str]:
    lang, _ = locale.getlocale()
    if not lang:
        return None
    return lang.split("_")[0]


class HostDeviceInfoProvider:
    """DeviceInfoProvider backed by the interpreter's host."""

    def __init__(self, content_size_category: Optional[str] = None) -> None:
        self._content_size_category = content_size_category

    def snapshot(self) -> DeviceInfo:
        return DeviceInfo(
            system_name=platform.system() or None,
            system_version=platform.release() or None,
            model=platform.machine() or None,
            manufacturer=None,
            idiom=DeviceIdiom.UNSPECIFIED,
            language=_language(),
        )

    def preferred_content_size_category(self) -> Optional[str]:
        return self._content_size_category
