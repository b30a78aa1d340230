"""Fixed device info, for tests and hosts that push their own state."""

from typing import Optional

from crowdtrack.schemas.device import DeviceInfo


class StaticDeviceInfoProvider:
    """DeviceInfoProvider returning whatever it was last given.

    Usage:
        provider = StaticDeviceInfoProvider(DeviceInfo(system_name="iOS"), "large")
        provider.content_size_category = "extra_large"
    """

    def __init__(
        self,
        device: Optional[DeviceInfo] = None,
        content_size_category: Optional[str] = None,
    ) -> None:
        self.device = device or DeviceInfo()
        self.content_size_category = content_size_category
        self.snapshot_count = 0

    def snapshot(self) -> DeviceInfo:
        self.snapshot_count += 1
        return self.device

    def preferred_content_size_category(self) -> Optional[str]:
        return self.content_size_category
