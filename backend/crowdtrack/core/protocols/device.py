"""Protocol for reading device and runtime state."""

from typing import Optional, Protocol, runtime_checkable

from crowdtrack.schemas.device import DeviceInfo


@runtime_checkable
class DeviceInfoProvider(Protocol):
    """Source of the per-event device snapshot."""

    def snapshot(self) -> DeviceInfo:
        """Current device/runtime state. Called once per tracked event."""
        ...

    def preferred_content_size_category(self) -> Optional[str]:
        """Current preferred text size category, if the platform has one."""
        ...
