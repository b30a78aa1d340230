"""Device info provider adapters."""

from crowdtrack.adapters.device.host import HostDeviceInfoProvider
from crowdtrack.adapters.device.static import StaticDeviceInfoProvider

__all__ = ["HostDeviceInfoProvider", "StaticDeviceInfoProvider"]
