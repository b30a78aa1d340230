"""Device and runtime snapshot schema."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DeviceIdiom(str, Enum):
    """Interface idiom the client is running under."""

    PHONE = "phone"
    PAD = "pad"
    TV = "tv"
    UNSPECIFIED = "unspecified"


class DeviceOrientation(str, Enum):
    """Physical orientation; values are the tracked labels."""

    FACE_DOWN = "Face Down"
    FACE_UP = "Face Up"
    LANDSCAPE_LEFT = "Landscape Left"
    LANDSCAPE_RIGHT = "Landscape Right"
    PORTRAIT = "Portrait"
    PORTRAIT_UPSIDE_DOWN = "Portrait Upside Down"
    UNKNOWN = "Unknown"


class DeviceInfo(BaseModel):
    """Point-in-time device/runtime state.

    Produced by a ``DeviceInfoProvider`` once per tracked event and never
    cached by the tracker.
    """

    model_config = ConfigDict(frozen=True)

    system_name: Optional[str] = None
    system_version: Optional[str] = None
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    idiom: DeviceIdiom = DeviceIdiom.UNSPECIFIED
    orientation: DeviceOrientation = DeviceOrientation.UNKNOWN
    screen_width: Optional[float] = None
    language: Optional[str] = None
    cellular_radio: Optional[str] = None
    is_wifi: bool = False
    is_voiceover_running: bool = False
    apple_pay_capable: bool = False
    apple_pay_device: bool = False
