"""Application settings.

Uses Pydantic Settings for automatic env var loading. All defaults live here.
"""

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crowdtrack.core.config.enums import Environment, LogLevel


class Settings(BaseSettings):
    """Settings for the tracking layer and its sinks.

    Env vars map one-to-one onto field names:
        ANALYTICS_ENABLED=false
        POSTHOG_API_KEY=phc_...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: LogLevel = LogLevel.INFO

    ANALYTICS_ENABLED: bool = Field(True, description="Master switch for every sink")

    # Primary sink
    POSTHOG_API_KEY: Optional[str] = None
    POSTHOG_HOST: str = "https://app.posthog.com"

    # Secondary (data lake) sink, receives allow-listed events only
    DATA_LAKE_ENABLED: bool = True
    DATA_LAKE_URL: Optional[str] = None
    DATA_LAKE_API_KEY: Optional[str] = None
    DATA_LAKE_TIMEOUT_SECONDS: float = Field(5.0, gt=0)
    DATA_LAKE_MAX_ATTEMPTS: int = Field(3, ge=1)
    DATA_LAKE_RETRY_BACKOFF_SECONDS: float = Field(0.5, ge=0)

    # Session context constants
    MP_LIB: str = "kickstarter_ios"
    FEATURE_FLAG_PREFIX: str = "ios_"
    USER_AGENT: Optional[str] = None
    APP_BUILD_NUMBER: Optional[str] = None
    APP_RELEASE_VERSION: Optional[str] = None

    @model_validator(mode="after")
    def validate_data_lake(self):
        """Reject a data lake URL that is not http(s)."""
        if self.DATA_LAKE_URL and not self.DATA_LAKE_URL.startswith(("http://", "https://")):
            raise ValueError(f"DATA_LAKE_URL must be an http(s) URL, got '{self.DATA_LAKE_URL}'")
        return self

    @property
    def sinks_enabled(self) -> bool:
        """Whether events should reach real backends at all."""
        return self.ANALYTICS_ENABLED and self.ENVIRONMENT not in (
            Environment.LOCAL,
            Environment.TEST,
        )
