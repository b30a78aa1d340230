"""Configuration module for crowdtrack.

Provides centralized configuration management with type-safe enums.

Usage:
    from crowdtrack.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from crowdtrack.core.config.enums import Environment, LogLevel
from crowdtrack.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "settings",
]

# Singleton settings instance
settings = Settings()
