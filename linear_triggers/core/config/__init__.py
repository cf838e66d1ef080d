"""Configuration module for the Linear trigger runtime.

Usage:
    from linear_triggers.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from linear_triggers.core.config.enums import Environment, LogLevel
from linear_triggers.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "settings",
]

# Singleton settings instance
settings = Settings()
