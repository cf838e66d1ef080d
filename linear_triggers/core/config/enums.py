"""Configuration enums for type-safe settings.

These enums inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior like log formatting.
    """

    LOCAL = "local"
    TEST = "test"
    PRD = "prd"


class LogLevel(str, Enum):
    """Log levels accepted by LOG_LEVEL."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
