"""Shared exceptions module."""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """How the host platform should treat a failed poll."""

    USER_CONFIGURATION = "user_configuration"


class LinearTriggersException(Exception):
    """Base exception for the Linear trigger runtime."""

    pass


class HaltedError(LinearTriggersException):
    """Exception raised when a poll cannot run until the user fixes its configuration.

    The host stops the trigger instead of retrying it.
    """

    category = ErrorCategory.USER_CONFIGURATION
    retryable = False

    def __init__(self, message: Optional[str] = "Trigger halted"):
        """Create a new HaltedError instance.

        Args:
        ----
            message (str, optional): The error message shown to the user.

        """
        self.message = message
        super().__init__(self.message)
