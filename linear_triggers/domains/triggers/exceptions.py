"""Trigger domain exceptions."""

from linear_triggers.core.exceptions import LinearTriggersException


class TriggerNotFoundError(LinearTriggersException):
    """Raised when no trigger is registered under the given key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Trigger not found: {key}")
