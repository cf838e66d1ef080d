"""Core protocols for dependency injection."""

from linear_triggers.core.protocols.cursor_store import CursorStoreProtocol
from linear_triggers.core.protocols.dynamic_fields import DynamicFieldProviderProtocol
from linear_triggers.core.protocols.registry import RegistryProtocol

__all__ = [
    "CursorStoreProtocol",
    "DynamicFieldProviderProtocol",
    "RegistryProtocol",
]
