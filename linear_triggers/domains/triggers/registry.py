"""Trigger registry: in-memory registry built once at startup from ALL_TRIGGERS."""

from linear_triggers.core.logging import logger
from linear_triggers.domains.triggers.protocols import TriggerRegistryProtocol
from linear_triggers.platform.triggers import ALL_TRIGGERS
from linear_triggers.platform.triggers._base import TriggerDefinition

registry_logger = logger.with_prefix("TriggerRegistry: ").with_context(
    component="trigger_registry"
)


class TriggerRegistry(TriggerRegistryProtocol):
    """In-memory trigger registry, built once at startup from ALL_TRIGGERS."""

    def __init__(self) -> None:
        """Initialize an empty registry. Call build() to populate it."""
        self._entries: dict[str, TriggerDefinition] = {}

    def get(self, key: str) -> TriggerDefinition:
        """Get a trigger definition by key.

        Args:
            key: The trigger key (e.g., "newIssue").

        Returns:
            The registered trigger definition.

        Raises:
            KeyError: If no trigger with the given key is registered.
        """
        return self._entries[key]

    def list_all(self) -> list[TriggerDefinition]:
        """List all registered trigger definitions."""
        return list(self._entries.values())

    def build(self) -> None:
        """Build the registry from ALL_TRIGGERS.

        Raises:
            ValueError: If two triggers share a key.
        """
        for definition in ALL_TRIGGERS:
            if definition.key in self._entries:
                raise ValueError(f"Duplicate trigger key '{definition.key}'")
            self._entries[definition.key] = definition

        registry_logger.info(f"Built registry with {len(self._entries)} triggers.")
