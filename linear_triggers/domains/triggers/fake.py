"""In-test stand-in for the trigger registry."""

from __future__ import annotations

from linear_triggers.platform.triggers._base import TriggerDefinition


class FakeTriggerRegistry:
    """TriggerRegistryProtocol double that remembers which keys were asked for.

    Definitions are registered with ``seed()``. Every ``get`` is appended to
    ``lookups``; keys with no definition also land in ``misses`` before the
    KeyError the service translates into TriggerNotFoundError.
    """

    def __init__(self) -> None:
        self._by_key: dict[str, TriggerDefinition] = {}
        self.lookups: list[str] = []
        self.misses: list[str] = []

    def get(self, key: str) -> TriggerDefinition:
        self.lookups.append(key)
        if key not in self._by_key:
            self.misses.append(key)
            raise KeyError(key)
        return self._by_key[key]

    def list_all(self) -> list[TriggerDefinition]:
        return list(self._by_key.values())

    def seed(self, *definitions: TriggerDefinition) -> None:
        """Register definitions under their trigger keys."""
        for definition in definitions:
            self._by_key[definition.key] = definition
