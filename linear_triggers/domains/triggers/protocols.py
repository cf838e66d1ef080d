"""Protocols for trigger services."""

from typing import Any, Dict, List, Protocol

from linear_triggers.core.protocols.registry import RegistryProtocol
from linear_triggers.platform.configs.fields import InputField
from linear_triggers.platform.contexts.trigger import TriggerContext
from linear_triggers.platform.triggers._base import TriggerDefinition


class TriggerRegistryProtocol(RegistryProtocol[TriggerDefinition], Protocol):
    """Trigger registry protocol."""

    pass


class TriggerServiceProtocol(Protocol):
    """Runs triggers and renders their input fields for the host."""

    async def perform(self, key: str, ctx: TriggerContext) -> List[Dict[str, Any]]:
        """Run one poll of the trigger registered under ``key``."""
        ...

    async def resolve_input_fields(self, key: str, ctx: TriggerContext) -> List[InputField]:
        """Return the trigger's input fields with dynamic choices filled in."""
        ...

    def list_triggers(self) -> List[TriggerDefinition]:
        """List all registered triggers."""
        ...
