"""Trigger service: entry point the host calls to run and render triggers."""

from dataclasses import replace
from typing import Any, Dict, List

from linear_triggers.core.exceptions import HaltedError
from linear_triggers.core.protocols.dynamic_fields import DynamicFieldProviderProtocol
from linear_triggers.domains.triggers.exceptions import TriggerNotFoundError
from linear_triggers.domains.triggers.protocols import TriggerRegistryProtocol
from linear_triggers.platform.configs.fields import InputField
from linear_triggers.platform.contexts.trigger import TriggerContext
from linear_triggers.platform.triggers._base import TriggerDefinition


class TriggerService:
    """Runs registered triggers and resolves their dynamic input fields."""

    def __init__(
        self,
        registry: TriggerRegistryProtocol,
        dynamic_field_provider: DynamicFieldProviderProtocol,
    ) -> None:
        """Initialize the service.

        Args:
            registry: Registry to look trigger definitions up in.
            dynamic_field_provider: Host lookup used to fill dynamic dropdowns.
        """
        self._registry = registry
        self._dynamic_field_provider = dynamic_field_provider

    def _get(self, key: str) -> TriggerDefinition:
        try:
            return self._registry.get(key)
        except KeyError:
            raise TriggerNotFoundError(key)

    def list_triggers(self) -> List[TriggerDefinition]:
        """List all registered triggers."""
        return self._registry.list_all()

    async def perform(self, key: str, ctx: TriggerContext) -> List[Dict[str, Any]]:
        """Run one poll of the trigger registered under ``key``.

        The trigger runs on a copy of ``ctx`` whose logger is tagged with the
        trigger key. Errors from the trigger propagate unchanged.

        Raises:
            TriggerNotFoundError: If no trigger is registered under ``key``.
        """
        definition = self._get(key)
        run_ctx = replace(ctx, logger=ctx.logger.with_context(trigger=key))

        try:
            records = await definition.perform(run_ctx)
        except HaltedError as e:
            run_ctx.logger.warning(f"Trigger halted: {e.message}")
            raise

        run_ctx.logger.info(f"Poll returned {len(records)} records")
        return records

    async def resolve_input_fields(self, key: str, ctx: TriggerContext) -> List[InputField]:
        """Return the trigger's input fields with dynamic choices filled in.

        Static fields are returned as defined.

        Raises:
            TriggerNotFoundError: If no trigger is registered under ``key``.
        """
        definition = self._get(key)
        resolved: List[InputField] = []
        for input_field in definition.operation.input_fields:
            ref = input_field.dynamic_ref
            if ref is None:
                resolved.append(input_field)
                continue
            choices = await self._dynamic_field_provider.fetch_choices(ref, ctx)
            resolved.append(input_field.model_copy(update={"choices": choices}))
        return resolved
