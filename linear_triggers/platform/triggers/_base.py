"""Trigger definition records."""

from typing import Any, Awaitable, Callable, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from linear_triggers.platform.configs.fields import InputField
from linear_triggers.platform.contexts.trigger import TriggerContext

PerformFunc = Callable[[TriggerContext], Awaitable[List[Dict[str, Any]]]]


class TriggerDisplay(BaseModel):
    """How the trigger is presented in the host UI."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str


class TriggerOperation(BaseModel):
    """What the trigger runs and which inputs it takes."""

    model_config = ConfigDict(frozen=True)

    input_fields: List[InputField] = Field(default_factory=list)
    sample: Dict[str, Any] = Field(default_factory=dict)
    can_paginate: bool = False
    perform: PerformFunc


class TriggerDefinition(BaseModel):
    """A polling trigger as registered with the host platform.

    Definitions are plain configuration: two triggers that differ only in a
    parameter share one ``perform`` implementation bound to different values.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    noun: str
    display: TriggerDisplay
    operation: TriggerOperation

    async def perform(self, ctx: TriggerContext) -> List[Dict[str, Any]]:
        """Run one poll of this trigger."""
        return await self.operation.perform(ctx)
