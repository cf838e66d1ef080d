"""Dynamic field provider protocol.

Dropdown fields such as team or status are populated by the host platform
from lookup triggers referenced by key (``"team.id.name"``). The runtime
depends on this interface but never implements a real provider.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from linear_triggers.platform.configs.fields import DynamicFieldRef, FieldChoice
    from linear_triggers.platform.contexts.trigger import TriggerContext


@runtime_checkable
class DynamicFieldProviderProtocol(Protocol):
    """Protocol for resolving the choices of a dynamic input field.

    Implementations:
    - FakeDynamicFieldProvider: adapters/dynamic_fields/fake.py (tests)
    """

    async def fetch_choices(
        self, ref: "DynamicFieldRef", ctx: "TriggerContext"
    ) -> list["FieldChoice"]:
        """Return the selectable choices for ``ref``.

        Args:
            ref: Parsed dynamic reference (lookup key, value key, label key).
            ctx: Context of the trigger whose fields are being rendered.

        Returns:
            Choices in display order.
        """
        ...
