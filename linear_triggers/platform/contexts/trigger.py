"""Trigger context: everything one poll needs from the host platform."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional

from linear_triggers.core.logging import ContextualLogger, logger

if TYPE_CHECKING:
    import httpx

    from linear_triggers.core.protocols.cursor_store import CursorStoreProtocol


@dataclass
class TriggerContext:
    """Per-invocation inputs injected by the host.

    Attributes:
        input_data: Values the user configured in the trigger's input fields.
        api_key: Linear API key used to authenticate the GraphQL request.
        cursor_store: Host-owned store holding the cursor between polls.
        page: Page index of this poll in the current polling sequence. ``0``
            marks the first invocation, which never reads the stored cursor.
        http_client: Optional shared HTTP client. The caller owns its lifecycle.
        logger: Contextual logger for this invocation.
    """

    input_data: Mapping[str, Any]
    api_key: str
    cursor_store: "CursorStoreProtocol"
    page: int = 0
    http_client: Optional["httpx.AsyncClient"] = None
    logger: ContextualLogger = field(default_factory=lambda: logger)

    def get_input(self, key: str) -> Optional[str]:
        """Return a configured input value, treating empty strings as unset."""
        value = self.input_data.get(key)
        if value is None or value == "":
            return None
        return str(value)
