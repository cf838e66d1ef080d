"""Cursor store protocol for poll pagination.

The host platform owns the stored cursor between polls. The trigger reads it
once at the start of an invocation and writes it at most once at the end.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CursorStoreProtocol(Protocol):
    """Protocol for the externally owned poll cursor.

    Implementations:
    - InMemoryCursorStore: adapters/cursor_store/in_memory.py
    - FakeCursorStore: adapters/cursor_store/fake.py (tests)
    """

    async def get(self) -> Optional[str]:
        """Return the cursor stored by the previous poll, if any."""
        ...

    async def set(self, value: str) -> None:
        """Store the cursor for the next poll."""
        ...
