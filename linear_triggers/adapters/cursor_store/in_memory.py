"""In-memory cursor store.

Keeps the poll cursor in process memory. Suitable for local runs of a
trigger; the host platform supplies its own persistent store in production.
"""

from __future__ import annotations

from typing import Optional


class InMemoryCursorStore:
    """In-memory implementation of the CursorStoreProtocol."""

    def __init__(self, initial: Optional[str] = None) -> None:
        """Initialize the store.

        Args:
            initial: Cursor value to start from, if any.
        """
        self._value = initial

    async def get(self) -> Optional[str]:
        """Return the stored cursor."""
        return self._value

    async def set(self, value: str) -> None:
        """Replace the stored cursor."""
        self._value = value
