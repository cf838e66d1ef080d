"""Fake cursor store for testing.

Records every read and write for assertions.
"""

from __future__ import annotations

from typing import Optional


class FakeCursorStore:
    """Test implementation of CursorStoreProtocol.

    Usage:
        store = FakeCursorStore(initial="issue-5")
        await fetch_issues(OrderField.CREATED_AT, ctx_with(store))

        assert store.get_calls == 1
        assert store.writes == ["issue-10"]
    """

    def __init__(self, initial: Optional[str] = None) -> None:
        """Initialize with an optional stored cursor."""
        self.value = initial
        self.get_calls = 0
        self.writes: list[str] = []

    async def get(self) -> Optional[str]:
        """Record the read and return the stored cursor."""
        self.get_calls += 1
        return self.value

    async def set(self, value: str) -> None:
        """Record the write and store the cursor."""
        self.writes.append(value)
        self.value = value

    # Test helpers

    @property
    def touched(self) -> bool:
        """Whether the store was read or written at all."""
        return self.get_calls > 0 or bool(self.writes)
