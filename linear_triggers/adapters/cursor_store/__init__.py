"""Cursor store adapters."""

from linear_triggers.adapters.cursor_store.fake import FakeCursorStore
from linear_triggers.adapters.cursor_store.in_memory import InMemoryCursorStore

__all__ = ["InMemoryCursorStore", "FakeCursorStore"]
