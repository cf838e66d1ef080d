"""Poll cursor for paging through a team's issues across invocations."""

from typing import Any, Mapping, Optional, Sequence

from linear_triggers.core.logging import ContextualLogger
from linear_triggers.core.protocols.cursor_store import CursorStoreProtocol


class PollCursor:
    """Runtime cursor wrapper around the host's cursor store.

    The stored value is the id of the last node fetched by the previous poll.
    It is read once at the start of an invocation and written at most once
    at the end.
    """

    def __init__(self, store: CursorStoreProtocol, logger: ContextualLogger):
        """Initialize the cursor.

        Args:
            store: Host-owned cursor store.
            logger: Logger for cursor reads and writes.
        """
        self._store = store
        self._logger = logger

    async def load(self, page: int) -> Optional[str]:
        """Return the cursor to resume from.

        The first poll of a sequence (``page`` falsy) starts from the top and
        does not read the store.
        """
        if not page:
            return None
        cursor = await self._store.get()
        self._logger.debug(f"Resuming after cursor {cursor!r} (page {page})")
        return cursor

    async def advance(self, nodes: Sequence[Mapping[str, Any]]) -> Optional[str]:
        """Store the id of the last fetched node, before any filtering.

        Returns:
            The stored cursor, or None when there was nothing to store.
        """
        if not nodes:
            return None
        next_cursor = nodes[-1].get("id")
        if not next_cursor:
            return None
        await self._store.set(next_cursor)
        self._logger.debug(f"Advanced cursor to {next_cursor!r}")
        return next_cursor
