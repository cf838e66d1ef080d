"""Protocols for registries."""

from typing import Protocol, TypeVar

EntryT = TypeVar("EntryT", covariant=True)


class RegistryProtocol(Protocol[EntryT]):
    """Base protocol for in-memory registries.

    Built once at startup. All lookups are synchronous dict reads.
    """

    def get(self, key: str) -> EntryT:
        """Get an entry by key. Raises KeyError if not found."""
        ...

    def list_all(self) -> list[EntryT]:
        """List all registered entries."""
        ...
