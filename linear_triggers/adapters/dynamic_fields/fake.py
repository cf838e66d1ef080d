"""Fake dynamic field provider for testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linear_triggers.platform.configs.fields import DynamicFieldRef, FieldChoice
    from linear_triggers.platform.contexts.trigger import TriggerContext


class FakeDynamicFieldProvider:
    """Test implementation of DynamicFieldProviderProtocol.

    Returns seeded choices per lookup key and records every request.

    Usage:
        fake = FakeDynamicFieldProvider()
        fake.seed("team", [FieldChoice(value="team-1", label="Engineering")])

        fields = await service.resolve_input_fields("newIssue", ctx)
        assert fake.requested == ["team", "status", ...]
    """

    def __init__(self) -> None:
        """Initialize with no seeded choices."""
        self._choices: dict[str, list["FieldChoice"]] = {}
        self.requested: list[str] = []

    async def fetch_choices(
        self, ref: "DynamicFieldRef", ctx: "TriggerContext"
    ) -> list["FieldChoice"]:
        """Return the seeded choices for ``ref.lookup_key`` (empty if unseeded)."""
        self.requested.append(ref.lookup_key)
        return list(self._choices.get(ref.lookup_key, []))

    # Test helpers

    def seed(self, lookup_key: str, choices: list["FieldChoice"]) -> None:
        """Set the choices returned for a lookup key."""
        self._choices[lookup_key] = list(choices)
