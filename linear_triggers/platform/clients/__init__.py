"""API clients."""

from linear_triggers.platform.clients.linear import LinearClient

__all__ = ["LinearClient"]
