"""Runtime contexts."""

from linear_triggers.platform.contexts.trigger import TriggerContext

__all__ = ["TriggerContext"]
