"""Entity shapes handled by the triggers."""

from linear_triggers.platform.entities.linear import IssueRecord, LinearIssueNode

__all__ = ["IssueRecord", "LinearIssueNode"]
