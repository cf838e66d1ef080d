"""Sample payloads for trigger tests in the host UI."""

from linear_triggers.platform.samples.issue import ISSUE_SAMPLE

__all__ = ["ISSUE_SAMPLE"]
