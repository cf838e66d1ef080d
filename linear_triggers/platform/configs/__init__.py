"""Trigger configuration schemas."""

from linear_triggers.platform.configs.fields import DynamicFieldRef, FieldChoice, InputField
from linear_triggers.platform.configs.issue import ISSUE_INPUT_FIELDS, PRIORITY_CHOICES

__all__ = [
    "DynamicFieldRef",
    "FieldChoice",
    "InputField",
    "ISSUE_INPUT_FIELDS",
    "PRIORITY_CHOICES",
]
