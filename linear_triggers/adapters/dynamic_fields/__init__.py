"""Dynamic field provider adapters."""

from linear_triggers.adapters.dynamic_fields.fake import FakeDynamicFieldProvider

__all__ = ["FakeDynamicFieldProvider"]
