"""Input field schema for trigger configuration.

Input fields describe what the host platform renders in a trigger's setup
form. Keys and shapes follow the host's conventions; ``model_dump(by_alias=True)``
produces the camelCase form it expects.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FieldChoice(BaseModel):
    """One selectable value of a dropdown field."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Value stored in the trigger input.")
    label: str = Field(..., description="Text shown to the user.")
    sample: Optional[str] = Field(None, description="Value used when testing the trigger.")


class DynamicFieldRef(BaseModel):
    """Parsed dynamic dropdown reference.

    The host writes these as ``"<lookup_key>.<value_key>.<label_key>"``, e.g.
    ``"team.id.name"``: choices come from the ``team`` lookup, storing each
    record's ``id`` and showing its ``name``.
    """

    model_config = ConfigDict(frozen=True)

    lookup_key: str
    value_key: str
    label_key: str

    @classmethod
    def parse(cls, value: str) -> "DynamicFieldRef":
        """Parse a dotted dynamic reference.

        Raises:
            ValueError: If the reference does not have exactly three non-empty parts.
        """
        parts = value.split(".")
        if len(parts) != 3 or not all(parts):
            raise ValueError(
                f"Invalid dynamic reference '{value}': expected '<lookup>.<value>.<label>'"
            )
        lookup_key, value_key, label_key = parts
        return cls(lookup_key=lookup_key, value_key=value_key, label_key=label_key)

    def __str__(self) -> str:
        return f"{self.lookup_key}.{self.value_key}.{self.label_key}"


class InputField(BaseModel):
    """A single configurable input of a trigger."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    key: str = Field(..., description="Key under which the value appears in input data.")
    label: str = Field(..., description="Field label shown to the user.")
    required: bool = Field(False, description="Whether the trigger can run without it.")
    help_text: Optional[str] = Field(None, description="Help text shown under the field.")
    dynamic: Optional[str] = Field(
        None, description="Dynamic dropdown reference ('<lookup>.<value>.<label>')."
    )
    alters_dynamic_fields: bool = Field(
        False, description="Whether changing the value refreshes other dynamic fields."
    )
    choices: Optional[list[FieldChoice]] = Field(
        None, description="Static or resolved dropdown choices."
    )

    @field_validator("dynamic")
    @classmethod
    def validate_dynamic(cls, value: Optional[str]) -> Optional[str]:
        """Reject malformed dynamic references at definition time."""
        if value is not None:
            DynamicFieldRef.parse(value)
        return value

    @property
    def dynamic_ref(self) -> Optional[DynamicFieldRef]:
        """Parsed dynamic reference, or None for static fields."""
        if self.dynamic is None:
            return None
        return DynamicFieldRef.parse(self.dynamic)
