"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Frozen models give immutable records without hand-written read-only
  properties for every field.
- Type coercion happens at the edge (CLI strings, env vars) in one place.

Note:
- These models describe *what* a person record is, not *how* it is printed.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Gender(str, Enum):
    """Gender options for a person record."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNSPECIFIED = "unspecified"

    @classmethod
    def coerce(cls, value: Any) -> "Gender":
        """Map any value onto a member; unknown values become UNSPECIFIED.

        Integers follow the ordinal order of the members (0 = male).
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.UNSPECIFIED
        if isinstance(value, int):
            members = list(cls)
            return members[value] if 0 <= value < len(members) else cls.UNSPECIFIED
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.UNSPECIFIED
        return cls.UNSPECIFIED

    def label(self) -> str:
        """Human readable label used in printed records."""

        return _GENDER_LABELS.get(self, "Unspecified")


_GENDER_LABELS: dict[Gender, str] = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
    Gender.OTHER: "Other",
}


class PersonRecord(BaseModel):
    """One individual's stored attributes.

    Records are frozen: there are no setters, and assigning to a field raises
    a `ValidationError`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Full name of the person.",
    )
    age: int = Field(
        ...,
        strict=True,
        description="Age in years. Must be a real int (no bool/float/str coercion); not range-checked.",
    )
    address: str = Field(
        ...,
        description="Home address.",
    )
    occupation: str = Field(
        ...,
        description="Occupation or role.",
    )
    gender: Gender = Field(
        default=Gender.UNSPECIFIED,
        description="Gender; unknown inputs are stored as 'unspecified'.",
    )

    @field_validator("gender", mode="before")
    @classmethod
    def _coerce_gender(cls, value: Any) -> Gender:
        return Gender.coerce(value)

    def gender_label(self) -> str:
        return self.gender.label()
