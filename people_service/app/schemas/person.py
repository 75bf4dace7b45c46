"""
Pydantic schema for person records.

A person carries an integer ``id`` assigned by whoever produced the
data file, plus a handful of optional descriptive strings.  Ids must
be JSON integers within the signed 32-bit range; strings, booleans
and floats are rejected rather than coerced.  Field names are
snake_case in Python and camelCase on the JSON wire
(``firstName``, ``photoUrl``), and both spellings are accepted when
reading the data file.  Any other keys found in the file are kept as
opaque extra fields so that they survive a round trip through the
REST API unchanged.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Ids travel as int32 on the gRPC surface, so the data file is held to
# the same range.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


class Person(BaseModel):
    """Schema for reading a person record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    id: int = Field(
        ...,
        strict=True,
        ge=ID_MIN,
        le=ID_MAX,
        description="Identifier assigned in the source data",
    )
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    bio: Optional[str] = None
    photo_url: Optional[str] = None

    @property
    def extra_fields(self) -> Dict[str, Any]:
        """Keys from the source data that are not part of the schema."""
        return dict(self.model_extra or {})
