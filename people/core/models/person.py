"""Person model using Pydantic."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from ..constraints import MAX_AGE, MIN_AGE


class Person(BaseModel):
    """A single individual as reported to external consumers.

    Field declaration order is the serialized key order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr = Field(..., description="Display name of the person")
    age: StrictInt = Field(
        ...,
        ge=MIN_AGE,
        le=MAX_AGE,
        description="Age in whole years (unsigned 32-bit)",
    )
    favourite_food: Optional[StrictStr] = Field(
        None, description="Favourite food, null when unknown"
    )

    def serialize(self) -> Dict[str, Any]:
        return serialize(self)

    def to_json(self) -> str:
        return serialize_json(self)


def serialize(person: Person) -> Dict[str, Any]:
    """Convert a person into an ordered mapping of its fields.

    An absent favourite food is kept as ``None`` rather than dropped.
    """
    return person.model_dump(mode="json", exclude_none=False)


def serialize_json(person: Person) -> str:
    """Compact JSON text for a person, e.g. ``{"name":"Ada","age":36,"favourite_food":"tea"}``.

    Non-ASCII text is written as is. Lone surrogates, which have no UTF-8
    form, are written as ``\\uXXXX`` escapes so the text always encodes.
    """
    text = json.dumps(serialize(person), ensure_ascii=False, separators=(",", ":"))
    # Surrogates only occur inside string values, where backslashreplace
    # yields a valid JSON escape.
    return text.encode("utf-8", "backslashreplace").decode("utf-8")
