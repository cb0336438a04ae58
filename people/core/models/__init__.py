"""Models for People Service."""

from .person import Person, serialize, serialize_json

__all__ = [
    "Person",
    "serialize",
    "serialize_json",
]
