"""Database package for People Service."""

from .memory_database import DEFAULT_PEOPLE, InMemoryPersonDatabase, get_database
from .person_database import PersonDatabase

__all__ = ["DEFAULT_PEOPLE", "InMemoryPersonDatabase", "PersonDatabase", "get_database"]
