"""Read-only in-memory person database."""

import logging
from typing import Iterable, List, Optional

from people.core.models import Person

from .person_database import PersonDatabase

logger = logging.getLogger(__name__)

DEFAULT_PEOPLE = (
    Person(name="Jerry", age=30, favourite_food="Pizza"),
    Person(name="Tom", age=28, favourite_food=None),
)


class InMemoryPersonDatabase(PersonDatabase):
    """Serves a fixed roster of people in insertion order."""

    def __init__(self, people: Optional[Iterable[Person]] = None):
        self._people = tuple(DEFAULT_PEOPLE if people is None else people)
        logger.debug(f"Loaded {len(self._people)} people into memory")

    async def list_people(self, limit: int = 100, offset: int = 0) -> List[Person]:
        return list(self._people[offset : offset + limit])

    async def count_people(self) -> int:
        return len(self._people)


_database: Optional[InMemoryPersonDatabase] = None


def get_database() -> PersonDatabase:
    """Get the process-wide database instance."""
    global _database
    if _database is None:
        _database = InMemoryPersonDatabase()
    return _database
