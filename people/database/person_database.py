"""Abstract PersonDatabase class for read operations."""

from abc import ABC, abstractmethod
from typing import List

from people.core.models import Person


class PersonDatabase(ABC):
    """Abstract base class for person database operations."""

    @abstractmethod
    async def list_people(self, limit: int = 100, offset: int = 0) -> List[Person]:
        pass

    @abstractmethod
    async def count_people(self) -> int:
        pass
