"""
Base In-Memory Repository Implementation
"""
import itertools
from typing import TypeVar, Generic, Optional, Dict, Iterator

from pydantic import BaseModel

from ...repositories.base import BaseRepository


T = TypeVar('T', bound=BaseModel)


class MemoryBaseRepository(BaseRepository[T], Generic[T]):
    """
    Base in-memory repository implementation.

    Entities are kept in a per-instance dict keyed by their string id.
    No locking: callers sharing an instance across threads synchronize
    around it themselves.
    """

    def __init__(self):
        self._storage: Dict[str, T] = {}

    def _generate_id(self) -> str:
        """Smallest positive integer, as a string, not used as a key"""
        for candidate in itertools.count(1):
            entity_id = str(candidate)
            if entity_id not in self._storage:
                return entity_id

    def _normalize_id(self, entity_id) -> str:
        """Normalize entity ID to string"""
        return str(entity_id)

    def _merge(self, existing: T, incoming: T) -> T:
        """Record stored when incoming targets an occupied id"""
        return incoming

    def save(self, entity: T) -> T:
        """Insert or replace an entity, assigning an id when absent"""
        if entity.id is None:
            entity = entity.model_copy(update={"id": self._generate_id()})

        entity_id = self._normalize_id(entity.id)
        existing = self._storage.get(entity_id)
        if existing is not None:
            entity = self._merge(existing, entity)

        self._storage[entity_id] = entity
        return entity

    def find_by_id(self, entity_id) -> Optional[T]:
        """Get entity by ID"""
        if entity_id is None:
            return None
        return self._storage.get(self._normalize_id(entity_id))

    def exists(self, entity_id) -> bool:
        """Check if entity exists"""
        if entity_id is None:
            return False
        return self._normalize_id(entity_id) in self._storage

    def count(self) -> int:
        """Count entities"""
        return len(self._storage)

    def _iter_entities(self) -> Iterator[T]:
        return iter(self._storage.values())

    def __len__(self) -> int:
        return len(self._storage)
