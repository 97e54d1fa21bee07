"""
Base Repository Interface
Generic repository pattern for data access abstraction.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional

from pydantic import BaseModel


T = TypeVar('T', bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository defining the standard store operations.

    All repository implementations must inherit from this class
    and implement the abstract methods.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """
        Insert or replace an entity.

        Args:
            entity: Entity to store, with or without an id

        Returns:
            Stored entity carrying its id
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[T]:
        """
        Get entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        """
        Check if entity exists.

        Args:
            entity_id: Entity identifier

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """
        Count stored entities.

        Returns:
            Number of entities
        """
        pass
