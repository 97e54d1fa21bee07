"""
Document Repository Interface
Repository for document upsert, lookup and filtered search.
"""
from abc import abstractmethod
from typing import Optional, List

from .base import BaseRepository
from ..models import Document, SearchRequest


class DocumentRepository(BaseRepository[Document]):
    """
    Repository interface for document operations.

    Implementations handle document storage, id assignment and search.
    """

    @abstractmethod
    def search(self, request: Optional[SearchRequest]) -> List[Document]:
        """
        Find documents matching every present filter of the request.

        Args:
            request: Filter specification; None matches nothing

        Returns:
            Matching documents, unordered
        """
        pass
