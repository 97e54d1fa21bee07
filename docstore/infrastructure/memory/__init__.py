"""
In-Memory Repository Implementations
"""
from .base import MemoryBaseRepository
from .document_repository import DocumentStore

__all__ = [
    "MemoryBaseRepository",
    "DocumentStore",
]
