"""
Document store models
"""
from .document import Author, Document
from .search import SearchRequest

__all__ = ["Author", "Document", "SearchRequest"]
