"""
docstore - in-memory document repository with upsert, lookup and filtered search.
"""
from .core import StoreSettings, UpdatePolicy, configure_logging
from .infrastructure.memory import DocumentStore
from .models import Author, Document, SearchRequest

__version__ = "1.0.0"

__all__ = [
    "Author",
    "Document",
    "SearchRequest",
    "DocumentStore",
    "StoreSettings",
    "UpdatePolicy",
    "configure_logging",
]
