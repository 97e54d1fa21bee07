"""
In-Memory Document Repository Implementation
"""
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Optional, List, Iterable, Callable, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from .base import MemoryBaseRepository
from ...core.config import StoreSettings, UpdatePolicy, get_settings
from ...core.errors import InvalidDocumentError, InvalidSearchRequestError
from ...core.logging_framework import LogCategory
from ...models import Document, SearchRequest
from ...models.document import ensure_aware
from ...repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)

V = TypeVar('V')


def _any_match(values: Optional[Iterable[V]], predicate: Callable[[V], bool]) -> bool:
    """An absent filter matches; a present one needs at least one hit"""
    return values is None or any(predicate(value) for value in values)


class DocumentStore(MemoryBaseRepository[Document], DocumentRepository):
    """In-memory document repository implementation"""

    def __init__(self, settings: Optional[StoreSettings] = None):
        super().__init__()
        self.settings = settings or get_settings()

    # ==================== Write Operations ====================

    def save(self, document: Union[Document, Mapping]) -> Document:
        """
        Upsert a document.

        A document without an id gets the smallest free positive integer id.
        Saving over an existing id follows the configured UpdatePolicy.
        """
        document = self._coerce_document(document)
        if document.created is not None and document.created.tzinfo is None:
            document = document.model_copy(update={"created": ensure_aware(document.created)})
        assigned = document.id is None

        stored = super().save(document)

        logger.debug(
            "Saved document %s (%s)",
            stored.id,
            "assigned id" if assigned else "explicit id",
            extra={
                "category": LogCategory.STORAGE.value,
                "extra_data": {"document_id": stored.id, "total": len(self)}
            }
        )
        return stored

    def _merge(self, existing: Document, incoming: Document) -> Document:
        if self.settings.UPDATE_POLICY == UpdatePolicy.PRESERVE_CREATED:
            return existing.model_copy(update={
                "title": incoming.title,
                "content": incoming.content,
                "author": incoming.author,
            })
        return incoming

    # ==================== Read Operations ====================

    def search(self, request: Union[SearchRequest, Mapping, None]) -> List[Document]:
        """Return every stored document matching all present filters"""
        if request is None:
            return []

        request = self._coerce_request(request)
        if request.is_empty():
            results = list(self._iter_entities())
        else:
            results = [doc for doc in self._iter_entities() if self._matches(doc, request)]

        logger.debug(
            "Search matched %d of %d documents",
            len(results),
            len(self),
            extra={
                "category": LogCategory.SEARCH.value,
                "extra_data": request.model_dump(exclude_none=True, mode="json")
            }
        )
        return results

    # ==================== Matching ====================

    def _fold(self, text: str) -> str:
        return text if self.settings.CASE_SENSITIVE else text.casefold()

    def _matches(self, doc: Document, request: SearchRequest) -> bool:
        return (
            self._matches_title(doc, request.title_prefixes)
            and self._matches_content(doc, request.contains_contents)
            and self._matches_author(doc, request.author_ids)
            and self._matches_created(doc, request.created_from, request.created_to)
        )

    def _matches_title(self, doc: Document, prefixes: Optional[List[str]]) -> bool:
        if prefixes is not None and doc.title is None:
            return False
        return _any_match(prefixes, lambda prefix: self._fold(doc.title).startswith(self._fold(prefix)))

    def _matches_content(self, doc: Document, contents: Optional[List[str]]) -> bool:
        if contents is not None and doc.content is None:
            return False
        return _any_match(contents, lambda part: self._fold(part) in self._fold(doc.content))

    def _matches_author(self, doc: Document, author_ids: Optional[List[str]]) -> bool:
        if author_ids is not None and doc.author_id is None:
            return False
        return _any_match(author_ids, lambda author_id: author_id == doc.author_id)

    def _matches_created(
        self,
        doc: Document,
        created_from: Optional[datetime],
        created_to: Optional[datetime]
    ) -> bool:
        if created_from is None and created_to is None:
            return True
        if doc.created is None:
            return False
        created = ensure_aware(doc.created)
        if created_from is not None and not created > ensure_aware(created_from):
            return False
        if created_to is not None and not created < ensure_aware(created_to):
            return False
        return True

    # ==================== Input Coercion ====================

    def _coerce_document(self, document) -> Document:
        if isinstance(document, Document):
            return document
        if not isinstance(document, Mapping):
            raise InvalidDocumentError(
                f"Expected Document or mapping, got {type(document).__name__}"
            )
        try:
            return Document.model_validate(document)
        except PydanticValidationError as e:
            raise InvalidDocumentError(errors=e.errors(include_url=False), cause=e) from e

    def _coerce_request(self, request) -> SearchRequest:
        if isinstance(request, SearchRequest):
            return request
        if not isinstance(request, Mapping):
            raise InvalidSearchRequestError(
                f"Expected SearchRequest or mapping, got {type(request).__name__}"
            )
        try:
            return SearchRequest.model_validate(request)
        except PydanticValidationError as e:
            raise InvalidSearchRequestError(errors=e.errors(include_url=False), cause=e) from e
