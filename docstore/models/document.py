"""
Document-related Pydantic models
"""
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def ensure_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with aware ones"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Author embedded in a document"""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Opaque author identifier")
    name: Optional[str] = Field(default=None, description="Display name")


class Document(BaseModel):
    """
    Stored document record.

    The id is assigned by the store on first save when absent and is never
    reassigned. ``created`` is supplied by the caller.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Document identifier")
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = Field(default=None, description="Creation timestamp")

    @field_validator('created')
    @classmethod
    def normalize_created(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_aware(v)

    @property
    def author_id(self) -> Optional[str]:
        return self.author.id if self.author else None

    def with_id(self, document_id: str) -> "Document":
        """Return a copy carrying the given id"""
        return self.model_copy(update={"id": document_id})
