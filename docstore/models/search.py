"""
Search request model
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .document import ensure_aware


class SearchRequest(BaseModel):
    """
    Document filter.

    Every field is optional; None means no constraint on that dimension.
    Dimensions are AND-ed, values within a list are OR-ed. Both created
    bounds are exclusive.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title_prefixes: Optional[List[str]] = Field(default=None, description="Accepted title prefixes")
    contains_contents: Optional[List[str]] = Field(default=None, description="Accepted content substrings")
    author_ids: Optional[List[str]] = Field(default=None, description="Accepted author identifiers")
    created_from: Optional[datetime] = Field(default=None, description="Exclusive lower bound on created")
    created_to: Optional[datetime] = Field(default=None, description="Exclusive upper bound on created")

    @field_validator('created_from', 'created_to')
    @classmethod
    def normalize_bounds(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_aware(v)

    def is_empty(self) -> bool:
        """True when no dimension is constrained"""
        return all(getattr(self, name) is None for name in type(self).model_fields)
