"""
Tests for Document Models

Tests Pydantic validation for Author, Document and SearchRequest.
"""
import pytest
from datetime import datetime, timezone
from pydantic import ValidationError


class TestAuthor:
    """Tests for Author model"""

    def test_compared_by_value(self):
        """Test authors with equal fields are equal"""
        from docstore.models import Author

        assert Author(id="a1", name="Alice") == Author(id="a1", name="Alice")
        assert Author(id="a1", name="Alice") != Author(id="a1", name="Alicia")

    def test_immutable(self):
        """Test authors cannot be modified"""
        from docstore.models import Author

        author = Author(id="a1", name="Alice")
        with pytest.raises(ValidationError):
            author.name = "Mallory"


class TestDocument:
    """Tests for Document model"""

    def test_all_fields_optional(self):
        """Test an empty document is valid"""
        from docstore.models import Document

        doc = Document()
        assert doc.id is None
        assert doc.title is None
        assert doc.author is None
        assert doc.author_id is None

    def test_with_id_returns_copy(self):
        """Test with_id leaves the original untouched"""
        from docstore.models import Document

        doc = Document(title="t")
        copy = doc.with_id("5")

        assert copy.id == "5"
        assert copy.title == "t"
        assert doc.id is None

    def test_immutable(self):
        """Test documents cannot be modified in place"""
        from docstore.models import Document

        doc = Document(title="t")
        with pytest.raises(ValidationError):
            doc.id = "1"

    def test_naive_created_is_utc(self):
        """Test naive timestamps are interpreted as UTC"""
        from docstore.models import Document

        doc = Document(created=datetime(2024, 5, 1, 8, 30))
        assert doc.created.tzinfo is not None
        assert doc.created == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)

    def test_author_from_mapping(self):
        """Test nested author validation"""
        from docstore.models import Document

        doc = Document.model_validate({"author": {"id": "a1", "name": "Alice"}})
        assert doc.author_id == "a1"

    def test_rejects_wrong_types(self):
        """Test non-string title is rejected"""
        from docstore.models import Document

        with pytest.raises(ValidationError):
            Document(title=123)


class TestSearchRequest:
    """Tests for SearchRequest model"""

    def test_defaults_are_unconstrained(self):
        """Test a default request constrains nothing"""
        from docstore.models import SearchRequest

        request = SearchRequest()
        assert request.is_empty()
        assert request.title_prefixes is None
        assert request.created_from is None

    def test_not_empty_with_any_filter(self):
        """Test a single filter makes the request non-empty"""
        from docstore.models import SearchRequest

        assert not SearchRequest(author_ids=[]).is_empty()
        assert not SearchRequest(created_to=datetime.now(timezone.utc)).is_empty()

    def test_camel_case_aliases(self):
        """Test camelCase keys are accepted"""
        from docstore.models import SearchRequest

        request = SearchRequest.model_validate({
            "titlePrefixes": ["He"],
            "containsContents": ["x"],
            "authorIds": ["a1"],
        })
        assert request.title_prefixes == ["He"]
        assert request.contains_contents == ["x"]
        assert request.author_ids == ["a1"]

    def test_accepts_sets_and_tuples(self):
        """Test any collection of strings is accepted"""
        from docstore.models import SearchRequest

        request = SearchRequest(title_prefixes=("a", "b"), author_ids={"a1"})
        assert sorted(request.title_prefixes) == ["a", "b"]
        assert request.author_ids == ["a1"]

    def test_naive_bounds_are_utc(self):
        """Test naive bounds are interpreted as UTC"""
        from docstore.models import SearchRequest

        request = SearchRequest(created_from=datetime(2024, 1, 1))
        assert request.created_from.tzinfo is not None

    def test_rejects_invalid_bounds(self):
        """Test non-datetime bounds are rejected"""
        from docstore.models import SearchRequest

        with pytest.raises(ValidationError):
            SearchRequest(created_to="yesterday")
