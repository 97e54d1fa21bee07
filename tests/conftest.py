"""
Pytest Configuration and Shared Fixtures

Provides fresh stores, authors, documents and fixed timestamps.
"""
import os
import sys
import pytest
from datetime import datetime, timedelta, timezone

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ==================== Settings Fixtures ====================

@pytest.fixture
def settings():
    """Default settings, isolated from the environment's .env file"""
    from docstore.core.config import StoreSettings
    return StoreSettings(_env_file=None)


@pytest.fixture
def store(settings):
    """Provide a fresh store with default settings"""
    from docstore import DocumentStore
    return DocumentStore(settings)


@pytest.fixture
def preserving_store():
    """Provide a store that keeps the stored created timestamp on update"""
    from docstore import DocumentStore
    from docstore.core.config import StoreSettings, UpdatePolicy
    return DocumentStore(StoreSettings(_env_file=None, UPDATE_POLICY=UpdatePolicy.PRESERVE_CREATED))


@pytest.fixture
def case_insensitive_store():
    """Provide a store with case-insensitive text matching"""
    from docstore import DocumentStore
    from docstore.core.config import StoreSettings
    return DocumentStore(StoreSettings(_env_file=None, CASE_SENSITIVE=False))


# ==================== Test Data Fixtures ====================

@pytest.fixture
def t0() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def t1(t0) -> datetime:
    return t0 + timedelta(days=1)


@pytest.fixture
def alice():
    from docstore import Author
    return Author(id="a1", name="Alice")


@pytest.fixture
def bob():
    from docstore import Author
    return Author(id="a2", name="Bob")


@pytest.fixture
def hello_doc(alice, t0):
    """Document without id, title Hello, by a1 at t0"""
    from docstore import Document
    return Document(title="Hello", content="greetings from the first doc", author=alice, created=t0)


@pytest.fixture
def world_doc(bob, t1):
    """Document without id, title World, by a2 at t1"""
    from docstore import Document
    return Document(title="World", content="the second doc says bye", author=bob, created=t1)
