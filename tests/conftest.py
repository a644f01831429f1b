"""Root conftest: shared fixtures."""

import pytest

from genre_shelf.catalog import store
from genre_shelf.catalog.schemas import Book
from genre_shelf.config import get_settings


CANONICAL_BOOKS = [
    {"title": "Book 1", "author": "Author 1", "genre": "Fantasy"},
    {"title": "Book 2", "author": "Author 2", "genre": "Science Fiction"},
    {"title": "Book 3", "author": "Author 3", "genre": "Fantasy"},
]


@pytest.fixture
def books():
    return [Book(**entry) for entry in CANONICAL_BOOKS]


@pytest.fixture
def seeded_store(books):
    """Store holding the three canonical books, restored afterwards."""
    original = store.list_books()
    store.reset(books)
    yield store
    store.reset(original)


@pytest.fixture
def clean_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
