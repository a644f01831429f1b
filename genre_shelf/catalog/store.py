"""
Simple in-memory data store for the catalogue API.

The ``BOOKS`` list is populated at import time from the sample dataset
named by ``Settings.data_file``. Nothing is written back to disk; books
added through the API live only as long as the process.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..config import get_settings
from .filters import filter_by_genre
from .schemas import Book, CreateBookRequest

logger = logging.getLogger(__name__)

_lock = threading.Lock()


def load_books(path: Path) -> List[Book]:
    """Load books from a JSON array of records.

    Parameters
    ----------
    path : Path
        File holding a list of objects with ``title``, ``author`` and
        ``genre`` keys.

    Returns
    -------
    List[Book]
        The valid entries, in file order. Entries that fail validation
        are logged and skipped. A missing or unreadable file yields an
        empty list.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read sample books from %s: %s", path, exc)
        return []
    if not isinstance(raw, list):
        logger.warning("Sample books file %s does not hold a list", path)
        return []

    books: List[Book] = []
    for index, entry in enumerate(raw):
        try:
            books.append(Book.model_validate(entry))
        except ValidationError as exc:
            logger.warning(
                "Skipping entry %d in %s: %s", index, path, exc.errors()[0]["msg"]
            )
    return books


def _initial_books() -> List[Book]:
    settings = get_settings()
    if not settings.seed_sample_data:
        return []
    books = load_books(settings.data_file)
    logger.info("Loaded %d sample books from %s", len(books), settings.data_file)
    return books


BOOKS: List[Book] = _initial_books()


def list_books(genre: Optional[str] = None) -> List[Book]:
    """Return the books in the store, optionally restricted to one genre.

    ``genre=None`` means no filter; any string, the empty one included,
    is matched exactly.
    """
    with _lock:
        snapshot = list(BOOKS)
    if genre is None:
        return snapshot
    return filter_by_genre(genre, snapshot)


def list_genres() -> List[str]:
    """Distinct genres, in the order they first appear."""
    with _lock:
        genres = [b.genre for b in BOOKS]
    return list(dict.fromkeys(genres))


def add_book(req: CreateBookRequest) -> Book:
    book = Book(title=req.title, author=req.author, genre=req.genre)
    with _lock:
        if book in BOOKS:
            raise ValueError(
                f"'{book.title}' by {book.author} is already listed under '{book.genre}'"
            )
        BOOKS.append(book)
    return book


def reset(books: Optional[List[Book]] = None) -> None:
    """Replace the whole collection, emptying it when ``books`` is None."""
    with _lock:
        BOOKS[:] = list(books or [])
