"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /books   : list books, optionally filtered by exact genre
- GET  /genres  : distinct genres in first-seen order
- POST /books   : add a book to the in-memory collection
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from . import store
from .schemas import Book, CreateBookRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/books", response_model=List[Book])
def list_books(
    genre: Optional[str] = Query(
        default=None,
        description="Exact, case-sensitive genre to keep. Omit to list every book.",
    ),
) -> List[Book]:
    """List books, keeping only those whose genre equals ``genre`` when given.

    ``genre=`` (present but empty) filters on the empty genre; no match
    is an empty list, not a 404.
    """
    books = store.list_books(genre)
    if genre is not None:
        logger.debug(
            "Filtered books by genre",
            extra={"genre": genre, "match_count": len(books)},
        )
    return books


@router.get("/genres", response_model=List[str])
def list_genres() -> List[str]:
    """Distinct genres in the order they first appear in the catalogue."""
    return store.list_genres()


@router.post("/books", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book(req: CreateBookRequest) -> Book:
    """Add a book; a duplicate of an existing entry is a 400."""
    try:
        book = store.add_book(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Added book %r", book.title, extra={"genre": book.genre})
    return book
