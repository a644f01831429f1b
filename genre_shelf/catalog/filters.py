"""
Genre filtering for book records.

``filter_by_genre`` is the single entry point. It works over ``Book``
models as well as loosely shaped records (plain dicts or any object
with a ``genre`` attribute), so callers holding raw fixture data can
use it without converting first.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional


def _genre_of(book: Any) -> Optional[str]:
    """Return the genre of ``book`` or ``None`` when it has no text genre."""
    if isinstance(book, Mapping):
        value = book.get("genre")
    else:
        value = getattr(book, "genre", None)
    return value if isinstance(value, str) else None


def filter_by_genre(genre: str, books: Sequence[Any]) -> List[Any]:
    """Return the books whose genre is exactly ``genre``.

    Parameters
    ----------
    genre : str
        The genre to match. Compared with ``==`` against each book's
        genre, so matching is case-sensitive and whitespace is
        significant. The empty string is a valid genre.
    books : Sequence
        Ordered book records. Records without a genre, or with a
        genre that is not a string, never match.

    Returns
    -------
    List
        A new list with the matching records in their input order.
        It is never the ``books`` container itself, and ``books`` is
        left untouched.

    Raises
    ------
    TypeError
        If ``genre`` is not a string or ``books`` is not a sequence
        (strings and bytes are rejected too).
    """
    if not isinstance(genre, str):
        raise TypeError(f"genre must be a str, not {type(genre).__name__}")
    if isinstance(books, (str, bytes)) or not isinstance(books, Sequence):
        raise TypeError(f"books must be a sequence, not {type(books).__name__}")
    return [book for book in books if _genre_of(book) == genre]
