"""
Pydantic schema definitions for the catalog module.

The ``Book`` model is the record the genre filter works over: a title,
an author and a genre, all plain strings. It is frozen so that a book
handed out by the store cannot be changed behind the store's back.
``CreateBookRequest`` is the body accepted when adding a book.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Book(BaseModel):
    """A single book entry.

    ``genre`` is compared by exact value when filtering: no case
    folding, no trimming. Two books with the same three fields are
    equal.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    genre: str


class CreateBookRequest(BaseModel):
    title: str
    author: str
    # Kept verbatim, an empty genre is a valid genre.
    genre: str

    @field_validator("title", "author")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
