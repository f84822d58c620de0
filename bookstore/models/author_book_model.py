# /bookstore/models/author_book_model.py

from pydantic import BaseModel, Field


class AuthorBookCreate(BaseModel):
    """Links an existing author to an existing book."""
    authorId: int = Field(..., description="The id of the author.")
    isbn: str = Field(default="", description="The ISBN of the book.")


class AuthorBookCreated(BaseModel):
    authorId: int
    isbn: str
