# /bookstore/models/book_model.py

from pydantic import BaseModel, Field
from typing import Optional


class BookUpdate(BaseModel):
    """
    Full replacement of a book's mutable fields. Anything omitted (pages,
    year, categoryId) is cleared on the stored book.
    """
    title: str = Field(default="", description="The book's title.")
    pages: Optional[int] = Field(default=None, description="Page count.")
    year: Optional[int] = Field(default=None, description="Year of publication.")
    categoryId: Optional[int] = Field(default=None, description="The id of the book's category.")


class BookCreate(BookUpdate):
    isbn: str = Field(default="", description="The caller-assigned ISBN, at most 13 characters.")


class BookWithAuthorInfo(BaseModel):
    """
    One row of the book listing: a book flattened together with its category
    name and ONE linked author, formatted as "Surname, Firstname". A book with
    several authors appears once per author.
    """
    isbn: str
    title: str
    pages: Optional[int] = None
    year: Optional[int] = None
    category: str = ""
    author: str = ""


class BookCreated(BaseModel):
    isbn: str
