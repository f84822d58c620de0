# /bookstore/db/models/catalog_models.py

"""
This module defines the SQLAlchemy ORM models for the bookstore catalog:
`Author`, `Book`, `Category` and the `AuthorBook` join entity.

Identity rules:
- Author and Category ids are generated by the database on insert.
- Book is keyed by its ISBN, which the caller supplies.
- AuthorBook is keyed by the (author id, ISBN) pair.

Delete rules:
- Removing an Author or a Book removes every AuthorBook row pointing at it.
- Removing a Category clears `category_id` on its books; books survive.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base

AUTHOR_NAME_MAX_LENGTH = 128
BOOK_ISBN_MAX_LENGTH = 13
BOOK_TITLE_MAX_LENGTH = 256
CATEGORY_NAME_MAX_LENGTH = 64


class Author(Base):
    """SQLAlchemy model representing a single author."""
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    firstname = Column(String(AUTHOR_NAME_MAX_LENGTH), nullable=False)
    surname = Column(String(AUTHOR_NAME_MAX_LENGTH), nullable=False)
    surname2 = Column(String(AUTHOR_NAME_MAX_LENGTH), nullable=True)

    # Links go away together with their author.
    author_books = relationship("AuthorBook", back_populates="author", cascade="all, delete")


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    category_name = Column(String(CATEGORY_NAME_MAX_LENGTH), unique=True, index=True, nullable=False)

    # No delete cascade here: deleting a category only detaches its books.
    books = relationship("Book", back_populates="category")


class Book(Base):
    """
    SQLAlchemy model representing a book. The ISBN is a natural key and is
    never generated by the database.
    """
    __tablename__ = "books"

    isbn = Column(String(BOOK_ISBN_MAX_LENGTH), primary_key=True, index=True)
    title = Column(String(BOOK_TITLE_MAX_LENGTH), nullable=False)
    pages = Column(Integer, nullable=True)
    year = Column(Integer, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)

    category = relationship("Category", back_populates="books")
    author_books = relationship("AuthorBook", back_populates="book", cascade="all, delete")


class AuthorBook(Base):
    """Join entity linking one Author to one Book."""
    __tablename__ = "author_books"

    author_id = Column(Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True)
    isbn = Column(String(BOOK_ISBN_MAX_LENGTH), ForeignKey("books.isbn", ondelete="CASCADE"), primary_key=True)
    # The only mutable field on a link.
    created = Column(DateTime, nullable=False, default=datetime.now)

    author = relationship("Author", back_populates="author_books")
    book = relationship("Book", back_populates="author_books")
