# /bookstore/services/catalog_service.py

"""
This service module is the business logic layer of the bookstore catalog.

Every write operation returns a `(result, error)` pair instead of raising:
on success `error` is None, on failure `result` is None/False and `error` is
a human-readable message. Storage exceptions are caught here, logged with
their full traceback, and turned into a `ConstraintError` or a generic
`UnexpectedError` message. Nothing above this module ever sees a raw
SQLAlchemy exception.

All writes run inside `DatabaseService.unit_of_work()`, so a failing
operation leaves no partial change behind.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from loguru import logger
from sqlalchemy.exc import IntegrityError

from ..db.models.catalog_models import (
    AUTHOR_NAME_MAX_LENGTH,
    BOOK_ISBN_MAX_LENGTH,
    BOOK_TITLE_MAX_LENGTH,
    CATEGORY_NAME_MAX_LENGTH,
    Author,
)
from ..models.book_model import BookWithAuthorInfo
from .catalog_errors import (
    CONSTRAINT_FAILURE_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
    CatalogError,
    ConstraintError,
    NotFoundError,
    UnexpectedError,
)
from .catalog_helpers import validation
from .database_helpers.query_filters import WILDCARD
from .database_service import DatabaseService

AUTHOR_NOT_FOUND = "Author not found"
BOOK_NOT_FOUND = "Book not found"
AUTHOR_BOOK_NOT_FOUND = "Author-Book relationship not found"


def _storage_failure(exc: Exception, context: str, **fields) -> str:
    """
    Logs a storage-level failure and returns the message for the caller.
    Constraint violations keep their kind; everything else is reported with
    the generic message so no internal detail leaks out.
    """
    logger.opt(exception=exc).error(context, **fields)
    if isinstance(exc, IntegrityError):
        return CONSTRAINT_FAILURE_MESSAGE
    return GENERIC_FAILURE_MESSAGE


def _validated_author_fields(firstname: str, surname: str, surname2: Optional[str]) -> dict:
    return {
        "firstname": validation.require_text(firstname, "First name", AUTHOR_NAME_MAX_LENGTH),
        "surname": validation.require_text(surname, "Surname", AUTHOR_NAME_MAX_LENGTH),
        "surname2": validation.optional_text(surname2, "Second surname", AUTHOR_NAME_MAX_LENGTH),
    }


def _validated_book_fields(title: str, pages: Optional[int], year: Optional[int], category_id: Optional[int]) -> dict:
    return {
        "title": validation.require_text(title, "Title", BOOK_TITLE_MAX_LENGTH),
        "pages": pages,
        "year": year,
        "category_id": category_id,
    }


def _format_author(surname: Optional[str], firstname: Optional[str]) -> str:
    if surname is None and firstname is None:
        return ""
    return f"{surname}, {firstname}"


# --- AUTHOR OPERATIONS ---

def add_author(
    db: DatabaseService,
    firstname: str,
    surname: str,
    surname2: Optional[str] = None
) -> Tuple[Optional[int], Optional[str]]:
    """Creates an author and returns its generated id."""
    try:
        record = _validated_author_fields(firstname, surname, surname2)
        with db.unit_of_work():
            new_author = db.add_author(record)
            author_id = new_author.id
        logger.info("Author {} added", author_id)
        return author_id, None
    except CatalogError as e:
        return None, str(e)
    except Exception as e:
        return None, _storage_failure(e, "Error adding author: {firstname} {surname}", firstname=firstname, surname=surname)


def get_authors(db: DatabaseService, firstname: str = WILDCARD, surname: str = WILDCARD) -> List[Author]:
    """
    Returns the authors whose first name and surname contain the given
    fragments. `%` disables the filter on that field.
    """
    try:
        return db.find_authors(firstname=firstname, surname=surname)
    except Exception as e:
        logger.opt(exception=e).error("Error retrieving authors (firstname={!r}, surname={!r})", firstname, surname)
        raise UnexpectedError() from e


def modify_author(
    db: DatabaseService,
    author_id: int,
    firstname: str,
    surname: str,
    surname2: Optional[str] = None
) -> Tuple[bool, Optional[str]]:
    """
    Overwrites every field of an existing author. A surname2 that is not
    supplied is cleared, not kept.
    """
    try:
        record = _validated_author_fields(firstname, surname, surname2)
        with db.unit_of_work():
            author = db.get_author_by_id(author_id)
            if author is None:
                raise NotFoundError(AUTHOR_NOT_FOUND)
            db.update_author(author, record)
        return True, None
    except CatalogError as e:
        return False, str(e)
    except Exception as e:
        return False, _storage_failure(e, "Error modifying author with ID: {author_id}", author_id=author_id)


def delete_author(db: DatabaseService, author_id: int) -> Tuple[bool, Optional[str]]:
    """Deletes an author together with all of its author-book links."""
    try:
        with db.unit_of_work():
            author = db.get_author_by_id(author_id)
            if author is None:
                raise NotFoundError(AUTHOR_NOT_FOUND)
            db.delete_author(author)
        logger.info("Author {} deleted", author_id)
        return True, None
    except CatalogError as e:
        return False, str(e)
    except Exception as e:
        return False, _storage_failure(e, "Error deleting author with ID: {author_id}", author_id=author_id)


# --- BOOK OPERATIONS ---

def add_book(
    db: DatabaseService,
    isbn: str,
    title: str,
    pages: Optional[int] = None,
    year: Optional[int] = None,
    category_id: Optional[int] = None
) -> Tuple[Optional[str], Optional[str]]:
    """
    Creates a book under the caller-supplied ISBN and echoes the ISBN back.
    An ISBN that is already taken is a conflict, never an upsert.
    """
    try:
        isbn = validation.require_text(isbn, "ISBN", BOOK_ISBN_MAX_LENGTH)
        record = {"isbn": isbn, **_validated_book_fields(title, pages, year, category_id)}
        with db.unit_of_work():
            if db.get_book_by_isbn(isbn) is not None:
                raise ConstraintError(f"A book with ISBN {isbn} already exists")
            db.add_book(record)
        logger.info("Book {} added", isbn)
        return isbn, None
    except CatalogError as e:
        return None, str(e)
    except Exception as e:
        return None, _storage_failure(e, "Error adding book with ISBN: {isbn}", isbn=isbn)


def get_books(db: DatabaseService, isbn: str = WILDCARD, title: str = WILDCARD) -> List[BookWithAuthorInfo]:
    """
    Lists books matching both filters, flattened with their category name
    and one author per row.

    This is a fan-out join: a book with two authors yields two rows that only
    differ in `author`, and a book with no authors yields one row with an
    empty `author`.
    """
    try:
        rows = db.find_books_with_author_info(isbn=isbn, title=title)
    except Exception as e:
        logger.opt(exception=e).error("Error retrieving books (isbn={!r}, title={!r})", isbn, title)
        raise UnexpectedError() from e

    return [
        BookWithAuthorInfo(
            isbn=row.isbn,
            title=row.title,
            pages=row.pages,
            year=row.year,
            category=row.category_name or "",
            author=_format_author(row.surname, row.firstname),
        )
        for row in rows
    ]


def modify_book(
    db: DatabaseService,
    isbn: str,
    title: str,
    pages: Optional[int] = None,
    year: Optional[int] = None,
    category_id: Optional[int] = None
) -> Tuple[bool, Optional[str]]:
    """Overwrites title, pages, year and category; omitted values are cleared."""
    try:
        record = _validated_book_fields(title, pages, year, category_id)
        with db.unit_of_work():
            book = db.get_book_by_isbn(isbn)
            if book is None:
                raise NotFoundError(BOOK_NOT_FOUND)
            db.update_book(book, record)
        return True, None
    except CatalogError as e:
        return False, str(e)
    except Exception as e:
        return False, _storage_failure(e, "Error modifying book with ISBN: {isbn}", isbn=isbn)


def delete_book(db: DatabaseService, isbn: str) -> Tuple[bool, Optional[str]]:
    """
    Removes a book and every author-book link that references it as one
    transaction. Either both removals are committed or neither is.
    """
    try:
        with db.unit_of_work():
            book = db.get_book_by_isbn(isbn)
            if book is None:
                raise NotFoundError(BOOK_NOT_FOUND)
            removed_links = db.delete_author_books_by_isbn(isbn)
            db.delete_book(book)
        logger.info("Book {} deleted along with {} author link(s)", isbn, removed_links)
        return True, None
    except CatalogError as e:
        return False, str(e)
    except Exception as e:
        return False, _storage_failure(e, "Error deleting book with ISBN: {isbn}", isbn=isbn)


# --- CATEGORY OPERATIONS ---

def add_category(db: DatabaseService, category_name: str) -> Tuple[Optional[int], Optional[str]]:
    try:
        category_name = validation.require_text(category_name, "Category name", CATEGORY_NAME_MAX_LENGTH)
        with db.unit_of_work():
            if db.get_category_by_name(category_name) is not None:
                raise ConstraintError(f"A category named {category_name} already exists")
            new_category = db.add_category({"category_name": category_name})
            category_id = new_category.id
        return category_id, None
    except CatalogError as e:
        return None, str(e)
    except Exception as e:
        return None, _storage_failure(e, "Error adding category: {category}", category=category_name)


# --- AUTHOR-BOOK LINK OPERATIONS ---

def add_author_book(db: DatabaseService, author_id: int, isbn: str) -> Tuple[bool, Optional[str]]:
    """
    Links an author to a book, stamped with the current time. Dangling ids
    are rejected by the database's foreign keys.
    """
    try:
        with db.unit_of_work():
            db.add_author_book({"author_id": author_id, "isbn": isbn, "created": datetime.now()})
        return True, None
    except CatalogError as e:
        return False, str(e)
    except Exception as e:
        return False, _storage_failure(
            e, "Error adding author-book relationship: AuthorId={author_id}, ISBN={isbn}",
            author_id=author_id, isbn=isbn
        )


def modify_author_book(db: DatabaseService, author_id: int, isbn: str) -> Tuple[bool, Optional[str]]:
    """Refreshes the creation timestamp of an existing link."""
    try:
        with db.unit_of_work():
            link = db.get_author_book(author_id, isbn)
            if link is None:
                raise NotFoundError(AUTHOR_BOOK_NOT_FOUND)
            db.update_author_book(link, {"created": datetime.now()})
        return True, None
    except CatalogError as e:
        return False, str(e)
    except Exception as e:
        return False, _storage_failure(
            e, "Error modifying author-book relationship: AuthorId={author_id}, ISBN={isbn}",
            author_id=author_id, isbn=isbn
        )
