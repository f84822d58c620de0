# /bookstore/services/database_service.py

from contextlib import contextmanager
from typing import Dict, Generator, Iterator, List, Optional

from fastapi import Depends
from loguru import logger
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from bookstore.db.database import get_db
from bookstore.db.models.catalog_models import Author, AuthorBook, Book, Category

# --- Repository Imports ---
from .database_helpers.author_repository_sql import AuthorRepositorySQL
from .database_helpers.book_repository_sql import BookRepositorySQL
from .database_helpers.category_repository_sql import CategoryRepositorySQL
from .database_helpers.author_book_repository_sql import AuthorBookRepositorySQL
from .database_helpers.query_filters import WILDCARD


class DatabaseService:
    """
    The data access context for one request.

    Wraps a single SQLAlchemy session and exposes the four catalog
    collections through their repositories. It holds no state beyond that
    session, so a new instance is built for every request.
    """

    def __init__(self, db_session: Session):
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.author_repo = AuthorRepositorySQL(db_session)
        self.book_repo = BookRepositorySQL(db_session)
        self.category_repo = CategoryRepositorySQL(db_session)
        self.author_book_repo = AuthorBookRepositorySQL(db_session)

    @contextmanager
    def unit_of_work(self) -> Iterator["DatabaseService"]:
        """
        Groups staged writes into one transaction: commit on clean exit,
        roll back everything and re-raise on any exception.
        """
        try:
            yield self
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.debug("Transaction rolled back ({}: {})", type(e).__name__, e)
            raise

    # --- AUTHOR METHODS (DELEGATED) ---
    def get_author_by_id(self, author_id: int) -> Optional[Author]: return self.author_repo.get_author_by_id(author_id)
    def find_authors(self, firstname: str = WILDCARD, surname: str = WILDCARD) -> List[Author]: return self.author_repo.find_authors(firstname, surname)
    def add_author(self, record: Dict) -> Author: return self.author_repo.add_author(record)
    def update_author(self, author: Author, data: Dict) -> Author: return self.author_repo.update_author(author, data)
    def delete_author(self, author: Author) -> None: self.author_repo.delete_author(author)

    # --- BOOK METHODS (DELEGATED) ---
    def get_book_by_isbn(self, isbn: str) -> Optional[Book]: return self.book_repo.get_book_by_isbn(isbn)
    def add_book(self, record: Dict) -> Book: return self.book_repo.add_book(record)
    def update_book(self, book: Book, data: Dict) -> Book: return self.book_repo.update_book(book, data)
    def delete_book(self, book: Book) -> None: self.book_repo.delete_book(book)
    def find_books_with_author_info(self, isbn: str = WILDCARD, title: str = WILDCARD) -> List[Row]:
        return self.book_repo.find_books_with_author_info(isbn, title)

    # --- CATEGORY METHODS (DELEGATED) ---
    def get_category_by_id(self, category_id: int) -> Optional[Category]: return self.category_repo.get_category_by_id(category_id)
    def get_category_by_name(self, category_name: str) -> Optional[Category]: return self.category_repo.get_category_by_name(category_name)
    def add_category(self, record: Dict) -> Category: return self.category_repo.add_category(record)

    # --- AUTHOR-BOOK LINK METHODS (DELEGATED) ---
    def get_author_book(self, author_id: int, isbn: str) -> Optional[AuthorBook]: return self.author_book_repo.get_author_book(author_id, isbn)
    def get_author_books_by_isbn(self, isbn: str) -> List[AuthorBook]: return self.author_book_repo.get_author_books_by_isbn(isbn)
    def get_author_books_by_author_id(self, author_id: int) -> List[AuthorBook]: return self.author_book_repo.get_author_books_by_author_id(author_id)
    def add_author_book(self, record: Dict) -> AuthorBook: return self.author_book_repo.add_author_book(record)
    def update_author_book(self, link: AuthorBook, data: Dict) -> AuthorBook: return self.author_book_repo.update_author_book(link, data)
    def delete_author_books_by_isbn(self, isbn: str) -> int: return self.author_book_repo.delete_author_books_by_isbn(isbn)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a request-scoped DatabaseService."""
    yield DatabaseService(db_session=db)
