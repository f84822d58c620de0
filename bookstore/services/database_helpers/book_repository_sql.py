# /bookstore/services/database_helpers/book_repository_sql.py

"""
Raw SQLAlchemy queries for the `books` table, including the listing query
that joins books with their category and authors.
"""

from typing import Dict, List, Optional
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from bookstore.db.models.catalog_models import Author, AuthorBook, Book, Category
from .query_filters import WILDCARD, apply_contains_filter


class BookRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.db.get(Book, isbn)

    def add_book(self, record: Dict) -> Book:
        new_book = Book(**record)
        self.db.add(new_book)
        self.db.flush()
        return new_book

    def update_book(self, book: Book, data: Dict) -> Book:
        for key, value in data.items():
            setattr(book, key, value)
        self.db.flush()
        return book

    def delete_book(self, book: Book) -> None:
        self.db.delete(book)
        self.db.flush()

    def find_books_with_author_info(self, isbn: str = WILDCARD, title: str = WILDCARD) -> List[Row]:
        """
        Left-joins books -> categories and books -> author_books -> authors.

        The result has one row per (book, linked author) pair. A book without
        authors still yields a single row whose author columns are NULL, and a
        book without a category yields NULL for `category_name`.
        """
        query = (
            self.db.query(
                Book.isbn,
                Book.title,
                Book.pages,
                Book.year,
                Category.category_name,
                Author.firstname,
                Author.surname,
            )
            .outerjoin(Category, Book.category_id == Category.id)
            .outerjoin(AuthorBook, AuthorBook.isbn == Book.isbn)
            .outerjoin(Author, AuthorBook.author_id == Author.id)
        )
        query = apply_contains_filter(query, Book.isbn, isbn)
        query = apply_contains_filter(query, Book.title, title)
        return query.order_by(Book.isbn, Author.id).all()
