# /bookstore/examples/usage_examples.py

"""
A guided walk through every catalog operation, in the order a new catalog is
usually populated: category, author, book, link, listing, changes, removal.

Run it against the configured DATABASE_URL with:

    python -m bookstore.examples.usage_examples
"""

from typing import List

from loguru import logger

from bookstore.core.logging_config import configure_logging
from bookstore.db.database import SessionLocal, engine, init_db
from bookstore.services import catalog_service
from bookstore.services.database_service import DatabaseService


def run_examples(db: DatabaseService, isbn: str = "0764576593") -> List[str]:
    """Runs the walkthrough and returns one line of output per step."""
    lines = []

    category_id, error = catalog_service.add_category(db, "Programming")
    lines.append(f"Category added with ID: {category_id}" if error is None else f"Error adding category: {error}")

    author_id, error = catalog_service.add_author(db, "Emily", "Vander", "Veer")
    lines.append(f"Author added with ID: {author_id}" if error is None else f"Error adding author: {error}")

    authors = catalog_service.get_authors(db, firstname="Emi")
    lines.append(f"Authors matching 'Emi': {len(authors)}")

    result_isbn, error = catalog_service.add_book(db, isbn, "JavaScript for dummies", 387, 2005, category_id)
    lines.append(f"Book added with ISBN: {result_isbn}" if error is None else f"Error adding book: {error}")

    success, error = catalog_service.add_author_book(db, author_id, isbn)
    lines.append("Author linked to book" if success else f"Error linking author: {error}")

    for book in catalog_service.get_books(db, isbn=isbn):
        lines.append(f"{book.isbn} | {book.title} | {book.pages} pages | {book.year} | {book.category} | {book.author}")

    success, error = catalog_service.modify_book(db, isbn, "JavaScript for Dummies", 400, 2006, category_id)
    lines.append("Book modified" if success else f"Error modifying book: {error}")

    success, error = catalog_service.modify_author_book(db, author_id, isbn)
    lines.append("Author-book link refreshed" if success else f"Error refreshing link: {error}")

    success, error = catalog_service.delete_book(db, isbn)
    lines.append("Book deleted" if success else f"Error deleting book: {error}")

    success, error = catalog_service.delete_author(db, author_id)
    lines.append("Author deleted" if success else f"Error deleting author: {error}")

    return lines


if __name__ == "__main__":
    configure_logging()
    init_db(engine)
    session = SessionLocal()
    try:
        for line in run_examples(DatabaseService(session)):
            logger.info(line)
    finally:
        session.close()
