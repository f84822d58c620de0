# /bookstore/services/database_helpers/author_book_repository_sql.py

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from bookstore.db.models.catalog_models import AuthorBook


class AuthorBookRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_author_book(self, author_id: int, isbn: str) -> Optional[AuthorBook]:
        return self.db.get(AuthorBook, (author_id, isbn))

    def get_author_books_by_isbn(self, isbn: str) -> List[AuthorBook]:
        return self.db.query(AuthorBook).filter(AuthorBook.isbn == isbn).all()

    def get_author_books_by_author_id(self, author_id: int) -> List[AuthorBook]:
        return self.db.query(AuthorBook).filter(AuthorBook.author_id == author_id).all()

    def add_author_book(self, record: Dict) -> AuthorBook:
        new_link = AuthorBook(**record)
        self.db.add(new_link)
        self.db.flush()
        return new_link

    def update_author_book(self, link: AuthorBook, data: Dict) -> AuthorBook:
        for key, value in data.items():
            setattr(link, key, value)
        self.db.flush()
        return link

    def delete_author_books_by_isbn(self, isbn: str) -> int:
        """Stages the removal of every link pointing at `isbn`; returns how many."""
        links = self.get_author_books_by_isbn(isbn)
        for link in links:
            self.db.delete(link)
        self.db.flush()
        return len(links)
