# /bookstore/services/database_helpers/author_repository_sql.py

"""
Raw SQLAlchemy queries for the `authors` table.

Write methods only stage and flush; committing is the job of the caller's
unit of work (see `DatabaseService.unit_of_work`).
"""

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from bookstore.db.models.catalog_models import Author
from .query_filters import WILDCARD, apply_contains_filter


class AuthorRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_author_by_id(self, author_id: int) -> Optional[Author]:
        return self.db.get(Author, author_id)

    def find_authors(self, firstname: str = WILDCARD, surname: str = WILDCARD) -> List[Author]:
        """Authors whose first name and surname contain the given fragments."""
        query = self.db.query(Author)
        query = apply_contains_filter(query, Author.firstname, firstname)
        query = apply_contains_filter(query, Author.surname, surname)
        return query.order_by(Author.id).all()

    def add_author(self, record: Dict) -> Author:
        """Stages a new Author; the flush assigns its generated id."""
        new_author = Author(**record)
        self.db.add(new_author)
        self.db.flush()
        return new_author

    def update_author(self, author: Author, data: Dict) -> Author:
        for key, value in data.items():
            setattr(author, key, value)
        self.db.flush()
        return author

    def delete_author(self, author: Author) -> None:
        # The relationship cascade removes the author's AuthorBook links too.
        self.db.delete(author)
        self.db.flush()
