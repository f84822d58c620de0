# /bookstore/services/database_helpers/category_repository_sql.py

from typing import Dict, Optional
from sqlalchemy.orm import Session

from bookstore.db.models.catalog_models import Category


class CategoryRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_category_by_id(self, category_id: int) -> Optional[Category]:
        return self.db.get(Category, category_id)

    def get_category_by_name(self, category_name: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.category_name == category_name).first()

    def add_category(self, record: Dict) -> Category:
        new_category = Category(**record)
        self.db.add(new_category)
        self.db.flush()
        return new_category
