# /bookstore/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model in the catalog inherits from this Base.
Base = declarative_base()
