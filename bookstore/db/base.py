# /bookstore/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# Importing it guarantees that Base.metadata knows every table before
# create_all() runs.

from .base_class import Base

from .models.catalog_models import Author, AuthorBook, Book, Category
