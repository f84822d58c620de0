# /bookstore/models/category_model.py

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    categoryName: str = Field(default="", description="Unique category name, at most 64 characters.")


class CategoryCreated(BaseModel):
    id: int
