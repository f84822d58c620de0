# /bookstore/models/author_model.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class AuthorCreate(BaseModel):
    """
    Payload for creating or overwriting an author. Missing names default to
    an empty string so that the service, not the framework, reports them.
    """
    firstname: str = Field(default="", description="The author's first name.")
    surname: str = Field(default="", description="The author's surname.")
    surname2: Optional[str] = Field(default=None, description="Optional middle name or second surname.")


class AuthorUpdate(AuthorCreate):
    """Full replacement of an author; an omitted surname2 is cleared."""


class Author(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    firstname: str
    surname: str
    surname2: Optional[str] = None


class AuthorCreated(BaseModel):
    id: int
