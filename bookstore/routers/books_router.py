# /bookstore/routers/books_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import JSONResponse
from loguru import logger
from typing import List

from ..models import book_model
from ..services import catalog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[book_model.BookWithAuthorInfo], summary="Get Books with Category and Author")
def get_books(
    isbn: str = "%",
    title: str = "%",
    db: DatabaseService = Depends(get_db_service)
):
    """
    Lists books joined with their category and authors, one row per
    (book, author) pair. `%` (the default) disables a filter.
    """
    try:
        return catalog_service.get_books(db=db, isbn=isbn, title=title)
    except Exception:
        logger.exception("Error retrieving books")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.post("", response_model=book_model.BookCreated, status_code=status.HTTP_201_CREATED, summary="Create a Book")
def create_book(payload: book_model.BookCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        isbn, error = catalog_service.add_book(
            db=db, isbn=payload.isbn, title=payload.title,
            pages=payload.pages, year=payload.year, category_id=payload.categoryId
        )
    except Exception:
        logger.exception("Error creating book")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not isbn:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return {"isbn": isbn}


@router.put("/{isbn}", status_code=status.HTTP_204_NO_CONTENT, summary="Overwrite a Book")
def update_book(isbn: str, payload: book_model.BookUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        success, error = catalog_service.modify_book(
            db=db, isbn=isbn, title=payload.title,
            pages=payload.pages, year=payload.year, category_id=payload.categoryId
        )
    except Exception:
        logger.exception("Error updating book with ISBN: {}", isbn)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{isbn}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Book and its Author Links")
def delete_book(isbn: str, db: DatabaseService = Depends(get_db_service)):
    try:
        success, error = catalog_service.delete_book(db=db, isbn=isbn)
    except Exception:
        logger.exception("Error deleting book with ISBN: {}", isbn)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
