# /bookstore/routers/author_books_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import JSONResponse
from loguru import logger

from ..models import author_book_model
from ..services import catalog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=author_book_model.AuthorBookCreated, status_code=status.HTTP_201_CREATED, summary="Link an Author to a Book")
def create_author_book(payload: author_book_model.AuthorBookCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        success, error = catalog_service.add_author_book(db=db, author_id=payload.authorId, isbn=payload.isbn)
    except Exception:
        logger.exception("Error creating author-book relationship")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return {"authorId": payload.authorId, "isbn": payload.isbn}


@router.put("/{author_id}/{isbn}", status_code=status.HTTP_204_NO_CONTENT, summary="Refresh an Author-Book Link")
def update_author_book(author_id: int, isbn: str, db: DatabaseService = Depends(get_db_service)):
    """Re-stamps the link's creation time; the link has no other mutable field."""
    try:
        success, error = catalog_service.modify_author_book(db=db, author_id=author_id, isbn=isbn)
    except Exception:
        logger.exception("Error updating author-book relationship: AuthorId={}, ISBN={}", author_id, isbn)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
