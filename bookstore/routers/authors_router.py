# /bookstore/routers/authors_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import JSONResponse
from loguru import logger
from typing import List

from ..models import author_model
from ..services import catalog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[author_model.Author], summary="Get Authors")
def get_authors(
    firstname: str = "%",
    surname: str = "%",
    db: DatabaseService = Depends(get_db_service)
):
    """
    Lists authors. Each filter is a substring match; `%` (the default) means
    no filter on that field.
    """
    try:
        return catalog_service.get_authors(db=db, firstname=firstname, surname=surname)
    except Exception:
        logger.exception("Error retrieving authors")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.post("", response_model=author_model.AuthorCreated, status_code=status.HTTP_201_CREATED, summary="Create an Author")
def create_author(payload: author_model.AuthorCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        author_id, error = catalog_service.add_author(
            db=db, firstname=payload.firstname, surname=payload.surname, surname2=payload.surname2
        )
    except Exception:
        logger.exception("Error creating author")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if author_id is None:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return {"id": author_id}


@router.put("/{author_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Overwrite an Author")
def update_author(author_id: int, payload: author_model.AuthorUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        success, error = catalog_service.modify_author(
            db=db, author_id=author_id,
            firstname=payload.firstname, surname=payload.surname, surname2=payload.surname2
        )
    except Exception:
        logger.exception("Error updating author with ID: {}", author_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Author")
def delete_author(author_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        success, error = catalog_service.delete_author(db=db, author_id=author_id)
    except Exception:
        logger.exception("Error deleting author with ID: {}", author_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if not success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
