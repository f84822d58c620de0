# /bookstore/routers/categories_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..models import category_model
from ..services import catalog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=category_model.CategoryCreated, status_code=status.HTTP_201_CREATED, summary="Create a Category")
def create_category(payload: category_model.CategoryCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        category_id, error = catalog_service.add_category(db=db, category_name=payload.categoryName)
    except Exception:
        logger.exception("Error creating category")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if category_id is None:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error)
    return {"id": category_id}
