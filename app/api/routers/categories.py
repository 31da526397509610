# app/api/routers/categories.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.mappers import category_to_out
from app.domain.schemas import ApiResponse, CategoryIn
from app.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


def get_service(db: Session):
    return CategoryService(db)


@router.get("/all", response_model=ApiResponse)
def get_all_categories(db: Session = Depends(get_db)):
    categories = get_service(db).get_all_categories()
    return ApiResponse(message="Found!", data=[category_to_out(c) for c in categories])


@router.post("/add", response_model=ApiResponse)
def add_category(payload: CategoryIn, db: Session = Depends(get_db)):
    category = get_service(db).add_category(payload.name)
    return ApiResponse(message="Success", data=category_to_out(category))


@router.get("/category/{category_id}/category", response_model=ApiResponse)
def get_category_by_id(category_id: int, db: Session = Depends(get_db)):
    category = get_service(db).get_category_by_id(category_id)
    return ApiResponse(message="Found", data=category_to_out(category))


@router.get("/category/by-name/{name}", response_model=ApiResponse)
def get_category_by_name(name: str, db: Session = Depends(get_db)):
    category = get_service(db).get_category_by_name(name)
    return ApiResponse(message="Found", data=category_to_out(category))


@router.put("/category/{category_id}/update", response_model=ApiResponse)
def update_category(category_id: int, payload: CategoryIn, db: Session = Depends(get_db)):
    category = get_service(db).update_category(category_id, payload.name)
    return ApiResponse(message="Update success!", data=category_to_out(category))


@router.delete("/category/{category_id}/delete", response_model=ApiResponse)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    get_service(db).delete_category_by_id(category_id)
    return ApiResponse(message="Deleted", data=None)
