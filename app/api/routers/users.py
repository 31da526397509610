from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.mappers import user_to_out
from app.domain.schemas import ApiResponse, UserCreate, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/user", response_model=ApiResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = UserService(db).get_user_by_id(user_id)
    return ApiResponse(message="Success", data=user_to_out(user))


@router.post("/add", response_model=ApiResponse)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    user = UserService(db).create_user(payload)
    return ApiResponse(message="Create User Success!", data=user_to_out(user))


@router.put("/{user_id}/update", response_model=ApiResponse)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    user = UserService(db).update_user(user_id, payload)
    return ApiResponse(message="Update User Success!", data=user_to_out(user))


@router.delete("/{user_id}/delete", response_model=ApiResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return ApiResponse(message="Delete User Success!", data=None)
