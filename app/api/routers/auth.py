# app/api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_jwt_utils
from app.data.database import get_db
from app.domain.schemas import ApiResponse, LoginIn
from app.security.tokens import JwtUtils
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    jwt_utils: JwtUtils = Depends(get_jwt_utils),
):
    svc = AuthService(db, jwt_utils)
    return ApiResponse(message="Logged in successfully", data=svc.login(payload.email, payload.password))
