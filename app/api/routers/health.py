# app/api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import ApiResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=ApiResponse)
def health(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return ApiResponse(message="ok", data={"database": "up"})
