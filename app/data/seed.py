# app/data/seed.py
from sqlalchemy.orm import Session

from app.data.database import SessionLocal
from app.domain.schemas import UserCreate
from app.security.principal import ROLE_ADMIN, ROLE_USER
from app.services.user_service import UserService
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PASSWORD = "123456"


def seed_defaults(db: Session):
    service = UserService(db)

    for role in (ROLE_ADMIN, ROLE_USER):
        service.get_or_create_role(role)

    # not forcing: only seed accounts that are missing
    for i in range(1, 6):
        _create_if_missing(service, f"user{i}@email.com", "The User", f"User{i}", ROLE_USER)

    for i in range(1, 3):
        _create_if_missing(service, f"admin{i}@email.com", "Admin", f"Admin{i}", ROLE_ADMIN)


def _create_if_missing(service: UserService, email: str, first_name: str, last_name: str, role: str):
    if service.repo.exists_by_email(email):
        return

    service.create_user(
        UserCreate(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=DEFAULT_PASSWORD,
        ),
        roles=[role],
    )
    logger.info(f"Default {role} account {email} created")


def seed():
    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()
