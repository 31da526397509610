# app/services/auth_service.py
from sqlalchemy.orm import Session

from app.domain.exceptions import AuthenticationError, AuthTokenError
from app.domain.schemas import JwtOut
from app.repos.user_repo import UserRepo
from app.security.passwords import verify_password
from app.security.principal import Principal
from app.security.tokens import JwtUtils
from app.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """
    -logowanie emailem i haslem, wydanie tokenu
    -zamiana tokenu z naglowka na Principal
    """

    def __init__(self, db: Session, jwt_utils: JwtUtils):
        self.repo = UserRepo(db)
        self.jwt_utils = jwt_utils

    def login(self, email: str, password: str) -> JwtOut:
        user = self.repo.get_user_by_email(email)

        if not user or not verify_password(password, user.password):
            logger.warning(f"Nieudane logowanie dla {email}")
            raise AuthenticationError("Invalid email or password")

        principal = Principal(id=user.id, email=user.email, roles=tuple(user.role_names))
        token = self.jwt_utils.generate_token(principal)

        logger.info(f"Uzytkownik {user.id} zalogowany")
        return JwtOut(id=user.id, token=token)

    def authenticate_token(self, token: str) -> Principal:
        email = self.jwt_utils.get_username_from_token(token)

        user = self.repo.get_user_by_email(email)
        if not user:
            raise AuthTokenError("User from token no longer exists")

        return Principal(id=user.id, email=user.email, roles=tuple(user.role_names))
