# app/api/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.exceptions import AuthenticationError, PermissionDeniedError
from app.security.principal import Principal
from app.security.tokens import JwtUtils
from app.services.auth_service import AuthService
from app.services.lock_service import LockService

_bearer = HTTPBearer(auto_error=False)

_jwt_utils: JwtUtils | None = None
_lock_service: LockService | None = None


def get_jwt_utils() -> JwtUtils:
    global _jwt_utils
    if _jwt_utils is None:
        _jwt_utils = JwtUtils()
    return _jwt_utils


def get_lock_service() -> LockService:
    global _lock_service
    if _lock_service is None:
        _lock_service = LockService()
    return _lock_service


def get_optional_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: Session = Depends(get_db),
    jwt_utils: JwtUtils = Depends(get_jwt_utils),
) -> Principal | None:
    """
    Brak naglowka = request anonimowy.
    Zly / przeterminowany token = 401 (AuthTokenError z walidacji).
    """
    if credentials is None or not credentials.credentials:
        return None
    return AuthService(db, jwt_utils).authenticate_token(credentials.credentials)


def get_principal(principal: Principal | None = Depends(get_optional_principal)) -> Principal:
    if principal is None:
        raise AuthenticationError("Full authentication is required to access this resource")
    return principal


def require_role(role: str):
    def checker(principal: Principal = Depends(get_principal)) -> Principal:
        if not principal.has_role(role):
            raise PermissionDeniedError("You don't have permission to this action.")
        return principal

    return checker
