# app/security/tokens.py
import base64
import binascii
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from app.domain.exceptions import AuthTokenError
from app.security.principal import Principal
from app.utils.settings import JWT_SECRET, JWT_EXPIRATION_MS
from app.utils.logging import get_logger

logger = get_logger(__name__)

ALGORITHM = "HS256"


class JwtUtils:
    """
    Wystawianie i walidacja tokenow JWT.

    Token niesie subject=email, claims id i roles, iat oraz exp.
    Podpis HS256 kluczem zdekodowanym z base64 w konfiguracji.
    """

    def __init__(self, secret: str | None = None, expiration_ms: int | None = None):
        self.key = self._decode_key(secret or JWT_SECRET)
        self.expiration = timedelta(
            milliseconds=expiration_ms if expiration_ms is not None else JWT_EXPIRATION_MS
        )

    @staticmethod
    def _decode_key(secret: str) -> bytes:
        try:
            return base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("JWT_SECRET must be a base64 encoded key") from e

    def generate_token(self, principal: Principal, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": principal.email,
            "id": principal.id,
            "roles": list(principal.roles),
            "iat": issued_at,
            "exp": issued_at + self.expiration,
        }
        return jwt.encode(claims, self.key, algorithm=ALGORITHM)

    def validate_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.key,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            logger.info(f"Odrzucono token: {e}")
            raise AuthTokenError(f"{e} : Invalid or expired token") from e

    def get_username_from_token(self, token: str) -> str:
        return self.validate_token(token)["sub"]
