# app/security/principal.py
from dataclasses import dataclass, field
from typing import Tuple

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


@dataclass(frozen=True)
class Principal:
    """Tozsamosc uwierzytelnionego uzytkownika, zbudowana z poprawnego tokenu."""

    id: int
    email: str
    roles: Tuple[str, ...] = field(default_factory=tuple)

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def is_admin(self) -> bool:
        return self.has_role(ROLE_ADMIN)
