from sqlalchemy.orm import Session

from app.data.models.user import RoleModel, UserModel
from app.domain.exceptions import AlreadyExistsError, NotFoundError
from app.domain.schemas import UserCreate, UserUpdate
from app.repos.user_repo import UserRepo
from app.security.passwords import hash_password
from app.security.principal import Principal, ROLE_USER
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def get_user_by_id(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found!")
        return user

    def get_or_create_role(self, name: str) -> RoleModel:
        return self.repo.get_role_by_name(name) or self.repo.create_role(RoleModel(name=name))

    def create_user(self, payload: UserCreate, roles: list[str] | None = None) -> UserModel:
        if self.repo.exists_by_email(payload.email):
            raise AlreadyExistsError(f"{payload.email} already exists!")

        user = UserModel(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password=hash_password(payload.password),
            roles=[self.get_or_create_role(r) for r in (roles or [ROLE_USER])],
        )
        created = self.repo.create_user(user)
        logger.info(f"Utworzono uzytkownika {created.id} ({created.email})")
        return created

    def update_user(self, user_id: int, payload: UserUpdate) -> UserModel:
        user = self.get_user_by_id(user_id)
        user.first_name = payload.first_name
        user.last_name = payload.last_name
        return self.repo.save(user)

    def delete_user(self, user_id: int) -> None:
        user = self.get_user_by_id(user_id)
        self.repo.delete_user(user)
        logger.info(f"Usunieto uzytkownika {user_id}")

    def get_authenticated_user(self, principal: Principal) -> UserModel:
        """Uzytkownik z jawnie przekazanego principala, bez globalnego kontekstu."""
        user = self.repo.get_user_by_email(principal.email)
        if not user:
            raise NotFoundError("User not found!")
        return user
