from sqlalchemy.orm import Session

from app.data.models.user import UserModel, RoleModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.query(UserModel).filter(UserModel.email == email).one_or_none()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(
            self.db.query(UserModel).filter(UserModel.email == email).exists()
        ).scalar()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save(self, user: UserModel) -> UserModel:
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete_user(self, user: UserModel) -> None:
        self.db.delete(user)
        self.db.commit()

    def get_role_by_name(self, name: str) -> RoleModel | None:
        return self.db.query(RoleModel).filter(RoleModel.name == name).one_or_none()

    def create_role(self, role: RoleModel) -> RoleModel:
        self.db.add(role)
        self.db.commit()
        self.db.refresh(role)
        return role
