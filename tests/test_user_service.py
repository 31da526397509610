import pytest

from app.domain.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthTokenError,
    NotFoundError,
)
from app.domain.schemas import UserCreate, UserUpdate
from app.security.passwords import verify_password
from app.security.principal import Principal, ROLE_ADMIN, ROLE_USER
from app.security.tokens import JwtUtils
from app.services.auth_service import AuthService
from app.services.user_service import UserService
from app.data.seed import seed_defaults, DEFAULT_PASSWORD


def _payload(email="ala@email.com", password="tajne123"):
    return UserCreate(first_name="Ala", last_name="Nowak", email=email, password=password)


def test_create_user_hashes_password_and_assigns_user_role(db):
    user = UserService(db).create_user(_payload())

    assert user.id is not None
    assert user.password != "tajne123"
    assert verify_password("tajne123", user.password)
    assert not verify_password("zle-haslo", user.password)
    assert user.role_names == [ROLE_USER]


def test_create_user_with_duplicate_email_fails(db):
    svc = UserService(db)
    svc.create_user(_payload())

    with pytest.raises(AlreadyExistsError):
        svc.create_user(_payload(password="inne-haslo"))


def test_update_and_delete_user(db):
    svc = UserService(db)
    user = svc.create_user(_payload())

    updated = svc.update_user(user.id, UserUpdate(first_name="Alicja", last_name="Kowal"))
    assert (updated.first_name, updated.last_name) == ("Alicja", "Kowal")

    svc.delete_user(user.id)
    with pytest.raises(NotFoundError):
        svc.get_user_by_id(user.id)
    with pytest.raises(NotFoundError):
        svc.delete_user(user.id)


def test_authenticated_user_comes_from_explicit_principal(db):
    svc = UserService(db)
    user = svc.create_user(_payload())

    found = svc.get_authenticated_user(Principal(id=user.id, email=user.email, roles=(ROLE_USER,)))
    assert found.id == user.id

    with pytest.raises(NotFoundError):
        svc.get_authenticated_user(Principal(id=0, email="ghost@email.com"))


def test_seed_is_idempotent(db):
    seed_defaults(db)
    seed_defaults(db)

    svc = UserService(db)
    admin = svc.repo.get_user_by_email("admin1@email.com")
    assert admin.role_names == [ROLE_ADMIN]
    assert svc.repo.get_user_by_email("user5@email.com") is not None
    assert svc.repo.get_user_by_email("user6@email.com") is None


def test_login_and_token_round_trip(db):
    UserService(db).create_user(_payload())
    auth = AuthService(db, JwtUtils())

    jwt_out = auth.login("ala@email.com", "tajne123")
    principal = auth.authenticate_token(jwt_out.token)

    assert principal.id == jwt_out.id
    assert principal.email == "ala@email.com"
    assert principal.roles == (ROLE_USER,)


def test_login_with_wrong_password_fails(db):
    seed_defaults(db)
    auth = AuthService(db, JwtUtils())

    with pytest.raises(AuthenticationError):
        auth.login("user1@email.com", "wrong-password")
    with pytest.raises(AuthenticationError):
        auth.login("nobody@email.com", DEFAULT_PASSWORD)


def test_token_of_deleted_user_is_rejected(db):
    svc = UserService(db)
    user = svc.create_user(_payload())
    auth = AuthService(db, JwtUtils())
    token = auth.login("ala@email.com", "tajne123").token

    svc.delete_user(user.id)

    with pytest.raises(AuthTokenError):
        auth.authenticate_token(token)
