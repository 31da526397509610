import os

# konfiguracja testowa musi byc ustawiona przed importem app.*
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "true")
os.environ.setdefault("SEED_DEFAULT_DATA", "false")

from decimal import Decimal

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.api.deps import get_lock_service
from app.data.database import Base, build_engine, get_db
from app.data import models  # noqa: F401
from app.data.seed import seed_defaults, DEFAULT_PASSWORD
from app.domain.schemas import CategoryIn, ProductIn, UserCreate
from app.services.lock_service import LockService
from app.services.product_service import ProductService
from app.services.user_service import UserService
from app.utils.settings import API_PREFIX


@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def lock_service(redis_client):
    return LockService(client=redis_client)


@pytest.fixture
def user(db):
    return UserService(db).create_user(
        UserCreate(first_name="Jan", last_name="Kowalski", email="jan@email.com", password="secret123")
    )


@pytest.fixture
def make_product(db):
    def _make(name="Keyboard", brand="Logi", price="10.00", inventory=10, category="Peripherals"):
        return ProductService(db).add_product(
            ProductIn(
                name=name,
                brand=brand,
                price=Decimal(price),
                inventory=inventory,
                description=f"{brand} {name}",
                category=CategoryIn(name=category),
            )
        )

    return _make


# =====================================================
# HTTP
# =====================================================
@pytest.fixture
def seeded(session_factory):
    session = session_factory()
    try:
        seed_defaults(session)
    finally:
        session.close()


@pytest.fixture
def client(session_factory, lock_service, seeded):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: lock_service

    with TestClient(app) as c:
        yield c


@pytest.fixture
def api():
    def _url(path: str) -> str:
        return f"{API_PREFIX}{path}"

    return _url


@pytest.fixture
def login(client, api):
    def _login(email: str, password: str = DEFAULT_PASSWORD):
        """Zwraca (naglowki z bearer tokenem, id uzytkownika)."""
        resp = client.post(api("/auth/login"), json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        data = resp.json()["data"]
        return {"Authorization": f"Bearer {data['token']}"}, data["id"]

    return _login
