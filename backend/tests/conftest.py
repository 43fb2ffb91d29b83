"""Root conftest: shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - get_db dependency overridden to use the test storage handle
    - db_manager patched for code that reads the module singleton (readiness probe)

Design Decisions:
    - SQLite in-memory over a shared file: no cleanup, no cross-test leakage
"""

import os

# Keep tests off any real database file before postboard.main reads settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import postboard.infrastructure.database as db_module  # noqa: E402
from postboard.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from postboard.main import app  # noqa: E402
from postboard.models.user import User as UserModel  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_user(user_id: str, **overrides) -> UserModel:
    """Build a user row with realistic defaults."""
    fields = {
        "id": user_id,
        "name": f"Name {user_id}",
        "username": f"user_{user_id}",
        "email": f"{user_id}@example.com",
        "phone": "555-0100",
        "street": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "zipcode": "62701",
    }
    fields.update(overrides)
    return UserModel(**fields)


@pytest.fixture
async def test_manager():
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.open()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(test_manager):
    async with test_manager.session() as session:
        yield session


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_user(test_db):
    """Insert one user with a fully populated address."""
    user = make_user("u1")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def seed_users(test_db):
    """Insert ten users, u00..u09, in id order."""
    users = [make_user(f"u{i:02d}") for i in range(10)]
    test_db.add_all(users)
    await test_db.commit()
    return users


@pytest.fixture
def user_factory():
    return make_user
