import os


os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret"

from datetime import datetime, timezone  # noqa: E402
from typing import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from api.auth import current_user  # noqa: E402
from api.database import db  # noqa: E402
from api.entities import Webinar  # noqa: E402
from api.main import app  # noqa: E402
from api.schemas.user import User  # noqa: E402


@pytest.fixture
def alice() -> User:
    return User(id="alice", email_verified=True, admin=False)


@pytest.fixture
def bob() -> User:
    return User(id="bob", email_verified=True, admin=False)


@pytest.fixture
def webinar(alice: User) -> Webinar:
    return Webinar(
        id="webinar-id",
        organizer_id=alice.id,
        title="Webinar title",
        start_date=datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc),
        seats=100,
    )


@pytest.fixture
async def database() -> AsyncIterator[None]:
    await db.create_tables()
    yield
    await db.drop_tables()
    await db.engine.dispose()


@pytest.fixture
async def client(database: None) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[current_user] = lambda: User(id="test-user", email_verified=True, admin=False)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
