from typing import AsyncIterator

import pytest
from fakeredis.aioredis import FakeRedis
from httpx import ASGITransport, AsyncClient

from api import models
from api.database import db, db_context
from api.main import app
from api.utils.jwt import decode_jwt, encode_jwt
from api.utils.utc import utcnow


def access_token(user_id: str) -> str:
    return encode_jwt({"uid": user_id, "rt": "refresh-token", "data": {"email_verified": True, "admin": False}})


@pytest.fixture
async def auth_redis(monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[FakeRedis]:
    redis = FakeRedis(decode_responses=True)
    monkeypatch.setattr("api.schemas.user.auth_redis", redis)
    yield redis
    await redis.flushall()
    await redis.aclose()


@pytest.fixture
async def client(database: None) -> AsyncIterator[AsyncClient]:
    async with db_context():
        await db.add(
            models.Webinar(
                id="test-webinar",
                title="Webinar Test",
                seats=10,
                start_date=utcnow(),
                end_date=utcnow(),
                organizer_id="test-user",
            )
        )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


def test__decode_jwt() -> None:
    assert decode_jwt(access_token("test-user"), ["uid", "rt", "data"]) == {
        "uid": "test-user",
        "rt": "refresh-token",
        "data": {"email_verified": True, "admin": False},
    }
    assert decode_jwt("not-a-token") is None
    assert decode_jwt(encode_jwt({"uid": "test-user"}), ["uid", "rt"]) is None


async def test__organizer_token(client: AsyncClient, auth_redis: FakeRedis) -> None:
    response = await client.post(
        "/webinars/test-webinar/seats",
        json={"seats": 30},
        headers={"Authorization": f"Bearer {access_token('test-user')}"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Seats updated"}


async def test__other_user_token(client: AsyncClient, auth_redis: FakeRedis) -> None:
    response = await client.post(
        "/webinars/test-webinar/seats",
        json={"seats": 30},
        headers={"Authorization": f"Bearer {access_token('bob')}"},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Webinar not organizer"}


async def test__revoked_token(client: AsyncClient, auth_redis: FakeRedis) -> None:
    await auth_redis.set("session_logout:refresh-token", 1)

    response = await client.post(
        "/webinars/test-webinar/seats",
        json={"seats": 30},
        headers={"Authorization": f"Bearer {access_token('test-user')}"},
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid token"}


async def test__invalid_token(client: AsyncClient) -> None:
    response = await client.post(
        "/webinars/test-webinar/seats", json={"seats": 30}, headers={"Authorization": "Bearer garbage"}
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid token"}
