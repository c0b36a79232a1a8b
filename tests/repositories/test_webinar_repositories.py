import pytest
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.engine import Dialect

from api import models
from api.database import db, db_context
from api.entities import Webinar
from api.repositories import InMemoryWebinarRepository, SQLWebinarRepository
from api.repositories.webinars import select_for_update


async def test__in_memory__find_by_id(webinar: Webinar) -> None:
    repository = InMemoryWebinarRepository([webinar])

    assert await repository.find_by_id("webinar-id") == webinar
    assert await repository.find_by_id("unknown") is None


async def test__in_memory__update(webinar: Webinar) -> None:
    repository = InMemoryWebinarRepository([webinar])

    await repository.update(webinar.with_seats(300))

    assert repository.find_by_id_sync("webinar-id") == webinar.with_seats(300)


async def test__sql__find_by_id(database: None, webinar: Webinar) -> None:
    async with db_context():
        await db.add(models.Webinar.from_entity(webinar))

    async with db_context():
        assert await SQLWebinarRepository().find_by_id("webinar-id") == webinar
        assert await SQLWebinarRepository().find_by_id("unknown") is None


async def test__sql__update(database: None, webinar: Webinar) -> None:
    repository = SQLWebinarRepository()
    async with db_context():
        await db.add(models.Webinar.from_entity(webinar))

    async with db_context():
        found = await repository.find_by_id("webinar-id")
        assert found is not None
        await repository.update(found.with_seats(300))

    async with db_context():
        row = await db.get(models.Webinar, id="webinar-id")
        assert row is not None
        assert row.seats == 300
        assert row.title == webinar.title
        assert row.start_date == webinar.start_date


@pytest.mark.parametrize("dialect", [postgresql.dialect(), mysql.dialect()])
def test__sql__select_locks_row(dialect: Dialect) -> None:
    statement = str(select_for_update("webinar-id").compile(dialect=dialect))

    assert "FOR UPDATE" in statement
    assert "webinar.id" in statement


def test__sql__select_lock_ignored_by_sqlite() -> None:
    assert "FOR UPDATE" not in str(select_for_update("webinar-id").compile(dialect=sqlite.dialect()))
