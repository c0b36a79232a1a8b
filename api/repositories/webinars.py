"""Persistence of webinars."""

from typing import Iterable, Protocol

from sqlalchemy.sql import Select

from api import models
from api.database import db, filter_by
from api.entities import Webinar


class WebinarRepository(Protocol):
    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Return the webinar with the given id or None if it does not exist."""

    async def update(self, webinar: Webinar) -> None:
        """Overwrite the stored state of the webinar with the given one."""


class InMemoryWebinarRepository:
    def __init__(self, webinars: Iterable[Webinar] = ()):
        self._webinars: dict[str, Webinar] = {webinar.id: webinar for webinar in webinars}

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        return self.find_by_id_sync(webinar_id)

    def find_by_id_sync(self, webinar_id: str) -> Webinar | None:
        return self._webinars.get(webinar_id)

    async def update(self, webinar: Webinar) -> None:
        self._webinars[webinar.id] = webinar


def select_for_update(webinar_id: str) -> Select[tuple[models.Webinar]]:
    return filter_by(models.Webinar, id=webinar_id).with_for_update()


class SQLWebinarRepository:
    """
    Webinars stored in the `webinar` table of the current database session.

    Rows are read `FOR UPDATE`, so a read followed by an update holds the row lock until the
    request's transaction ends (MySQL and PostgreSQL only, SQLite ignores it).
    """

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        webinar = await db.first(select_for_update(webinar_id))
        return webinar.to_entity() if webinar else None

    async def update(self, webinar: Webinar) -> None:
        await db.merge(models.Webinar.from_entity(webinar))
        await db.flush()
