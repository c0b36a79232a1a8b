from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from api import entities
from api.database import Base
from api.database.database import UTCDateTime


class Webinar(Base):
    __tablename__ = "webinar"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, unique=True)
    title: Mapped[str] = mapped_column(String(256))
    seats: Mapped[int] = mapped_column(Integer)
    start_date: Mapped[datetime] = mapped_column(UTCDateTime)
    end_date: Mapped[datetime] = mapped_column(UTCDateTime)
    organizer_id: Mapped[str] = mapped_column(String(36))

    def to_entity(self) -> entities.Webinar:
        return entities.Webinar(
            id=self.id,
            organizer_id=self.organizer_id,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            seats=self.seats,
        )

    @classmethod
    def from_entity(cls, webinar: entities.Webinar) -> Webinar:
        return cls(
            id=webinar.id,
            organizer_id=webinar.organizer_id,
            title=webinar.title,
            start_date=webinar.start_date,
            end_date=webinar.end_date,
            seats=webinar.seats,
        )
