from api.entities import NotOrganizer, SeatsNotIncreased, TooManySeats, Webinar, WebinarNotFound
from api.logger import get_logger
from api.repositories import WebinarRepository
from api.schemas.user import User


logger = get_logger(__name__)


class ChangeSeats:
    """Raise the number of seats of a webinar on behalf of its organizer."""

    def __init__(self, repository: WebinarRepository, max_seats: int = 1000):
        self.repository = repository
        self.max_seats = max_seats

    async def execute(self, webinar_id: str, user: User, seats: int) -> Webinar:
        webinar = await self.repository.find_by_id(webinar_id)
        if webinar is None:
            raise WebinarNotFound(webinar_id)

        if user.id != webinar.organizer_id:
            logger.debug(f"User {user.id} tried to change the seats of webinar {webinar.id}")
            raise NotOrganizer(webinar.id, user.id)

        if seats <= webinar.seats:
            raise SeatsNotIncreased(webinar.seats, seats)

        if seats > self.max_seats:
            raise TooManySeats(self.max_seats, seats)

        updated = webinar.with_seats(seats)
        await self.repository.update(updated)
        logger.info(f"Seats of webinar {webinar.id} changed from {webinar.seats} to {seats}")
        return updated
