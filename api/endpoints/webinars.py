"""Endpoints related to webinars."""

from typing import Any

from fastapi import APIRouter, Depends

from api.auth import get_user
from api.entities import NotOrganizer, SeatsNotIncreased, TooManySeats, WebinarNotFound
from api.exceptions.auth import InvalidTokenError, user_responses
from api.exceptions.webinars import CannotReduceSeatsError, NotOrganizerError, TooManySeatsError, WebinarNotFoundError
from api.repositories import SQLWebinarRepository, WebinarRepository
from api.schemas.user import User
from api.schemas.webinars import ChangeSeats, SeatsUpdated
from api.settings import settings
from api.use_cases import change_seats


router = APIRouter()


def get_webinar_repository() -> WebinarRepository:
    return SQLWebinarRepository()


@router.post(
    "/webinars/{webinar_id}/seats",
    responses=user_responses(
        SeatsUpdated, WebinarNotFoundError, NotOrganizerError, CannotReduceSeatsError, TooManySeatsError
    ),
)
async def change_webinar_seats(
    webinar_id: str,
    data: ChangeSeats,
    user: User | None = get_user,
    repository: WebinarRepository = Depends(get_webinar_repository),
) -> Any:
    """
    Raise the number of seats of a webinar.

    Can only be accessed by the organizer of the webinar.
    """

    if settings.trust_request_user and data.user is not None:
        user = data.user
    if user is None:
        raise InvalidTokenError

    try:
        await change_seats.ChangeSeats(repository, settings.webinar_max_seats).execute(webinar_id, user, data.seats)
    except WebinarNotFound:
        raise WebinarNotFoundError
    except NotOrganizer:
        raise NotOrganizerError
    except SeatsNotIncreased:
        raise CannotReduceSeatsError
    except TooManySeats:
        raise TooManySeatsError

    return SeatsUpdated()
