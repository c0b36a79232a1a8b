from starlette import status

from api.exceptions.api_exception import APIException
from api.settings import settings


class WebinarNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Webinar not found"
    description = "The requested webinar does not exist."
    key = "error"


class NotOrganizerError(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Webinar not organizer"
    description = "Only the organizer of the webinar may perform this action."
    key = "message"


class CannotReduceSeatsError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "You cannot reduce the number of seats"
    description = "The new number of seats must be greater than the current one."
    key = "error"


class TooManySeatsError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = f"Webinar must have at most {settings.webinar_max_seats} seats"
    description = f"A webinar cannot have more than {settings.webinar_max_seats} seats."
    key = "error"
