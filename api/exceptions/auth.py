from typing import Any

from starlette import status

from api.exceptions.api_exception import APIException
from api.utils.docs import responses


class InvalidTokenError(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid token"
    description = "This access token is invalid or the session has expired."


def user_responses(default: type, *args: type[APIException]) -> dict[int | str, dict[str, Any]]:
    return responses(default, InvalidTokenError, *args)
