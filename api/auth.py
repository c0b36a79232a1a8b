from typing import Any

from fastapi import Depends, Request
from fastapi.openapi.models import HTTPBearer as HTTPBearerModel
from fastapi.security.base import SecurityBase

from api.exceptions.auth import InvalidTokenError
from api.schemas.user import User, UserAccessToken
from api.utils.jwt import decode_jwt


def get_token(request: Request) -> str:
    authorization: str = request.headers.get("Authorization", "")
    return authorization.removeprefix("Bearer ")


class HTTPAuth(SecurityBase):
    def __init__(self) -> None:
        self.model = HTTPBearerModel()
        self.scheme_name = self.__class__.__name__

    async def __call__(self, request: Request) -> User | None:
        if not (token := get_token(request)):
            return None

        if (data := decode_jwt(token, ["uid", "rt", "data"])) is None:
            raise InvalidTokenError

        access_token = UserAccessToken(**data)
        if await access_token.is_revoked():
            raise InvalidTokenError

        return access_token.to_user()


auth = HTTPAuth()


async def current_user(user: User | None = Depends(auth)) -> User | None:
    return user


get_user: Any = Depends(current_user)
