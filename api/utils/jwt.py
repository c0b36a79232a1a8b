from typing import Any, cast

import jwt
from jwt import InvalidTokenError

from api.settings import settings


def encode_jwt(data: dict[str, Any]) -> str:
    return jwt.encode(data, settings.jwt_secret, "HS256")


def decode_jwt(token: str, require: list[str] | None = None) -> dict[str, Any] | None:
    try:
        return cast(
            dict[str, Any], jwt.decode(token, settings.jwt_secret, ["HS256"], options={"require": require or []})
        )
    except InvalidTokenError:
        return None
