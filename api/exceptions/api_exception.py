from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class APIException(HTTPException):
    status_code: int
    detail: Any
    description: str
    key: str = "detail"  # name of the response field holding the detail

    def __init__(self) -> None:
        super().__init__(self.status_code, self.detail)

    @classmethod
    def response_body(cls) -> dict[str, Any]:
        return {cls.key: cls.detail}


async def api_exception_handler(_: Request, exc: APIException) -> JSONResponse:
    return JSONResponse({exc.key: exc.detail}, status_code=exc.status_code, headers=exc.headers)
