from collections import defaultdict
from typing import Any

from api.exceptions.api_exception import APIException


def responses(default: type, *args: type[APIException]) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI `responses` of a route from its exceptions."""

    exceptions: dict[int, list[type[APIException]]] = defaultdict(list)
    for exc in args:
        exceptions[exc.status_code].append(exc)

    out: dict[int | str, dict[str, Any]] = {
        code: {
            "description": "\n\n".join(exc.description for exc in excs),
            "content": {
                "application/json": {"examples": {exc.__name__: {"value": exc.response_body()} for exc in excs}}
            },
        }
        for code, excs in exceptions.items()
    }
    out[200] = {"model": default}
    return out
