from typing import Any

from pydantic import BaseModel, ConfigDict

from ..exceptions.api_exception import APIException


def example(**kwargs: Any) -> ConfigDict:
    return ConfigDict(json_schema_extra={"example": kwargs})


def responses(default: type[BaseModel], *args: type[APIException]) -> dict[int | str, dict[str, Any]]:
    """Build the `responses` argument of a route from its success model and the exceptions it may raise."""

    exceptions: dict[int, list[type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    return {
        200: {"model": default},
        **{
            code: {
                "description": " / ".join(exc.description for exc in excs),
                "content": {
                    "application/json": {
                        "examples": {
                            exc.__name__: {"summary": exc.detail, "value": {"error": exc.detail}} for exc in excs
                        }
                    }
                },
            }
            for code, excs in sorted(exceptions.items())
        },
    }
