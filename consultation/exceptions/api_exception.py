from enum import Enum

from fastapi import HTTPException


class ErrorKind(str, Enum):
    MALFORMED_INPUT = "malformed-input"
    VALIDATION = "validation"
    DELIVERY = "delivery"
    METHOD = "method"


class APIException(HTTPException):
    status_code: int
    detail: str
    description: str
    kind: ErrorKind

    def __init__(self) -> None:
        super().__init__(self.status_code, self.detail)
