"""Validation and notification dispatch for consultation requests"""

import asyncio
import json
import re
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from ..exceptions.api_exception import APIException, ErrorKind
from ..exceptions.consultation import (
    InvalidEmailFormatError,
    InvalidRequestFormatError,
    MethodNotAllowedError,
    MissingBodyError,
    MissingFieldsError,
    SubmissionFailedError,
)
from ..logger import get_logger
from ..schemas.consultation import (
    EMAIL_REGEX,
    ConsultationRequest,
    ConsultationType,
    ErrorResponse,
    HttpResponse,
    SubmissionResponse,
)
from ..settings import Settings
from ..utils.email import CONSULTATION_RECEIVED, NEW_CONSULTATION, SMTPTransport


logger = get_logger(__name__)


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

FIELDS = ("name", "email", "type", "otherType", "query")


def _response(status_code: int, content: BaseModel | None = None) -> HttpResponse:
    return HttpResponse(
        status_code=status_code,
        headers=dict(CORS_HEADERS),
        body=content.model_dump_json() if content is not None else "",
    )


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def parse_request(body: str | None) -> ConsultationRequest:
    """
    Parse and validate the body of a consultation request.

    Missing fields are reported before a malformed email address. Values that are not strings count as missing.
    """

    if not body:
        raise MissingBodyError

    try:
        data: Any = json.loads(body)
    except (ValueError, RecursionError):
        raise InvalidRequestFormatError
    if not isinstance(data, dict):
        raise InvalidRequestFormatError

    name, email, type_, other_type, query = (_text(data, key) for key in FIELDS)

    if type_ not in {t.value for t in ConsultationType}:
        raise MissingFieldsError
    if not (name and email and query) or (type_ == ConsultationType.OTHER and not other_type):
        raise MissingFieldsError

    if not re.fullmatch(EMAIL_REGEX, email):
        raise InvalidEmailFormatError

    return ConsultationRequest(name=name, email=email, type=type_, other_type=other_type, query=query)


class ConsultationHandler:
    def __init__(self, transport: SMTPTransport, recipients: Sequence[str], company: str) -> None:
        self.transport = transport
        self.recipients = tuple(recipients)
        self.company = company

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConsultationHandler":
        return cls(SMTPTransport.from_settings(settings), settings.notification_recipients, settings.company_name)

    async def handle(self, http_method: str, body: str | None) -> HttpResponse:
        if http_method == "OPTIONS":
            return _response(204)

        try:
            if http_method != "POST":
                raise MethodNotAllowedError

            request = parse_request(body)
            await self.dispatch(request)
        except APIException as e:
            if e.kind != ErrorKind.DELIVERY:
                logger.debug(f"Rejected consultation request: {e.detail}")
            return _response(e.status_code, ErrorResponse(error=e.detail))

        return _response(200, SubmissionResponse())

    async def dispatch(self, request: ConsultationRequest) -> None:
        """Notify all internal recipients concurrently, then confirm to the submitter."""

        try:
            results = await asyncio.gather(
                *(
                    NEW_CONSULTATION.send(
                        self.transport,
                        recipient,
                        name=request.name,
                        email=request.email,
                        type=request.resolved_type,
                        query=request.query,
                    )
                    for recipient in self.recipients
                ),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            await CONSULTATION_RECEIVED.send(self.transport, request.email, name=request.name, company=self.company)
        except Exception:
            logger.exception("Submission error")
            raise SubmissionFailedError

        logger.info(f"Consultation request from {request.name} submitted")
