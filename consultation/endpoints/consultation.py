"""Endpoints for consultation requests"""

from functools import cache
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from ..exceptions.consultation import (
    InvalidEmailFormatError,
    InvalidRequestFormatError,
    MethodNotAllowedError,
    MissingBodyError,
    MissingFieldsError,
    SubmissionFailedError,
)
from ..schemas.consultation import SubmissionResponse
from ..services.consultation import ConsultationHandler
from ..settings import settings
from ..utils.docs import responses


class AnyMethodRoute(APIRoute):
    """Route that hands every HTTP method to its endpoint instead of answering unlisted ones itself."""

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        return (Match.FULL if match == Match.PARTIAL else match), child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


router = APIRouter(tags=["consultation"], route_class=AnyMethodRoute)


@cache
def get_handler() -> ConsultationHandler:
    return ConsultationHandler.from_settings(settings)


@router.api_route(
    "/submit-consultation",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    responses=responses(
        SubmissionResponse,
        MissingBodyError,
        InvalidRequestFormatError,
        MissingFieldsError,
        InvalidEmailFormatError,
        MethodNotAllowedError,
        SubmissionFailedError,
    ),
)
async def submit_consultation(request: Request, handler: ConsultationHandler = Depends(get_handler)) -> Any:
    """
    Submit a consultation request.

    The body must be a JSON object with the fields `name`, `email`, `type` (`buyer`, `seller` or `other`),
    `otherType` (required if `type` is `other`) and `query`. On success a notification is sent to the team and a
    confirmation to the given email address.

    `OPTIONS` answers CORS preflight requests, all other methods except `POST` are rejected.
    """

    raw = await request.body()
    result = await handler.handle(request.method, raw.decode("utf-8", errors="replace") if raw else None)

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type="application/json" if result.body else None,
    )
