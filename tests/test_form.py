import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from consultation.endpoints.consultation import get_handler
from consultation.form import FALLBACK_ERROR, SUCCESS_MESSAGE, ConsultationForm, FormData, Toast
from consultation.main import app
from consultation.services.consultation import ConsultationHandler


Handler = Callable[[httpx.Request], httpx.Response]


def make_form(handler: Handler) -> ConsultationForm:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return ConsultationForm(client)


def fill(form: ConsultationForm) -> None:
    form.update(name="Jane Doe", email="jane@example.com", type="other", otherType="Investor", query="Hi\nthere")


async def test__submit_success() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        assert form.is_submitting
        assert form.submit_label == "Submitting..."
        return httpx.Response(200, json={"success": True, "message": "Consultation request submitted successfully"})

    form = make_form(handler)
    fill(form)

    assert await form.submit() is True

    [request] = requests
    assert request.method == "POST"
    assert request.url.path == "/api/submit-consultation"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "type": "other",
        "otherType": "Investor",
        "query": "Hi\nthere",
    }

    assert form.data == FormData()
    assert form.toaster.toasts == [Toast("success", SUCCESS_MESSAGE)]
    assert not form.is_submitting
    assert form.submit_label == "Submit Consultation Request"


@pytest.mark.parametrize(
    "response,message",
    [
        (httpx.Response(400, json={"error": "Invalid email format"}), "Invalid email format"),
        (httpx.Response(500, json={}), "Failed to submit form"),
        (httpx.Response(502, text="<html>Bad Gateway</html>"), "Failed to parse server response"),
    ],
)
async def test__submit_error(response: httpx.Response, message: str) -> None:
    form = make_form(lambda _: response)
    fill(form)
    draft = form.data.model_copy()

    assert await form.submit() is False

    assert form.data == draft
    assert form.toaster.toasts == [Toast("error", message)]
    assert not form.is_submitting


async def test__submit_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    form = make_form(handler)
    fill(form)

    assert await form.submit() is False

    assert form.data.name == "Jane Doe"
    assert form.toaster.toasts == [Toast("error", "Connection refused")]
    assert not form.is_submitting


async def test__submit_error_without_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("", request=request)

    form = make_form(handler)

    assert await form.submit() is False
    assert form.toaster.toasts == [Toast("error", FALLBACK_ERROR)]


def test__render_other_type() -> None:
    form = make_form(lambda _: httpx.Response(200))

    assert 'id="otherType"' not in form.render()

    form.update(type="other", otherType="Investor")
    html = form.render()
    assert 'id="otherType"' in html
    assert 'value="Investor"' in html
    assert '<option value="other" selected>Other</option>' in html


def test__render_submitting() -> None:
    form = make_form(lambda _: httpx.Response(200))
    form.update(query="<script>")

    assert "<button type=\"submit\">Submit Consultation Request</button>" in form.render()
    assert "&lt;script&gt;" in form.render()

    form.is_submitting = True
    assert '<button type="submit" disabled>Submitting...</button>' in form.render()


async def test__submit_end_to_end(handler: ConsultationHandler, send: AsyncMock, payload: dict[str, Any]) -> None:
    app.dependency_overrides[get_handler] = lambda: handler
    try:
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
        async with client:
            form = ConsultationForm(client)
            form.update(**payload)

            assert await form.submit() is True
    finally:
        app.dependency_overrides.clear()

    assert form.toaster.toasts == [Toast("success", SUCCESS_MESSAGE)]
    assert send.await_count == 3
    assert send.await_args_list[2].args[:2] == ("jane@example.com", "Consultation Request Received - Platteneye Capital")
