from typing import Any
from unittest.mock import AsyncMock

import pytest
from pytest_mock import MockerFixture

from consultation.services.consultation import ConsultationHandler
from consultation.utils.email import SMTPTransport


RECIPIENTS = ["joseph@platteneye.co.uk", "daniel@platteneye.co.uk"]


@pytest.fixture
def transport(mocker: MockerFixture) -> SMTPTransport:
    transport = SMTPTransport(hostname="smtp.example.com", port=587, username=None, password=None, sender="x@y.z")
    mocker.patch.object(SMTPTransport, "send", new_callable=AsyncMock)
    return transport


@pytest.fixture
def send(transport: SMTPTransport) -> AsyncMock:
    return SMTPTransport.send  # type: ignore[return-value]


@pytest.fixture
def handler(transport: SMTPTransport) -> ConsultationHandler:
    return ConsultationHandler(transport, RECIPIENTS, "Platteneye Capital")


@pytest.fixture
def payload() -> dict[str, Any]:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "type": "buyer",
        "otherType": "",
        "query": "Interested in listing.",
    }