"""Client side collection and submission of consultation requests"""

from dataclasses import dataclass, field
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .logger import get_logger
from .settings import settings
from .utils.templates import env


logger = get_logger(__name__)


SUBMIT_LABEL = "Submit Consultation Request"
SUBMITTING_LABEL = "Submitting..."

SUCCESS_MESSAGE = "Your consultation request has been submitted successfully!"
FALLBACK_ERROR = "Failed to submit form. Please try again later."

TYPE_OPTIONS = [("", "Select type"), ("buyer", "Buyer"), ("seller", "Seller"), ("other", "Other")]


class FormData(BaseModel):
    name: str = ""
    email: str = ""
    type: str = ""
    other_type: str = Field("", alias="otherType")
    query: str = ""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)


class SubmissionError(Exception):
    pass


@dataclass
class Toast:
    kind: Literal["success", "error"]
    message: str


@dataclass
class Toaster:
    position: str = "top-right"
    toasts: list[Toast] = field(default_factory=list)

    def success(self, message: str) -> None:
        logger.info(message)
        self.toasts.append(Toast("success", message))

    def error(self, message: str) -> None:
        logger.warning(message)
        self.toasts.append(Toast("error", message))


class ConsultationForm:
    def __init__(
        self, client: httpx.AsyncClient, *, endpoint: str | None = None, toaster: Toaster | None = None
    ) -> None:
        self.client = client
        self.endpoint = endpoint or settings.consultation_endpoint
        self.toaster = toaster or Toaster()
        self.data = FormData()
        self.is_submitting = False

    def update(self, **fields: str) -> None:
        for key, value in fields.items():
            setattr(self.data, "other_type" if key == "otherType" else key, value)

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self.is_submitting else SUBMIT_LABEL

    def render(self) -> str:
        return env.get_template("consultation_form.html").render(
            data=self.data,
            type_options=TYPE_OPTIONS,
            is_submitting=self.is_submitting,
            submit_label=self.submit_label,
            endpoint=self.endpoint,
            toasts=self.toaster.toasts,
            toast_position=self.toaster.position,
        )

    async def submit(self) -> bool:
        """
        Post the draft to the consultation endpoint and report the outcome as a toast.

        The draft is cleared only if the server accepted the request. Returns whether it did.
        """

        self.is_submitting = True
        try:
            response = await self.client.post(self.endpoint, json=self.data.model_dump(by_alias=True))

            try:
                data: Any = response.json()
            except ValueError:
                data = {"error": "Failed to parse server response"}
            if not isinstance(data, dict):
                data = {}

            if not response.is_success:
                raise SubmissionError(data.get("error") or "Failed to submit form")

            self.toaster.success(SUCCESS_MESSAGE)
            self.data = FormData()
            return True
        except Exception as e:
            self.toaster.error(str(e) or FALLBACK_ERROR)
            logger.error(f"Submission error: {e!r}")
            return False
        finally:
            self.is_submitting = False
