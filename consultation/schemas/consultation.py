from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..utils.docs import example


EMAIL_REGEX = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class ConsultationType(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"
    OTHER = "other"


class ConsultationRequest(BaseModel):
    name: str = Field(min_length=1, description="Full name of the submitter")
    email: str = Field(pattern=EMAIL_REGEX, description="Email address of the submitter")
    type: ConsultationType = Field(description="Kind of consultation")
    other_type: str = Field("", alias="otherType", description="Kind of consultation if `type` is `other`")
    query: str = Field(min_length=1, description="Free text inquiry")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def resolved_type(self) -> str:
        return self.other_type if self.type == ConsultationType.OTHER else self.type.value


class SubmissionResponse(BaseModel):
    success: bool = Field(True, description="Whether the request has been submitted")
    message: str = Field("Consultation request submitted successfully", description="Human readable status")

    model_config = example(success=True, message="Consultation request submitted successfully")


class ErrorResponse(BaseModel):
    error: str = Field(description="Error message")

    model_config = example(error="All fields are required")


class HttpResponse(BaseModel):
    status_code: int
    headers: dict[str, str]
    body: str = ""
