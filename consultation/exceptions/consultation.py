from fastapi import status

from .api_exception import APIException, ErrorKind


class MethodNotAllowedError(APIException):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    detail = "Method Not Allowed"
    description = "Only POST and OPTIONS requests are accepted."
    kind = ErrorKind.METHOD


class MissingBodyError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Request body is required"
    description = "The request did not contain a body."
    kind = ErrorKind.MALFORMED_INPUT


class InvalidRequestFormatError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request format"
    description = "The request body is not a JSON object."
    kind = ErrorKind.MALFORMED_INPUT


class MissingFieldsError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "All fields are required"
    description = "A required field is missing or the consultation type is unknown."
    kind = ErrorKind.VALIDATION


class InvalidEmailFormatError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid email format"
    description = "The email address is not syntactically valid."
    kind = ErrorKind.VALIDATION


class SubmissionFailedError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Failed to submit consultation request. Please try again later."
    description = "The notification or confirmation emails could not be sent."
    kind = ErrorKind.DELIVERY
