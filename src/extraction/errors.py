"""Tagged failures raised by the extraction pipeline and their HTTP mapping."""

from __future__ import annotations

from enum import Enum

from src.extraction.models import ErrorBody


class ErrorKind(str, Enum):
    """Discriminant carried by every pipeline failure."""

    INVALID_TYPE = "invalid_type"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    PROVIDER_AUTH = "provider_auth"
    RATE_LIMITED = "rate_limited"
    PROVIDER_FAILURE = "provider_failure"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_JSON = "malformed_json"
    INVALID_SHAPE = "invalid_shape"
    ROUTE_NOT_FOUND = "route_not_found"
    PAYLOAD_TOO_LARGE = "payload_too_large"


class ExtractionError(Exception):
    """Base class for failures raised by any stage of the pipeline."""

    kind: ErrorKind = ErrorKind.PROVIDER_FAILURE

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class NotesValidationError(ExtractionError):
    """The submitted notes failed an input rule."""


class ProviderAuthError(ExtractionError):
    kind = ErrorKind.PROVIDER_AUTH


class RateLimitedError(ExtractionError):
    kind = ErrorKind.RATE_LIMITED


class ProviderError(ExtractionError):
    kind = ErrorKind.PROVIDER_FAILURE


class EmptyResponseError(ExtractionError):
    kind = ErrorKind.EMPTY_RESPONSE


class MalformedResponseError(ExtractionError):
    """The completion text is not JSON, or not the expected shape."""

    kind = ErrorKind.MALFORMED_JSON


GENERIC_FAILURE_MESSAGE = "Failed to process meeting notes. Please try again."

VALIDATION_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_TYPE: "Invalid input. Please provide meeting notes as a string.",
    ErrorKind.TOO_SHORT: "Meeting notes too short. Please provide at least 10 characters.",
    ErrorKind.TOO_LONG: "Meeting notes too long. Please limit to 50,000 characters.",
}

_RESPONSES: dict[ErrorKind, tuple[int, str]] = {
    **{kind: (400, message) for kind, message in VALIDATION_MESSAGES.items()},
    ErrorKind.PROVIDER_AUTH: (500, "API configuration error. Please contact support."),
    ErrorKind.RATE_LIMITED: (429, "Too many requests. Please try again in a moment."),
    ErrorKind.ROUTE_NOT_FOUND: (404, "Endpoint not found"),
    ErrorKind.PAYLOAD_TOO_LARGE: (413, "Request body too large."),
}


def classify_kind(kind: ErrorKind) -> tuple[int, ErrorBody]:
    """Return the status code and response body for an error kind."""
    status, message = _RESPONSES.get(kind, (500, GENERIC_FAILURE_MESSAGE))
    return status, ErrorBody(error=message)


def classify_error(error: BaseException) -> tuple[int, ErrorBody]:
    """Map any failure to a ``(status, body)`` pair.

    Only the ``kind`` discriminant is inspected; the exception's own text is
    never copied into the body. Untagged exceptions fall back to the generic
    500 response.
    """
    if isinstance(error, ExtractionError):
        return classify_kind(error.kind)
    return 500, ErrorBody(error=GENERIC_FAILURE_MESSAGE)
