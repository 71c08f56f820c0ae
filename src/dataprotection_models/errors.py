"""Error hierarchy for Data Protection model conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models.api_2020_01_alpha import Error


@dataclass(slots=True)
class RequestDetails:
    operation: str
    method: str | None = None
    url: str | None = None
    status_code: int | None = None
    response_body: Any | None = None
    error: Error | None = None


class DataProtectionModelError(Exception):
    """Base class for all model adapter errors."""


class ConversionError(DataProtectionModelError):
    """Raised when a raw value cannot be converted to its declared type.

    ``model_name`` names the outermost model whose construction was aborted;
    ``target`` names the type the offending value was converted to and
    ``location`` is the path from that model down to the value.
    """

    def __init__(
        self,
        *,
        model_name: str,
        target: str | None = None,
        errors: Any = None,
        location: tuple[str | int, ...] = (),
        raw_sample: Any | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__()
        self.model_name = model_name
        self.target = target
        self.errors = errors
        self.location = location
        self.raw_sample = raw_sample
        self.reason = reason

    def prepend(self, *segments: str | int, model_name: str | None = None) -> ConversionError:
        self.location = (*segments, *self.location)
        if model_name is not None:
            self.model_name = model_name
        return self

    @property
    def path(self) -> str:
        return format_location(self.location)

    def __str__(self) -> str:
        where = self.path or "<root>"
        expected = f" (expected {self.target})" if self.target else ""
        detail = f": {self.reason}" if self.reason else ""
        return f"conversion to {self.model_name} failed at {where}{expected}{detail}"


class UnknownFieldError(ConversionError):
    """Raised in strict mode when input carries keys no field declares."""

    def __init__(self, *, model_name: str, keys: list[str], location: tuple[str | int, ...] = ()) -> None:
        super().__init__(
            model_name=model_name,
            location=location,
            raw_sample=keys,
            reason=f"unknown keys {', '.join(keys)}",
        )
        self.keys = keys


class JsonParseError(DataProtectionModelError):
    """Raised when JSON text cannot be parsed into an object."""

    def __init__(self, message: str, *, model_name: str, raw_sample: Any | None = None) -> None:
        super().__init__(f"{model_name}: {message}")
        self.model_name = model_name
        self.reason = message
        self.raw_sample = raw_sample


class ApiError(DataProtectionModelError):
    """Raised when a received response carries an unexpected HTTP status."""

    def __init__(self, message: str, *, details: RequestDetails) -> None:
        super().__init__(message)
        self.details = details

    @property
    def error(self) -> Error | None:
        return self.details.error


class AuthError(ApiError):
    """Raised for authentication/authorization failures."""


class ValidationError(ApiError):
    """Raised for invalid request payloads."""


class NotFoundError(ApiError):
    """Raised when requested resource does not exist."""


class ConflictError(ApiError):
    """Raised when request conflicts with current state."""


class ServerError(ApiError):
    """Raised for server-side failures."""


def format_location(location: tuple[str | int, ...]) -> str:
    rendered = ""
    for segment in location:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        else:
            rendered = f"{rendered}.{segment}" if rendered else segment
    return rendered


def classify_api_error(details: RequestDetails) -> ApiError:
    status = details.status_code or 0
    message = f"{details.operation} failed with status {status}"
    if details.error is not None and details.error.code:
        suffix = f": {details.error.message}" if details.error.message else ""
        message = f"{message} ({details.error.code}{suffix})"

    if status in (401, 403):
        return AuthError(message, details=details)
    if status == 400:
        return ValidationError(message, details=details)
    if status == 404:
        return NotFoundError(message, details=details)
    if status == 409:
        return ConflictError(message, details=details)
    if status >= 500:
        return ServerError(message, details=details)

    return ApiError(message, details=details)
