"""OCPI response envelope and status codes.

Every OCPI endpoint answers with the same envelope:

    {"data": ..., "status_code": 1000, "status_message": "...", "timestamp": "..."}

``status_code`` is OCPI's own 4 digit code, independent of the HTTP status.
"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ocpi_contracts.error_details import format_validation_errors
from ocpi_contracts.validation import OcpiDateTime, ValidationResult

__all__ = [
    "OcpiResponse",
    "OcpiResponseBuilder",
    "OcpiStatusCode",
    "ocpi_timestamp",
]

DataT = TypeVar("DataT")


class OcpiStatusCode(IntEnum):
    """OCPI status codes, grouped by thousands.

    1xxx success, 2xxx client errors, 3xxx server errors, 4xxx hub errors.
    """

    SUCCESS_GENERIC = 1000

    CLIENT_ERROR_GENERIC = 2000
    CLIENT_ERROR_INVALID_OR_MISSING_PARAMETERS = 2001
    CLIENT_ERROR_NOT_ENOUGH_INFORMATION = 2002
    CLIENT_ERROR_UNKNOWN_LOCATION = 2003
    CLIENT_ERROR_UNKNOWN_TOKEN = 2004

    SERVER_ERROR_GENERIC = 3000
    SERVER_ERROR_UNABLE_TO_USE_CLIENT_API = 3001
    SERVER_ERROR_UNSUPPORTED_VERSION = 3002
    SERVER_ERROR_NO_MATCHING_ENDPOINTS = 3003

    HUB_ERROR_GENERIC = 4000
    HUB_ERROR_UNKNOWN_RECEIVER = 4001
    HUB_ERROR_REQUEST_TIMEOUT = 4002
    HUB_ERROR_CONNECTION_PROBLEM = 4003

    @property
    def is_success(self) -> bool:
        return 1000 <= self.value < 2000


class OcpiResponse(BaseModel, Generic[DataT]):
    """Standard OCPI response.

    ``data`` is a single object, a list, or absent for errors and for
    operations that return nothing.
    """

    data: DataT | None = None
    status_code: int
    status_message: str | None = None
    timestamp: OcpiDateTime

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def ocpi_timestamp(moment: datetime | None = None) -> str:
    """Format a moment as a UTC OCPI DateTime with millisecond precision.

    Args:
        moment: Aware datetime to format, defaults to now

    Returns:
        Timestamp like ``2024-01-31T12:00:00.000Z`` (24 chars)
    """
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class OcpiResponseBuilder:
    """Factory methods for OCPI responses."""

    @staticmethod
    def success(data: DataT, message: str | None = None) -> OcpiResponse[DataT]:
        """Create a successful response with data."""
        return OcpiResponse(
            data=data,
            status_code=OcpiStatusCode.SUCCESS_GENERIC,
            status_message=message,
            timestamp=ocpi_timestamp(),
        )

    @staticmethod
    def success_empty(message: str | None = None) -> OcpiResponse[None]:
        """Create a successful response with no data."""
        return OcpiResponse[None](
            status_code=OcpiStatusCode.SUCCESS_GENERIC,
            status_message=message,
            timestamp=ocpi_timestamp(),
        )

    @staticmethod
    def error(status_code: int, message: str | None = None) -> OcpiResponse[None]:
        """Create an error response."""
        return OcpiResponse[None](
            status_code=status_code,
            status_message=message,
            timestamp=ocpi_timestamp(),
        )

    @staticmethod
    def invalid_parameters(
        errors: ValidationError | dict[str, ValidationResult],
    ) -> OcpiResponse[None]:
        """Create a 2001 response describing why a request payload was rejected.

        Args:
            errors: Pydantic error from parsing a DTO, or ValidationService results

        Returns:
            Error response whose message lists every violation
        """
        if isinstance(errors, ValidationError):
            lines = format_validation_errors(errors)
        else:
            lines = [r.message for r in errors.values() if r.failed and r.message]
        return OcpiResponseBuilder.error(
            OcpiStatusCode.CLIENT_ERROR_INVALID_OR_MISSING_PARAMETERS,
            "; ".join(lines) or None,
        )
