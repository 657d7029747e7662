"""Error message formatting for user-friendly exception handling."""

import json

from pydantic import ValidationError


def format_validation_errors(error: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into ``location: message`` lines.

    Nested locations are dotted, list indices included (``evse_uids.1``).
    """
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        lines.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return lines


def _format_validation_error(error: ValidationError) -> str:
    details = "\n".join(f"  - {line}" for line in format_validation_errors(error))
    return f"Invalid {error.title} payload ({error.error_count()} errors):\n{details}"


ERROR_TYPES = {
    ValidationError: _format_validation_error,
    json.JSONDecodeError: lambda e: f"Payload is not valid JSON: {e!s}",
    FileNotFoundError: lambda e: str(e),
    KeyError: lambda e: f"Unknown name {e!s}",
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
    ValueError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
