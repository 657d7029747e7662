"""Pydantic field types bound to the OCPI format rules.

Each type runs its rule on the raw input before pydantic's own ``str``
handling, so wrong runtime types are reported with the OCPI message rather
than a generic coercion error.

    class Token(OcpiModel):
        uid: ci_string(max_length=36)
        last_updated: OcpiDateTime
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, StringConstraints, ValidationInfo
from pydantic_core import PydanticCustomError

from ocpi_contracts.validation.rules import (
    CI_STRING,
    OCPI_DATETIME,
    TIME_OF_DAY,
    FormatRule,
)

__all__ = [
    "OCPI_FORMAT_ERROR",
    "CiString",
    "OcpiDateTime",
    "TimeOfDay",
    "ci_string",
    "rule_validator",
]

OCPI_FORMAT_ERROR = "ocpi_format"


def rule_validator(rule: FormatRule) -> BeforeValidator:
    """Wrap a FormatRule as a pydantic before-validator.

    Args:
        rule: The rule instance to run for the annotated field

    Returns:
        BeforeValidator raising ``PydanticCustomError`` on violation
    """

    def _validate(value: Any, info: ValidationInfo) -> Any:
        result = rule.validate(value, info.field_name or "value")
        if result.failed:
            raise PydanticCustomError(
                OCPI_FORMAT_ERROR,
                "{message}",
                {"message": result.message, "rule": rule.name},
            )
        return value

    return BeforeValidator(_validate)


CiString = Annotated[str, rule_validator(CI_STRING)]
OcpiDateTime = Annotated[str, rule_validator(OCPI_DATETIME)]
TimeOfDay = Annotated[str, rule_validator(TIME_OF_DAY)]


def ci_string(max_length: int | None = None, min_length: int | None = None) -> Any:
    """CiString with an independent length constraint, e.g. OCPI ``CiString(36)``."""
    return Annotated[
        str,
        StringConstraints(min_length=min_length, max_length=max_length),
        rule_validator(CI_STRING),
    ]
