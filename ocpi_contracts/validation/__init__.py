"""Format validation for OCPI primitive string types.

This module provides the CiString, DateTime and Time rules, the pydantic
field types that attach them to DTO fields, and a small service for running
an explicit field-to-rule table over a raw payload.
"""

from ocpi_contracts.validation.fields import (
    CiString,
    OcpiDateTime,
    TimeOfDay,
    ci_string,
)
from ocpi_contracts.validation.results import ValidationResult
from ocpi_contracts.validation.rules import (
    CI_STRING,
    OCPI_DATETIME,
    TIME_OF_DAY,
    CiStringRule,
    FormatRule,
    OcpiDateTimeRule,
    TimeOfDayRule,
)
from ocpi_contracts.validation.service import ValidationService

__all__ = [
    "CI_STRING",
    "OCPI_DATETIME",
    "TIME_OF_DAY",
    "CiString",
    "CiStringRule",
    "FormatRule",
    "OcpiDateTime",
    "OcpiDateTimeRule",
    "TimeOfDay",
    "TimeOfDayRule",
    "ValidationResult",
    "ValidationService",
    "ci_string",
]
