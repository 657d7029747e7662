"""OCPI primitive format rules.

Each rule checks one of the textual micro-formats OCPI defines on top of
JSON strings:

- CiString: printable ASCII only (code points 32-126)
- DateTime: RFC 3339 restricted to at most 25 characters, with fractional
  seconds allowed only in UTC
- Time: 24 hour ``HH:MM``

Rules are stateless. The module-level instances are shared by every DTO
field and are safe to call from any thread.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar

from ocpi_contracts.validation.results import ValidationResult

__all__ = [
    "CI_STRING",
    "OCPI_DATETIME",
    "TIME_OF_DAY",
    "CiStringRule",
    "FormatRule",
    "OcpiDateTimeRule",
    "TimeOfDayRule",
]

PRINTABLE_ASCII_REGEX = re.compile(r"[\x20-\x7E]*")

OCPI_DATETIME_MAX_LENGTH = 25

_DATE_TIME = (
    r"(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])"
    r"T([01]\d|2[0-3]):([0-5]\d):([0-5]\d)"
)

# Fractional seconds may only be combined with UTC (``Z`` or no designator)
OCPI_DATETIME_WITH_FRACTIONS = re.compile(_DATE_TIME + r"\.\d{1,3}Z?", re.ASCII)
OCPI_DATETIME_WITHOUT_FRACTIONS = re.compile(
    _DATE_TIME + r"(?:Z|[+-](?:[01]\d|2[0-3]):[0-5]\d)?", re.ASCII
)

TIME_REGEX = re.compile(r"([01]\d|2[0-3]):[0-5]\d", re.ASCII)


class FormatRule(ABC):
    """Base class for a named, stateless string format check.

    ``validate`` accepts any value: anything that is not a ``str`` is
    rejected before ``check`` runs, so subclasses only deal with text.
    """

    name: ClassVar[str]
    message_template: ClassVar[str]

    def validate(self, value: Any, field: str) -> ValidationResult:
        """Run the rule against a candidate value.

        Args:
            value: Raw value of any type
            field: Field name interpolated into the violation message

        Returns:
            ValidationResult, never raises
        """
        if isinstance(value, str) and self.check(value):
            return ValidationResult(valid=True, rule_name=self.name, field=field)
        return ValidationResult(
            valid=False,
            rule_name=self.name,
            field=field,
            message=self.message(field),
        )

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and self.check(value)

    def message(self, field: str) -> str:
        return self.message_template.format(field=field)

    @abstractmethod
    def check(self, text: str) -> bool:
        """Return True when ``text`` satisfies the format."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CiStringRule(FormatRule):
    """OCPI CiString: printable ASCII characters only.

    Case is not normalized here; case-insensitivity only matters when two
    CiStrings are compared. Length limits are a separate field constraint.
    """

    name = "isOcpiCiString"
    message_template = (
        "{field} must be a valid OCPI CiString (only printable ASCII characters allowed)"
    )

    def check(self, text: str) -> bool:
        return PRINTABLE_ASCII_REGEX.fullmatch(text) is not None


class OcpiDateTimeRule(FormatRule):
    """OCPI DateTime: constrained RFC 3339 timestamp.

    Accepted forms:
        YYYY-MM-DDTHH:mm:ss.f{1,3}[Z]
        YYYY-MM-DDTHH:mm:ss[Z|+HH:mm|-HH:mm]

    The grammar alone lets through impossible dates such as February 30th,
    so the parsed components are rebuilt into a ``datetime`` and compared.
    """

    name = "isOcpiDateTime"
    message_template = (
        "{field} must be a valid OCPI DateTime (max 25 chars: "
        "YYYY-MM-DDTHH:mm:ss[.fff][Z] or YYYY-MM-DDTHH:mm:ss[Z|±HH:mm])"
    )

    def check(self, text: str) -> bool:
        if len(text) > OCPI_DATETIME_MAX_LENGTH:
            return False

        match = OCPI_DATETIME_WITH_FRACTIONS.fullmatch(text)
        if match is None:
            match = OCPI_DATETIME_WITHOUT_FRACTIONS.fullmatch(text)
        if match is None:
            return False

        return self._is_calendar_valid(*(int(part) for part in match.groups()[:6]))

    @staticmethod
    def _is_calendar_valid(
        year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> bool:
        # datetime raises on out-of-range components instead of rolling over
        try:
            rebuilt = datetime(year, month, day, hour, minute, second)
        except (ValueError, OverflowError):
            return False

        return (
            rebuilt.year,
            rebuilt.month,
            rebuilt.day,
            rebuilt.hour,
            rebuilt.minute,
            rebuilt.second,
        ) == (year, month, day, hour, minute, second)


class TimeOfDayRule(FormatRule):
    """Time of day in 24 hour ``HH:MM`` format, 00:00 to 23:59."""

    name = "isTime"
    message_template = "{field} must be a valid time in HH:MM format (00:00-23:59)"

    def check(self, text: str) -> bool:
        return TIME_REGEX.fullmatch(text) is not None


CI_STRING = CiStringRule()
OCPI_DATETIME = OcpiDateTimeRule()
TIME_OF_DAY = TimeOfDayRule()
