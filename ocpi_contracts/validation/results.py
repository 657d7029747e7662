"""Validation result types.

This module defines the structured outcome of a format rule, replacing a
bare boolean with a value object that also carries the violation message.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of running one format rule on one field value.

    ``message`` is only set when the value was rejected.
    """

    valid: bool
    rule_name: str
    field: str
    message: str | None = None

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.valid

    def format_error(self) -> str:
        """Format the violation as a single report line.

        Returns empty string if validation succeeded.
        """
        if self.valid:
            return ""
        return f"- {self.field} [{self.rule_name}]: {self.message}"
