"""Validation service for running format rules over a payload.

This module provides a service layer that applies an explicit field-to-rule
table to a mapping of raw values and aggregates the results.
"""

from collections.abc import Mapping
from typing import Any

from ocpi_contracts.config import get_settings
from ocpi_contracts.utils.logging import get_logger
from ocpi_contracts.validation.results import ValidationResult
from ocpi_contracts.validation.rules import FormatRule

logger = get_logger(__name__)


class ValidationService:
    """Runs a fixed ``{field: rule}`` table and aggregates results.

    The table is given explicitly at construction, there is no registry.
    """

    def __init__(self, field_rules: Mapping[str, FormatRule]):
        """Initialize service with the rule for each field.

        Args:
            field_rules: Mapping of field name to the FormatRule it must satisfy
        """
        self.field_rules = dict(field_rules)

    def validate_all(self, payload: Mapping[str, Any]) -> dict[str, ValidationResult]:
        """Run every field's rule against the payload.

        Fields absent from the payload are skipped; whether a field is
        required is decided by the owning DTO.

        Args:
            payload: Raw field values keyed by field name

        Returns:
            Dictionary mapping field name to ValidationResult
        """
        results = {
            field: rule.validate(payload[field], field)
            for field, rule in self.field_rules.items()
            if field in payload
        }

        if get_settings().validation.log_violations:
            for result in results.values():
                if result.failed:
                    logger.info(
                        "Format violation",
                        field=result.field,
                        rule=result.rule_name,
                    )

        return results

    def has_errors(self, results: dict[str, ValidationResult]) -> bool:
        """Check if any field failed validation.

        Args:
            results: Dictionary of validation results

        Returns:
            True if any rule reported a violation
        """
        return any(r.failed for r in results.values())

    def errors(self, results: dict[str, ValidationResult]) -> dict[str, str]:
        """Collect violation messages keyed by field name."""
        return {
            field: r.message for field, r in results.items() if r.failed and r.message
        }

    def format_error_report(self, results: dict[str, ValidationResult]) -> str:
        """Format all violations as a multi-line report.

        Args:
            results: Dictionary of validation results

        Returns:
            Report string, empty if nothing failed
        """
        failed = [r for r in results.values() if r.failed]

        if not failed:
            return ""

        return "\n".join(r.format_error() for r in failed)
