"""Tests for ValidationResult value object."""

from dataclasses import FrozenInstanceError

import pytest

from ocpi_contracts.validation.results import ValidationResult


class TestValidationResult:
    """Tests for ValidationResult value object."""

    def test_format_error_when_valid(self):
        """Test that format_error returns empty string on success."""
        result = ValidationResult(valid=True, rule_name="isTime", field="start_time")

        assert result.format_error() == ""
        assert result.message is None

    def test_format_error_when_failed(self):
        """Test error formatting when validation failed."""
        result = ValidationResult(
            valid=False,
            rule_name="isTime",
            field="start_time",
            message="start_time must be a valid time",
        )

        assert result.format_error() == (
            "- start_time [isTime]: start_time must be a valid time"
        )

    def test_failed_property(self):
        """Test that failed is the negation of valid."""
        assert ValidationResult(False, "isTime", "f", "bad").failed is True
        assert ValidationResult(True, "isTime", "f").failed is False

    def test_immutability(self):
        """Test that results cannot be modified."""
        result = ValidationResult(True, "isTime", "f")
        with pytest.raises(FrozenInstanceError):
            result.valid = False  # pyrefly: ignore
