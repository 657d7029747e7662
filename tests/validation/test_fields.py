"""Tests for the pydantic field types bound to the OCPI rules."""

import pytest
from pydantic import BaseModel, ValidationError

from ocpi_contracts.validation import CiString, OcpiDateTime, TimeOfDay, ci_string


class Sample(BaseModel):
    uid: CiString
    last_updated: OcpiDateTime
    start_time: TimeOfDay | None = None


class ShortId(BaseModel):
    party_id: ci_string(min_length=3, max_length=3)
    tags: list[ci_string(max_length=5)] = []


class TestAnnotatedFields:
    """Tests for CiString, OcpiDateTime and TimeOfDay annotations."""

    def test_valid_values_pass_through_unchanged(self):
        """Test that accepted values are stored as given."""
        sample = Sample(
            uid="abc", last_updated="2015-06-29T20:39:09Z", start_time="13:30"
        )
        assert sample.uid == "abc"
        assert sample.last_updated == "2015-06-29T20:39:09Z"
        assert sample.start_time == "13:30"

    def test_violation_reports_rule_message(self):
        """Test that the error carries the field-interpolated rule message."""
        with pytest.raises(ValidationError) as exc_info:
            Sample(uid="abc", last_updated="2023-02-30T10:30:45Z")

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "ocpi_format"
        assert errors[0]["loc"] == ("last_updated",)
        assert errors[0]["msg"].startswith("last_updated must be a valid OCPI DateTime")
        assert errors[0]["ctx"]["rule"] == "isOcpiDateTime"

    def test_non_string_is_not_coerced(self):
        """Test that wrong runtime types get the OCPI message, not coercion."""
        with pytest.raises(ValidationError) as exc_info:
            Sample(uid=12345, last_updated="2015-06-29T20:39:09Z")

        error = exc_info.value.errors()[0]
        assert error["type"] == "ocpi_format"
        assert "uid must be a valid OCPI CiString" in error["msg"]

    def test_all_violations_collected(self):
        """Test that every violating field is reported."""
        with pytest.raises(ValidationError) as exc_info:
            Sample(uid="tab\t", last_updated="yesterday", start_time="24:00")

        locations = {e["loc"][0] for e in exc_info.value.errors()}
        assert locations == {"uid", "last_updated", "start_time"}

    def test_optional_field_accepts_none(self):
        """Test that Optional wrapping skips the rule for None."""
        sample = Sample(uid="abc", last_updated="2015-06-29T20:39:09")
        assert sample.start_time is None

    def test_length_is_checked_independently(self):
        """Test that ci_string adds a length limit on top of the character check."""
        assert ShortId(party_id="TNM").party_id == "TNM"

        with pytest.raises(ValidationError) as exc_info:
            ShortId(party_id="TNMX")
        assert exc_info.value.errors()[0]["type"] == "string_too_long"

        with pytest.raises(ValidationError) as exc_info:
            ShortId(party_id="TN\n")
        assert exc_info.value.errors()[0]["type"] == "ocpi_format"

    def test_list_items_use_field_name(self):
        """Test that list items are checked one by one."""
        with pytest.raises(ValidationError) as exc_info:
            ShortId(party_id="TNM", tags=["ok", "bad\x7f"])

        error = exc_info.value.errors()[0]
        assert error["loc"] == ("tags", 1)
        assert error["msg"].startswith("tags must be a valid OCPI CiString")
