"""Shared base model and field types for OCPI DTOs."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, HttpUrl, TypeAdapter

from ocpi_contracts.validation import ci_string

__all__ = [
    "CiString2",
    "CiString3",
    "CiString4",
    "CiString36",
    "CiString48",
    "OcpiModel",
    "Url",
]

CiString2 = ci_string(min_length=2, max_length=2)
CiString3 = ci_string(min_length=3, max_length=3)
CiString4 = ci_string(max_length=4)
CiString36 = ci_string(max_length=36)
CiString48 = ci_string(max_length=48)

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except ValueError:
        raise ValueError("must be a valid URL") from None
    return value


# Kept as the original string so payloads round-trip unchanged
Url = Annotated[str, AfterValidator(_check_url)]


class OcpiModel(BaseModel):
    """Base for all OCPI objects.

    Field names are the snake_case names used on the wire. Unknown fields
    are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    def to_wire(self) -> dict:
        """Dump to a JSON-compatible dict, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)
