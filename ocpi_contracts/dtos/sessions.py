"""Session module objects."""

from enum import Enum

from pydantic import Field

from ocpi_contracts.dtos.base import OcpiModel
from ocpi_contracts.validation import OcpiDateTime

__all__ = [
    "ChargingPreferences",
    "ProfileType",
]


class ProfileType(str, Enum):
    """Smart charging preference of the driver."""

    CHEAP = "CHEAP"
    FAST = "FAST"
    GREEN = "GREEN"
    REGULAR = "REGULAR"


class ChargingPreferences(OcpiModel):
    profile_type: ProfileType
    departure_time: OcpiDateTime | None = None
    energy_need: float | None = Field(default=None, ge=0, description="kWh")
    discharge_allowed: bool | None = None
