"""Tariff module objects."""

from enum import Enum
from typing import Annotated

from pydantic import Field, StringConstraints

from ocpi_contracts.dtos.base import CiString2, CiString3, CiString36, OcpiModel, Url
from ocpi_contracts.dtos.common import DisplayText, Price
from ocpi_contracts.dtos.locations import EnergyMix
from ocpi_contracts.validation import OcpiDateTime, TimeOfDay

__all__ = [
    "DayOfWeek",
    "PriceComponent",
    "ReservationRestrictionType",
    "Tariff",
    "TariffDimensionType",
    "TariffElement",
    "TariffRestrictions",
    "TariffType",
]

# Local calendar date, e.g. 2015-12-24
LocalDate = Annotated[
    str,
    StringConstraints(
        pattern=r"^([12][0-9]{3})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$"
    ),
]


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class ReservationRestrictionType(str, Enum):
    """Marks a Tariff Element as describing reservation costs."""

    RESERVATION = "RESERVATION"
    RESERVATION_EXPIRES = "RESERVATION_EXPIRES"


class TariffDimensionType(str, Enum):
    ENERGY = "ENERGY"
    FLAT = "FLAT"
    PARKING_TIME = "PARKING_TIME"
    TIME = "TIME"


class TariffType(str, Enum):
    AD_HOC_PAYMENT = "AD_HOC_PAYMENT"
    PROFILE_CHEAP = "PROFILE_CHEAP"
    PROFILE_FAST = "PROFILE_FAST"
    PROFILE_GREEN = "PROFILE_GREEN"
    REGULAR = "REGULAR"


class PriceComponent(OcpiModel):
    """Price of one tariff dimension, billed in blocks of ``step_size``."""

    type: TariffDimensionType
    price: float = Field(ge=0, description="Price per unit, excl. VAT")
    vat: float | None = Field(default=None, ge=0)
    step_size: int = Field(ge=1)


class TariffRestrictions(OcpiModel):
    """Conditions under which a Tariff Element is active during a session.

    All set restrictions are combined with a logical AND. Times and dates
    are local to the Location's time zone. An ``end_time`` before
    ``start_time`` wraps around to the next day.
    """

    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    start_date: LocalDate | None = None
    end_date: LocalDate | None = None
    min_kwh: float | None = Field(default=None, ge=0)
    max_kwh: float | None = Field(default=None, ge=0)
    min_current: float | None = Field(default=None, ge=0)
    max_current: float | None = Field(default=None, ge=0)
    min_power: float | None = Field(default=None, ge=0)
    max_power: float | None = Field(default=None, ge=0)
    min_duration: int | None = Field(default=None, ge=0)
    max_duration: int | None = Field(default=None, ge=0)
    day_of_week: list[DayOfWeek] | None = None
    reservation: ReservationRestrictionType | None = None


class TariffElement(OcpiModel):
    price_components: list[PriceComponent] = Field(min_length=1)
    restrictions: TariffRestrictions | None = None


class Tariff(OcpiModel):
    """A tariff: its price elements and the period it is valid for."""

    country_code: CiString2
    party_id: CiString3
    id: CiString36
    currency: str = Field(max_length=3, description="ISO-4217 code")
    type: TariffType | None = None
    tariff_alt_text: list[DisplayText] | None = None
    tariff_alt_url: Url | None = None
    min_price: Price | None = None
    max_price: Price | None = None
    elements: list[TariffElement] = Field(min_length=1)
    energy_mix: EnergyMix | None = None
    start_date_time: OcpiDateTime | None = None
    end_date_time: OcpiDateTime | None = None
    last_updated: OcpiDateTime
