"""Location module objects: locations, EVSEs, connectors, energy mix and hours."""

import re
from enum import Enum

from pydantic import Field, field_validator, model_validator

from ocpi_contracts.dtos.base import (
    CiString2,
    CiString3,
    CiString4,
    CiString36,
    CiString48,
    OcpiModel,
    Url,
)
from ocpi_contracts.dtos.common import DisplayText
from ocpi_contracts.dtos.tokens import TokenType
from ocpi_contracts.validation import OcpiDateTime, TimeOfDay

__all__ = [
    "EVSE",
    "AdditionalGeoLocation",
    "BusinessDetails",
    "Capability",
    "Connector",
    "ConnectorFormat",
    "ConnectorType",
    "EnergyMix",
    "EnergySource",
    "EnergySourceCategory",
    "EnvironmentalImpact",
    "EnvironmentalImpactCategory",
    "ExceptionalPeriod",
    "Facility",
    "GeoLocation",
    "Hours",
    "Image",
    "ImageCategory",
    "Location",
    "ParkingRestriction",
    "ParkingType",
    "PowerType",
    "PublishTokenType",
    "RegularHours",
    "Status",
    "StatusSchedule",
]

DECIMAL_DEGREES_REGEX = re.compile(r"[+-]?(?:0|[1-9]\d{0,2})(?:\.\d+)?", re.ASCII)


class Capability(str, Enum):
    """Functionality an EVSE supports."""

    CHARGING_PROFILE_CAPABLE = "CHARGING_PROFILE_CAPABLE"
    CHARGING_PREFERENCES_CAPABLE = "CHARGING_PREFERENCES_CAPABLE"
    CHIP_CARD_SUPPORT = "CHIP_CARD_SUPPORT"
    CONTACTLESS_CARD_SUPPORT = "CONTACTLESS_CARD_SUPPORT"
    CREDIT_CARD_PAYABLE = "CREDIT_CARD_PAYABLE"
    DEBIT_CARD_PAYABLE = "DEBIT_CARD_PAYABLE"
    PED_TERMINAL = "PED_TERMINAL"
    REMOTE_START_STOP_CAPABLE = "REMOTE_START_STOP_CAPABLE"
    RESERVABLE = "RESERVABLE"
    RFID_READER = "RFID_READER"
    START_SESSION_CONNECTOR_REQUIRED = "START_SESSION_CONNECTOR_REQUIRED"
    TOKEN_GROUP_CAPABLE = "TOKEN_GROUP_CAPABLE"
    UNLOCK_CAPABLE = "UNLOCK_CAPABLE"


class ConnectorFormat(str, Enum):
    SOCKET = "SOCKET"
    CABLE = "CABLE"


class ConnectorType(str, Enum):
    """Socket or plug standard of a Connector."""

    CHADEMO = "CHADEMO"
    CHAOJI = "CHAOJI"
    DOMESTIC_A = "DOMESTIC_A"
    DOMESTIC_B = "DOMESTIC_B"
    DOMESTIC_C = "DOMESTIC_C"
    DOMESTIC_D = "DOMESTIC_D"
    DOMESTIC_E = "DOMESTIC_E"
    DOMESTIC_F = "DOMESTIC_F"
    DOMESTIC_G = "DOMESTIC_G"
    DOMESTIC_H = "DOMESTIC_H"
    DOMESTIC_I = "DOMESTIC_I"
    DOMESTIC_J = "DOMESTIC_J"
    DOMESTIC_K = "DOMESTIC_K"
    DOMESTIC_L = "DOMESTIC_L"
    DOMESTIC_M = "DOMESTIC_M"
    DOMESTIC_N = "DOMESTIC_N"
    DOMESTIC_O = "DOMESTIC_O"
    GBT_AC = "GBT_AC"
    GBT_DC = "GBT_DC"
    IEC_60309_2_single_16 = "IEC_60309_2_single_16"
    IEC_60309_2_three_16 = "IEC_60309_2_three_16"
    IEC_60309_2_three_32 = "IEC_60309_2_three_32"
    IEC_60309_2_three_64 = "IEC_60309_2_three_64"
    IEC_62196_T1 = "IEC_62196_T1"
    IEC_62196_T1_COMBO = "IEC_62196_T1_COMBO"
    IEC_62196_T2 = "IEC_62196_T2"
    IEC_62196_T2_COMBO = "IEC_62196_T2_COMBO"
    IEC_62196_T3A = "IEC_62196_T3A"
    IEC_62196_T3C = "IEC_62196_T3C"
    NEMA_5_20 = "NEMA_5_20"
    NEMA_6_30 = "NEMA_6_30"
    NEMA_6_50 = "NEMA_6_50"
    NEMA_10_30 = "NEMA_10_30"
    NEMA_10_50 = "NEMA_10_50"
    NEMA_14_30 = "NEMA_14_30"
    NEMA_14_50 = "NEMA_14_50"
    PANTOGRAPH_BOTTOM_UP = "PANTOGRAPH_BOTTOM_UP"
    PANTOGRAPH_TOP_DOWN = "PANTOGRAPH_TOP_DOWN"
    TESLA_R = "TESLA_R"
    TESLA_S = "TESLA_S"


class EnergySourceCategory(str, Enum):
    NUCLEAR = "NUCLEAR"
    GENERAL_FOSSIL = "GENERAL_FOSSIL"
    COAL = "COAL"
    GAS = "GAS"
    GENERAL_GREEN = "GENERAL_GREEN"
    SOLAR = "SOLAR"
    WIND = "WIND"
    WATER = "WATER"


class EnvironmentalImpactCategory(str, Enum):
    NUCLEAR_WASTE = "NUCLEAR_WASTE"
    CARBON_DIOXIDE = "CARBON_DIOXIDE"


class Facility(str, Enum):
    """Facility near or at a Location."""

    HOTEL = "HOTEL"
    RESTAURANT = "RESTAURANT"
    CAFE = "CAFE"
    MALL = "MALL"
    SUPERMARKET = "SUPERMARKET"
    SPORT = "SPORT"
    RECREATION_AREA = "RECREATION_AREA"
    NATURE = "NATURE"
    MUSEUM = "MUSEUM"
    BIKE_SHARING = "BIKE_SHARING"
    BUS_STOP = "BUS_STOP"
    TAXI_STAND = "TAXI_STAND"
    TRAM_STOP = "TRAM_STOP"
    METRO_STATION = "METRO_STATION"
    TRAIN_STATION = "TRAIN_STATION"
    AIRPORT = "AIRPORT"
    PARKING_LOT = "PARKING_LOT"
    CARPOOL_PARKING = "CARPOOL_PARKING"
    FUEL_STATION = "FUEL_STATION"
    WIFI = "WIFI"


class ParkingRestriction(str, Enum):
    EV_ONLY = "EV_ONLY"
    PLUGGED = "PLUGGED"
    DISABLED = "DISABLED"
    CUSTOMERS = "CUSTOMERS"
    MOTORCYCLES = "MOTORCYCLES"


class ParkingType(str, Enum):
    ALONG_MOTORWAY = "ALONG_MOTORWAY"
    PARKING_GARAGE = "PARKING_GARAGE"
    PARKING_LOT = "PARKING_LOT"
    ON_DRIVEWAY = "ON_DRIVEWAY"
    ON_STREET = "ON_STREET"
    UNDERGROUND_GARAGE = "UNDERGROUND_GARAGE"


class PowerType(str, Enum):
    AC_1_PHASE = "AC_1_PHASE"
    AC_2_PHASE = "AC_2_PHASE"
    AC_2_PHASE_SPLIT = "AC_2_PHASE_SPLIT"
    AC_3_PHASE = "AC_3_PHASE"
    DC = "DC"


class ImageCategory(str, Enum):
    """What an image is used for in a user presentation."""

    CHARGER = "CHARGER"
    ENTRANCE = "ENTRANCE"
    LOCATION = "LOCATION"
    NETWORK = "NETWORK"
    OPERATOR = "OPERATOR"
    OTHER = "OTHER"
    OWNER = "OWNER"


class Status(str, Enum):
    """Status of an EVSE."""

    AVAILABLE = "AVAILABLE"
    BLOCKED = "BLOCKED"
    CHARGING = "CHARGING"
    INOPERATIVE = "INOPERATIVE"
    OUTOFORDER = "OUTOFORDER"
    PLANNED = "PLANNED"
    REMOVED = "REMOVED"
    RESERVED = "RESERVED"
    UNKNOWN = "UNKNOWN"


class GeoLocation(OcpiModel):
    """WGS 84 position of a Charge Point, in decimal degrees.

    Coordinates travel as strings, e.g. ``"50.770774"``. Five decimal places
    give roughly 1 meter precision and are the recommended minimum.
    """

    latitude: str
    longitude: str

    @field_validator("latitude")
    @classmethod
    def check_latitude(cls, v: str) -> str:
        if not _in_degree_range(v, 90):
            raise ValueError(
                "latitude must be a valid latitude coordinate (e.g., 50.770774)"
            )
        return v

    @field_validator("longitude")
    @classmethod
    def check_longitude(cls, v: str) -> str:
        if not _in_degree_range(v, 180):
            raise ValueError(
                "longitude must be a valid longitude coordinate (e.g., -126.104965)"
            )
        return v


def _in_degree_range(value: str, limit: int) -> bool:
    if DECIMAL_DEGREES_REGEX.fullmatch(value) is None:
        return False
    return -limit <= float(value) <= limit


class Image(OcpiModel):
    """Reference to an image related to a Location or EVSE."""

    url: Url
    thumbnail: Url | None = None
    category: ImageCategory
    type: CiString4 = Field(description="Image type like: gif, jpeg, png, svg")
    width: int | None = Field(default=None, ge=1, le=99999)
    height: int | None = Field(default=None, ge=1, le=99999)


class BusinessDetails(OcpiModel):
    name: str = Field(min_length=1, max_length=100)
    website: Url | None = None
    logo: Image | None = None


class RegularHours(OcpiModel):
    """Regular recurring operation or access hours, in local time."""

    weekday: int = Field(ge=1, le=7, description="Monday (1) till Sunday (7)")
    period_begin: TimeOfDay
    period_end: TimeOfDay


class ExceptionalPeriod(OcpiModel):
    """One exceptional opening or closing period."""

    period_begin: OcpiDateTime
    period_end: OcpiDateTime


class Hours(OcpiModel):
    """Opening and access hours of a Location.

    ``regular_hours`` is only meaningful when ``twentyfourseven`` is false,
    and then must contain at least one entry.
    """

    twentyfourseven: bool
    regular_hours: list[RegularHours] | None = None
    exceptional_openings: list[ExceptionalPeriod] | None = None
    exceptional_closings: list[ExceptionalPeriod] | None = None

    @model_validator(mode="after")
    def check_regular_hours(self) -> "Hours":
        if not self.twentyfourseven and not self.regular_hours:
            raise ValueError(
                "regular_hours must contain at least one RegularHours object "
                "when twentyfourseven is false"
            )
        return self


class StatusSchedule(OcpiModel):
    """Planned status of an EVSE for a period that may have no end."""

    period_begin: OcpiDateTime
    period_end: OcpiDateTime | None = None
    status: Status


class AdditionalGeoLocation(GeoLocation):
    """Extra point related to a Location, e.g. an entrance, with an optional name."""

    name: DisplayText | None = None


class EnergySource(OcpiModel):
    source: EnergySourceCategory
    percentage: float = Field(ge=0, le=100)


class EnvironmentalImpact(OcpiModel):
    category: EnvironmentalImpactCategory
    amount: float = Field(ge=0, description="g/kWh")


class EnergyMix(OcpiModel):
    """Energy supplied at a Location or by a Tariff."""

    is_green_energy: bool
    energy_sources: list[EnergySource] | None = None
    environ_impact: list[EnvironmentalImpact] | None = None
    supplier_name: str | None = Field(default=None, max_length=64)
    energy_product_name: str | None = Field(default=None, max_length=64)


class Connector(OcpiModel):
    """A socket or cable available at an EVSE."""

    id: CiString36
    standard: ConnectorType
    format: ConnectorFormat
    power_type: PowerType
    max_voltage: int = Field(ge=1, le=2_000_000)
    max_amperage: int = Field(ge=1, le=1_000_000)
    max_electric_power: int | None = Field(default=None, ge=1, le=10_000_000)
    tariff_ids: list[CiString36] | None = None
    terms_and_conditions: Url | None = None
    last_updated: OcpiDateTime


class EVSE(OcpiModel):
    """An Electric Vehicle Supply Equipment; charges one EV at a time.

    ``evse_id`` follows the eMI3 EVSE ID format and is up to 48 characters.
    """

    uid: CiString36
    evse_id: CiString48 | None = None
    status: Status | None = None
    status_schedule: list[StatusSchedule] | None = None
    capabilities: list[Capability] | None = None
    connectors: list[Connector] = Field(min_length=1)
    floor_level: str | None = Field(default=None, max_length=4)
    coordinates: GeoLocation | None = None
    physical_reference: str | None = Field(default=None, max_length=16)
    directions: list[DisplayText] | None = None
    parking_restrictions: list[ParkingRestriction] | None = None
    images: list[Image] | None = None
    last_updated: OcpiDateTime


class PublishTokenType(OcpiModel):
    """Token or token group a non-published Location is visible to."""

    uid: CiString36 | None = None
    type: TokenType | None = None
    visual_number: str | None = Field(default=None, max_length=64)
    issuer: str | None = Field(default=None, max_length=64)
    group_id: CiString36 | None = None


class Location(OcpiModel):
    """A charging location with its EVSEs, operator data and opening times."""

    country_code: CiString2
    party_id: CiString3
    id: CiString36
    publish: bool
    publish_allowed_to: list[PublishTokenType] | None = None
    name: str | None = Field(default=None, max_length=255)
    address: str = Field(max_length=45)
    city: str = Field(max_length=45)
    postal_code: str | None = Field(default=None, max_length=10)
    state: str | None = Field(default=None, max_length=20)
    country: str = Field(max_length=3, description="ISO 3166-1 alpha-3")
    coordinates: GeoLocation
    related_locations: list[AdditionalGeoLocation] | None = None
    parking_type: ParkingType | None = None
    evses: list[EVSE] | None = None
    directions: list[DisplayText] | None = None
    operator: BusinessDetails | None = None
    suboperator: BusinessDetails | None = None
    owner: BusinessDetails | None = None
    facilities: list[Facility] | None = None
    time_zone: str = Field(max_length=255)
    opening_times: Hours | None = None
    charging_when_closed: bool | None = None
    images: list[Image] | None = None
    energy_mix: EnergyMix | None = None
    last_updated: OcpiDateTime
