"""OCPI data transfer objects.

``MODELS`` maps the OCPI object name to its model class; it is the lookup
table used by the command line.
"""

from ocpi_contracts.dtos.base import OcpiModel
from ocpi_contracts.dtos.commands import CancelReservation, ReserveNow
from ocpi_contracts.dtos.common import DisplayText, Price
from ocpi_contracts.dtos.locations import (
    EVSE,
    AdditionalGeoLocation,
    BusinessDetails,
    Capability,
    Connector,
    ConnectorFormat,
    ConnectorType,
    EnergyMix,
    EnergySource,
    EnergySourceCategory,
    EnvironmentalImpact,
    EnvironmentalImpactCategory,
    ExceptionalPeriod,
    Facility,
    GeoLocation,
    Hours,
    Image,
    ImageCategory,
    Location,
    ParkingRestriction,
    ParkingType,
    PowerType,
    PublishTokenType,
    RegularHours,
    Status,
    StatusSchedule,
)
from ocpi_contracts.dtos.sessions import ChargingPreferences, ProfileType
from ocpi_contracts.dtos.tariffs import (
    DayOfWeek,
    PriceComponent,
    ReservationRestrictionType,
    Tariff,
    TariffDimensionType,
    TariffElement,
    TariffRestrictions,
    TariffType,
)
from ocpi_contracts.dtos.tokens import (
    AllowedType,
    AuthorizationInfo,
    EnergyContract,
    LocationReferences,
    Token,
    TokenType,
    WhitelistType,
)

MODELS: dict[str, type[OcpiModel]] = {
    "AdditionalGeoLocation": AdditionalGeoLocation,
    "AuthorizationInfo": AuthorizationInfo,
    "BusinessDetails": BusinessDetails,
    "CancelReservation": CancelReservation,
    "ChargingPreferences": ChargingPreferences,
    "Connector": Connector,
    "DisplayText": DisplayText,
    "EVSE": EVSE,
    "EnergyContract": EnergyContract,
    "EnergyMix": EnergyMix,
    "EnergySource": EnergySource,
    "EnvironmentalImpact": EnvironmentalImpact,
    "ExceptionalPeriod": ExceptionalPeriod,
    "GeoLocation": GeoLocation,
    "Hours": Hours,
    "Image": Image,
    "Location": Location,
    "LocationReferences": LocationReferences,
    "Price": Price,
    "PriceComponent": PriceComponent,
    "PublishTokenType": PublishTokenType,
    "RegularHours": RegularHours,
    "ReserveNow": ReserveNow,
    "StatusSchedule": StatusSchedule,
    "Tariff": Tariff,
    "TariffElement": TariffElement,
    "TariffRestrictions": TariffRestrictions,
    "Token": Token,
}

__all__ = [
    "EVSE",
    "MODELS",
    "AdditionalGeoLocation",
    "AllowedType",
    "AuthorizationInfo",
    "BusinessDetails",
    "CancelReservation",
    "Capability",
    "ChargingPreferences",
    "Connector",
    "ConnectorFormat",
    "ConnectorType",
    "DayOfWeek",
    "DisplayText",
    "EnergyContract",
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
    "LocationReferences",
    "OcpiModel",
    "ParkingRestriction",
    "ParkingType",
    "PowerType",
    "Price",
    "PriceComponent",
    "ProfileType",
    "PublishTokenType",
    "RegularHours",
    "ReservationRestrictionType",
    "ReserveNow",
    "Status",
    "StatusSchedule",
    "Tariff",
    "TariffDimensionType",
    "TariffElement",
    "TariffRestrictions",
    "TariffType",
    "Token",
    "TokenType",
    "WhitelistType",
]
