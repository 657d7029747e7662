"""Command module request objects."""

from ocpi_contracts.dtos.base import CiString36, OcpiModel, Url
from ocpi_contracts.dtos.tokens import Token
from ocpi_contracts.validation import OcpiDateTime

__all__ = [
    "CancelReservation",
    "ReserveNow",
]


class CancelReservation(OcpiModel):
    response_url: Url
    reservation_id: CiString36


class ReserveNow(OcpiModel):
    """Reserve an EVSE at a Location for a Token until ``expiry_date``."""

    response_url: Url
    token: Token
    expiry_date: OcpiDateTime
    reservation_id: CiString36
    location_id: CiString36
    evse_uid: CiString36 | None = None
    authorization_reference: CiString36 | None = None
