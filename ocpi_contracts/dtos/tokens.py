"""Token module objects: driver tokens and authorization results."""

from enum import Enum

from pydantic import Field

from ocpi_contracts.dtos.base import CiString2, CiString3, CiString36, OcpiModel
from ocpi_contracts.dtos.common import DisplayText
from ocpi_contracts.dtos.sessions import ProfileType
from ocpi_contracts.validation import OcpiDateTime

__all__ = [
    "AllowedType",
    "AuthorizationInfo",
    "EnergyContract",
    "LocationReferences",
    "Token",
    "TokenType",
    "WhitelistType",
]


class AllowedType(str, Enum):
    """Whether a token is allowed to charge at a location."""

    ALLOWED = "ALLOWED"
    BLOCKED = "BLOCKED"
    EXPIRED = "EXPIRED"
    NO_CREDIT = "NO_CREDIT"
    NOT_ALLOWED = "NOT_ALLOWED"


class TokenType(str, Enum):
    AD_HOC_USER = "AD_HOC_USER"
    APP_USER = "APP_USER"
    OTHER = "OTHER"
    RFID = "RFID"


class WhitelistType(str, Enum):
    """How a CPO may authorize a token without asking the eMSP."""

    ALWAYS = "ALWAYS"
    ALLOWED = "ALLOWED"
    ALLOWED_OFFLINE = "ALLOWED_OFFLINE"
    NEVER = "NEVER"


class EnergyContract(OcpiModel):
    """Driver's own energy supplier/contract."""

    supplier_name: str = Field(max_length=64)
    contract_id: str | None = Field(default=None, max_length=64)


class Token(OcpiModel):
    """An EV driver's authentication token.

    ``uid`` together with ``type`` is unique within the eMSP's system.
    OCPP 1.5/1.6 only support group ids up to 20 characters, so longer
    ``group_id`` values may not work at older Charge Points.
    """

    country_code: CiString2 = Field(description="ISO-3166 alpha-2 country code")
    party_id: CiString3
    uid: CiString36
    type: TokenType
    contract_id: CiString36
    visual_number: str | None = Field(default=None, max_length=64)
    issuer: str = Field(max_length=64)
    group_id: CiString36 | None = None
    valid: bool
    whitelist: WhitelistType
    language: str | None = Field(default=None, max_length=2)
    default_profile_type: ProfileType | None = None
    energy_contract: EnergyContract | None = None
    last_updated: OcpiDateTime


class LocationReferences(OcpiModel):
    location_id: CiString36
    evse_uids: list[CiString36] | None = None


class AuthorizationInfo(OcpiModel):
    """Result of a real-time token authorization request."""

    allowed: AllowedType
    token: Token
    location: LocationReferences | None = None
    authorization_reference: CiString36 | None = None
    info: DisplayText | None = None
