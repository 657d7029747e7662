"""Types shared by several OCPI modules."""

from pydantic import Field

from ocpi_contracts.dtos.base import OcpiModel


class DisplayText(OcpiModel):
    """Multi-language text for display to end users."""

    language: str = Field(
        min_length=2, max_length=2, description="Language Code ISO 639-1"
    )
    text: str = Field(
        max_length=512, description="Text to be displayed, no markup or html"
    )


class Price(OcpiModel):
    """Price with and without VAT."""

    excl_vat: float = Field(ge=0, description="Price/Cost excluding VAT")
    incl_vat: float | None = Field(
        default=None, ge=0, description="Price/Cost including VAT"
    )
