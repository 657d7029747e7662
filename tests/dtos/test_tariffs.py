"""Tests for tariff, session, command and common objects."""

import pytest
from pydantic import ValidationError

from ocpi_contracts.dtos import (
    MODELS,
    CancelReservation,
    ChargingPreferences,
    DayOfWeek,
    DisplayText,
    OcpiModel,
    Price,
    PriceComponent,
    ProfileType,
    ReservationRestrictionType,
    ReserveNow,
    Tariff,
    TariffDimensionType,
    TariffElement,
    TariffRestrictions,
    TariffType,
)


class TestTariffRestrictions:
    """Tests for TariffRestrictions."""

    def test_empty_is_valid(self):
        assert TariffRestrictions().to_wire() == {}

    def test_full(self):
        restrictions = TariffRestrictions.model_validate(
            {
                "start_time": "13:30",
                "end_time": "19:45",
                "start_date": "2015-12-24",
                "end_date": "2015-12-27",
                "min_kwh": 20,
                "max_kwh": 50.5,
                "min_duration": 0,
                "day_of_week": ["MONDAY", "SATURDAY"],
                "reservation": "RESERVATION_EXPIRES",
            }
        )
        assert restrictions.day_of_week == [DayOfWeek.MONDAY, DayOfWeek.SATURDAY]
        assert (
            restrictions.reservation is ReservationRestrictionType.RESERVATION_EXPIRES
        )

    def test_end_time_wrap_is_allowed(self):
        restrictions = TariffRestrictions(start_time="22:00", end_time="06:00")
        assert restrictions.end_time == "06:00"

    @pytest.mark.parametrize("value", ["24:00", "7:00", "07:00:00"])
    def test_time_rule(self, value):
        with pytest.raises(ValidationError) as exc_info:
            TariffRestrictions(start_time=value)

        assert exc_info.value.errors()[0]["type"] == "ocpi_format"

    @pytest.mark.parametrize("value", ["2015-13-01", "15-12-24", "3015-12-24"])
    def test_date_pattern(self, value):
        with pytest.raises(ValidationError):
            TariffRestrictions(start_date=value)

    def test_negative_limits(self):
        with pytest.raises(ValidationError):
            TariffRestrictions(min_power=-1)


class TestChargingPreferences:
    def test_valid(self):
        prefs = ChargingPreferences(
            profile_type="FAST",
            departure_time="2019-06-24T08:00:00Z",
            energy_need=32.0,
        )
        assert prefs.profile_type is ProfileType.FAST

    def test_departure_time_rule(self):
        with pytest.raises(ValidationError):
            ChargingPreferences(profile_type="FAST", departure_time="2019-06-24")


class TestCommands:
    def test_cancel_reservation(self):
        command = CancelReservation(
            response_url="https://server.com/ocpi/emsp/2.2.1/commands/CANCEL/1",
            reservation_id="14",
        )
        assert command.reservation_id == "14"

    def test_reserve_now(self, token_payload):
        command = ReserveNow.model_validate(
            {
                "response_url": "https://server.com/ocpi/emsp/2.2.1/commands/RESERVE/1",
                "token": token_payload,
                "expiry_date": "2024-02-29T12:00:00Z",
                "reservation_id": "14",
                "location_id": "LOC1",
            }
        )
        assert command.token.issuer == "TheNewMotion"

    def test_reserve_now_expiry_rule(self, token_payload):
        with pytest.raises(ValidationError) as exc_info:
            ReserveNow.model_validate(
                {
                    "response_url": "https://server.com/cb",
                    "token": token_payload,
                    "expiry_date": "2023-02-29T12:00:00Z",
                    "reservation_id": "14",
                    "location_id": "LOC1",
                }
            )

        assert exc_info.value.errors()[0]["loc"] == ("expiry_date",)


class TestCommon:
    def test_display_text(self):
        assert DisplayText(language="en", text="Standard Tariff").language == "en"

    def test_display_text_language_length(self):
        with pytest.raises(ValidationError):
            DisplayText(language="eng", text="Standard Tariff")

    def test_price(self):
        price = Price(excl_vat=1.5, incl_vat=1.815)
        assert price.to_wire() == {"excl_vat": 1.5, "incl_vat": 1.815}

    def test_negative_price(self):
        with pytest.raises(ValidationError):
            Price(excl_vat=-0.01)


class TestPriceComponent:
    def test_valid(self):
        component = PriceComponent(type="TIME", price=2.0, vat=10.0, step_size=300)
        assert component.type is TariffDimensionType.TIME

    @pytest.mark.parametrize(
        "overrides", [{"price": -0.01}, {"step_size": 0}, {"type": "DISTANCE"}]
    )
    def test_invalid(self, overrides):
        values = {"type": "ENERGY", "price": 0.25, "step_size": 1}
        values.update(overrides)

        with pytest.raises(ValidationError):
            PriceComponent(**values)


class TestTariffElement:
    def test_price_components_required(self):
        with pytest.raises(ValidationError) as exc_info:
            TariffElement(price_components=[])

        assert exc_info.value.errors()[0]["loc"] == ("price_components",)

    def test_restrictions_validated(self):
        with pytest.raises(ValidationError) as exc_info:
            TariffElement.model_validate(
                {
                    "price_components": [
                        {"type": "FLAT", "price": 1.0, "step_size": 1}
                    ],
                    "restrictions": {"start_time": "24:00"},
                }
            )

        error = exc_info.value.errors()[0]
        assert error["loc"] == ("restrictions", "start_time")
        assert error["type"] == "ocpi_format"


class TestTariff:
    """Tests for Tariff."""

    @pytest.fixture
    def tariff_payload(self):
        return {
            "country_code": "DE",
            "party_id": "ALL",
            "id": "12",
            "currency": "EUR",
            "type": "REGULAR",
            "tariff_alt_url": "https://company.com/tariffs/12",
            "elements": [
                {
                    "price_components": [
                        {"type": "TIME", "price": 2.0, "vat": 10.0, "step_size": 300}
                    ],
                    "restrictions": {"start_time": "13:30", "end_time": "19:00"},
                }
            ],
            "energy_mix": {"is_green_energy": True},
            "last_updated": "2015-06-29T20:39:09Z",
        }

    def test_valid(self, tariff_payload):
        tariff = Tariff.model_validate(tariff_payload)
        assert tariff.type is TariffType.REGULAR
        assert tariff.elements[0].restrictions.end_time == "19:00"
        assert tariff.energy_mix.is_green_energy is True

    def test_elements_required(self, tariff_payload):
        tariff_payload["elements"] = []

        with pytest.raises(ValidationError):
            Tariff.model_validate(tariff_payload)

    def test_end_date_time_uses_datetime_rule(self, tariff_payload):
        tariff_payload["end_date_time"] = "2015-13-01T00:00:00Z"

        with pytest.raises(ValidationError) as exc_info:
            Tariff.model_validate(tariff_payload)

        error = exc_info.value.errors()[0]
        assert error["loc"] == ("end_date_time",)
        assert error["type"] == "ocpi_format"

    def test_currency_max_length(self, tariff_payload):
        tariff_payload["currency"] = "EURO"

        with pytest.raises(ValidationError):
            Tariff.model_validate(tariff_payload)


class TestModels:
    def test_names_match_classes(self):
        """Test that every table entry is registered under its class name."""
        for name, model in MODELS.items():
            assert issubclass(model, OcpiModel)
            assert model.__name__ == name
