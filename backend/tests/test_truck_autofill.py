"""Tests for truck form autofill from decoded VINs."""

from app.data.truck_catalog import TruckManufacturer
from app.schemas.vin import TruckDraft
from app.services.truck_autofill import apply_decoded_vin
from app.services.vin_decoder import decode_vin


def test_fills_empty_fields(kenworth_vin):
    draft = TruckDraft(vin=kenworth_vin)
    result = apply_decoded_vin(draft, decode_vin(kenworth_vin))

    assert result.truck.manufacturer == TruckManufacturer.KENWORTH
    assert result.truck.model == "T680"
    assert result.truck.model_year == 2019
    assert result.truck.engine_model == "PACCAR MX / Cummins"
    assert set(result.filled_fields) == {"manufacturer", "model", "model_year", "engine_model"}


def test_user_values_win(kenworth_vin):
    """Fields the user already filled are never overwritten."""
    draft = TruckDraft(vin=kenworth_vin, model="T660", model_year=2018, unit_number="U-17")
    result = apply_decoded_vin(draft, decode_vin(kenworth_vin))

    assert result.truck.model == "T660"
    assert result.truck.model_year == 2018
    assert result.truck.unit_number == "U-17"
    assert set(result.filled_fields) == {"manufacturer", "engine_model"}


def test_blank_string_counts_as_empty(kenworth_vin):
    draft = TruckDraft(vin=kenworth_vin, model="   ")
    result = apply_decoded_vin(draft, decode_vin(kenworth_vin))
    assert result.truck.model == "T680"
    assert "model" in result.filled_fields


def test_draft_not_mutated(kenworth_vin):
    draft = TruckDraft(vin=kenworth_vin)
    apply_decoded_vin(draft, decode_vin(kenworth_vin))
    assert draft.manufacturer is None
    assert draft.model is None


def test_invalid_vin_fills_nothing():
    draft = TruckDraft(vin="SHORT", model="T680")
    result = apply_decoded_vin(draft, decode_vin("SHORT"))
    assert result.filled_fields == []
    assert result.truck == draft


def test_unknown_wmi_only_fills_year():
    vin = "999DP4TX0KJ123456"
    result = apply_decoded_vin(TruckDraft(vin=vin), decode_vin(vin))
    assert result.filled_fields == ["model_year"]
    assert result.truck.manufacturer is None
