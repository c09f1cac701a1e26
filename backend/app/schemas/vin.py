"""
Pydantic schemas for VIN and truck-form API requests and responses.
"""

from pydantic import BaseModel, Field

from app.data.truck_catalog import TruckManufacturer
from app.utils.distance import DistanceUnit


class DecodedVinOut(BaseModel):
    """Decode result as returned by the API. Optional fields are null when unresolved."""

    vin: str
    is_valid: bool
    manufacturer: TruckManufacturer | None = None
    model: str | None = None
    model_year: int | None = None
    country: str | None = None
    check_digit: str | None = None
    engine_type: str | None = None
    summary: str
    check_digit_valid: bool | None = None  # informational, never affects is_valid


class VinValidation(BaseModel):
    vin: str
    is_valid: bool


class TruckDraft(BaseModel):
    """Truck form fields as entered so far. Empty fields may be filled from the VIN."""

    vin: str
    manufacturer: TruckManufacturer | None = None
    model: str | None = None
    model_year: int | None = None
    engine_model: str | None = None
    engine_number: str | None = None
    unit_number: str | None = None
    odometer_reading: float | None = None
    odometer_unit: DistanceUnit = DistanceUnit.MILES
    engine_hours: float | None = None


class AutofillResponse(BaseModel):
    truck: TruckDraft
    decoded: DecodedVinOut
    filled_fields: list[str] = Field(default_factory=list)
