"""
VIN decoding API routes.

Provides offline VIN -> truck info lookup and truck-form autofill.
Malformed VINs are reported with is_valid=false, not as HTTP errors.
"""

import logging

from fastapi import APIRouter, Query

from app.config import settings
from app.data.truck_catalog import generate_sample_vin
from app.schemas.vin import AutofillResponse, DecodedVinOut, TruckDraft, VinValidation
from app.services.truck_autofill import apply_decoded_vin
from app.services.vin_decoder import (
    DecodedVin,
    check_digit_matches,
    decode_vin,
    describe_vin,
    is_valid_vin_format,
    normalize_vin,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vin", tags=["vin"])


def _to_response(vin: str, decoded: DecodedVin) -> DecodedVinOut:
    return DecodedVinOut(
        vin=normalize_vin(vin),
        is_valid=decoded.is_valid,
        manufacturer=decoded.manufacturer,
        model=decoded.model,
        model_year=decoded.model_year,
        country=decoded.country,
        check_digit=decoded.check_digit,
        engine_type=decoded.engine_type,
        summary=describe_vin(decoded),
        check_digit_valid=check_digit_matches(vin) if settings.vin_report_check_digit else None,
    )


@router.get("/decode", response_model=DecodedVinOut)
async def decode_vin_endpoint(
    vin: str = Query(..., description="17-character VIN to decode"),
):
    """Decode a VIN to manufacturer/model/year/country/engine (offline, best-effort model)."""
    decoded = decode_vin(vin)
    if not decoded.is_valid:
        logger.info(f"Rejected malformed VIN: {vin!r}")
    return _to_response(vin, decoded)


@router.get("/validate", response_model=VinValidation)
async def validate_vin_endpoint(
    vin: str = Query(..., description="VIN to check"),
):
    """Format check only: length 17 and no I, O or Q."""
    return VinValidation(vin=normalize_vin(vin), is_valid=is_valid_vin_format(vin))


@router.post("/autofill", response_model=AutofillResponse)
async def autofill_truck(draft: TruckDraft):
    """Fill empty truck form fields from the draft's VIN."""
    decoded = decode_vin(draft.vin)
    result = apply_decoded_vin(draft, decoded)
    return AutofillResponse(
        truck=result.truck,
        decoded=_to_response(draft.vin, decoded),
        filled_fields=result.filled_fields,
    )


@router.get("/sample")
async def sample_vin():
    """Placeholder VIN for a new truck form."""
    return {"vin": generate_sample_vin()}
