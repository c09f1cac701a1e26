"""
Truck catalog API.
"""

from fastapi import APIRouter, Query

from app.data.truck_catalog import (
    TruckManufacturer,
    generate_sample_engine_number,
    generate_sample_vin,
    models_for_manufacturer,
)
from app.utils.distance import DistanceUnit, distance_in_unit, format_distance

router = APIRouter(prefix="/trucks", tags=["trucks"])


@router.get("/manufacturers")
async def list_manufacturers():
    return {"manufacturers": [m.value for m in TruckManufacturer]}


@router.get("/models")
async def list_models(
    manufacturer: str = Query(..., description="Manufacturer, e.g. KENWORTH"),
):
    """Fleet models for a manufacturer. Unknown manufacturers return an empty list."""
    models = models_for_manufacturer(manufacturer)
    return {"manufacturer": manufacturer.upper(), "models": models, "count": len(models)}


@router.get("/sample")
async def sample_truck():
    """Placeholder VIN and engine number for a new truck form."""
    return {"vin": generate_sample_vin(), "engine_number": generate_sample_engine_number()}


@router.get("/odometer")
async def convert_odometer(
    reading: float = Query(..., ge=0, description="Odometer reading"),
    unit: DistanceUnit = Query(DistanceUnit.MILES, description="Unit of the reading"),
    to: DistanceUnit = Query(DistanceUnit.KILOMETERS, description="Unit to convert to"),
    decimals: int = Query(0, ge=0, le=3),
):
    """Express an odometer reading in another unit."""
    value = distance_in_unit(reading, unit, to)
    return {"reading": value, "unit": to.value, "display": format_distance(value, to, decimals)}
