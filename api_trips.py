# api_trips.py
import logging
from typing import Annotated, Any, Dict, List, Sequence

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from services.calculator import (
    TripResult,
    compare_all,
    distance_from_duration,
    time_from_distance,
    total_hours,
)
from services.catalogue import CATALOGUE, VehicleNotFound, VehicleRecord, find_by_name

logger = logging.getLogger(__name__)

trips_router = APIRouter()


def get_catalogue() -> Sequence[VehicleRecord]:
    # Overridable in tests via app.dependency_overrides
    return CATALOGUE


# Finite, non-negative JSON numbers only; booleans and numeric strings are refused.
Quantity = Annotated[float, Field(ge=0, strict=True, allow_inf_nan=False)]


class TimeRequest(BaseModel):
    distance: Quantity = Field(..., description="Trip distance in km")
    transport: str = Field(..., description="Vehicle name, exact match")


class DistanceRequest(BaseModel):
    hours: Quantity
    minutes: Quantity = 0.0
    vehicle: str = Field(..., description="Vehicle name, exact match")


def _lookup(name: str, catalogue: Sequence[VehicleRecord]) -> VehicleRecord:
    v = find_by_name(name, catalogue)
    if v is None:
        logger.warning("Unknown vehicle requested: %r", name)
        raise VehicleNotFound(name)
    return v


def _payload(selected: TripResult, comparison: List[TripResult]) -> Dict[str, Any]:
    return {
        "selected": selected.to_payload(),
        "comparison": [{"name": r.vehicle, **r.to_payload()} for r in comparison],
    }


@trips_router.post("/calculate-time")
def calculate_time(req: TimeRequest, catalogue: Sequence[VehicleRecord] = Depends(get_catalogue)) -> Dict[str, Any]:
    """
    Request:  { distance: number, transport: string }
    Response: { selected: {...}, comparison: [{name, ...}, ...] }
    """
    vehicle = _lookup(req.transport, catalogue)
    selected = time_from_distance(req.distance, vehicle)
    comparison = compare_all(time_from_distance, req.distance, catalogue)
    logger.debug("calculate-time %s km with %s -> %.3f h", req.distance, vehicle.name, selected.hours)
    return _payload(selected, comparison)


@trips_router.post("/calculate-distance")
def calculate_distance(req: DistanceRequest, catalogue: Sequence[VehicleRecord] = Depends(get_catalogue)) -> Dict[str, Any]:
    """
    Request:  { hours: number, minutes: number, vehicle: string }
    Response: { selected: {...}, comparison: [{name, ...}, ...] }
    """
    vehicle = _lookup(req.vehicle, catalogue)
    hrs = total_hours(req.hours, req.minutes)
    selected = distance_from_duration(hrs, vehicle)
    comparison = compare_all(distance_from_duration, hrs, catalogue)
    logger.debug("calculate-distance %.3f h with %s -> %.2f km", hrs, vehicle.name, selected.distance)
    return _payload(selected, comparison)
