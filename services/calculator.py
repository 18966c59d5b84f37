# services/calculator.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List

from services.catalogue import VehicleRecord

# ------------------ Result types ------------------
DIRECTION_TIME = "time"          # distance in, hours out
DIRECTION_DISTANCE = "distance"  # hours in, distance out


class RangeStatus(str, Enum):
    WITHIN_RANGE = "Within Range"
    OUT_OF_RANGE = "Out of Range"


@dataclass(frozen=True)
class TripResult:
    """
    Raw (unrounded) outcome of one trip for one vehicle.
    Values are only rounded in to_payload(), so they can be fed back
    into the other direction without compounding error.
    """
    vehicle: str
    direction: str
    distance: float   # km
    hours: float
    fuel_used: float  # litres
    max_range: float  # km
    status: RangeStatus

    @property
    def out_of_range(self) -> bool:
        return self.status is RangeStatus.OUT_OF_RANGE

    def to_payload(self) -> Dict[str, Any]:
        """JSON shape served to the UI: numbers as 2-decimal strings."""
        out: Dict[str, Any] = {"vehicle": self.vehicle}
        if self.direction == DIRECTION_TIME:
            out["distance"] = fmt2(self.distance)
            out["time"] = fmt2(self.hours)
        else:
            out["hours"] = fmt2(self.hours)
            out["distance"] = fmt2(self.distance)
        out["fuelUsed"] = fmt2(self.fuel_used)
        out["maxRange"] = fmt2(self.max_range)
        out["status"] = self.status.value
        return out


# ---------- Helpers ----------
def fmt2(x: float) -> str:
    # +0.0 folds -0.0 into 0.0 so it never prints as "-0.00"
    return f"{float(x) + 0.0:.2f}"


def total_hours(hours: float, minutes: float = 0.0) -> float:
    return float(hours) + float(minutes or 0.0) / 60.0


def range_status(distance: float, max_range: float) -> RangeStatus:
    # exactly on the limit still counts as reachable
    if distance > max_range:
        return RangeStatus.OUT_OF_RANGE
    return RangeStatus.WITHIN_RANGE


# ---------- Core calculations ----------
def time_from_distance(distance: float, vehicle: VehicleRecord) -> TripResult:
    d = float(distance)
    return TripResult(
        vehicle=vehicle.name,
        direction=DIRECTION_TIME,
        distance=d,
        hours=d / vehicle.top_speed,
        fuel_used=d / vehicle.fuel_efficiency,
        max_range=vehicle.max_range,
        status=range_status(d, vehicle.max_range),
    )


def distance_from_duration(hours: float, vehicle: VehicleRecord, minutes: float = 0.0) -> TripResult:
    h = total_hours(hours, minutes)
    d = vehicle.top_speed * h
    return TripResult(
        vehicle=vehicle.name,
        direction=DIRECTION_DISTANCE,
        distance=d,
        hours=h,
        fuel_used=d / vehicle.fuel_efficiency,
        max_range=vehicle.max_range,
        status=range_status(d, vehicle.max_range),
    )


def compare_all(
    calc: Callable[[float, VehicleRecord], TripResult],
    value: float,
    catalogue: Iterable[VehicleRecord],
) -> List[TripResult]:
    """Run one calculation against every vehicle, keeping catalogue order."""
    return [calc(value, v) for v in catalogue]
