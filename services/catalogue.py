# services/catalogue.py
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

Number = Union[int, float]

# (name, top speed km/h, fuel efficiency km/l, tank capacity l)
VEHICLE_TABLE: List[Tuple[str, Number, Number, Number]] = [
    ("Maruti Suzuki Alto",   140, 22.05, 35),
    ("Hyundai i20",          180, 20.35, 37),
    ("Tata Nexon",           180, 17.57, 44),
    ("Honda City",           180, 17.8,  40),
    ("Mahindra Thar",        155, 15.2,  57),
    ("Toyota Innova Crysta", 179, 11.25, 55),
    ("Kia Seltos",           170, 16.8,  50),
    ("Renault Kwid",         150, 22.3,  28),
    ("Ford EcoSport",        182, 15.9,  52),
    ("Tata Tiago",           150, 23.84, 35),
]


class VehicleNotFound(LookupError):
    """Raised by the request layer when a vehicle name has no catalogue match."""

    message = "Vehicle not found"

    def __init__(self, name: Optional[str]):
        super().__init__(f"{self.message}: {name!r}")
        self.name = name


@dataclass(frozen=True)
class VehicleRecord:
    name: str
    top_speed: float        # km/h
    fuel_efficiency: float  # km per litre
    tank_capacity: float    # litres
    max_range: float = field(init=False)  # km on a full tank

    def __post_init__(self):
        # frozen: derived field has to go through object.__setattr__
        object.__setattr__(self, "max_range", self.fuel_efficiency * self.tank_capacity)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "topSpeed": self.top_speed,
            "fuelEfficiency": self.fuel_efficiency,
            "tankCapacity": self.tank_capacity,
            "maxRange": self.max_range,
        }


def build_catalogue(
    table: Iterable[Tuple[str, Number, Number, Number]] = VEHICLE_TABLE,
) -> Tuple[VehicleRecord, ...]:
    """
    Build the ordered, read-only vehicle catalogue.
    max_range is attached once here and never recomputed.
    """
    return tuple(
        VehicleRecord(
            name=name,
            top_speed=float(speed),
            fuel_efficiency=float(efficiency),
            tank_capacity=float(capacity),
        )
        for (name, speed, efficiency, capacity) in table
    )


# Built once per process; shared by every request.
CATALOGUE: Tuple[VehicleRecord, ...] = build_catalogue()


def find_by_name(name: Optional[str], catalogue: Iterable[VehicleRecord] = CATALOGUE) -> Optional[VehicleRecord]:
    """Exact, case-sensitive match. First hit in catalogue order wins."""
    for v in catalogue:
        if v.name == name:
            return v
    return None
