import dataclasses

import pytest

from services.catalogue import CATALOGUE, VEHICLE_TABLE, VehicleNotFound, VehicleRecord, build_catalogue, find_by_name


def test_catalogue_has_ten_vehicles_in_table_order():
    assert len(CATALOGUE) == 10
    assert [v.name for v in CATALOGUE] == [row[0] for row in VEHICLE_TABLE]
    assert CATALOGUE[0].name == "Maruti Suzuki Alto"
    assert CATALOGUE[-1].name == "Tata Tiago"

def test_max_range_is_efficiency_times_capacity():
    for v in CATALOGUE:
        assert v.max_range == pytest.approx(v.fuel_efficiency * v.tank_capacity)

def test_known_ranges():
    assert find_by_name("Tata Tiago").max_range == pytest.approx(834.4)
    assert find_by_name("Mahindra Thar").max_range == pytest.approx(866.4)
    assert find_by_name("Renault Kwid").max_range == pytest.approx(624.4)

def test_records_are_immutable():
    v = CATALOGUE[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.max_range = 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.tank_capacity = 1.0
    assert isinstance(CATALOGUE, tuple)

def test_find_by_name_is_exact_and_case_sensitive():
    assert find_by_name("Honda City").top_speed == 180.0
    assert find_by_name("honda city") is None
    assert find_by_name("Honda City ") is None
    assert find_by_name("") is None
    assert find_by_name(None) is None

def test_find_by_name_first_match_wins():
    cat = build_catalogue([("Dup", 100, 10, 10), ("Dup", 200, 20, 20)])
    assert find_by_name("Dup", cat).top_speed == 100.0

def test_build_catalogue_from_custom_table():
    cat = build_catalogue([("Scooter", 90, 45, 5)])
    assert cat == (VehicleRecord(name="Scooter", top_speed=90.0, fuel_efficiency=45.0, tank_capacity=5.0),)
    assert cat[0].max_range == 225.0
    assert cat[0].to_dict() == {
        "name": "Scooter",
        "topSpeed": 90.0,
        "fuelEfficiency": 45.0,
        "tankCapacity": 5.0,
        "maxRange": 225.0,
    }

def test_vehicle_not_found_message():
    err = VehicleNotFound("Batmobile")
    assert err.name == "Batmobile"
    assert "Vehicle not found" in str(err)
