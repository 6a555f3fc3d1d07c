"""
capship Test Configuration and Fixtures

A small reference catalog and three baseline designs (jumpship, warship,
space station), each legal under the permissive oracle. Expected budgets
for the baselines:

    jumpship  150,000 t  total 149,611.0 t
    warship   500,000 t  total 394,903.0 t
    station   100,000 t  total  22,884.0 t
"""

import copy

import pytest

from capship.catalog import ReferenceCatalog
from capship.core.design import UnitDesign
from capship.weight import AttributeCalculator


CATALOG_DATA = {
    "version": "test",
    "equipment": [
        {
            "equipment_id": "nac10",
            "name": "Naval Autocannon/10",
            "kind": "weapon",
            "tonnage": 2000,
            "flags": ["aero_weapon", "capital"],
            "ammo_family": "nac10",
            "long_range": 3,
        },
        {
            "equipment_id": "nac10_ammo",
            "name": "NAC/10 Ammo",
            "kind": "ammo",
            "tonnage": 1.0,
            "ammo_family": "nac10",
            "shots_per_lot": 2,
        },
        {
            "equipment_id": "ac5",
            "name": "AC/5",
            "kind": "weapon",
            "tonnage": 8,
            "flags": ["aero_weapon"],
            "ammo_family": "ac",
            "long_range": 4,
        },
        {
            "equipment_id": "ac5_ammo",
            "name": "AC/5 Ammo",
            "kind": "ammo",
            "tonnage": 1.0,
            "ammo_family": "ac",
            "shots_per_lot": 20,
        },
        {
            "equipment_id": "uac5",
            "name": "Ultra AC/5",
            "kind": "weapon",
            "tonnage": 9,
            "flags": ["aero_weapon"],
            "ammo_family": "AC_ULTRA",
            "long_range": 4,
        },
        {
            "equipment_id": "uac5_ammo",
            "name": "Ultra AC/5 Ammo",
            "kind": "ammo",
            "tonnage": 1.0,
            "ammo_family": "ac_ultra",
            "shots_per_lot": 20,
        },
        {
            "equipment_id": "rac5",
            "name": "Rotary AC/5",
            "kind": "weapon",
            "tonnage": 10,
            "flags": ["aero_weapon"],
            "ammo_family": "ac_rotary",
            "long_range": 4,
        },
        {
            "equipment_id": "rac5_ammo",
            "name": "Rotary AC/5 Ammo",
            "kind": "ammo",
            "tonnage": 1.0,
            "ammo_family": "ac_rotary",
            "shots_per_lot": 20,
        },
        {
            "equipment_id": "laser_large",
            "name": "Large Laser",
            "kind": "weapon",
            "tonnage": 5,
            "flags": ["aero_weapon"],
            "long_range": 3,
            "intro_year": 2316,
        },
        {
            "equipment_id": "laser_small",
            "name": "Small Laser",
            "kind": "weapon",
            "tonnage": 0.5,
            "flags": ["aero_weapon"],
            "long_range": 1,
        },
        {
            "equipment_id": "flamer",
            "name": "Flamer",
            "kind": "weapon",
            "tonnage": 1,
            "long_range": 1,
        },
        {
            "equipment_id": "lmass",
            "name": "Light Mass Driver",
            "kind": "weapon",
            "tonnage": 30000,
            "flags": ["aero_weapon", "capital", "mass_driver"],
            "ammo_family": "lmass",
            "long_range": 4,
        },
        {
            "equipment_id": "screen",
            "name": "Screen Launcher",
            "kind": "weapon",
            "tonnage": 40,
            "flags": ["aero_weapon", "screen_launcher"],
            "ammo_family": "screen",
            "long_range": 2,
        },
        {
            "equipment_id": "naval_c3",
            "name": "Naval C3",
            "kind": "misc",
            "tonnage": 1500,
            "flags": ["js_equipment", "ws_equipment", "ss_equipment", "naval_c3"],
        },
        {
            "equipment_id": "hpg",
            "name": "HPG",
            "kind": "misc",
            "tonnage": 50,
            "flags": ["js_equipment", "ws_equipment", "ss_equipment"],
            "crew_requirement": 10,
        },
        {
            "equipment_id": "station_module",
            "name": "Station Module",
            "kind": "misc",
            "tonnage": 10,
            "flags": ["ss_equipment"],
            "crew_requirement": 5,
        },
    ],
    "armor": [
        {
            "armor_id": "standard",
            "name": "Standard Capital",
            "flags": ["js_equipment"],
            "points_per_ton": {"jumpship": 0.8, "warship": 1.0, "space_station": 0.8},
            "intro_year": 2300,
        },
        {
            "armor_id": "lamellor",
            "name": "Lamellor Ferro-Carbide",
            "flags": ["js_equipment"],
            "points_per_ton": {"jumpship": 1.0, "warship": 1.2, "space_station": 1.0},
            "intro_year": 3070,
            "tech_base": "inner_sphere",
        },
        {
            "armor_id": "primitive",
            "name": "Primitive Aerospace",
            "flags": ["primitive_armor"],
            "points_per_ton": {"jumpship": 0.6, "warship": 0.66, "space_station": 0.6},
        },
    ],
}


def _facings(tons, points):
    arcs = ["nose", "front_left", "front_right", "aft", "aft_left", "aft_right"]
    return [
        {"arc": arc, "tonnage": t, "points": p}
        for arc, t, p in zip(arcs, tons, points)
    ]


JUMPSHIP_DATA = {
    "name": "Invader",
    "model": "(2631)",
    "hull_class": "jumpship",
    "tonnage": 150000,
    "structural_integrity": 3,
    "original_year": 2500,
    "drive_core": "standard",
    "tech_base": "inner_sphere",
    "fuel_tonnage": 100,
    "has_sail": True,
    "armor_type": "standard",
    "armor": _facings([10] * 6, [8] * 6),
    "heat_sinks": 105,
    "heat_sink_type": "single",
    "crew": {"officers": 3, "enlisted": 11, "gunners": 1},
    "lifeboats": 2,
    "mounts": [
        {"mount_id": "ll_n", "equipment_id": "laser_large", "arc": "nose"},
        {"mount_id": "ll_fl", "equipment_id": "laser_large", "arc": "front_left"},
        {"mount_id": "ll_fr", "equipment_id": "laser_large", "arc": "front_right"},
        {"mount_id": "ll_a", "equipment_id": "laser_large", "arc": "aft"},
    ],
    "bays": [
        {"name": "Cargo", "bay_type": "cargo", "capacity": 500, "doors": 2, "tonnage": 500},
        {
            "name": "Crew Quarters",
            "bay_type": "quarters_standard",
            "capacity": 20,
            "tonnage": 140,
        },
    ],
    "docking_collars": 1,
    "grav_decks": [90],
}


WARSHIP_DATA = {
    "name": "Aegis",
    "model": "Heavy Cruiser",
    "hull_class": "warship",
    "tonnage": 500000,
    "structural_integrity": 100,
    "original_year": 3050,
    "drive_core": "compact",
    "tech_base": "inner_sphere",
    "original_thrust": 3,
    "fuel_tonnage": 2000,
    "has_sail": True,
    "armor_type": "standard",
    "armor": _facings([120, 100, 100, 80, 100, 100], [130, 110, 110, 90, 110, 110]),
    "heat_sinks": 500,
    "heat_sink_type": "double",
    "crew": {
        "officers": 25,
        "enlisted": 144,
        "gunners": 5,
        "passengers": 10,
        "marines": 20,
    },
    "lifeboats": 20,
    "escape_pods": 20,
    "mounts": [
        {"mount_id": "nac_1", "equipment_id": "nac10", "arc": "nose"},
        {"mount_id": "nac_2", "equipment_id": "nac10", "arc": "nose"},
        {"mount_id": "nac_3", "equipment_id": "nac10", "arc": "nose"},
        {"mount_id": "nac_4", "equipment_id": "nac10", "arc": "nose"},
        {"mount_id": "nac_ammo", "equipment_id": "nac10_ammo", "arc": "nose", "shots": 40},
        {"mount_id": "ac_fl_1", "equipment_id": "ac5", "arc": "front_left"},
        {"mount_id": "ac_fl_2", "equipment_id": "ac5", "arc": "front_left"},
        {"mount_id": "ac_fr_1", "equipment_id": "ac5", "arc": "front_right"},
        {"mount_id": "ac_fr_2", "equipment_id": "ac5", "arc": "front_right"},
        {"mount_id": "ll_lbs", "equipment_id": "laser_large", "arc": "left_broadside"},
        {"mount_id": "ll_rbs", "equipment_id": "laser_large", "arc": "right_broadside"},
    ],
    "bays": [
        {
            "name": "Nose NAC",
            "bay_type": "weapon",
            "mount_ids": ["nac_1", "nac_2", "nac_3", "nac_4", "nac_ammo"],
        },
        {
            "name": "Drop Shuttle Bay",
            "bay_type": "drop_shuttle",
            "doors": 1,
            "facing": "nose",
            "tonnage": 11000,
        },
        {
            "name": "Fighters",
            "bay_type": "fighter",
            "capacity": 12,
            "doors": 2,
            "tonnage": 1800,
            "personnel": 24,
        },
        {
            "name": "Officer Quarters",
            "bay_type": "quarters_officer",
            "capacity": 25,
            "tonnage": 250,
        },
        {
            "name": "Crew Quarters",
            "bay_type": "quarters_standard",
            "capacity": 155,
            "tonnage": 1085,
        },
    ],
    "docking_collars": 2,
    "grav_decks": [200, 200],
}


STATION_DATA = {
    "name": "Olympus",
    "model": "Recharge Station",
    "hull_class": "space_station",
    "tonnage": 100000,
    "structural_integrity": 10,
    "original_year": 3050,
    "drive_core": "none",
    "tech_base": "inner_sphere",
    "fuel_tonnage": 200,
    "armor_type": "standard",
    "armor": _facings([50] * 6, [40] * 6),
    "heat_sinks": 93,
    "heat_sink_type": "single",
    "crew": {"officers": 12, "enlisted": 58, "gunners": 1},
    "mounts": [
        {"mount_id": "ll_fl", "equipment_id": "laser_large", "arc": "front_left"},
        {"mount_id": "ll_fr", "equipment_id": "laser_large", "arc": "front_right"},
        {"mount_id": "module", "equipment_id": "station_module", "arc": "aft"},
    ],
    "bays": [
        {
            "name": "Repair Bay Fore",
            "bay_type": "repair_pressurized",
            "doors": 1,
            "facing": "nose",
            "tonnage": 5000,
        },
        {
            "name": "Repair Bay Aft",
            "bay_type": "repair_pressurized",
            "doors": 1,
            "facing": "aft",
            "tonnage": 5000,
        },
        {
            "name": "Crew Quarters",
            "bay_type": "quarters_standard",
            "capacity": 80,
            "tonnage": 560,
        },
    ],
    "grav_decks": [400],
}


@pytest.fixture
def catalog_data():
    """Raw catalog document (fresh copy per test)."""
    return copy.deepcopy(CATALOG_DATA)


@pytest.fixture
def catalog(catalog_data):
    return ReferenceCatalog.from_dict(catalog_data)


@pytest.fixture
def calculator(catalog):
    return AttributeCalculator(catalog)


@pytest.fixture
def jumpship_data():
    return copy.deepcopy(JUMPSHIP_DATA)


@pytest.fixture
def warship_data():
    return copy.deepcopy(WARSHIP_DATA)


@pytest.fixture
def station_data():
    return copy.deepcopy(STATION_DATA)


@pytest.fixture
def jumpship(jumpship_data):
    return UnitDesign.from_dict(jumpship_data)


@pytest.fixture
def warship(warship_data):
    return UnitDesign.from_dict(warship_data)


@pytest.fixture
def station(station_data):
    return UnitDesign.from_dict(station_data)
