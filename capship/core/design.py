"""
capship Design Model

Immutable snapshot of a capital ship as handed over by a loader:
- ArmorFacing: tonnage and points allocated to one facing
- CrewComplement: crew, passengers and embarked troops
- EquipmentMount: one installed weapon, ammo lot or misc item
- Bay: weapon grouping or transport/quarters space
- UnitDesign: the whole ship

Nothing here computes construction budgets; see ``capship.weight``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .enums import Arc, BayType, DriveCoreType, HeatSinkType, HullClass, TechBase
from .hulls import HullProfile, get_hull_profile
from capship.errors import (
    MalformedDesignError,
    UnknownMountError,
    create_invalid_hull_error,
)


def _enum(enum_cls, value: Any, path: str):
    """Coerce ``value`` to ``enum_cls`` or raise a structural error."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        raise MalformedDesignError(
            f"Invalid {enum_cls.__name__} value: {value!r}",
            source="core.design",
            path=path,
            value=value,
        ) from None


def _number(cast, value: Any, path: str):
    """Coerce ``value`` with ``int`` or ``float`` or raise a structural error."""
    try:
        return cast(value)
    except (ValueError, TypeError, OverflowError):
        raise MalformedDesignError(
            f"Expected a number for {path}, got {value!r}",
            source="core.design",
            path=path,
            value=value,
        ) from None


def _mapping(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedDesignError(
            f"Expected an object for {path}, got {value!r}",
            source="core.design",
            path=path,
            value=value,
        )
    return value


def _sequence(value: Any, path: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise MalformedDesignError(
            f"Expected a list for {path}, got {value!r}",
            source="core.design",
            path=path,
            value=value,
        )
    return list(value)


def _arc(value: Any, path: str) -> Optional[Arc]:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return Arc[value.upper()]
        except KeyError:
            raise MalformedDesignError(
                f"Invalid arc: {value!r}", source="core.design", path=path, value=value
            ) from None
    return _enum(Arc, value, path)


# =============================================================================
# COMPONENTS
# =============================================================================

@dataclass(frozen=True)
class ArmorFacing:
    """Armor allocated to one facing."""
    arc: Arc
    tonnage: float = 0.0
    points: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"arc": self.arc.name.lower(), "tonnage": self.tonnage, "points": self.points}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArmorFacing":
        data = _mapping(data, "armor")
        return cls(
            arc=_arc(data.get("arc"), "armor.arc"),
            tonnage=_number(float, data.get("tonnage", 0.0), "armor.tonnage"),
            points=_number(int, data.get("points", 0), "armor.points"),
        )


@dataclass(frozen=True)
class CrewComplement:
    """
    Personnel aboard.

    ``enlisted`` includes bay personnel; the working crew excludes them.
    """
    officers: int = 0
    enlisted: int = 0
    gunners: int = 0
    passengers: int = 0
    marines: int = 0
    battle_armor: int = 0

    @property
    def crew(self) -> int:
        return self.officers + self.enlisted + self.gunners

    def to_dict(self) -> Dict[str, Any]:
        return {
            "officers": self.officers,
            "enlisted": self.enlisted,
            "gunners": self.gunners,
            "passengers": self.passengers,
            "marines": self.marines,
            "battle_armor": self.battle_armor,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrewComplement":
        data = _mapping(data, "crew")
        counts = {
            key: _number(int, data.get(key, 0), f"crew.{key}")
            for key in ("officers", "enlisted", "gunners", "passengers", "marines", "battle_armor")
        }
        return cls(**counts)


@dataclass(frozen=True)
class EquipmentMount:
    """
    One installed piece of equipment.

    Attributes:
        mount_id: Unique id within the design
        equipment_id: Catalog reference
        arc: Firing arc / location, None for unlocated items (one-shot ammo)
        tonnage: Mass override; None means the catalog tonnage
        shots: Shots remaining (ammo mounts)
        one_shot: Weapon carries its own single-use ammo
    """
    mount_id: str
    equipment_id: str
    arc: Optional[Arc] = None
    tonnage: Optional[float] = None
    shots: int = 0
    one_shot: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mount_id": self.mount_id,
            "equipment_id": self.equipment_id,
            "arc": self.arc.name.lower() if self.arc is not None else None,
            "tonnage": self.tonnage,
            "shots": self.shots,
            "one_shot": self.one_shot,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EquipmentMount":
        data = _mapping(data, "mounts")
        try:
            mount_id = str(data["mount_id"])
            equipment_id = str(data["equipment_id"])
        except KeyError as e:
            raise MalformedDesignError(
                f"Equipment mount missing field {e.args[0]!r}",
                source="core.design",
                path="mounts",
            ) from None
        tonnage = data.get("tonnage")
        return cls(
            mount_id=mount_id,
            equipment_id=equipment_id,
            arc=_arc(data.get("arc"), f"mounts.{mount_id}.arc"),
            tonnage=(
                _number(float, tonnage, f"mounts.{mount_id}.tonnage")
                if tonnage is not None else None
            ),
            shots=_number(int, data.get("shots", 0), f"mounts.{mount_id}.shots"),
            one_shot=bool(data.get("one_shot", False)),
        )


@dataclass(frozen=True)
class Bay:
    """
    Weapon bay or transport bay.

    Weapon bays list their weapon and ammo mounts in ``mount_ids``;
    transport bays carry capacity, doors and (for hardpoint bays) a facing.
    """
    name: str
    bay_type: BayType
    capacity: float = 0.0
    doors: int = 0
    facing: Optional[Arc] = None
    tonnage: float = 0.0
    personnel: int = 0
    mount_ids: Tuple[str, ...] = ()

    @property
    def is_weapon_bay(self) -> bool:
        return self.bay_type is BayType.WEAPON

    @property
    def hardpoint_cost(self) -> int:
        return self.bay_type.hardpoint_cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "bay_type": self.bay_type.value,
            "capacity": self.capacity,
            "doors": self.doors,
            "facing": self.facing.name.lower() if self.facing is not None else None,
            "tonnage": self.tonnage,
            "personnel": self.personnel,
            "mount_ids": list(self.mount_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bay":
        data = _mapping(data, "bays")
        name = str(data.get("name", "Bay"))
        path = f"bays.{name}"
        return cls(
            name=name,
            bay_type=_enum(BayType, data.get("bay_type"), f"{path}.bay_type"),
            capacity=_number(float, data.get("capacity", 0.0), f"{path}.capacity"),
            doors=_number(int, data.get("doors", 0), f"{path}.doors"),
            facing=_arc(data.get("facing"), f"{path}.facing"),
            tonnage=_number(float, data.get("tonnage", 0.0), f"{path}.tonnage"),
            personnel=_number(int, data.get("personnel", 0), f"{path}.personnel"),
            mount_ids=tuple(
                str(m) for m in _sequence(data.get("mount_ids", []), f"{path}.mount_ids")
            ),
        )


# =============================================================================
# UNIT DESIGN
# =============================================================================

@dataclass(frozen=True)
class UnitDesign:
    """
    Fully specified capital ship design.

    Built once by a loader and never mutated; the calculator and the
    validator only read it.
    """
    name: str
    hull_class: HullClass
    tonnage: float
    structural_integrity: int
    original_year: int

    model: str = ""
    primitive: bool = False
    drive_core: DriveCoreType = DriveCoreType.STANDARD
    tech_base: TechBase = TechBase.INNER_SPHERE
    original_thrust: int = 0

    fuel_tonnage: float = 0.0
    has_sail: bool = False
    has_lf_battery: bool = False

    armor_type: Optional[str] = None
    armor: Tuple[ArmorFacing, ...] = ()

    heat_sinks: int = 0
    heat_sink_type: str = HeatSinkType.SINGLE.value

    crew: CrewComplement = field(default_factory=CrewComplement)
    lifeboats: int = 0
    escape_pods: int = 0

    mounts: Tuple[EquipmentMount, ...] = ()
    bays: Tuple[Bay, ...] = ()
    docking_collars: int = 0
    grav_decks: Tuple[int, ...] = ()

    # Overrides
    allow_overweight: bool = False
    canon_invalid_build: bool = False

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.model}".strip()

    @property
    def hull_profile(self) -> HullProfile:
        return get_hull_profile(self.hull_class)

    @property
    def armor_tonnage(self) -> float:
        return sum(facing.tonnage for facing in self.armor)

    @property
    def weapon_bays(self) -> List[Bay]:
        return [bay for bay in self.bays if bay.is_weapon_bay]

    @property
    def transport_bays(self) -> List[Bay]:
        return [bay for bay in self.bays if not bay.is_weapon_bay]

    @property
    def bay_personnel(self) -> int:
        return sum(bay.personnel for bay in self.transport_bays)

    def get_mount(self, mount_id: str) -> EquipmentMount:
        """
        Resolve a mount by id.

        Raises:
            UnknownMountError: no mount with that id
        """
        for mount in self.mounts:
            if mount.mount_id == mount_id:
                return mount
        raise UnknownMountError(
            f"Unknown mount id: {mount_id}",
            source="core.design",
            path="bays.mount_ids",
            value=mount_id,
        )

    def bay_mounts(self, bay: Bay) -> Iterator[EquipmentMount]:
        for mount_id in bay.mount_ids:
            yield self.get_mount(mount_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "model": self.model,
            "hull_class": self.hull_class.value,
            "primitive": self.primitive,
            "tonnage": self.tonnage,
            "structural_integrity": self.structural_integrity,
            "original_year": self.original_year,
            "drive_core": self.drive_core.value,
            "tech_base": self.tech_base.value,
            "original_thrust": self.original_thrust,
            "fuel_tonnage": self.fuel_tonnage,
            "has_sail": self.has_sail,
            "has_lf_battery": self.has_lf_battery,
            "armor_type": self.armor_type,
            "armor": [facing.to_dict() for facing in self.armor],
            "heat_sinks": self.heat_sinks,
            "heat_sink_type": self.heat_sink_type,
            "crew": self.crew.to_dict(),
            "lifeboats": self.lifeboats,
            "escape_pods": self.escape_pods,
            "mounts": [mount.to_dict() for mount in self.mounts],
            "bays": [bay.to_dict() for bay in self.bays],
            "docking_collars": self.docking_collars,
            "grav_decks": list(self.grav_decks),
            "allow_overweight": self.allow_overweight,
            "canon_invalid_build": self.canon_invalid_build,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnitDesign":
        """
        Deserialize from dictionary.

        Raises:
            InvalidHullClassError: hull class outside the closed set
            MalformedDesignError: required field missing, or a value of the
                wrong shape (bad enum, non-numeric count, non-list section)
        """
        data = _mapping(data, "design")
        hull_value = data.get("hull_class")
        try:
            hull_class = HullClass(hull_value)
        except ValueError:
            raise create_invalid_hull_error(hull_value, source="core.design") from None

        missing = [
            key for key in ("name", "tonnage", "structural_integrity", "original_year")
            if key not in data
        ]
        if missing:
            raise MalformedDesignError(
                f"Missing required fields: {', '.join(missing)}",
                source="core.design",
                path=missing[0],
            )

        return cls(
            name=str(data["name"]),
            model=str(data.get("model", "")),
            hull_class=hull_class,
            primitive=bool(data.get("primitive", False)),
            tonnage=_number(float, data["tonnage"], "tonnage"),
            structural_integrity=_number(
                int, data["structural_integrity"], "structural_integrity"
            ),
            original_year=_number(int, data["original_year"], "original_year"),
            drive_core=_enum(DriveCoreType, data.get("drive_core", "standard"), "drive_core"),
            tech_base=_enum(TechBase, data.get("tech_base", "inner_sphere"), "tech_base"),
            original_thrust=_number(int, data.get("original_thrust", 0), "original_thrust"),
            fuel_tonnage=_number(float, data.get("fuel_tonnage", 0.0), "fuel_tonnage"),
            has_sail=bool(data.get("has_sail", False)),
            has_lf_battery=bool(data.get("has_lf_battery", False)),
            armor_type=data.get("armor_type"),
            armor=tuple(
                ArmorFacing.from_dict(a) for a in _sequence(data.get("armor", []), "armor")
            ),
            heat_sinks=_number(int, data.get("heat_sinks", 0), "heat_sinks"),
            heat_sink_type=str(data.get("heat_sink_type", HeatSinkType.SINGLE.value)),
            crew=CrewComplement.from_dict(data.get("crew", {})),
            lifeboats=_number(int, data.get("lifeboats", 0), "lifeboats"),
            escape_pods=_number(int, data.get("escape_pods", 0), "escape_pods"),
            mounts=tuple(
                EquipmentMount.from_dict(m) for m in _sequence(data.get("mounts", []), "mounts")
            ),
            bays=tuple(Bay.from_dict(b) for b in _sequence(data.get("bays", []), "bays")),
            docking_collars=_number(int, data.get("docking_collars", 0), "docking_collars"),
            grav_decks=tuple(
                _number(int, d, "grav_decks")
                for d in _sequence(data.get("grav_decks", []), "grav_decks")
            ),
            allow_overweight=bool(data.get("allow_overweight", False)),
            canon_invalid_build=bool(data.get("canon_invalid_build", False)),
        )
