"""
capship Reference Catalog

In-memory, read-only lookup of equipment and armor records. Unknown ids are
structural errors, never rule violations.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, List
import json
import logging

from pydantic import ValidationError

from capship.core.enums import EquipmentFlag
from capship.errors import (
    CatalogLoadError,
    create_missing_armor_error,
    create_unknown_equipment_error,
)
from .equipment import ArmorType, EquipmentType
from .schema import CatalogDocument
from .tech import TechContext, TechOracle

logger = logging.getLogger(__name__)


class ReferenceCatalog:
    """
    Equipment and armor reference data.

    Args:
        equipment: Equipment types to index by id
        armor: Armor types to index by id
    """

    def __init__(
        self,
        equipment: Iterable[EquipmentType] = (),
        armor: Iterable[ArmorType] = (),
    ):
        self._equipment: Dict[str, EquipmentType] = {e.equipment_id: e for e in equipment}
        self._armor: Dict[str, ArmorType] = {a.armor_id: a for a in armor}

    def __len__(self) -> int:
        return len(self._equipment) + len(self._armor)

    def lookup_equipment(self, equipment_id: str) -> EquipmentType:
        """
        Get an equipment type.

        Raises:
            UnknownEquipmentError: id not in the catalog
        """
        try:
            return self._equipment[equipment_id]
        except KeyError:
            raise create_unknown_equipment_error(
                equipment_id, source="catalog.lookup_equipment", path="mounts.equipment_id"
            ) from None

    def lookup_armor(self, armor_id: str) -> ArmorType:
        """
        Get an armor type.

        Raises:
            MissingArmorTypeError: id not in the catalog
        """
        try:
            return self._armor[armor_id]
        except KeyError:
            raise create_missing_armor_error(armor_id, source="catalog.lookup_armor") from None

    def armor_types(self) -> List[ArmorType]:
        return list(self._armor.values())

    def primitive_armor(self) -> ArmorType:
        """
        The armor forced on primitive hulls.

        Raises:
            MissingArmorTypeError: catalog has no primitive armor
        """
        for armor in self._armor.values():
            if armor.is_primitive:
                return armor
        raise create_missing_armor_error("primitive", source="catalog.primitive_armor")

    def armor_types_for(
        self,
        oracle: TechOracle,
        context: TechContext,
        primitive: bool = False,
    ) -> List[ArmorType]:
        """
        Armor types a hull may legally use.

        Primitive hulls get primitive armor only; other hulls get every
        armor carrying the jumpship-class equipment flag that the oracle
        accepts.
        """
        if primitive:
            return [self.primitive_armor()]
        return [
            armor for armor in self._armor.values()
            if armor.has_flag(EquipmentFlag.JS_EQUIPMENT) and oracle.is_legal(armor, context)
        ]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReferenceCatalog":
        """
        Build from a catalog document dictionary.

        Raises:
            CatalogLoadError: document fails schema validation
        """
        try:
            document = CatalogDocument.model_validate(data)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Invalid catalog document: {e.error_count()} error(s)",
                source="catalog.from_dict",
                value=str(e),
            ) from e

        catalog = cls(
            equipment=(record.to_equipment_type() for record in document.equipment),
            armor=(record.to_armor_type() for record in document.armor),
        )
        logger.debug(
            f"Catalog v{document.version} loaded: "
            f"{len(document.equipment)} equipment, {len(document.armor)} armor"
        )
        return catalog

    @classmethod
    def from_file(cls, filepath: str) -> "ReferenceCatalog":
        """
        Load a JSON catalog file.

        Raises:
            CatalogLoadError: file missing, unreadable or invalid
        """
        path = Path(filepath)
        if not path.exists():
            raise CatalogLoadError(
                f"Catalog file not found: {filepath}",
                source="catalog.from_file",
                path=str(path),
            )
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(
                f"Catalog file is not valid JSON: {e}",
                source="catalog.from_file",
                path=str(path),
            ) from e

        logger.info(f"Loading catalog from: {path}")
        return cls.from_dict(data)
