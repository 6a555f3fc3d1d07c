"""
Unit tests for AttributeCalculator and AttributeSet.
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from capship.core.design import EquipmentMount
from capship.core.enums import Arc
from capship.errors import MissingArmorTypeError, UnknownEquipmentError
from capship.weight import LEDGER_ORDER, AttributeSet


class TestBaselineTotals:
    """Total weight of the baseline designs."""

    def test_jumpship(self, calculator, jumpship):
        attrs = calculator.calculate(jumpship)
        assert attrs.total_weight == pytest.approx(149611.0)

    def test_warship(self, calculator, warship):
        attrs = calculator.calculate(warship)
        assert attrs.total_weight == pytest.approx(394903.0)

    def test_station(self, calculator, station):
        attrs = calculator.calculate(station)
        assert attrs.total_weight == pytest.approx(22884.0)

    def test_total_is_sum_of_ledger(self, calculator, warship):
        attrs = calculator.calculate(warship)
        assert attrs.total_weight == pytest.approx(sum(w for _, w in attrs.weight_ledger()))


class TestAttributeSet:
    """Tests for the derived attribute record."""

    def test_crew_requirements(self, calculator, warship):
        attrs = calculator.calculate(warship)
        assert attrs.minimum_base_crew == 145
        assert attrs.required_gunners == 5
        assert attrs.required_crew == 150
        assert attrs.required_officers == 25

    def test_limits(self, calculator, warship):
        attrs = calculator.calculate(warship)
        assert attrs.max_armor_weight == 1000.0
        assert attrs.max_armor_points == 1060
        assert attrs.free_heat_sinks == 469
        assert attrs.engine_tonnage == attrs.engine_weight == 90000.0
        assert attrs.min_tonnage == 100000

    def test_ledger_order(self, calculator, jumpship):
        attrs = calculator.calculate(jumpship)
        labels = [label for label, _ in attrs.weight_ledger()]
        assert labels == [label for label, _ in LEDGER_ORDER]
        assert labels[0] == "Structure"
        assert labels[-1] == "Ammunition"
        assert len(labels) == 18

    def test_frozen(self, calculator, jumpship):
        attrs = calculator.calculate(jumpship)
        with pytest.raises(FrozenInstanceError):
            attrs.total_weight = 0.0

    def test_to_dict(self, calculator, warship):
        data = calculator.calculate(warship).to_dict()
        assert data["total_weight"] == 394903.0
        assert set(data["fire_control_by_arc"]) == {
            "N", "FLS", "FRS", "A", "ALS", "ARS", "LBS", "RBS"
        }
        assert set(AttributeSet.__dataclass_fields__) == set(data)

    def test_design_not_mutated(self, calculator, warship):
        before = warship.to_dict()
        calculator.calculate(warship)
        assert warship.to_dict() == before


class TestStructuralErrors:
    """The calculator raises on unresolvable references."""

    def test_unknown_equipment(self, calculator, jumpship):
        design = replace(jumpship, mounts=(EquipmentMount("x", "gauss", Arc.NOSE),))
        with pytest.raises(UnknownEquipmentError):
            calculator.calculate(design)

    def test_missing_armor(self, calculator, jumpship):
        with pytest.raises(MissingArmorTypeError):
            calculator.calculate(replace(jumpship, armor_type="reactive"))

    def test_primitive_without_primitive_armor(self, jumpship):
        from capship.catalog import ReferenceCatalog
        from capship.weight import AttributeCalculator

        calculator = AttributeCalculator(ReferenceCatalog())
        with pytest.raises(MissingArmorTypeError):
            calculator.calculate(replace(jumpship, primitive=True, mounts=()))
