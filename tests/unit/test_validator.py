"""
Unit tests for the check registry and DesignValidator.
"""

import logging
from dataclasses import replace

import pytest

from capship.bootstrap.config import ValidationConfig
from capship.catalog import IntroYearTechOracle, TechContext
from capship.core.design import EquipmentMount
from capship.core.enums import Arc, TechBase
from capship.errors import MissingArmorTypeError, StructuralError, UnknownEquipmentError
from capship.validators import (
    DEFAULT_CHECKS,
    CheckCategory,
    CheckDefinition,
    DesignValidator,
    LegalityCheck,
    get_check,
    get_checks_by_category,
    list_check_ids,
)


@pytest.fixture
def validator(catalog):
    return DesignValidator(catalog)


@pytest.fixture
def armor_and_crew_failure(warship):
    """Warship over its armor allowance on the nose and short of crew."""
    armor = (replace(warship.armor[0], points=200),) + warship.armor[1:]
    crew = replace(warship.crew, enlisted=100)
    return replace(warship, armor=armor, crew=crew)


class TestRegistry:
    """Tests for the ordered check battery."""

    def test_order(self):
        assert list_check_ids() == [
            "hull/tonnage",
            "weight/budget",
            "heat/sinks",
            "armor/allocation",
            "equipment/combinations",
            "crew/quarters",
            "facilities/grav_decks",
            "facilities/bays",
            "tech/legality",
        ]

    def test_get_check(self):
        assert get_check("armor/allocation").definition.category is CheckCategory.ARMOR
        assert get_check("missing") is None

    def test_by_category(self):
        ids = [c.check_id for c in get_checks_by_category(CheckCategory.FACILITIES)]
        assert ids == ["facilities/grav_decks", "facilities/bays"]

    def test_definition_to_dict(self):
        data = DEFAULT_CHECKS[0].definition.to_dict()
        assert data["category"] == "hull"


class TestValidate:
    """Tests for DesignValidator.validate."""

    @pytest.mark.parametrize("hull", ["jumpship", "warship", "station"])
    def test_baselines_legal(self, validator, hull, request):
        result = validator.validate(request.getfixturevalue(hull))
        assert result.legal
        assert result.diagnostics == ()
        assert not result.overridden
        assert len(result.check_results) == len(DEFAULT_CHECKS)

    def test_never_short_circuits(self, validator, armor_and_crew_failure):
        """Armor and crew failures are both reported."""
        result = validator.validate(armor_and_crew_failure)
        assert not result.legal
        failed = [c.check_id for c in result.failed_checks]
        assert failed == ["armor/allocation", "crew/quarters"]
        assert result.diagnostics == (
            "N armor, 200 points, is greater than the maximum for 120.0 tons: 130",
            "Requires 150 crew and only has 106",
        )

    def test_every_check_runs_after_failure(self, catalog, armor_and_crew_failure):
        calls = []

        def recorder(check_id):
            def check(ctx):
                calls.append(check_id)
                return check_id != "first", [f"{check_id} failed"] if check_id == "first" else []
            return check

        battery = [
            LegalityCheck(
                CheckDefinition(cid, cid, "", CheckCategory.HULL), recorder(cid)
            )
            for cid in ("first", "second", "third")
        ]
        result = DesignValidator(catalog, checks=battery).validate(armor_and_crew_failure)
        assert calls == ["first", "second", "third"]
        assert result.diagnostics == ("first failed",)

    def test_canonical_override(self, validator, armor_and_crew_failure):
        plain = validator.validate(armor_and_crew_failure)
        result = validator.validate(replace(armor_and_crew_failure, canon_invalid_build=True))
        assert result.legal
        assert result.overridden
        assert result.diagnostics == plain.diagnostics
        assert result.diagnostics

    def test_override_on_legal_design_is_not_applied(self, validator, warship):
        result = validator.validate(replace(warship, canon_invalid_build=True))
        assert result.legal
        assert not result.overridden

    def test_override_does_not_alter_attributes(self, calculator, warship):
        flagged = replace(warship, canon_invalid_build=True)
        assert calculator.calculate(flagged) == calculator.calculate(warship)

    def test_override_does_not_suppress_structural_errors(self, validator, warship):
        design = replace(
            warship,
            canon_invalid_build=True,
            mounts=warship.mounts + (EquipmentMount("x", "gauss", Arc.NOSE),),
        )
        with pytest.raises(UnknownEquipmentError):
            validator.validate(design)

    def test_missing_armor_is_structural(self, validator, warship):
        with pytest.raises(StructuralError):
            validator.validate(replace(warship, armor_type="reactive"))
        with pytest.raises(MissingArmorTypeError):
            validator.validate(replace(warship, armor_type="reactive"))

    def test_precomputed_attributes(self, validator, calculator, warship):
        attributes = calculator.calculate(warship)
        assert validator.validate(warship, attributes).legal

    def test_global_overweight_option(self, catalog, jumpship):
        bays = (replace(jumpship.bays[0], tonnage=2000.0),) + jumpship.bays[1:]
        heavy = replace(jumpship, bays=bays)
        assert not DesignValidator(catalog).validate(heavy).legal
        config = ValidationConfig(allow_overweight_construction=True)
        assert DesignValidator(catalog, config=config).validate(heavy).legal

    def test_get_check_result(self, validator, armor_and_crew_failure):
        result = validator.validate(armor_and_crew_failure)
        assert not result.get_check("crew/quarters").passed
        assert result.get_check("heat/sinks").passed
        assert result.get_check("nope") is None

    def test_to_dict(self, validator, armor_and_crew_failure):
        data = validator.validate(armor_and_crew_failure).to_dict()
        assert data["legal"] is False
        assert len(data["checks"]) == 9
        assert data["checks"][3]["diagnostics"] == list(data["diagnostics"][:1])


class TestTechContext:
    """Tests for the validator's tech context."""

    def test_defaults_to_design_year(self, catalog, warship):
        context = DesignValidator(catalog).context_for(warship)
        assert context == TechContext(year=3050, tech_base=TechBase.INNER_SPHERE)

    def test_explicit_context(self, catalog, warship):
        design = replace(warship, armor_type="lamellor")
        strict = DesignValidator(catalog, oracle=IntroYearTechOracle())
        assert not strict.validate(design).legal

        later = DesignValidator(
            catalog,
            oracle=IntroYearTechOracle(),
            tech_context=TechContext(year=3075, tech_base=TechBase.INNER_SPHERE),
        )
        assert later.validate(design).legal


class TestLogging:
    """Tests for validator log output."""

    def test_verdict_logged(self, validator, warship, caplog):
        with caplog.at_level(logging.INFO, logger="capship.validators.engine"):
            validator.validate(warship)
        assert "Aegis Heavy Cruiser: legal" in caplog.text

    def test_override_warns(self, validator, armor_and_crew_failure, caplog):
        design = replace(armor_and_crew_failure, canon_invalid_build=True)
        with caplog.at_level(logging.WARNING, logger="capship.validators.engine"):
            validator.validate(design)
        assert "accepted as canonical" in caplog.text
