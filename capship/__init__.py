"""
capship - Capital ship construction validator

Derives construction budgets for jumpships, warships and space stations and
runs the legality battery over a design:

    catalog = ReferenceCatalog.from_file("catalog.json")
    design = UnitDesign.from_dict(data)
    result = DesignValidator(catalog).validate(design)
"""

__version__ = "1.0.0"

from .core import UnitDesign, HullClass, Arc
from .catalog import ReferenceCatalog, TechContext
from .weight import AttributeCalculator, AttributeSet
from .validators import DesignValidator, ValidationResult
from .errors import StructuralError

__all__ = [
    "__version__",
    "UnitDesign",
    "HullClass",
    "Arc",
    "ReferenceCatalog",
    "TechContext",
    "AttributeCalculator",
    "AttributeSet",
    "DesignValidator",
    "ValidationResult",
    "StructuralError",
]
