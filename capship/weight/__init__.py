"""
weight/ - Derived Attributes

Construction budgets derived from a design: subsystem weights, armor and
heat sink limits, crew requirements and hull limits.
"""

from .calculator import AttributeSet, AttributeCalculator, LEDGER_ORDER
from . import formulas

__all__ = [
    "AttributeSet",
    "AttributeCalculator",
    "LEDGER_ORDER",
    "formulas",
]
