"""
Validation components for formula elements.

This submodule contains the rule types and the validator, separated from
the parsing logic.
"""

from .rules import (
    ValidationError,
    ValidationResult,
    ValidationRule,
    ValidationRuleType,
)
from .validators import FormulaValidator, validate

__all__ = [
    "FormulaValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "ValidationRuleType",
    "validate",
]
