"""
Formula parsing submodule for pyformula.

This submodule converts between the single-line formula notation and trees
of typed elements, and validates formulas against configurable rules.

Main Components
---------------
- FormulaParser: Text <-> element tree conversion
- FormulaTokenizer: Low-level formula string scanning
- FormulaStringifier: Canonical text reconstruction
- FormulaValidator: Rule based structural validation
- FormulaDocument: Headless editable formula

Examples
--------
>>> from pyformula.formula import FormulaParser
>>> FormulaParser.stringify(FormulaParser.parse("x^2+y_i"))
'x^{2}+y_{i}'
"""

# Main public API
from .parser import FormulaParser, parse, stringify

# Core components (for advanced users)
from .core import (
    ElementType,
    FormulaElement,
    FormulaStringifier,
    FormulaTokenizer,
    generate_id,
)

# Validation
from .validation import (
    FormulaValidator,
    ValidationError,
    ValidationResult,
    ValidationRule,
    ValidationRuleType,
    validate,
)

# Editing
from .document import FormulaDocument, ValidationConfig

__all__ = [
    # Main public interface
    "FormulaParser",
    "parse",
    "stringify",
    "validate",

    # Core components
    "ElementType",
    "FormulaElement",
    "FormulaStringifier",
    "FormulaTokenizer",
    "generate_id",

    # Validation
    "FormulaValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "ValidationRuleType",

    # Editing
    "FormulaDocument",
    "ValidationConfig",
]
