# Import modules
from pyformula import (
    errors,
    formula,
    options,
    report,
    utils,
)

# Import frequently used functions and classes
from pyformula.formula import (
    ElementType,
    FormulaDocument,
    FormulaElement,
    FormulaParser,
    FormulaValidator,
    ValidationConfig,
    ValidationError,
    ValidationResult,
    ValidationRule,
    ValidationRuleType,
    parse,
    stringify,
    validate,
)
from pyformula.options import get_option, option_context, set_option
from pyformula.report import tidy_elements, tidy_validation

__all__ = [
    "ElementType",
    "FormulaDocument",
    "FormulaElement",
    "FormulaParser",
    "FormulaValidator",
    "ValidationConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "ValidationRuleType",
    "errors",
    "formula",
    "get_option",
    "option_context",
    "options",
    "parse",
    "report",
    "set_option",
    "stringify",
    "tidy_elements",
    "tidy_validation",
    "utils",
    "validate",
]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyformula")
except PackageNotFoundError:
    __version__ = "unknown"
