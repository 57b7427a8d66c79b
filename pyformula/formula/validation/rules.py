"""
Validation rule and result types.

A rule is a tagged selection of one built-in structural check, or a custom
check carrying a predicate over the formula text and its elements.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Optional, Union

from pyformula.errors import InvalidValidationRuleError, UnknownValidationRuleError
from pyformula.options import options
from pyformula.utils._exceptions import find_stack_level

from ..core.types import FormulaElement

if TYPE_CHECKING:
    import pandas as pd

RulePredicate = Callable[[str, Sequence[FormulaElement]], bool]


class ValidationRuleType(StrEnum):
    """Built-in validation rule kinds."""

    BRACKETS_MATCH = "brackets-match"
    OPERATORS_SURROUNDED = "operators-surrounded"
    NON_EMPTY = "non-empty"
    HAS_EQUALS = "has-equals"
    NO_CONSECUTIVE_OPERANDS = "no-consecutive-operands"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value):
        # accept member names and camelCase tags, e.g. "BRACKETS_MATCH"
        # or "bracketsMatch"
        if isinstance(value, str):
            key = "".join(c for c in value.lower() if c.isalnum())
            for member in cls:
                if member.name.replace("_", "").lower() == key:
                    return member
        return None


@dataclass(frozen=True)
class ValidationRule:
    """
    One configured structural check.

    Parameters
    ----------
    type : ValidationRuleType or str
        The rule tag. Strings are coerced to `ValidationRuleType`; unknown tags
        raise `UnknownValidationRuleError`, or are kept as always-valid no-ops
        with a warning when the `unknown_rule` option is "ignore".
    message : str, optional
        Overrides the default failure message.
    validate : callable, optional
        Predicate `(text, elements) -> bool`. Required for custom rules and
        rejected for built-in ones.
    """

    type: Union[ValidationRuleType, str]
    message: Optional[str] = None
    validate: Optional[RulePredicate] = field(default=None, compare=False)

    def __post_init__(self):
        try:
            rule_type = ValidationRuleType(self.type)
        except ValueError:
            if options.unknown_rule == "raise":
                raise UnknownValidationRuleError(
                    f"Unknown validation rule '{self.type}'. Expecting one of "
                    f"{[t.value for t in ValidationRuleType]}."
                ) from None
            warnings.warn(
                f"Unknown validation rule '{self.type}' will be ignored.",
                UserWarning,
                stacklevel=find_stack_level(),
            )
            return

        object.__setattr__(self, "type", rule_type)
        if rule_type is ValidationRuleType.CUSTOM and self.validate is None:
            raise InvalidValidationRuleError(
                "A custom validation rule requires a `validate` predicate."
            )
        if rule_type is not ValidationRuleType.CUSTOM and self.validate is not None:
            raise InvalidValidationRuleError(
                f"Only custom rules accept a `validate` predicate, got one for "
                f"'{rule_type}'."
            )

    @property
    def is_known(self) -> bool:
        return isinstance(self.type, ValidationRuleType)

    @classmethod
    def custom(
        cls, validate: RulePredicate, message: Optional[str] = None
    ) -> ValidationRule:
        """Build a custom rule from a predicate."""
        return cls(ValidationRuleType.CUSTOM, message=message, validate=validate)


@dataclass(frozen=True)
class ValidationError:
    """
    A single failed rule.

    Attributes
    ----------
    message : str
        Failure message.
    rule_type : ValidationRuleType
        The rule that failed.
    element_index : int, optional
        Position of the offending element. For bracket matching this is the
        character index into the formula text.
    """

    message: str
    rule_type: ValidationRuleType
    element_index: Optional[int] = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a formula against a rule list."""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> ValidationResult:
        return cls(valid=not errors, errors=errors)

    def tidy(self) -> pd.DataFrame:
        """
        Tidy validation outputs.

        Returns
        -------
        pd.DataFrame
            One row per error with the columns `rule_type`, `message` and
            `element_index`.
        """
        from pyformula.report import tidy_validation

        return tidy_validation(self)
