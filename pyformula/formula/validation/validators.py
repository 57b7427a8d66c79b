"""
Validation logic for formula elements.

This module contains the rule dispatch and the built-in structural checks.
Failures are returned as data in a `ValidationResult`; nothing here raises
for malformed formulas.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from pyformula.options import options
from pyformula.utils.dev_utils import docstring_from

from ..core.types import ElementType, FormulaElement
from .rules import ValidationError, ValidationResult, ValidationRule, ValidationRuleType

logger = logging.getLogger(__name__)

UNCHECKED_OPERATORS = frozenset({"=", "±"})
UNARY_OPERATORS = frozenset({"+", "-"})

# (is_valid, element_index)
_CheckResult = tuple[bool, Optional[int]]


def _bracket_pairs() -> dict[str, str]:
    # the `brackets` option lists opener/closer pairs, e.g. "()[]{}"
    return dict(zip(options.brackets[::2], options.brackets[1::2]))


class FormulaValidator:
    """
    Rule based structural validation of formulas.

    Each rule is evaluated independently and in order; the errors of all
    failing rules are collected, so one pass reports every violation.
    """

    @staticmethod
    def validate(
        formula: str,
        elements: Sequence[FormulaElement],
        rules: Sequence[ValidationRule],
    ) -> ValidationResult:
        """
        Validate a formula against an ordered list of rules.

        Parameters
        ----------
        formula : str
            The formula text, used by the text based rules.
        elements : Sequence[FormulaElement]
            The parsed top-level elements, used by the element based rules.
        rules : Sequence[ValidationRule]
            Rules to apply, in order.

        Returns
        -------
        ValidationResult
            `valid` is True if and only if no rule failed. `errors` holds one
            entry per failing rule, in rule order.

        Examples
        --------
        >>> from pyformula import parse
        >>> rules = [ValidationRule("brackets-match")]
        >>> FormulaValidator.validate("(a+b", parse("(a+b"), rules).errors[0].element_index
        0
        """
        errors: list[ValidationError] = []
        for rule in rules:
            error = FormulaValidator.apply_rule(formula, elements, rule)
            if error is not None:
                errors.append(error)

        logger.debug(
            "Validated %r against %d rules: %d errors", formula, len(rules), len(errors)
        )
        return ValidationResult.from_errors(errors)

    @staticmethod
    def apply_rule(
        formula: str, elements: Sequence[FormulaElement], rule: ValidationRule
    ) -> Optional[ValidationError]:
        """Apply a single rule. Returns the error, or None when the rule passes."""
        if not rule.is_known:
            # kept only when the `unknown_rule` option is "ignore"
            return None

        if rule.type is ValidationRuleType.CUSTOM:
            # exceptions raised by the predicate propagate to the caller
            if rule.validate(formula, elements):
                return None
            return ValidationError(
                message=rule.message or options.messages["custom"],
                rule_type=rule.type,
            )

        element_index: Optional[int] = None
        if rule.type is ValidationRuleType.BRACKETS_MATCH:
            is_valid, element_index = FormulaValidator.validate_brackets_match(formula)
        elif rule.type is ValidationRuleType.OPERATORS_SURROUNDED:
            is_valid, element_index = FormulaValidator.validate_operators_surrounded(
                elements
            )
        elif rule.type is ValidationRuleType.NON_EMPTY:
            is_valid = len(formula.strip()) > 0
        elif rule.type is ValidationRuleType.HAS_EQUALS:
            is_valid = "=" in formula
        else:
            is_valid, element_index = (
                FormulaValidator.validate_no_consecutive_operands(elements)
            )

        if is_valid:
            return None

        return ValidationError(
            message=rule.message or options.messages[rule.type.value],
            rule_type=rule.type,
            element_index=element_index,
        )

    @staticmethod
    def validate_brackets_match(formula: str) -> _CheckResult:
        """
        Check that brackets in the formula text are balanced and properly nested.

        Parameters
        ----------
        formula : str
            The formula text.

        Returns
        -------
        tuple[bool, Optional[int]]
            Validity and, on failure, the character index of the first
            offending bracket: a closer without a matching opener, or the
            earliest opener left unclosed.
        """
        pairs = _bracket_pairs()
        closers = frozenset(pairs.values())
        stack: list[tuple[str, int]] = []

        for i, char in enumerate(formula):
            if char in pairs:
                stack.append((char, i))
            elif char in closers:
                if not stack:
                    return False, i
                opener, _ = stack.pop()
                if pairs[opener] != char:
                    return False, i

        if stack:
            return False, stack[0][1]

        return True, None

    @staticmethod
    def validate_operators_surrounded(
        elements: Sequence[FormulaElement],
    ) -> _CheckResult:
        """
        Check that operators have operands on both sides.

        `=` and `±` are not checked. `+` and `-` may be unary and only need an
        operand after them.
        """
        for i, element in enumerate(elements):
            if element.kind is not ElementType.OPERATOR:
                continue
            if element.value in UNCHECKED_OPERATORS:
                continue

            has_prev = i > 0 and elements[i - 1].is_operand
            has_next = i < len(elements) - 1 and elements[i + 1].is_operand

            if element.value in UNARY_OPERATORS:
                if not has_next:
                    return False, i
            elif not (has_prev and has_next):
                return False, i

        return True, None

    @staticmethod
    def validate_no_consecutive_operands(
        elements: Sequence[FormulaElement],
    ) -> _CheckResult:
        """Check that no two operands are adjacent (brackets count as operands)."""
        for i in range(1, len(elements)):
            if elements[i].is_operand and elements[i - 1].is_operand:
                return False, i

        return True, None

    @staticmethod
    def get_validation_summary(
        formula: str, elements: Sequence[FormulaElement]
    ) -> dict[str, bool]:
        """
        Get a summary of validation status for every built-in rule.

        Useful for debugging, or to show which checks a formula passes without
        configuring a rule list.

        Returns
        -------
        dict[str, bool]
            Mapping from rule tag to whether the rule passes.
        """
        return {
            rule_type.value: FormulaValidator.apply_rule(
                formula, elements, ValidationRule(rule_type)
            )
            is None
            for rule_type in ValidationRuleType
            if rule_type is not ValidationRuleType.CUSTOM
        }


@docstring_from(FormulaValidator.validate)
def validate(
    formula: str,
    elements: Sequence[FormulaElement],
    rules: Sequence[ValidationRule],
) -> ValidationResult:
    return FormulaValidator.validate(formula, elements, rules)
