"""
Headless formula document.

`FormulaDocument` holds the element list of one formula together with its
validation configuration. It offers the element level editing operations an
editing surface needs (insert, update, remove, find) without any notion of
display, cursor or events.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from .core import ElementType, FormulaElement
from .parser import FormulaParser
from .validation import FormulaValidator, ValidationResult, ValidationRule

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

CustomValidator = Callable[[str, Sequence[FormulaElement]], ValidationResult]


@dataclass
class ValidationConfig:
    """
    Validation settings of a formula document.

    Attributes
    ----------
    auto_validate : bool
        Re-validate after every change to the document.
    rules : list[ValidationRule]
        Rules applied by `FormulaDocument.validate`.
    custom_validator : callable, optional
        `(text, elements) -> ValidationResult`. Takes precedence over `rules`.
    """

    auto_validate: bool = False
    rules: list[ValidationRule] = field(default_factory=list)
    custom_validator: Optional[CustomValidator] = None


class FormulaDocument:
    """
    An editable formula held as a list of elements.

    Parameters
    ----------
    formula : str, optional
        Initial formula text.
    validation : ValidationConfig, optional
        Validation settings. Defaults to no rules and no auto validation.

    Examples
    --------
    >>> doc = FormulaDocument("a+b")
    >>> _ = doc.append_element(FormulaElement("operator", "="))
    >>> doc.get_formula()
    'a+b='
    """

    def __init__(
        self, formula: str = "", validation: Optional[ValidationConfig] = None
    ):
        self.validation = validation if validation is not None else ValidationConfig()
        self._elements: list[FormulaElement] = []
        self._last_validation_result: Optional[ValidationResult] = None
        if formula:
            self.set_formula(formula)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"FormulaDocument({self.get_formula()!r})"

    @property
    def elements(self) -> list[FormulaElement]:
        """A shallow copy of the top-level elements."""
        return list(self._elements)

    @property
    def last_validation_result(self) -> Optional[ValidationResult]:
        return self._last_validation_result

    def set_formula(self, formula: str) -> None:
        """Replace the document content with the parsed formula."""
        self._elements = FormulaParser.parse(formula)
        self._changed()

    def get_formula(self) -> str:
        """Return the canonical formula text, modifiers included."""
        return FormulaParser.stringify(self._elements)

    def get_formula_text(self) -> str:
        """Return the plain concatenation of top-level values, without modifiers."""
        return "".join(element.value for element in self._elements)

    def element_at(self, index: int) -> Optional[FormulaElement]:
        """Return a copy of the element at `index`, or None if out of range."""
        if 0 <= index < len(self._elements):
            element = self._elements[index]
            return dataclasses.replace(
                element,
                children=[dataclasses.replace(c) for c in element.children],
            )
        return None

    def insert_element(
        self, element: FormulaElement, index: Optional[int] = None
    ) -> FormulaElement:
        """
        Insert a copy of `element` at `index`.

        The inserted element and its children get fresh identifiers. `index` is
        clamped to the valid range; None appends.

        Returns
        -------
        FormulaElement
            The element as stored in the document.
        """
        new_element = element.copy()
        if index is None:
            index = len(self._elements)
        index = max(0, min(index, len(self._elements)))
        self._elements.insert(index, new_element)
        self._changed()
        return new_element

    def append_element(self, element: FormulaElement) -> FormulaElement:
        return self.insert_element(element, len(self._elements))

    def update_element(
        self,
        index: int,
        *,
        kind: Optional[Union[ElementType, str]] = None,
        value: Optional[str] = None,
        children: Optional[Iterable[FormulaElement]] = None,
    ) -> bool:
        """
        Update fields of the element at `index`, keeping its identifier.

        Returns
        -------
        bool
            False if `index` is out of range.
        """
        if not 0 <= index < len(self._elements):
            return False

        changes = {}
        if kind is not None:
            changes["kind"] = kind
        if value is not None:
            changes["value"] = value
        if children is not None:
            changes["children"] = list(children)
        self._elements[index] = dataclasses.replace(self._elements[index], **changes)
        self._changed()
        return True

    def remove_element(self, index: int) -> bool:
        """Remove the element at `index`. Returns False if out of range."""
        if not 0 <= index < len(self._elements):
            return False
        del self._elements[index]
        self._changed()
        return True

    def find_elements(
        self, predicate: Callable[[FormulaElement, int], bool]
    ) -> list[int]:
        """Return the indices of the elements for which `predicate(element, index)` holds."""
        return [i for i, element in enumerate(self._elements) if predicate(element, i)]

    def set_elements(self, elements: Iterable[FormulaElement]) -> None:
        """Replace the document content with copies of `elements`."""
        self._elements = [element.copy() for element in elements]
        self._changed()

    def clear(self) -> None:
        self._elements = []
        self._changed()

    # validation ------------

    def set_validation_rules(self, rules: Iterable[ValidationRule]) -> None:
        self.validation.rules = list(rules)

    def set_auto_validate(self, auto_validate: bool) -> None:
        self.validation.auto_validate = auto_validate

    def set_custom_validator(self, validator: Optional[CustomValidator]) -> None:
        self.validation.custom_validator = validator

    def validate(self) -> ValidationResult:
        """
        Validate the document.

        A custom validator, when set, replaces the rule list. With neither
        rules nor a custom validator the formula is always valid.

        Returns
        -------
        ValidationResult
            The result, also kept as `last_validation_result`.
        """
        config = self.validation
        if not config.rules and config.custom_validator is None:
            return ValidationResult(valid=True, errors=[])

        formula = self.get_formula()
        if config.custom_validator is not None:
            result = config.custom_validator(formula, self.elements)
        else:
            result = FormulaValidator.validate(formula, self.elements, config.rules)

        self._last_validation_result = result
        if not result.valid:
            logger.debug(
                "Formula %r failed validation with %d errors",
                formula,
                len(result.errors),
            )
        return result

    def tidy(self) -> pd.DataFrame:
        """Return the elements as a tidy pd.DataFrame, one row per element."""
        from pyformula.report import tidy_elements

        return tidy_elements(self._elements)

    def _changed(self) -> None:
        if self.validation.auto_validate:
            self.validate()
