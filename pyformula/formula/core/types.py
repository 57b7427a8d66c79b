"""
Core types and data structures for formula elements.

This module contains the element vocabulary shared by the tokenizer, the
stringifier and the validator: the element kind enumeration and the
tree-shaped element dataclass.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import StrEnum

_id_counter = itertools.count(1)


def generate_id() -> str:
    """Return a new process-unique element identifier."""
    return f"fe-{next(_id_counter)}"


class ElementType(StrEnum):
    """Kinds of formula elements."""

    SYMBOL = "symbol"
    NUMBER = "number"
    VARIABLE = "variable"
    FUNCTION = "function"
    BRACKET = "bracket"
    OPERATOR = "operator"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    FRACTION = "fraction"
    ROOT = "root"
    INTEGRAL = "integral"


OPERAND_TYPES = frozenset(
    {
        ElementType.NUMBER,
        ElementType.VARIABLE,
        ElementType.FUNCTION,
        ElementType.BRACKET,
    }
)

MODIFIER_TYPES = frozenset({ElementType.SUPERSCRIPT, ElementType.SUBSCRIPT})


@dataclass
class FormulaElement:
    """
    One typed node of a formula tree.

    Attributes
    ----------
    kind : ElementType
        The element kind. Plain strings are coerced to `ElementType`.
    value : str
        The literal text the element renders as. For modifier children this is
        the unwrapped content, without braces or the `^`/`_` marker.
    children : list[FormulaElement]
        Modifier children (superscripts and subscripts) in source order.
    id : str
        Opaque, process-unique identifier. Not part of equality.
    """

    kind: ElementType
    value: str
    children: list[FormulaElement] = field(default_factory=list)
    id: str = field(default_factory=generate_id, compare=False)

    def __post_init__(self):
        self.kind = ElementType(self.kind)

    @property
    def is_operand(self) -> bool:
        return self.kind in OPERAND_TYPES

    @property
    def is_modifier(self) -> bool:
        return self.kind in MODIFIER_TYPES

    @property
    def superscripts(self) -> list[FormulaElement]:
        return [c for c in self.children if c.kind is ElementType.SUPERSCRIPT]

    @property
    def subscripts(self) -> list[FormulaElement]:
        return [c for c in self.children if c.kind is ElementType.SUBSCRIPT]

    def copy(self) -> FormulaElement:
        """Return a deep copy of the element with fresh identifiers."""
        return FormulaElement(
            kind=self.kind,
            value=self.value,
            children=[child.copy() for child in self.children],
        )
