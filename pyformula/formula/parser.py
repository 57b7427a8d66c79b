"""
Main formula parser that orchestrates the core components.

This module contains the FormulaParser class that ties the tokenizer and the
stringifier together behind the two text <-> tree entry points.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyformula.utils.dev_utils import docstring_from

from .core import FormulaElement, FormulaStringifier, FormulaTokenizer


class FormulaParser:
    """
    Convert between the textual formula notation and element trees.

    Both directions are total: `parse` maps every character to some element
    and `stringify` accepts any element list.

    Examples
    --------
    >>> elements = FormulaParser.parse("E=mc^2")
    >>> [e.value for e in elements]
    ['E', '=', 'm', 'c']
    >>> FormulaParser.stringify(elements)
    'E=mc^{2}'
    """

    @staticmethod
    def parse(formula: str) -> list[FormulaElement]:
        """
        Parse a formula string into a list of typed elements.

        Parameters
        ----------
        formula : str
            Formula string. The empty string yields an empty list.

        Returns
        -------
        list[FormulaElement]
            Top-level elements in reading order, with superscripts and
            subscripts attached as children.
        """
        return FormulaTokenizer.tokenize(formula)

    @staticmethod
    def stringify(elements: Iterable[FormulaElement]) -> str:
        """
        Convert a list of elements back into formula text.

        Modifiers are always written in braced form, so `parse` followed by
        `stringify` normalises `x^2` to `x^{2}`.

        Parameters
        ----------
        elements : Iterable[FormulaElement]
            Top-level elements in reading order.

        Returns
        -------
        str
            The canonical formula text.
        """
        return FormulaStringifier.stringify(elements)

    @staticmethod
    def normalize(formula: str) -> str:
        """Return the canonical form of a formula string."""
        return FormulaStringifier.stringify(FormulaTokenizer.tokenize(formula))


@docstring_from(FormulaParser.parse)
def parse(formula: str) -> list[FormulaElement]:
    return FormulaParser.parse(formula)


@docstring_from(FormulaParser.stringify)
def stringify(elements: Iterable[FormulaElement]) -> str:
    return FormulaParser.stringify(elements)
