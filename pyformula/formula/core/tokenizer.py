"""
Formula tokenizer for parsing formula strings into typed elements.

This module is responsible for the low-level scanning of formula strings
into their top-level elements, attaching superscript and subscript modifiers
to the element they decorate.
"""

from __future__ import annotations

import string
from typing import Optional

from pyformula.options import options

from .types import ElementType, FormulaElement

DIGITS = frozenset(string.digits + ".")
LETTERS = frozenset(string.ascii_letters)
MODIFIERS = {
    "^": ElementType.SUPERSCRIPT,
    "_": ElementType.SUBSCRIPT,
}


class FormulaTokenizer:
    """
    Responsible for breaking formula strings into typed elements.

    The tokenizer scans left to right with single character lookahead,
    bounded lookahead for function names and unbounded lookahead for braced
    modifier groups. It never fails: every character maps to some element or
    is consumed as modifier content.
    """

    @staticmethod
    def tokenize(formula: str) -> list[FormulaElement]:
        """
        Parse a formula string into an ordered list of elements.

        Parameters
        ----------
        formula : str
            Formula string, e.g. "E=mc^2" or "x_{i}+sin(y)".

        Returns
        -------
        list[FormulaElement]
            Top-level elements in reading order. Superscripts and subscripts
            are attached as children of the element they follow.

        Examples
        --------
        >>> elements = FormulaTokenizer.tokenize("x^2_i")
        >>> [(e.kind, e.value) for e in elements]
        [(<ElementType.VARIABLE: 'variable'>, 'x')]
        >>> [c.value for c in elements[0].children]
        ['2', 'i']
        """
        if not formula:
            return []

        function_names = sorted(options.function_names, key=len, reverse=True)
        elements: list[FormulaElement] = []
        # index of the element that modifiers attach to
        last: Optional[int] = None
        pos = 0

        while pos < len(formula):
            char = formula[pos]

            if char in DIGITS:
                end = FormulaTokenizer._scan_number(formula, pos)
                elements.append(FormulaElement(ElementType.NUMBER, formula[pos:end]))
                pos = end

            elif char in LETTERS:
                name = FormulaTokenizer._match_function(formula, pos, function_names)
                if name is not None:
                    elements.append(FormulaElement(ElementType.FUNCTION, name))
                    pos += len(name)
                else:
                    elements.append(FormulaElement(ElementType.VARIABLE, char))
                    pos += 1

            elif char in options.operators:
                elements.append(FormulaElement(ElementType.OPERATOR, char))
                pos += 1

            elif char in options.brackets:
                elements.append(FormulaElement(ElementType.BRACKET, char))
                pos += 1

            elif char in MODIFIERS:
                content, pos = FormulaTokenizer._scan_modifier(formula, pos + 1)
                if last is not None:
                    elements[last].children.append(
                        FormulaElement(MODIFIERS[char], content)
                    )
                continue

            else:
                elements.append(FormulaElement(ElementType.SYMBOL, char))
                pos += 1

            last = len(elements) - 1

        return elements

    @staticmethod
    def _scan_number(formula: str, start: int) -> int:
        """Return the end of the maximal run of digits and dots at `start`."""
        end = start
        while end < len(formula) and formula[end] in DIGITS:
            end += 1
        return end

    @staticmethod
    def _match_function(
        formula: str, start: int, function_names: list[str]
    ) -> Optional[str]:
        """Return the function name at `start` if it is directly followed by '('."""
        for name in function_names:
            if formula.startswith(name + "(", start):
                return name
        return None

    @staticmethod
    def _scan_modifier(formula: str, start: int) -> tuple[str, int]:
        """
        Read the content of a superscript or subscript.

        Parameters
        ----------
        formula : str
            The formula string.
        start : int
            Position right after the `^` or `_` marker.

        Returns
        -------
        tuple[str, int]
            The unwrapped content and the position after it. A braced group
            is read up to its matching closing brace, counting nested braces;
            an unterminated group runs to the end of the input. Otherwise the
            content is the single next character, or empty at end of input.
        """
        if start >= len(formula):
            return "", start

        if formula[start] != "{":
            return formula[start], start + 1

        depth = 1
        pos = start + 1
        while pos < len(formula):
            if formula[pos] == "{":
                depth += 1
            elif formula[pos] == "}":
                depth -= 1
                if depth == 0:
                    return formula[start + 1 : pos], pos + 1
            pos += 1

        return formula[start + 1 :], pos
