"""
Formula stringifier, the structural inverse of the tokenizer.

Modifier children are always written in their braced form, so a parse and
stringify round trip normalises `x^2` to `x^{2}`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import ElementType, FormulaElement

MARKERS = {
    ElementType.SUPERSCRIPT: "^",
    ElementType.SUBSCRIPT: "_",
}


class FormulaStringifier:
    """Reconstruct canonical formula text from a list of elements."""

    @staticmethod
    def stringify(elements: Iterable[FormulaElement]) -> str:
        """
        Convert formula elements back into the textual notation.

        Parameters
        ----------
        elements : Iterable[FormulaElement]
            Top-level elements in reading order.

        Returns
        -------
        str
            The concatenated element values, each followed by its modifiers as
            `^{...}` or `_{...}`. Children of other kinds are skipped.

        Notes
        -----
        Modifier content whose braces cannot be wrapped is written as parsed:
        a lone `}` stays unbraced (`x^}`) and a group left open at the end of
        the input keeps no closing brace (`x^{a{b`).
        """
        parts: list[str] = []
        for element in elements:
            parts.append(element.value)
            for child in element.children:
                marker = MARKERS.get(child.kind)
                if marker is None:
                    continue
                parts.append(marker + _wrap(child.value))
        return "".join(parts)


def _wrap(content: str) -> str:
    # Balanced content is braced. A lone closing brace only comes from the
    # unbraced form, and an excess of opening braces only from a group left
    # open at the end of the input; both are written back in that form.
    depth = 0
    for char in content:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                break

    if depth == 0:
        return "{" + content + "}"
    if depth < 0 and len(content) == 1:
        return content
    if depth > 0:
        return "{" + content
    return "{" + content + "}"
