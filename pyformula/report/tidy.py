from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

import pandas as pd

from pyformula.formula.core.types import FormulaElement

if TYPE_CHECKING:
    from pyformula.formula.validation.rules import ValidationResult


def _join_modifiers(modifiers: list[FormulaElement]) -> Optional[str]:
    if not modifiers:
        return None
    return "".join(m.value for m in modifiers)


def tidy_elements(elements: Sequence[FormulaElement]) -> pd.DataFrame:
    """
    Tidy formula elements.

    Parameters
    ----------
    elements : Sequence[FormulaElement]
        Top-level formula elements.

    Returns
    -------
    tidy_df : pd.DataFrame
        One row per top-level element, indexed by position, with the columns
        `kind`, `value`, `superscript`, `subscript` and `id`. The modifier
        columns hold the joined modifier values, or None.
    """
    tidy_df = pd.DataFrame(
        {
            "kind": [str(e.kind) for e in elements],
            "value": [e.value for e in elements],
            "superscript": [_join_modifiers(e.superscripts) for e in elements],
            "subscript": [_join_modifiers(e.subscripts) for e in elements],
            "id": [e.id for e in elements],
        },
        columns=["kind", "value", "superscript", "subscript", "id"],
    )
    tidy_df.index.name = "position"

    return tidy_df


def tidy_validation(result: ValidationResult) -> pd.DataFrame:
    """
    Tidy validation outputs.

    Parameters
    ----------
    result : ValidationResult
        The result of a validation run.

    Returns
    -------
    tidy_df : pd.DataFrame
        One row per error with the columns `rule_type`, `message` and
        `element_index`. `element_index` is a nullable integer column.
    """
    tidy_df = pd.DataFrame(
        {
            "rule_type": [str(e.rule_type) for e in result.errors],
            "message": [e.message for e in result.errors],
            "element_index": pd.array(
                [e.element_index for e in result.errors], dtype="Int64"
            ),
        },
        columns=["rule_type", "message", "element_index"],
    )

    return tidy_df
