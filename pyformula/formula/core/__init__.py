"""
Core components for formula parsing.

This submodule contains the fundamental building blocks: element types, the
tokenizer and the stringifier.
"""

from .stringifier import FormulaStringifier
from .tokenizer import FormulaTokenizer
from .types import ElementType, FormulaElement, generate_id

__all__ = [
    "ElementType",
    "FormulaElement",
    "FormulaStringifier",
    "FormulaTokenizer",
    "generate_id",
]
