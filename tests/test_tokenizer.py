"""
Tests for the formula tokenizer in pyformula/formula/core/tokenizer.py.

This module contains:
- Part 1: Top-level token classes
- Part 2: Superscript and subscript modifiers
- Part 3: Edge cases
"""

import pytest

from pyformula import ElementType, FormulaElement, parse
from pyformula.formula.core import FormulaTokenizer
from pyformula.options import option_context


def _kinds(elements):
    return [e.kind for e in elements]


def _values(elements):
    return [e.value for e in elements]


# =============================================================================
# Part 1: Top-level token classes
# =============================================================================


class TestTopLevelTokens:
    """Tests for numbers, functions, variables, operators, brackets and symbols."""

    def test_empty_string(self):
        assert parse("") == []

    @pytest.mark.parametrize("formula", ["123.45", "0", "1.2.3", ".", "..5"])
    def test_numbers_are_single_tokens(self, formula):
        result = parse(formula)
        assert len(result) == 1
        assert result[0].kind is ElementType.NUMBER
        assert result[0].value == formula

    def test_variables_are_not_grouped(self):
        result = parse("xyz")
        assert _kinds(result) == [ElementType.VARIABLE] * 3
        assert _values(result) == ["x", "y", "z"]

    def test_operators(self):
        result = parse("+-×÷*/=")
        assert _kinds(result) == [ElementType.OPERATOR] * 7
        assert "".join(_values(result)) == "+-×÷*/="

    def test_brackets(self):
        result = parse("()[]{}")
        assert _kinds(result) == [ElementType.BRACKET] * 6
        assert "".join(_values(result)) == "()[]{}"

    @pytest.mark.parametrize("name", ["sin", "cos", "tan", "log", "ln"])
    def test_functions_before_bracket(self, name):
        result = parse(f"{name}(x)")
        assert result[0] == FormulaElement(ElementType.FUNCTION, name)
        assert result[1] == FormulaElement(ElementType.BRACKET, "(")
        assert _values(result) == [name, "(", "x", ")"]

    def test_function_name_without_bracket_is_variables(self):
        result = parse("sin x")
        assert _values(result) == ["s", "i", "n", " ", "x"]
        assert _kinds(result)[:3] == [ElementType.VARIABLE] * 3
        assert result[3].kind is ElementType.SYMBOL

    def test_function_name_inside_longer_word(self):
        # "a" is scanned first; the function starts at the next position
        result = parse("acos(")
        assert _values(result) == ["a", "cos", "("]
        assert result[1].kind is ElementType.FUNCTION

    def test_negative_number_is_operator_then_number(self):
        result = parse("-3.5")
        assert _kinds(result) == [ElementType.OPERATOR, ElementType.NUMBER]
        assert _values(result) == ["-", "3.5"]

    @pytest.mark.parametrize("char", ["α", "∑", "∞", " ", "!", "±", "π"])
    def test_fallback_symbols(self, char):
        result = parse(char)
        assert result == [FormulaElement(ElementType.SYMBOL, char)]

    def test_complex_formula(self):
        result = parse("E=mc^2")
        assert _values(result) == ["E", "=", "m", "c"]
        assert _kinds(result) == [
            ElementType.VARIABLE,
            ElementType.OPERATOR,
            ElementType.VARIABLE,
            ElementType.VARIABLE,
        ]
        assert result[3].children == [FormulaElement(ElementType.SUPERSCRIPT, "2")]

    def test_tokenizer_and_parse_agree(self):
        formula = "f(x)=sin(x)^2+ln(y_{i})"
        assert FormulaTokenizer.tokenize(formula) == parse(formula)


# =============================================================================
# Part 2: Superscript and subscript modifiers
# =============================================================================


class TestModifiers:
    """Tests for `^` and `_` modifier attachment."""

    def test_single_character_superscript(self):
        result = parse("x^2")
        assert len(result) == 1
        assert result[0].kind is ElementType.VARIABLE
        assert result[0].children == [FormulaElement(ElementType.SUPERSCRIPT, "2")]

    def test_braced_superscript_is_not_parsed(self):
        result = parse("x^{y+z}")
        assert len(result) == 1
        assert result[0].children == [FormulaElement(ElementType.SUPERSCRIPT, "y+z")]

    def test_subscript(self):
        result = parse("a_i")
        assert result[0].children == [FormulaElement(ElementType.SUBSCRIPT, "i")]

    def test_modifiers_accumulate_in_order(self):
        result = parse("x^2_i")
        assert len(result) == 1
        assert result[0].children == [
            FormulaElement(ElementType.SUPERSCRIPT, "2"),
            FormulaElement(ElementType.SUBSCRIPT, "i"),
        ]

    def test_nested_braces(self):
        result = parse("e^{x^{2}}+1")
        assert result[0].children[0].value == "x^{2}"
        assert _values(result) == ["e", "+", "1"]

    def test_unbraced_modifier_takes_one_character(self):
        result = parse("x^23")
        assert result[0].children[0].value == "2"
        assert result[1] == FormulaElement(ElementType.NUMBER, "3")

    def test_modifier_attaches_to_previous_element_of_any_kind(self):
        result = parse("(a+b)^2")
        assert result[-1].value == ")"
        assert result[-1].children[0].value == "2"

    def test_leading_modifier_is_dropped(self):
        result = parse("^2x")
        assert result == [FormulaElement(ElementType.VARIABLE, "x")]

    def test_leading_braced_modifier_is_dropped(self):
        result = parse("_{ab}+c")
        assert _values(result) == ["+", "c"]
        assert all(not e.children for e in result)

    def test_unterminated_group_consumes_to_end(self):
        result = parse("x^{a+b")
        assert len(result) == 1
        assert result[0].children[0].value == "a+b"

    def test_modifier_at_end_of_input_is_empty(self):
        result = parse("x^")
        assert result[0].children == [FormulaElement(ElementType.SUPERSCRIPT, "")]

    def test_modifier_children_have_no_children(self):
        result = parse("x^{a^b}")
        assert result[0].children[0].children == []


# =============================================================================
# Part 3: Edge cases
# =============================================================================


class TestEdgeCases:
    """Identifiers, options and determinism."""

    def test_ids_are_unique(self):
        result = parse("x^2+y_i=z")
        ids = [e.id for e in result] + [c.id for e in result for c in e.children]
        assert len(ids) == len(set(ids))

    def test_reparse_gives_equal_elements_with_new_ids(self):
        first = parse("a+b^2")
        second = parse("a+b^2")
        assert first == second
        assert {e.id for e in first}.isdisjoint(e.id for e in second)

    def test_custom_function_names(self):
        with option_context(function_names=("exp", "sinh", "sin")):
            result = parse("sinh(x)+exp(y)")
        assert result[0] == FormulaElement(ElementType.FUNCTION, "sinh")
        assert FormulaElement(ElementType.FUNCTION, "exp") in result

    def test_default_function_names_restored(self):
        with option_context(function_names=("exp",)):
            pass
        assert parse("sin(")[0].kind is ElementType.FUNCTION
