import random
import string

import pytest

import pyformula as pf
from pyformula import ElementType


def test_api():
    elements = pf.parse("E=mc^2")
    text = pf.stringify(elements)
    result = pf.validate(
        text,
        elements,
        [pf.ValidationRule(t) for t in ("non-empty", "has-equals", "brackets-match")],
    )

    assert text == "E=mc^{2}"
    assert result.valid
    assert pf.formula.FormulaParser.parse("E=mc^2") == elements
    pf.report.tidy_elements(elements)
    pf.FormulaDocument(text).tidy()


@pytest.mark.parametrize("seed", range(5))
def test_digit_strings_are_one_number(seed):
    rng = random.Random(seed)
    formula = "".join(rng.choice(string.digits + ".") for _ in range(rng.randint(1, 12)))
    elements = pf.parse(formula)

    assert len(elements) == 1
    assert elements[0].kind is ElementType.NUMBER
    assert elements[0].value == formula


@pytest.mark.parametrize("seed", range(5))
def test_letter_strings_are_variables(seed):
    rng = random.Random(seed)
    formula = "".join(rng.choice(string.ascii_letters) for _ in range(rng.randint(1, 12)))
    elements = pf.parse(formula)

    assert [e.kind for e in elements] == [ElementType.VARIABLE] * len(formula)
    assert "".join(e.value for e in elements) == formula


@pytest.mark.parametrize("seed", range(20))
def test_random_round_trip(seed):
    rng = random.Random(seed)
    alphabet = "ab1.+-=()[]{}^_ sin(α"
    formula = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))

    tree = pf.parse(formula)
    once = pf.stringify(tree)

    assert pf.parse(once) == tree
    assert pf.stringify(pf.parse(once)) == once
