from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field

from pyformula.literals import UnknownRuleOptions, _validate_literal_argument

__all__ = ["get_option", "option_context", "options", "set_option"]


def _default_messages() -> dict[str, str]:
    return {
        "brackets-match": "Brackets do not match",
        "operators-surrounded": "Operators must be surrounded by operands",
        "non-empty": "Formula cannot be empty",
        "has-equals": "Formula must contain an equals sign",
        "no-consecutive-operands": (
            "Operands cannot appear consecutively, join them with an operator"
        ),
        "custom": "Custom validation failed",
    }


def _check_function_names(names) -> tuple[str, ...]:
    if isinstance(names, str):
        raise TypeError(
            "function_names must be a collection of names, not a single string. "
            f"Use function_names=(\"{names}\",) for a single function."
        )
    names = tuple(names)
    for name in names:
        if not (isinstance(name, str) and name.isascii() and name.isalpha()):
            raise ValueError(
                f"Invalid function name {name!r}. "
                "Expecting a non-empty string of ASCII letters."
            )
    return names


@dataclass
class _Options:
    function_names: tuple[str, ...] = ("sin", "cos", "tan", "log", "ln")
    operators: str = "+-×÷*/="
    brackets: str = "()[]{}"
    unknown_rule: UnknownRuleOptions = "raise"
    messages: Mapping[str, str] = field(default_factory=_default_messages)

    # helpers ------------
    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise KeyError(f"Unknown option '{k}'")
            if k == "unknown_rule":
                _validate_literal_argument(v, UnknownRuleOptions)
            if k == "function_names":
                v = _check_function_names(v)
            if k == "brackets" and (not isinstance(v, str) or len(v) % 2):
                raise ValueError(
                    "brackets must be a string of opener/closer pairs, e.g. '()[]'."
                )
            if k == "messages":
                v = {**_default_messages(), **v}
            setattr(self, k, v)

    def to_dict(self):
        return asdict(self)


options = _Options()


def set_option(**kwargs):
    """Globally set default options for parsing and validation."""
    options.update(**kwargs)


def get_option(name: str):
    return getattr(options, name)


@contextmanager
def option_context(**kwargs):
    "Temporarily override options inside a `with` block."
    old = options.to_dict()
    try:
        options.update(**kwargs)
        yield
    finally:
        options.__dict__.update(old)
