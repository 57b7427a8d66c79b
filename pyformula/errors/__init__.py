class UnknownValidationRuleError(Exception):  # noqa: D101
    pass


class InvalidValidationRuleError(Exception):  # noqa: D101
    pass


__all__ = [
    "InvalidValidationRuleError",
    "UnknownValidationRuleError",
]
