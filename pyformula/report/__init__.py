from pyformula.report.tidy import tidy_elements, tidy_validation

__all__ = [
    "tidy_elements",
    "tidy_validation",
]
