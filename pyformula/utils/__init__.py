from pyformula.utils._exceptions import find_stack_level
from pyformula.utils.dev_utils import docstring_from

__all__ = [
    "docstring_from",
    "find_stack_level",
]
