"Pytest configuration for pyformula tests."

import pytest

from pyformula.options import options


@pytest.fixture(autouse=True)
def _restore_options():
    # tests may call set_option; keep the global defaults isolated per test
    old = options.to_dict()
    yield
    options.__dict__.update(old)
