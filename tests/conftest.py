"""Root conftest - shared test configuration."""

import os

import pytest

from hello.core.culture import Culture, reset_current_culture, set_current_culture

# Keep test output quiet and independent of a developer's .env
os.environ.setdefault("HELLO_LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def invariant_culture():
    """Pin ordinal collation so ordering assertions do not depend on the host locale."""
    token = set_current_culture(Culture.invariant())
    yield Culture.invariant()
    reset_current_culture(token)
