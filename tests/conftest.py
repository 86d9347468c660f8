# tests/conftest.py
import warnings
import pytest

@pytest.fixture(autouse=True)
def range_warnings_always():
    # Make sure repeated out-of-range calls are reported in every test
    with warnings.catch_warnings():
        warnings.simplefilter("always", category=UserWarning)
        yield
