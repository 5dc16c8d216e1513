import jax.numpy as jnp
import pytest

from skyframes.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch dtype (e.g. test_config.py) restore float64 so later
    tests keep double precision.
    """
    set_dtype(jnp.float64)
    yield
    set_dtype(jnp.float64)
