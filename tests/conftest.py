import jax.numpy as jnp
import pytest

from skyframes.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that change the dtype (e.g. test_config.py) would otherwise leak
    their setting into whichever test runs next in the same process.
    """
    set_dtype(jnp.float64)
