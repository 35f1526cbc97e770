import jax.numpy as jnp
import pytest

from keplerax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    With pytest-xdist, each worker process imports keplerax (float64 by
    default), but a test that switches to float32 must not leak into the
    next one.  test_config.py has its own autouse fixture on top of this.
    """
    set_dtype(jnp.float64)
