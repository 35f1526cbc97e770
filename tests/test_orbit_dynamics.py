"""Tests for the keplerax.orbit_dynamics gravity model."""

import jax
import jax.numpy as jnp
import pytest

from keplerax.constants import G
from keplerax.orbit_dynamics import force
from keplerax.vec3 import magnitude

_M1 = 2e6
_M2 = 8e6
_FORCE_TOL = 5e-6  # N


class TestForce:
    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_single_axis(self, axis):
        """A 200 m separation along one axis gives -0.02669 N on that axis."""
        p1 = jnp.zeros(3).at[axis].set(200.0)
        f = force(p1, jnp.zeros(3), _M1, _M2)

        assert jnp.abs(f[axis] - (-0.02669)) < _FORCE_TOL
        for other in {0, 1, 2} - {axis}:
            assert jnp.abs(f[other]) < 1e-12
        assert jnp.abs(magnitude(f) - 0.02669) < _FORCE_TOL

    def test_all_axes(self):
        f = force(jnp.array([200.0, 200.0, 200.0]), jnp.zeros(3), _M1, _M2)
        assert jnp.allclose(f, jnp.array([-0.00514, -0.00514, -0.00514]), atol=_FORCE_TOL)
        assert jnp.abs(magnitude(f) - 0.00890) < _FORCE_TOL

    def test_inverse_square_magnitude(self):
        p1 = jnp.array([3.0, -4.0, 12.0])
        p2 = jnp.array([-1.0, 2.0, 0.5])
        d = magnitude(p1 - p2)
        f = force(p1, p2, _M1, _M2)
        assert jnp.isclose(magnitude(f), G * _M1 * _M2 / d**2, rtol=1e-12)

    def test_attractive(self):
        """The force on the body at p1 points toward p2."""
        p1 = jnp.array([3.0, -4.0, 12.0])
        p2 = jnp.array([-1.0, 2.0, 0.5])
        f = force(p1, p2, _M1, _M2)
        assert jnp.dot(f, p2 - p1) > 0.0

    def test_symmetry(self):
        """Swapping the positions gives an equal and opposite force."""
        p1 = jnp.array([3.0, -4.0, 12.0])
        p2 = jnp.array([-1.0, 2.0, 0.5])
        f12 = force(p1, p2, _M1, _M2)
        f21 = force(p2, p1, _M1, _M2)
        assert jnp.isclose(magnitude(f12), magnitude(f21), rtol=1e-14)
        assert jnp.allclose(f12, -f21, rtol=1e-14, atol=0.0)

    def test_zero_mass(self):
        f = force(jnp.array([1.0, 0.0, 0.0]), jnp.zeros(3), _M1, 0.0)
        assert jnp.all(f == 0.0)

    def test_coincident_positions_nan(self):
        p = jnp.array([1.0, 2.0, 3.0])
        assert jnp.all(jnp.isnan(force(p, p, _M1, _M2)))


class TestJAXCompatibility:
    def test_jit(self):
        p1 = jnp.array([200.0, 200.0, 200.0])
        p2 = jnp.zeros(3)
        assert jnp.allclose(jax.jit(force)(p1, p2, _M1, _M2), force(p1, p2, _M1, _M2))

    def test_vmap(self):
        p1 = jnp.array([[200.0, 0.0, 0.0], [0.0, 200.0, 0.0], [0.0, 0.0, 200.0]])
        f = jax.vmap(force, in_axes=(0, None, None, None))(p1, jnp.zeros(3), _M1, _M2)
        assert f.shape == (3, 3)
        assert jnp.allclose(jnp.diag(f), -0.02669, atol=_FORCE_TOL)
