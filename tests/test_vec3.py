"""Tests for the keplerax.vec3 primitives."""

import jax
import jax.numpy as jnp

from keplerax.vec3 import cross, divide, dot, magnitude, scale, subtract


class TestArithmetic:
    def test_subtract(self):
        assert jnp.array_equal(subtract([3.0, 2.0, 1.0], [1.0, 1.0, 1.0]), jnp.array([2.0, 1.0, 0.0]))

    def test_subtract_does_not_mutate(self):
        a = jnp.array([3.0, 2.0, 1.0])
        subtract(a, jnp.ones(3))
        assert jnp.array_equal(a, jnp.array([3.0, 2.0, 1.0]))

    def test_scale(self):
        assert jnp.array_equal(scale([1.0, -2.0, 3.0], 2.0), jnp.array([2.0, -4.0, 6.0]))

    def test_divide(self):
        assert jnp.array_equal(divide([2.0, -4.0, 6.0], 2.0), jnp.array([1.0, -2.0, 3.0]))

    def test_divide_by_zero_follows_ieee(self):
        out = divide([1.0, -1.0, 0.0], 0.0)
        assert out[0] == jnp.inf
        assert out[1] == -jnp.inf
        assert jnp.isnan(out[2])


class TestProducts:
    def test_cross_unit_axes(self):
        x = jnp.array([1.0, 0.0, 0.0])
        y = jnp.array([0.0, 1.0, 0.0])
        z = jnp.array([0.0, 0.0, 1.0])
        assert jnp.array_equal(cross(x, y), z)
        assert jnp.array_equal(cross(y, z), x)
        assert jnp.array_equal(cross(z, x), y)

    def test_cross_anticommutative(self):
        a = jnp.array([1.5, -2.0, 0.25])
        b = jnp.array([-0.5, 4.0, 3.0])
        assert jnp.allclose(cross(a, b), -cross(b, a))

    def test_cross_matches_numpy(self):
        a = jnp.array([1.5, -2.0, 0.25])
        b = jnp.array([-0.5, 4.0, 3.0])
        assert jnp.allclose(cross(a, b), jnp.cross(a, b), atol=1e-14)

    def test_cross_orthogonal_to_inputs(self):
        a = jnp.array([1.5, -2.0, 0.25])
        b = jnp.array([-0.5, 4.0, 3.0])
        c = cross(a, b)
        assert jnp.abs(dot(c, a)) < 1e-12
        assert jnp.abs(dot(c, b)) < 1e-12

    def test_dot(self):
        assert dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == 12.0

    def test_magnitude(self):
        assert magnitude([3.0, 4.0, 0.0]) == 5.0

    def test_magnitude_zero(self):
        assert magnitude(jnp.zeros(3)) == 0.0

    def test_magnitude_non_negative(self):
        assert magnitude([-3.0, -4.0, -12.0]) == 13.0


class TestJAXCompatibility:
    def test_jit_cross(self):
        a = jnp.array([1.5, -2.0, 0.25])
        b = jnp.array([-0.5, 4.0, 3.0])
        assert jnp.allclose(jax.jit(cross)(a, b), cross(a, b))

    def test_vmap_magnitude(self):
        vs = jnp.array([[3.0, 4.0, 0.0], [0.0, 0.0, 2.0], [1.0, 2.0, 2.0]])
        assert jnp.allclose(jax.vmap(magnitude)(vs), jnp.array([5.0, 2.0, 3.0]))
