import numpy as np
import pytest
from numba import njit

from sde_bench.integrator import get_integrator, sde_euler, sde_euler_jit
from sde_bench.noise import brownian_increments, brownian_path
from sde_bench.options import sde_set


class TestNoise:
    def test_seeded_increments_are_reproducible(self, short_grid):
        opts = sde_set(RandSeed=3)
        d1 = brownian_increments(opts, short_grid, 4)
        d2 = brownian_increments(opts, short_grid, 4)
        assert d1.shape == (50, 4)
        np.testing.assert_array_equal(d1, d2)

    def test_increment_scale(self):
        t = np.linspace(0.0, 1.0, 101)
        dW = brownian_increments(sde_set(RandSeed=0), t, 20_000)
        np.testing.assert_allclose(dW.var(), 0.01, rtol=0.02)

    def test_antithetic_columns(self):
        t = np.linspace(0.0, 1.0, 11)
        dW = brownian_increments(sde_set(RandSeed=0, Antithetic="yes"), t, 5)
        np.testing.assert_array_equal(dW[:, 3:5], -dW[:, 0:2])

    def test_callable_rand_fun(self):
        t = np.linspace(0.0, 1.0, 5)
        dW = brownian_increments(sde_set(RandFUN=lambda m, n: np.ones((m, n))), t, 2)
        np.testing.assert_allclose(dW, 0.5)

    def test_callable_rand_fun_bad_shape(self):
        t = np.linspace(0.0, 1.0, 5)
        with pytest.raises(ValueError):
            brownian_increments(sde_set(RandFUN=lambda m, n: np.ones(m)), t, 2)

    def test_pinned_path(self):
        W = np.array([[0.0, 0.1], [0.3, -0.2], [0.4, 0.0]])
        opts = sde_set(RandFUN=W)
        np.testing.assert_array_equal(brownian_path(opts, [0.0, 0.5, 1.0], 2), W)
        np.testing.assert_allclose(brownian_increments(opts, [0.0, 0.5, 1.0], 2), np.diff(W, axis=0))

    def test_pinned_path_wrong_shape(self):
        opts = sde_set(RandFUN=np.zeros((3, 2)))
        with pytest.raises(ValueError):
            brownian_path(opts, [0.0, 1.0], 2)

    def test_path_starts_at_zero(self, short_grid):
        W = brownian_path(sde_set(RandSeed=1), short_grid, 3)
        assert W.shape == (51, 3)
        np.testing.assert_array_equal(W[0], 0.0)


class TestSdeEuler:
    def test_shapes(self, linear, short_grid):
        Y, W = sde_euler(*linear, short_grid, np.ones(7), sde_set(RandSeed=1))
        assert Y.shape == (51, 7)
        assert W.shape == (51, 7)
        np.testing.assert_array_equal(Y[0], 1.0)
        np.testing.assert_array_equal(W[0], 0.0)

    def test_deterministic_with_seed(self, linear, short_grid):
        opts = sde_set(RandSeed=11)
        Y1, W1 = sde_euler(*linear, short_grid, np.ones(5), opts)
        Y2, W2 = sde_euler(*linear, short_grid, np.ones(5), opts)
        np.testing.assert_array_equal(Y1, Y2)
        np.testing.assert_array_equal(W1, W2)

    def test_ito_single_step(self, linear):
        W = np.array([[0.0], [0.3]])
        Y, _ = sde_euler(*linear, [0.0, 0.1], [2.0], sde_set(SDEType="Ito", RandFUN=W))
        np.testing.assert_allclose(Y[1], 2.0 + 0.1 * 2.0 + 2.0 * 0.3)

    def test_stratonovich_single_step(self, linear):
        W = np.array([[0.0], [0.3]])
        Y, _ = sde_euler(*linear, [0.0, 0.1], [2.0], sde_set(RandFUN=W))
        ybar = 2.0 + 2.0 * 0.3
        np.testing.assert_allclose(Y[1], 2.0 + 0.1 * 2.0 + 0.5 * (2.0 + ybar) * 0.3)

    def test_zero_noise_is_euler(self, short_grid):
        def f(t, y):
            return -y

        def g(t, y):
            return np.zeros_like(y)

        Y, _ = sde_euler(f, g, short_grid, [1.0], sde_set(RandSeed=0))
        np.testing.assert_allclose(Y[-1, 0], (1.0 - 0.02) ** 50)

    def test_const_coefficients_fast_path(self, short_grid):
        def f(t, y):
            return np.full_like(y, 0.5)

        def g(t, y):
            return np.full_like(y, 0.2)

        opts = sde_set(RandSeed=4)
        Y_gen, _ = sde_euler(f, g, short_grid, np.zeros(3), opts)
        Y_const, _ = sde_euler(f, g, short_grid, np.zeros(3), sde_set(opts, ConstFFUN="yes", ConstGFUN="yes"))
        np.testing.assert_allclose(Y_const, Y_gen)

    def test_returned_w_drives_path(self, linear, short_grid):
        opts = sde_set(RandSeed=2, SDEType="Ito")
        Y, W = sde_euler(*linear, short_grid, np.ones(3), opts)
        Y_again, _ = sde_euler(*linear, short_grid, np.ones(3), sde_set(opts, RandFUN=W))
        np.testing.assert_allclose(Y_again, Y, rtol=1e-12)

    def test_rejects_non_diagonal(self, linear, short_grid):
        with pytest.raises(ValueError, match="diagonal"):
            sde_euler(*linear, short_grid, np.ones(2), sde_set(DiagonalNoise="no"))

    def test_rejects_bad_grid(self, linear):
        with pytest.raises(ValueError):
            sde_euler(*linear, [0.0], np.ones(2))
        with pytest.raises(ValueError):
            sde_euler(*linear, [0.0, 0.2, 0.1], np.ones(2))

    def test_drift_shape_mismatch(self, short_grid):
        def f(t, y):
            return np.zeros(y.size + 1)

        def g(t, y):
            return y

        with pytest.raises(ValueError, match="Drift"):
            sde_euler(f, g, short_grid, np.ones(2))

    def test_integer_drift_rejected(self, short_grid):
        def f(t, y):
            return np.zeros(y.size, dtype=int)

        def g(t, y):
            return y

        with pytest.raises(TypeError):
            sde_euler(f, g, short_grid, np.ones(2))


class TestSdeEulerJit:
    @pytest.mark.parametrize("sde_type", ["Stratonovich", "Ito"])
    def test_matches_python_integrator(self, short_grid, sde_type):
        @njit
        def f(t, y):
            return 0.5 * y

        @njit
        def g(t, y):
            return 0.8 * y

        opts = sde_set(RandSeed=9, SDEType=sde_type)
        Y_jit, W_jit = sde_euler_jit(f, g, short_grid, np.ones(6), opts)
        Y_py, W_py = sde_euler(f, g, short_grid, np.ones(6), opts)
        np.testing.assert_array_equal(W_jit, W_py)
        np.testing.assert_allclose(Y_jit, Y_py, rtol=1e-12)


def test_registry():
    assert get_integrator("euler") == (sde_euler, False)
    assert get_integrator("euler_jit") == (sde_euler_jit, True)
    with pytest.raises(ValueError, match="Unknown integrator"):
        get_integrator("milstein")
