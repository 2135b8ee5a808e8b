import logging

import numpy as np
import pytest
import scipy.integrate
from numpy.testing import assert_allclose

from pquad.integrate import trapezoid, trapz, zeros_like_except


def test_trapezoid_unit_spacing():
    y = np.array([1.0, 2.0, 3.0])
    assert np.isclose(trapezoid(y), 4.0)
    assert np.isclose(trapezoid(y, dx=1, axis=0), 4.0)
    assert np.isclose(trapezoid(y, np.array([0.0, 1.0, 2.0]), axis=0), 4.0)
    assert isinstance(trapezoid(y), np.ndarray)


def test_trapezoid_non_unit_spacing():
    y = np.array([1.0, 2.0, 3.0])
    assert np.isclose(trapezoid(y, np.array([0.0, 2.0, 4.0]), axis=0), 8.0)
    assert np.isclose(trapezoid(y, dx=2.0), 8.0)
    # (1 + 2) / 2 * 0.5 + (2 + 3) / 2 * 1.5
    assert np.isclose(trapezoid(y, [0.0, 0.5, 2.0]), 4.5)


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_trapezoid_x_squared(dtype):
    x = np.linspace(0, 1, 5).astype(dtype)
    y = x**2
    val = trapezoid(y, x)
    assert val.dtype == dtype
    assert np.isclose(val, 0.34375)
    assert np.isclose(trapezoid(y, dx=0.25), 0.34375)


@pytest.mark.parametrize("dtype, order", [(np.float64, "F"), (np.float64, "C"), (np.float32, "F"), (np.float32, "C")])
def test_trapezoid_2d(dtype, order):
    x = np.linspace(0, 1, 5)
    y = np.asarray(np.vstack([x**2, x**3]), dtype=dtype, order=order)
    val = trapezoid(y, x)
    assert val.shape == (2,)
    assert val.dtype == dtype
    assert_allclose(val, np.array([0.34375, 0.265625], dtype=dtype), rtol=1e-6)
    assert_allclose(trapezoid(y.T, x, axis=0), val, rtol=1e-6)


def test_trapezoid_int_dtype():
    x = np.array([1, 2, 3, 4, 5])
    y = x**2
    val = trapezoid(y, x)
    assert val.dtype == np.float64
    assert np.isclose(val, 42.0)


def test_trapezoid_complex():
    y = np.array([1 + 1j, 2 + 2j, 3 + 3j])
    assert np.isclose(trapezoid(y), 4.0 + 4.0j)
    assert np.isclose(trapezoid(y, [0.0, 2.0, 4.0]), 8.0 + 8.0j)


def test_trapezoid_float32_large_coordinates():
    # widths of 1.0 survive although 1e8 + 1 is not representable in float32
    val = trapezoid(np.ones(3, dtype=np.float32), 1e8 + np.arange(3.0))
    assert val.dtype == np.float32
    assert np.isclose(val, 2.0)


def test_trapezoid_complex_sample_points():
    y = np.array([1.0, 2.0, 3.0], dtype=np.complex128)
    # (1 + 2) / 2 * 1j + (2 + 3) / 2 * (2 - 1j)
    assert np.isclose(trapezoid(y, [0.0, 1j, 2.0]), 5.0 - 1.0j)
    with pytest.raises(TypeError, match="complex x requires complex y"):
        trapezoid(np.array([1.0, 2.0, 3.0]), [0.0, 1j, 2.0])


def test_trapezoid_single_sample():
    y = np.array([[5.0], [6.0]])
    assert_allclose(trapezoid(y, axis=1), [0.0, 0.0])
    assert_allclose(trapezoid(y, [3.0], axis=1), [0.0, 0.0])


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_trapezoid_uniform_matches_sample_points(axis):
    rng = np.random.default_rng(42)
    y = rng.standard_normal((3, 4, 5))
    h = 0.37
    x = np.arange(y.shape[axis]) * h
    assert_allclose(trapezoid(y, dx=h, axis=axis), trapezoid(y, x, axis=axis), rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_trapezoid_matches_scipy(axis):
    rng = np.random.default_rng(7)
    y = rng.standard_normal((3, 4, 5))
    x = np.sort(rng.uniform(0.0, 2.0, y.shape[axis]))
    assert_allclose(trapezoid(y, x, axis=axis), scipy.integrate.trapezoid(y, x, axis=axis), rtol=1e-12, atol=1e-12)
    assert_allclose(trapezoid(y, dx=0.1, axis=axis), scipy.integrate.trapezoid(y, dx=0.1, axis=axis), rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_trapezoid_full_grid(axis):
    rng = np.random.default_rng(11)
    y = rng.standard_normal((3, 4, 5))
    x = np.cumsum(rng.uniform(0.1, 1.0, y.shape), axis=axis)
    assert_allclose(trapezoid(y, x, axis=axis), scipy.integrate.trapezoid(y, x, axis=axis), rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("axis", [1, 2])
def test_trapezoid_lower_rank_grid(axis):
    rng = np.random.default_rng(3)
    y = rng.standard_normal((3, 4, 5))
    x = np.cumsum(rng.uniform(0.1, 1.0, (4, 5)), axis=axis - 1)
    expected = scipy.integrate.trapezoid(y, np.broadcast_to(x, y.shape), axis=axis)
    assert_allclose(trapezoid(y, x, axis=axis), expected, rtol=1e-12, atol=1e-12)


def test_trapezoid_higher_rank_grid():
    rng = np.random.default_rng(13)
    y = rng.standard_normal((3, 4))
    x = np.cumsum(rng.uniform(0.1, 1.0, (3, 1, 4)), axis=0)
    val = trapezoid(y, x, axis=0)
    assert val.shape == (2, 4)
    assert_allclose(val, np.sum((y[:-1] + y[1:]) * np.diff(x, axis=0), axis=0) / 2.0, rtol=1e-12)
    with pytest.raises(ValueError, match="cannot be broadcast"):
        trapezoid(y, np.ones((2, 3, 4)), axis=1)


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_trapezoid_negative_axis(axis):
    rng = np.random.default_rng(5)
    y = rng.standard_normal((3, 4, 5))
    x = np.linspace(0.0, 1.0, y.shape[axis])
    assert_allclose(trapezoid(y, x, axis=axis), trapezoid(y, x, axis=axis - y.ndim))
    assert_allclose(trapezoid(y, dx=0.5, axis=axis), trapezoid(y, dx=0.5, axis=axis - y.ndim))


def test_trapezoid_empty_axis():
    y = np.ones((2, 0, 3))
    val = trapezoid(y, axis=1)
    assert val.shape == (2, 3)
    assert_allclose(val, np.zeros((2, 3)))
    val = trapezoid(y, np.array([]), axis=1)
    assert val.shape == (2, 3)
    assert_allclose(val, np.zeros((2, 3)))
    assert trapezoid(np.array([], dtype=np.float32)).dtype == np.float32
    assert_allclose(zeros_like_except(np.ones((4, 0)), 1), np.zeros(4))


def test_trapezoid_empty_axis_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="pquad.integrate.trapezoid"):
        trapezoid(np.ones((2, 0)), axis=1)
    assert "is empty, returning zeros" in caplog.text


def test_trapz_alias():
    y = np.array([1.0, 2.0, 3.0])
    assert np.isclose(trapz(y), 4.0)
    assert np.isclose(trapz(y, [0.0, 2.0, 4.0]), 8.0)
    assert np.isclose(trapz(y, dx=2.0, axis=0), 8.0)


def test_trapezoid_exceptions():
    x = np.linspace(0, 1, 5)
    # shape mismatch
    with pytest.raises(ValueError, match="one x value for each sample point"):
        trapezoid(np.ones(4), x)
    with pytest.raises(ValueError, match="one x value for each sample point"):
        trapezoid(np.ones((2, 4)), x)
    with pytest.raises(ValueError, match="cannot be broadcast"):
        trapezoid(np.ones((3, 4)), np.ones((2, 4)), axis=1)
    with pytest.raises(ValueError, match="at least 1-dimensional"):
        trapezoid(np.ones(4), 1.0)
    with pytest.raises(ValueError, match="Only one of x or dx"):
        trapezoid(np.ones(5), x, dx=0.25)
    # axis
    with pytest.raises(IndexError):
        trapezoid(np.ones((2, 5)), x, axis=2)
    with pytest.raises(IndexError):
        trapezoid(np.ones((2, 5)), axis=-3)
    with pytest.raises(IndexError):
        trapezoid(np.float64(1.0))
    with pytest.raises(TypeError):
        trapezoid(np.ones(5), axis=0.0)


def test_trapezoid_type_exceptions():
    with pytest.raises(TypeError, match="boolean"):
        trapezoid(np.array([True, False, True]))
    with pytest.raises(TypeError, match="boolean"):
        trapezoid(np.array([1.0, 2.0, 3.0]), np.array([True, False, True]))
    with pytest.raises(TypeError, match="boolean"):
        trapezoid(np.ones((2, 0), dtype=bool), axis=1)
    with pytest.raises(TypeError):
        trapezoid(np.array([1.0, 2.0, 3.0]), dx=1 + 1j)
    with pytest.raises(TypeError):
        trapezoid(np.array([1.0, 2.0, 3.0]), dx=True)
