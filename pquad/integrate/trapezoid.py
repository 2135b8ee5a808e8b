"""Definite and cumulative integrals with the trapezoidal rule."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import logging

import numpy as np

from pquad.integrate.spacing import UniformSpacing, resolve_spacing
from pquad.utils.utility import check_integrand, normalize_axis, shape_without_axis, slice_along_axis

logger = logging.getLogger(__name__)


def _trapezoid_sample(y: np.ndarray, widths: np.ndarray, axis: int) -> np.ndarray:
    left = slice_along_axis(y, axis, None, -1)
    right = slice_along_axis(y, axis, 1, None)
    # widths broadcasts against (left + right) here
    return np.sum((left + right) * widths, axis=axis) / 2.0


def _trapezoid_uniform(y: np.ndarray, dx: float, axis: int) -> np.ndarray:
    # with a constant dx the rule simplifies to dx * (sum(y) - (y_first + y_last) / 2)
    first = np.take(y, 0, axis=axis)
    last = np.take(y, y.shape[axis] - 1, axis=axis)
    return (np.sum(y, axis=axis) - (first + last) * 0.5) * dx


def _cumulative_trapezoid_sample(y: np.ndarray, widths: np.ndarray, axis: int) -> np.ndarray:
    left = slice_along_axis(y, axis, None, -1)
    right = slice_along_axis(y, axis, 1, None)
    return np.cumsum((left + right) * widths, axis=axis) / 2.0


def _cumulative_trapezoid_uniform(y: np.ndarray, dx: float, axis: int) -> np.ndarray:
    left = slice_along_axis(y, axis, None, -1)
    right = slice_along_axis(y, axis, 1, None)
    return np.cumsum(dx / 2.0 * (left + right), axis=axis)


def zeros_like_except(y: np.ndarray, axis: int) -> np.ndarray:
    """Zero-filled array shaped like `y` with `axis` removed, in the dtype of `y`."""
    return np.zeros(shape_without_axis(y.shape, axis), dtype=y.dtype)


def trapezoid(y, x=None, *, dx=None, axis: int = -1) -> np.ndarray:
    """
    Integrate sampled values along an axis with the trapezoidal rule.

    Parameters
    ----------
    y : array_like
        Function values. Integer values are promoted to float64.
    x : array_like, optional
        Sample coordinates. Either 1D with one value per sample along `axis`,
        or an array that broadcasts against `y` (arrays with fewer dimensions
        than `y` are left-padded with ones).
    dx : float, optional
        Uniform spacing between samples, used when `x` is None. Defaults to 1.
    axis : int, default=-1
        Axis to integrate along.

    Returns
    -------
    np.ndarray
        Definite integral with `axis` removed, in the dtype of `y`. A
        zero-length axis gives zeros.

    Raises
    ------
    TypeError
        If `y` or `x` is boolean or non-numeric, `x` is complex while `y` is
        real, `dx` is not a real number, or `axis` is not an integer.
    ValueError
        If both `x` and `dx` are given or `x` does not match the shape of `y`.
    IndexError
        If `axis` is out of bounds.

    Mathematical definition
    -----------------------
    For samples ``y_1, ..., y_n`` separated by widths ``dx_1, ..., dx_{n-1}``:

    .. math::
        T(y) = \\sum_{i=1}^{n-1} \\frac{dx_i}{2}\\,\\big(y_i + y_{i+1}\\big).

    With a constant ``dx`` this is evaluated as
    ``dx * (sum(y) - (y_1 + y_n) / 2)``.

    See Also
    --------
    cumulative_trapezoid : Running integral along an axis.
    """
    y = check_integrand(y)
    axis = normalize_axis(axis, y.ndim)
    spacing = resolve_spacing(y, axis, x=x, dx=dx)

    # the integral over no samples is zero
    if y.shape[axis] == 0:
        logger.debug("Axis %d of y with shape %s is empty, returning zeros.", axis, y.shape)
        return zeros_like_except(y, axis)

    if isinstance(spacing, UniformSpacing):
        return np.asarray(_trapezoid_uniform(y, spacing.dx, axis))
    # widths are taken in the promoted dtype, only the integral is cast back to y.dtype
    return np.asarray(_trapezoid_sample(y, spacing.widths(y.dtype), axis)).astype(y.dtype, copy=False)


def cumulative_trapezoid(y, x=None, *, dx=None, axis: int = -1) -> np.ndarray:
    """
    Running integral of sampled values along an axis with the trapezoidal rule.

    Parameters
    ----------
    y : array_like
        Function values. Integer values are promoted to float64.
    x : array_like, optional
        Sample coordinates, see :func:`trapezoid`.
    dx : float, optional
        Uniform spacing between samples, used when `x` is None. Defaults to 1.
    axis : int, default=-1
        Axis to integrate along.

    Returns
    -------
    np.ndarray
        Same shape as `y` except one fewer entry along `axis`. Entry ``k``
        along `axis` is the integral over the first ``k + 2`` samples, so the
        last entry equals ``trapezoid(y, x, dx=dx, axis=axis)``.

    Raises
    ------
    TypeError
        If `y` or `x` is boolean or non-numeric, `x` is complex while `y` is
        real, `dx` is not a real number, or `axis` is not an integer.
    ValueError
        If both `x` and `dx` are given or `x` does not match the shape of `y`.
    IndexError
        If `axis` is out of bounds.

    Notes
    -----
    Unlike :func:`trapezoid` there is no special case for a zero-length
    axis; the result then simply has length 0 along `axis`.
    """
    y = check_integrand(y)
    axis = normalize_axis(axis, y.ndim)
    spacing = resolve_spacing(y, axis, x=x, dx=dx)

    if isinstance(spacing, UniformSpacing):
        return _cumulative_trapezoid_uniform(y, spacing.dx, axis)
    return _cumulative_trapezoid_sample(y, spacing.widths(y.dtype), axis).astype(y.dtype, copy=False)


def trapz(y, x=None, *, dx=None, axis: int = -1) -> np.ndarray:
    """Alias of :func:`trapezoid`."""
    return trapezoid(y, x, dx=dx, axis=axis)
