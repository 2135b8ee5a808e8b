"""Utility functions for axis bookkeeping and input validation of sampled data"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT
import numbers
from typing import Optional, Sequence, Tuple

import numpy as np
from sklearn.utils.validation import check_scalar


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Map a possibly negative axis index onto ``[0, ndim)``.

    Parameters
    ----------
    axis : int
        Axis index. Negative values count from the last dimension.
    ndim : int
        Number of dimensions of the array the axis refers to.

    Returns
    -------
    int
        The equivalent non-negative axis index.

    Raises
    ------
    TypeError
        If `axis` is not an integer (booleans are rejected as well).
    IndexError
        If `axis` does not satisfy ``-ndim <= axis < ndim``.
    """
    if isinstance(axis, (bool, np.bool_)) or not isinstance(axis, numbers.Integral):
        raise TypeError(f"axis must be an integer, got {type(axis).__name__}.")
    if not (-ndim <= axis < ndim):
        raise IndexError(f"axis {axis} is out of bounds for array of dimension {ndim}.")
    return int(axis) + ndim if axis < 0 else int(axis)


def pad_shape(shape: Sequence[int], ndim: int) -> Tuple[int, ...]:
    """
    Left-pad a shape with ones so that it has at least `ndim` dimensions.

    The existing lengths keep their trailing positions, e.g. ``(5, 5, 5)``
    padded to 6 dimensions becomes ``(1, 1, 1, 5, 5, 5)``. Shapes that already
    have `ndim` or more dimensions are returned unchanged.

    Parameters
    ----------
    shape : sequence of int
        Current shape.
    ndim : int
        Target number of dimensions.

    Returns
    -------
    tuple of int
        Shape with ``max(ndim, len(shape))`` entries.
    """
    shape = tuple(int(s) for s in shape)
    return (1,) * max(ndim - len(shape), 0) + shape


def shape_without_axis(shape: Sequence[int], axis: int) -> Tuple[int, ...]:
    """Return `shape` with the entry at `axis` removed."""
    shape = tuple(shape)
    return shape[:axis] + shape[axis + 1 :]


def slice_along_axis(a: np.ndarray, axis: int, start: Optional[int] = None, stop: Optional[int] = None) -> np.ndarray:
    """Return the view ``a[..., start:stop, ...]`` where the slice sits at `axis`."""
    return a[(slice(None),) * axis + (slice(start, stop),)]


def check_integrand(y) -> np.ndarray:
    """
    Validate sampled function values.

    Parameters
    ----------
    y : array_like
        Function values of any shape.

    Returns
    -------
    np.ndarray
        `y` as an array. Integer input is promoted to float64; floating and
        complex input keep their dtype.

    Raises
    ------
    TypeError
        If `y` has a boolean or non-numeric dtype.
    """
    y = np.asarray(y)
    if y.dtype == np.bool_:
        raise TypeError("y must not have a boolean dtype; bool inputs are not supported.")
    if not np.issubdtype(y.dtype, np.number):
        raise TypeError(f"y must have a numeric dtype, got {y.dtype}.")
    if np.issubdtype(y.dtype, np.integer):
        y = y.astype(np.float64)
    return y


def check_sample_points(x, dtype: np.dtype) -> np.ndarray:
    """
    Validate sample coordinates against the dtype of the data.

    Parameters
    ----------
    x : array_like
        Sample coordinates, at least 1D.
    dtype : np.dtype
        Dtype of the function values `x` belongs to.

    Returns
    -------
    np.ndarray
        `x` as an array in its own dtype. Interval widths are taken in this
        dtype so that large coordinates keep their precision.

    Raises
    ------
    TypeError
        If `x` has a boolean or non-numeric dtype, or `x` is complex while
        `dtype` is real.
    ValueError
        If `x` is a 0-d array or scalar.
    """
    x = np.asarray(x)
    if x.dtype == np.bool_:
        raise TypeError("x must not have a boolean dtype; bool inputs are not supported.")
    if not np.issubdtype(x.dtype, np.number):
        raise TypeError(f"x must have a numeric dtype, got {x.dtype}.")
    if np.issubdtype(x.dtype, np.complexfloating) and not np.issubdtype(dtype, np.complexfloating):
        raise TypeError(f"x has complex dtype {x.dtype} but y is real ({np.dtype(dtype)}); complex x requires complex y.")
    if x.ndim == 0:
        raise ValueError("x must be at least 1-dimensional; pass dx for a uniform spacing.")
    return x


def check_spacing(dx) -> float:
    """
    Validate a uniform sample spacing.

    Parameters
    ----------
    dx : real number
        Distance between consecutive sample points.

    Returns
    -------
    float
        `dx` as a Python float so that it does not change the result dtype.

    Raises
    ------
    TypeError
        If `dx` is boolean, complex or otherwise not a real number.
    """
    if isinstance(dx, (bool, np.bool_)):
        raise TypeError("dx must be a real number, got bool.")
    check_scalar(dx, "dx", numbers.Real)
    return float(dx)
