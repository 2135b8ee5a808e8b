"""Spacing of sample points along the integration axis.

A spacing is either a single step shared by every interval
(:class:`UniformSpacing`) or explicit sample coordinates
(:class:`SampleSpacing`) aligned so that they broadcast against the data.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from pquad.utils.utility import check_sample_points, check_spacing, pad_shape


@dataclass(frozen=True)
class UniformSpacing:
    """Equal distance `dx` between every pair of consecutive samples."""

    dx: float


@dataclass(frozen=True)
class SampleSpacing:
    """Explicit sample coordinates.

    Attributes
    ----------
    x : np.ndarray
        Sample coordinates viewed so that they have at least as many
        dimensions as the data and broadcast against it.
    axis : int
        Normalized integration axis.
    """

    x: np.ndarray
    axis: int

    def widths(self, dtype: np.dtype) -> np.ndarray:
        """Width of every interval, one fewer entry than `x` along `axis`.

        The difference is taken in the dtype of `x`, then promoted with
        `dtype`, the dtype of the function values.
        """
        widths = np.diff(self.x, axis=self.axis)
        return widths.astype(np.result_type(widths.dtype, dtype), copy=False)


Spacing = Union[UniformSpacing, SampleSpacing]


def align_sample_points(x: np.ndarray, y_shape: Tuple[int, ...], axis: int) -> np.ndarray:
    """
    View sample coordinates so that they broadcast against data of shape `y_shape`.

    Parameters
    ----------
    x : np.ndarray
        Sample coordinates, at least 1D.
    y_shape : tuple of int
        Shape of the function values.
    axis : int
        Normalized integration axis of the function values.

    Returns
    -------
    np.ndarray
        A view of `x`:

        - 1D `x` becomes ``(1, ..., n, ..., 1)`` with ``n`` placed at `axis`;
        - `x` with fewer dimensions than the data is left-padded with ones;
        - otherwise `x` is returned as-is.

    Raises
    ------
    ValueError
        If a 1D `x` does not have one coordinate per sample point, or if the
        interval widths of `x` cannot broadcast against the data intervals.
    """
    ndim = len(y_shape)
    if x.ndim == 1:
        if x.shape[0] != y_shape[axis]:
            raise ValueError(
                f"There must be one x value for each sample point: x has {x.shape[0]} values "
                f"but y has {y_shape[axis]} samples along axis {axis}."
            )
        new_shape = [1] * ndim
        new_shape[axis] = x.shape[0]
        x_viewed = x.reshape(new_shape)
    elif x.ndim < ndim:
        x_viewed = x.reshape(pad_shape(x.shape, ndim))
    else:
        x_viewed = x

    widths_shape = list(x_viewed.shape)
    widths_shape[axis] = max(widths_shape[axis] - 1, 0)
    intervals_shape = list(y_shape)
    intervals_shape[axis] = max(intervals_shape[axis] - 1, 0)
    try:
        np.broadcast_shapes(tuple(intervals_shape), tuple(widths_shape))
    except ValueError as e:
        raise ValueError(f"x of shape {x.shape} cannot be broadcast against y of shape {tuple(y_shape)} along axis {axis}.") from e
    return x_viewed


def resolve_spacing(y: np.ndarray, axis: int, x=None, dx=None) -> Spacing:
    """
    Select and validate the spacing for integrating `y` along `axis`.

    Parameters
    ----------
    y : np.ndarray
        Validated function values.
    axis : int
        Normalized integration axis.
    x : array_like, optional
        Sample coordinates. Selects :class:`SampleSpacing`.
    dx : real number, optional
        Uniform step. Selects :class:`UniformSpacing`. When neither `x` nor
        `dx` is given, a unit step is used.

    Returns
    -------
    UniformSpacing or SampleSpacing

    Raises
    ------
    ValueError
        If both `x` and `dx` are given, or `x` does not fit the shape of `y`.
    TypeError
        If `dx` is not a real number, `x` has a boolean or non-numeric dtype,
        or `x` is complex while `y` is real.
    """
    if x is not None and dx is not None:
        raise ValueError("Only one of x or dx can be given.")
    if x is None:
        return UniformSpacing(check_spacing(1.0 if dx is None else dx))
    x = check_sample_points(x, y.dtype)
    return SampleSpacing(align_sample_points(x, y.shape, axis), axis)
