"""Utilities for axis handling and input validation."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT
from pquad.utils.utility import (
    check_integrand,
    check_sample_points,
    check_spacing,
    normalize_axis,
    pad_shape,
    shape_without_axis,
    slice_along_axis,
)

__all__ = [
    "check_integrand",
    "check_sample_points",
    "check_spacing",
    "normalize_axis",
    "pad_shape",
    "shape_without_axis",
    "slice_along_axis",
]
