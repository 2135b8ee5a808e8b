"""Numerical integration of sampled data with the trapezoidal rule."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from pquad.integrate.spacing import SampleSpacing, UniformSpacing, align_sample_points, resolve_spacing
from pquad.integrate.trapezoid import cumulative_trapezoid, trapezoid, trapz, zeros_like_except
from pquad.integrate.trapezoid_transformer import TrapezoidTransformer

__all__ = [
    "SampleSpacing",
    "TrapezoidTransformer",
    "UniformSpacing",
    "align_sample_points",
    "cumulative_trapezoid",
    "resolve_spacing",
    "trapezoid",
    "trapz",
    "zeros_like_except",
]
