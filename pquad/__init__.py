"""Configure global settings and get information about the working environment."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

# Python Quadrature (pquad)
# =========================
#
# pquad is a Python package for integrating sampled data stored in multi-dimensional arrays.
#
# It computes definite and cumulative integrals with the trapezoidal rule along any axis, with either a
# uniform spacing or explicit sample coordinates that broadcast against the data.
# A scikit-learn transformer is provided so that curves observed on a common grid can be integrated
# inside machine learning pipelines.

import importlib as _importlib
import logging

logger = logging.getLogger(__name__)


# PEP0440 compatible formatted version, see:
# https://www.python.org/dev/peps/pep-0440/
#
# Generic release markers:
#   X.Y.0   # For first release after an increment in Y
#   X.Y.Z   # For bugfix releases
#
# Admissible pre-release markers:
#   X.Y.ZaN   # Alpha release
#   X.Y.ZbN   # Beta release
#   X.Y.ZrcN  # Release Candidate
#   X.Y.Z     # Final release
#
# Dev branch marker is: 'X.Y.dev' or 'X.Y.devN' where N is an integer.
# 'X.Y.dev0' is the canonical version of 'X.Y.dev'

__version__ = "0.1.0.dev0"

from pquad.integrate import TrapezoidTransformer, cumulative_trapezoid, trapezoid, trapz  # noqa: F401 E402

_submodules = [
    "integrate",
    "utils",
]

__all__ = _submodules + [
    "TrapezoidTransformer",
    "cumulative_trapezoid",
    "trapezoid",
    "trapz",
]


def __dir__():
    return __all__


def __getattr__(name):
    if name in _submodules:
        return _importlib.import_module(f"pquad.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'pquad' has no attribute '{name}'")
