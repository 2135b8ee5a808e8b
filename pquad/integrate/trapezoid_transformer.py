"""Trapezoidal integration of functional data as a scikit-learn transformer."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import warnings
from typing import List, Optional, Union

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_array, check_is_fitted

from pquad.integrate.trapezoid import cumulative_trapezoid, trapezoid
from pquad.utils.utility import check_spacing


class TrapezoidTransformer(BaseEstimator, TransformerMixin):
    """
    Integrate curves observed on a common grid with the trapezoidal rule.

    Each row of the input matrix is one curve sampled at the points of `grid`
    (or at equally spaced points `dx` apart), and the transformer replaces it
    by its integral or by its running integral.

    Parameters
    ----------
    grid : array_like of shape (n_points,), optional
        Sample coordinates shared by every curve. If None, the samples are
        assumed to be `dx` apart.
    dx : float, default=1.0
        Positive spacing used when `grid` is None.
    cumulative : bool, default=False
        If True, return running integrals instead of definite integrals.

    Attributes
    ----------
    grid_ : np.ndarray of shape (n_points,)
        Sample coordinates used for integration, kept in float64 so that
        large coordinates do not lose precision with float32 data.
    n_features_in_ : int
        Number of sample points per curve seen during fit.

    See Also
    --------
    pquad.integrate.trapezoid : Definite integral along an axis.
    pquad.integrate.cumulative_trapezoid : Running integral along an axis.
    """

    def __init__(
        self,
        grid: Optional[Union[np.ndarray, List[float]]] = None,
        dx: float = 1.0,
        cumulative: bool = False,
    ) -> None:
        self.grid = grid
        self.dx = dx
        self.cumulative = cumulative
        self._check_params()

    def _check_params(self) -> None:
        """Validate `dx` and `cumulative`, also after `set_params`."""
        if check_spacing(self.dx) <= 0:
            raise ValueError(f"Spacing, dx, should be positive, got {self.dx}.")
        if not isinstance(self.cumulative, bool):
            raise TypeError("cumulative must be a boolean value.")

    def fit(self, X: Union[np.ndarray, List[List[float]]], y=None) -> "TrapezoidTransformer":
        """Validate the curves and the sample grid.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_points)
            Curves, one per row.
        y : None
            Ignored.

        Returns
        -------
        TrapezoidTransformer
            Fitted transformer (self).

        Raises
        ------
        ValueError
            If `dx` is not positive, `X` has fewer than two sample points or
            `grid` does not match the number of columns of `X`.
        TypeError
            If `dx` is not a real number or `cumulative` is not a bool.
        """
        self._check_params()
        X = check_array(X, dtype=[np.float64, np.float32])
        n_points = X.shape[1]
        if n_points < 2:
            raise ValueError(f"X must have at least 2 sample points per curve, got {n_points}.")

        if self.grid is None:
            grid = np.arange(n_points, dtype=np.float64) * float(self.dx)
        else:
            grid = check_array(self.grid, ensure_2d=False, dtype=np.float64)
            if grid.ndim != 1:
                raise ValueError("grid must be a 1D array.")
            if grid.size != n_points:
                raise ValueError(f"grid must have one point per column of X, got {grid.size} points for {n_points} columns.")
            if np.any(np.diff(grid) <= 0):
                warnings.warn("grid is not strictly increasing. Integrals over decreasing intervals are negative.")

        self._input_dtype = X.dtype
        self.grid_ = grid
        self.n_features_in_ = n_points
        return self

    def transform(self, X: Union[np.ndarray, List[List[float]]]) -> np.ndarray:
        """Integrate every curve.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_points)
            Curves, one per row, sampled on the fitted grid.

        Returns
        -------
        np.ndarray
            Shape (n_samples, 1) with the integrals, or
            (n_samples, n_points - 1) with the running integrals if
            `cumulative` is True.

        Raises
        ------
        sklearn.exceptions.NotFittedError
            If the transformer is not fitted.
        ValueError
            If `X` does not have `n_features_in_` columns.
        """
        check_is_fitted(self, ["grid_", "n_features_in_"])
        X = check_array(X, dtype=self._input_dtype)
        if X.shape[1] != self.n_features_in_:
            raise ValueError(f"X has {X.shape[1]} sample points, but TrapezoidTransformer is expecting {self.n_features_in_}.")

        if self.grid is None:
            spacing = {"dx": float(self.dx)}
        else:
            spacing = {"x": self.grid_}
        if self.cumulative:
            return cumulative_trapezoid(X, axis=1, **spacing)
        return trapezoid(X, axis=1, **spacing).reshape(-1, 1)
