"""
Equal-width discretization of a streamed attribute.

The boundaries are interior: for ``bins`` bins there are ``bins - 1``
thresholds, the first bin is unbounded below and the last is unbounded
above. Bins are right-closed, so a value equal to a threshold belongs to
the lower bin.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .utils import ArrayLike


def value_range(values: np.ndarray, seed: float) -> Tuple[float, float]:
    """
    Minimum and maximum of the buffered values and the seed value.

    Parameters
    ----------
    values : np.ndarray of shape (n_samples,)
        Buffered attribute values (may be empty).
    seed : float
        Value of the sample triggering the discretization.

    Returns
    -------
    lo, hi : float
        Range of the attribute.
    """
    if values.size == 0:
        return seed, seed
    return min(seed, float(values.min())), max(seed, float(values.max()))


def compute_split_points(lo: float, hi: float, bins: int) -> np.ndarray:
    """
    Interior boundaries of ``bins`` equal-width bins over [lo, hi].

    Parameters
    ----------
    lo : float
        Lowest value observed.
    hi : float
        Highest value observed.
    bins : int
        Number of bins.

    Returns
    -------
    split_points : np.ndarray of shape (bins - 1,)
        ``lo + i * (hi - lo) / bins`` for ``i = 1..bins-1``. All equal to
        ``lo`` when the range is empty.
    """
    bin_width = (hi - lo) / bins
    return lo + np.arange(1, bins, dtype=float) * bin_width


def find_bin(split_points: np.ndarray, value: float) -> int:
    """
    Bin index of a single value: the number of boundaries strictly below it.
    """
    return int(np.searchsorted(split_points, value, side='left'))


def find_bins(split_points: np.ndarray, values: ArrayLike) -> np.ndarray:
    """
    Bin indices of many values.

    Parameters
    ----------
    split_points : np.ndarray of shape (bins - 1,)
        Non-decreasing interior boundaries.
    values : array-like of shape (n_samples,)
        Values to route.

    Returns
    -------
    bins : np.ndarray of shape (n_samples,)
        Indices in ``[0, len(split_points)]``.
    """
    return np.searchsorted(split_points, np.asarray(values, dtype=float), side='left')


__all__ = ['value_range', 'compute_split_points', 'find_bin', 'find_bins']
