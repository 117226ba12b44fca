"""
Routing information produced by a numeric split.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .binning import find_bin, find_bins
from .utils import ArrayLike


@dataclass
class NumericSplitInfo:
    """
    Boundaries of a materialized numeric split.

    A sample whose attribute value is ``v`` goes to the child whose index is
    the number of split points strictly below ``v``.

    Attributes
    ----------
    split_points : np.ndarray of shape (n_children - 1,)
        Interior bin boundaries, non-decreasing.
    """
    split_points: np.ndarray = field(default_factory=lambda: np.empty(0))

    def __post_init__(self) -> None:
        self.split_points = np.asarray(self.split_points, dtype=float).ravel()

    @property
    def n_children(self) -> int:
        return len(self.split_points) + 1

    def calculate_direction(self, value: float) -> int:
        """Index of the child a value is routed to."""
        return find_bin(self.split_points, value)

    def calculate_directions(self, values: ArrayLike) -> np.ndarray:
        """Vectorized calculate_direction."""
        return find_bins(self.split_points, values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericSplitInfo):
            return NotImplemented
        return np.array_equal(self.split_points, other.split_points)


__all__ = ['NumericSplitInfo']
