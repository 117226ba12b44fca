"""
Test suite for equal-width discretization and bin lookup.
"""

import sys
import os
import numpy as np

# Ensure local `src/` package is importable when running tests without installation
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_PATH = os.path.join(PROJECT_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from hoeffding_split.binning import compute_split_points, find_bin, find_bins, value_range
from hoeffding_split.split_info import NumericSplitInfo


def test_split_points_are_interior():
    """Test that boundaries exclude the extremes of the range."""
    points = compute_split_points(0.0, 10.0, 5)
    np.testing.assert_allclose(points, [2.0, 4.0, 6.0, 8.0])
    assert 0.0 not in points
    assert 10.0 not in points


def test_split_points_count():
    for bins in (1, 2, 7, 255):
        assert compute_split_points(-1.0, 1.0, bins).shape == (bins - 1,)


def test_split_points_collapse_on_empty_range():
    np.testing.assert_array_equal(compute_split_points(3.0, 3.0, 4), [3.0, 3.0, 3.0])


def test_value_range_includes_seed():
    assert value_range(np.array([1.0, 2.0]), 5.0) == (1.0, 5.0)
    assert value_range(np.array([1.0, 2.0]), -5.0) == (-5.0, 2.0)
    assert value_range(np.array([]), 4.0) == (4.0, 4.0)


def test_find_bin_boundary_goes_to_lower_bin():
    points = np.array([1.0, 2.0, 3.0])
    assert find_bin(points, 1.0) == 0
    assert find_bin(points, 1.0000001) == 1
    assert find_bin(points, 3.0) == 2
    assert find_bin(points, 3.5) == 3


def test_find_bin_is_total():
    """Test that every value maps to a bin in [0, bins)."""
    points = compute_split_points(-2.0, 2.0, 6)
    values = np.concatenate([np.linspace(-50, 50, 501), points, [-1e300, 1e300]])
    bins = find_bins(points, values)
    assert bins.min() >= 0
    assert bins.max() <= 5


def test_find_bins_matches_find_bin():
    rng = np.random.default_rng(5)
    points = np.sort(rng.normal(size=9))
    values = rng.normal(scale=2.0, size=100)
    expected = [find_bin(points, v) for v in values]
    np.testing.assert_array_equal(find_bins(points, values), expected)
    # lookups are stable
    np.testing.assert_array_equal(find_bins(points, values), expected)


def test_find_bin_collapsed_boundaries():
    points = np.array([7.0, 7.0])
    assert find_bin(points, 7.0) == 0
    assert find_bin(points, 6.0) == 0
    assert find_bin(points, 8.0) == 2


def test_find_bin_without_boundaries():
    assert find_bin(np.empty(0), 123.0) == 0


# =============================================================================
# NumericSplitInfo Tests
# =============================================================================

def test_split_info_directions():
    info = NumericSplitInfo(np.array([0.0, 10.0]))
    assert info.n_children == 3
    np.testing.assert_array_equal(info.calculate_directions([-1.0, 0.0, 5.0, 10.0, 11.0]), [0, 0, 1, 1, 2])


def test_split_info_equality():
    assert NumericSplitInfo([1.5, 2.5]) == NumericSplitInfo(np.array([1.5, 2.5]))
    assert NumericSplitInfo([1.5, 2.5]) != NumericSplitInfo([1.5])


def test_split_info_default_is_single_child():
    info = NumericSplitInfo()
    assert info.n_children == 1
    assert info.calculate_direction(-3.0) == 0
