"""
Test suite for split fitness functions.
"""

import math

import numpy as np
import pytest

import sys
from pathlib import Path
_repo_root = Path(__file__).resolve().parents[1]
src_path = str(_repo_root / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from hoeffding_split.fitness import (
    CallableFitness,
    FitnessFunction,
    GiniImpurity,
    InformationGain,
    get_fitness_function,
)


# =============================================================================
# Gini Tests
# =============================================================================

def test_gini_perfect_binary_split():
    counts = np.array([[10, 0], [0, 10]])
    assert GiniImpurity().evaluate(counts) == pytest.approx(0.5)


def test_gini_uninformative_split():
    """Test that children mirroring the parent give no gain."""
    counts = np.array([[5, 5], [3, 3]])
    assert GiniImpurity().evaluate(counts) == pytest.approx(0.0)


def test_gini_single_child_scores_zero():
    counts = np.array([[0, 0, 6], [0, 0, 6]])
    assert GiniImpurity().evaluate(counts) == pytest.approx(0.0)


def test_gini_empty_table():
    assert GiniImpurity().evaluate(np.zeros((3, 4))) == 0.0


def test_gini_manual_value():
    counts = np.array([[3, 1], [1, 3]])
    parent = 1.0 - (0.5 ** 2 + 0.5 ** 2)
    child = 1.0 - (0.75 ** 2 + 0.25 ** 2)
    assert GiniImpurity()(counts) == pytest.approx(parent - child)


def test_gini_range():
    assert GiniImpurity().range(2) == pytest.approx(0.5)
    assert GiniImpurity().range(4) == pytest.approx(0.75)


# =============================================================================
# Information Gain Tests
# =============================================================================

def test_info_gain_perfect_binary_split():
    counts = np.array([[10, 0], [0, 10]])
    assert InformationGain().evaluate(counts) == pytest.approx(1.0)


def test_info_gain_manual_value():
    counts = np.array([[3, 1], [1, 3]])
    child = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
    assert InformationGain().evaluate(counts) == pytest.approx(1.0 - child)


def test_info_gain_tolerates_zero_rows_and_columns():
    counts = np.array([[4, 0, 0], [0, 0, 4], [0, 0, 0]])
    assert InformationGain().evaluate(counts) == pytest.approx(1.0)


def test_info_gain_range():
    assert InformationGain().range(8) == pytest.approx(3.0)
    assert InformationGain().range(1) == 0.0


def test_scores_are_non_negative():
    rng = np.random.default_rng(1)
    for _ in range(20):
        counts = rng.integers(0, 20, size=(3, 5))
        assert GiniImpurity().evaluate(counts) >= -1e-12
        assert InformationGain().evaluate(counts) >= -1e-12


# =============================================================================
# Factory Tests
# =============================================================================

@pytest.mark.parametrize("name,expected", [
    ("gini", GiniImpurity),
    ("Gini-Impurity", GiniImpurity),
    ("info_gain", InformationGain),
    ("information_gain", InformationGain),
    ("entropy", InformationGain),
])
def test_get_fitness_function_by_name(name, expected):
    assert isinstance(get_fitness_function(name), expected)


def test_get_fitness_function_unknown_name():
    with pytest.raises(ValueError, match="Unknown fitness function"):
        get_fitness_function("variance")


def test_get_fitness_function_passes_instances_through():
    fitness = InformationGain()
    assert get_fitness_function(fitness) is fitness


def test_get_fitness_function_wraps_callables():
    fitness = get_fitness_function(lambda counts: counts.sum(), score_range=2.0)
    assert isinstance(fitness, CallableFitness)
    assert isinstance(fitness, FitnessFunction)
    assert fitness(np.ones((2, 2))) == 4.0
    assert fitness.range(2) == 2.0
    assert fitness.min_score == 0.0


def test_get_fitness_function_rejects_other_types():
    with pytest.raises(ValueError, match="fitness must be"):
        get_fitness_function(42)
