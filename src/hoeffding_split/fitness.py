"""
Fitness functions for split evaluation.

This module provides the split-quality metrics used to compare candidate
splits. Each metric scores a (class x child) count table; higher is better.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

import numpy as np


# =============================================================================
# Base Fitness Class
# =============================================================================

class FitnessFunction(ABC):
    """
    Abstract base class for split fitness functions.

    All fitness functions must implement:
    - The score of a count table
    - The range of the score for a given number of classes

    Attributes
    ----------
    min_score : float
        Lowest score the function can return; reported when a split carries
        no information.
    """

    min_score: float = 0.0

    @abstractmethod
    def evaluate(self, counts: np.ndarray) -> float:
        """
        Score a candidate split.

        Parameters
        ----------
        counts : np.ndarray of shape (n_classes, n_children)
            Number of samples of each class falling into each child.

        Returns
        -------
        score : float
            Split quality. Higher is better.
        """
        pass

    @abstractmethod
    def range(self, num_classes: int) -> float:
        """
        Spread between the lowest and highest possible score.

        Parameters
        ----------
        num_classes : int
            Number of label categories.

        Returns
        -------
        range : float
            Maximum score minus minimum score.
        """
        pass

    def __call__(self, counts: np.ndarray) -> float:
        return self.evaluate(counts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# =============================================================================
# Impurity-Based Fitness Functions
# =============================================================================

def _gini(counts: np.ndarray, total: np.ndarray) -> np.ndarray:
    """Gini impurity of each column (or of a single vector)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        f = np.where(total > 0, counts / total, 0.0)
    return np.sum(f * (1.0 - f), axis=0)


def _entropy(counts: np.ndarray, total: np.ndarray) -> np.ndarray:
    """Base-2 entropy of each column (or of a single vector)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        f = np.where(total > 0, counts / total, 0.0)
        logs = np.where(f > 0, np.log2(f), 0.0)
    return -np.sum(f * logs, axis=0)


class GiniImpurity(FitnessFunction):
    """
    Gini gain of a split.

    gain = gini(parent) - sum_j (n_j / n) * gini(child_j)

    where gini(p) = sum_i p_i * (1 - p_i). An empty table scores 0.
    """

    def evaluate(self, counts: np.ndarray) -> float:
        counts = np.asarray(counts, dtype=float)
        child_totals = counts.sum(axis=0)
        total = child_totals.sum()

        # Corner case: no samples, no impurity.
        if total == 0:
            return 0.0

        class_totals = counts.sum(axis=1)
        impurity = float(_gini(class_totals, total))
        impurity -= float(np.sum((child_totals / total) * _gini(counts, child_totals)))
        return impurity

    def range(self, num_classes: int) -> float:
        # Maximum Gini impurity is reached with a uniform distribution.
        return 1.0 - 1.0 / num_classes


class InformationGain(FitnessFunction):
    """
    Information gain of a split (entropy in bits).

    gain = H(parent) - sum_j (n_j / n) * H(child_j)
    """

    def evaluate(self, counts: np.ndarray) -> float:
        counts = np.asarray(counts, dtype=float)
        child_totals = counts.sum(axis=0)
        total = child_totals.sum()

        if total == 0:
            return 0.0

        class_totals = counts.sum(axis=1)
        gain = float(_entropy(class_totals, total))
        gain -= float(np.sum((child_totals / total) * _entropy(counts, child_totals)))
        return gain

    def range(self, num_classes: int) -> float:
        # With only one class there is nothing to gain.
        if num_classes <= 1:
            return 0.0
        return float(np.log2(num_classes))


class CallableFitness(FitnessFunction):
    """
    Adapter turning a plain scoring function into a FitnessFunction.

    Parameters
    ----------
    func : callable
        Function mapping a count table to a score.
    score_range : float, default=1.0
        Value returned by range().
    """

    def __init__(self, func: Callable[[np.ndarray], float], score_range: float = 1.0):
        self.func = func
        self.score_range = score_range

    def evaluate(self, counts: np.ndarray) -> float:
        return float(self.func(counts))

    def range(self, num_classes: int) -> float:
        return self.score_range

    def __repr__(self) -> str:
        name = getattr(self.func, '__name__', repr(self.func))
        return f"CallableFitness({name})"


# =============================================================================
# Fitness Function Factory
# =============================================================================

def get_fitness_function(
    fitness: Union[str, FitnessFunction, Callable[[np.ndarray], float]],
    **kwargs: Any,
) -> FitnessFunction:
    """
    Resolve a fitness function from a name, an instance or a callable.

    Parameters
    ----------
    fitness : str, FitnessFunction or callable
        'gini', 'gini_impurity', 'info_gain', 'information_gain' or
        'entropy'; a FitnessFunction instance (returned as is); or a
        callable scoring a count table.
    **kwargs : dict
        Forwarded to CallableFitness when wrapping a callable.

    Returns
    -------
    fitness : FitnessFunction
        The resolved fitness function.

    Raises
    ------
    ValueError
        If the name is not recognized or the argument is not usable.
    """
    if isinstance(fitness, FitnessFunction):
        return fitness

    if isinstance(fitness, str):
        name = fitness.lower().replace('-', '_')

        fitness_map = {
            'gini': GiniImpurity,
            'gini_impurity': GiniImpurity,
            'info_gain': InformationGain,
            'information_gain': InformationGain,
            'entropy': InformationGain,
        }

        if name in fitness_map:
            return fitness_map[name]()
        raise ValueError(
            f"Unknown fitness function: '{fitness}'. "
            f"Supported fitness functions: {list(fitness_map.keys())}"
        )

    if callable(fitness):
        return CallableFitness(fitness, **kwargs)

    raise ValueError(
        f"fitness must be a name, a FitnessFunction or a callable, "
        f"got {type(fitness).__name__}"
    )


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    'FitnessFunction',
    'GiniImpurity',
    'InformationGain',
    'CallableFitness',
    'get_fitness_function',
]
