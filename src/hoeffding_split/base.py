"""
Base classes for streaming split evaluators.

This module provides the configuration dataclass and the abstract interface
a tree-growth algorithm uses to drive a per-attribute split evaluator.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

import numpy as np

from .utils import check_positive_int


# =============================================================================
# Split Parameters Dataclass
# =============================================================================

@dataclass
class SplitParams:
    """
    Dataclass containing the discretization configuration of an evaluator.

    Parameters
    ----------
    bins : int
        Number of bins the attribute range is cut into.
    observations_before_binning : int
        Number of samples after which the bin boundaries are fixed.
    verbose : int
        Verbosity level (0=silent, 1=events, 2=debug).
    """
    bins: int = 10
    observations_before_binning: int = 100
    verbose: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to dictionary."""
        return asdict(self)

    def validate(self) -> None:
        """
        Validate all parameters.

        Raises
        ------
        InvalidConfigurationError
            If bins or observations_before_binning is not a positive integer.
        """
        self.bins = check_positive_int(self.bins, "bins")
        self.observations_before_binning = check_positive_int(
            self.observations_before_binning, "observations_before_binning"
        )


# =============================================================================
# Base Split Abstract Class
# =============================================================================

class BaseSplit(ABC):
    """
    Abstract base class for single-attribute split evaluators.

    An evaluator belongs to one tree node and one attribute. The tree feeds
    it one sample at a time, periodically asks for its fitness and, once it
    decides to split, asks it to materialize the split.
    """

    @abstractmethod
    def train(self, value: Any, label: int) -> None:
        """
        Update the evaluator with one training sample.

        Parameters
        ----------
        value : Any
            Attribute value of the sample.
        label : int
            Class index of the sample.
        """
        pass

    @abstractmethod
    def evaluate_fitness(self) -> Tuple[float, float]:
        """
        Score the best and second best split of this attribute.

        Returns
        -------
        best_fitness : float
            Score of the best candidate split.
        second_best_fitness : float
            Score of the runner-up candidate split.
        """
        pass

    @abstractmethod
    def majority_class(self) -> int:
        """Return the most frequent class seen so far."""
        pass

    @abstractmethod
    def majority_probability(self) -> float:
        """Return the fraction of samples belonging to the majority class."""
        pass

    @abstractmethod
    def split(self) -> Tuple[np.ndarray, Any]:
        """
        Materialize the split.

        Returns
        -------
        child_majorities : np.ndarray
            Default prediction for each child.
        split_info : Any
            Routing information for the children.
        """
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the evaluator state to a JSON-compatible dictionary."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any], **kwargs: Any) -> "BaseSplit":
        """Restore an evaluator from a dictionary produced by to_dict."""
        pass

    # -------------------------------------------------------------------------
    # Common methods
    # -------------------------------------------------------------------------

    def save(self, path: str) -> None:
        """
        Save the evaluator state to a JSON file.

        Parameters
        ----------
        path : str
            File path to save the state.
        """
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str, **kwargs: Any) -> "BaseSplit":
        """
        Load an evaluator from a JSON file.

        Parameters
        ----------
        path : str
            File path to load the state from.
        **kwargs : dict
            Forwarded to from_dict (e.g. fitness, verbose).

        Returns
        -------
        split : BaseSplit
            The restored evaluator.
        """
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data, **kwargs)
