"""
Streaming split evaluator for a numeric attribute.

The evaluator sees (value, label) pairs one at a time. Until
``observations_before_binning`` samples have arrived it buffers them raw;
the sample that reaches the threshold fixes equal-width bin boundaries over
the range seen so far, the buffer is folded into a (class x bin) count table
and every later sample only increments that table. Memory is bounded by
``max(observations_before_binning, num_classes * bins)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple, Union

import numpy as np

from .base import BaseSplit, SplitParams
from .binning import compute_split_points, find_bin, find_bins, value_range
from .fitness import FitnessFunction, get_fitness_function
from .split_info import NumericSplitInfo
from .utils import (
    ArrayLike,
    InvalidStateError,
    check_label,
    check_positive_int,
    check_stream,
    check_value,
    log_debug,
    log_message,
)

FitnessLike = Union[str, FitnessFunction, Callable[[np.ndarray], float]]


# =============================================================================
# Phase States
# =============================================================================

@dataclass
class _Collecting:
    """Raw samples buffered before the range is known."""
    values: np.ndarray
    labels: np.ndarray


@dataclass
class _Binned:
    """Fixed boundaries and per-(class, bin) counts."""
    split_points: np.ndarray
    sufficient_statistics: np.ndarray


# =============================================================================
# Numeric Split Evaluator
# =============================================================================

class HoeffdingNumericSplit(BaseSplit):
    """
    Equal-width binned split evaluator for one numeric attribute at one node.

    Parameters
    ----------
    num_classes : int
        Number of label categories.
    bins : int, default=10
        Number of bins, hence of children when the split is taken.
    observations_before_binning : int, default=100
        Number of samples used to estimate the attribute range.
    fitness : str, FitnessFunction or callable, default='gini'
        Split-quality metric applied to the count table.
    verbose : int, default=0
        Verbosity level.

    Raises
    ------
    InvalidConfigurationError
        If num_classes, bins or observations_before_binning is below 1.
    """

    def __init__(
        self,
        num_classes: int,
        bins: int = 10,
        observations_before_binning: int = 100,
        fitness: FitnessLike = 'gini',
        verbose: int = 0,
    ):
        self.params = SplitParams(
            bins=bins,
            observations_before_binning=observations_before_binning,
            verbose=verbose,
        )
        self.params.validate()
        self._num_classes = check_positive_int(num_classes, "num_classes")
        self.fitness = get_fitness_function(fitness)

        self.samples_seen_ = 0
        self._state: Union[_Collecting, _Binned] = self._empty_buffer()

    @classmethod
    def from_sibling(
        cls, other: "HoeffdingNumericSplit", num_classes: int
    ) -> "HoeffdingNumericSplit":
        """
        Fresh evaluator with the configuration of another one.

        Used when a node splits and its children need their own evaluators
        for the same attribute.
        """
        return cls(num_classes, fitness=other.fitness, **other.get_params())

    def get_params(self) -> Dict[str, Any]:
        """
        Get the discretization configuration.

        Returns
        -------
        params : dict
            bins, observations_before_binning and verbose.
        """
        return self.params.to_dict()

    # -------------------------------------------------------------------------
    # Property accessors
    # -------------------------------------------------------------------------

    @property
    def num_classes(self) -> int:
        return self._num_classes

    @property
    def bins(self) -> int:
        return self.params.bins

    @property
    def observations_before_binning(self) -> int:
        return self.params.observations_before_binning

    @property
    def verbose(self) -> int:
        return self.params.verbose

    @property
    def samples_seen(self) -> int:
        return self.samples_seen_

    @property
    def is_binned(self) -> bool:
        return isinstance(self._state, _Binned)

    @property
    def split_points(self) -> np.ndarray:
        """Bin boundaries; empty until the attribute has been discretized."""
        if isinstance(self._state, _Binned):
            return self._state.split_points.copy()
        return np.empty(0)

    @property
    def sufficient_statistics(self) -> np.ndarray:
        """Copy of the (class x bin) count table; zeros until discretized."""
        if isinstance(self._state, _Binned):
            return self._state.sufficient_statistics.copy()
        return np.zeros((self._num_classes, self.bins), dtype=np.int64)

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def train(self, value: Any, label: int) -> None:
        """
        Add one sample.

        Parameters
        ----------
        value : float
            Attribute value. Must be finite.
        label : int
            Class index in [0, num_classes).
        """
        value = check_value(value)
        label = check_label(label, self._num_classes)

        state = self._state
        if isinstance(state, _Collecting):
            if self.samples_seen_ < self.observations_before_binning - 1:
                state.values[self.samples_seen_] = value
                state.labels[self.samples_seen_] = label
                self.samples_seen_ += 1
                return

            state = self._discretize(state, value)
            self._state = state

        state.sufficient_statistics[label, find_bin(state.split_points, value)] += 1
        self.samples_seen_ += 1

    def train_batch(self, values: ArrayLike, labels: ArrayLike) -> "HoeffdingNumericSplit":
        """
        Add samples in order, as repeated calls to train.

        Parameters
        ----------
        values : array-like of shape (n_samples,)
            Attribute values.
        labels : array-like of shape (n_samples,)
            Class indices.

        Returns
        -------
        self : HoeffdingNumericSplit
            The evaluator.
        """
        values, labels = check_stream(values, labels)
        for value, label in zip(values, labels):
            self.train(value, label)
        return self

    def _discretize(self, state: _Collecting, value: float) -> _Binned:
        """Fix the boundaries from the buffer and the incoming value."""
        lo, hi = value_range(state.values, value)
        split_points = compute_split_points(lo, hi, self.bins)

        table = np.zeros((self._num_classes, self.bins), dtype=np.int64)
        np.add.at(table, (state.labels, find_bins(split_points, state.values)), 1)

        log_message(
            f"Binning after {self.samples_seen_ + 1} observations: "
            f"min={lo:.6g}, max={hi:.6g}, bin width={(hi - lo) / self.bins:.6g}",
            verbose=self.verbose,
        )
        if hi == lo:
            log_debug(
                "Attribute is constant over the buffer; all boundaries collapse",
                verbose=self.verbose,
            )

        return _Binned(split_points=split_points, sufficient_statistics=table)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def class_counts(self) -> np.ndarray:
        """Number of samples seen per class."""
        state = self._state
        if isinstance(state, _Binned):
            return state.sufficient_statistics.sum(axis=1)
        return np.bincount(
            state.labels[:self.samples_seen_], minlength=self._num_classes
        ).astype(np.int64)

    def evaluate_fitness(self) -> Tuple[float, float]:
        """
        Score the split on this attribute.

        Returns
        -------
        best_fitness : float
            Fitness of the binned split, or the minimum score while the
            samples are still being collected.
        second_best_fitness : float
            Always the minimum score: the bins are the only candidate.
        """
        floor = self.fitness.min_score
        if not isinstance(self._state, _Binned):
            return floor, floor
        # Only train may change the table.
        table = self._state.sufficient_statistics.view()
        table.flags.writeable = False
        return float(self.fitness(table)), floor

    def majority_class(self) -> int:
        """Most frequent class; ties go to the lowest class index."""
        return int(np.argmax(self.class_counts()))

    def majority_probability(self) -> float:
        """
        Fraction of the samples seen that belong to the majority class.

        Raises
        ------
        InvalidStateError
            If no sample has been seen yet.
        """
        counts = self.class_counts()
        total = counts.sum()
        if total == 0:
            raise InvalidStateError(
                "majority_probability is undefined before any sample is seen"
            )
        return float(counts.max() / total)

    def split(self) -> Tuple[np.ndarray, NumericSplitInfo]:
        """
        Materialize the binned split.

        Returns
        -------
        child_majorities : np.ndarray of shape (bins,)
            Majority class of each bin (lowest index on ties), used as the
            initial prediction of each child.
        split_info : NumericSplitInfo
            Boundaries routing samples to children.

        Raises
        ------
        InvalidStateError
            If the attribute has not been discretized yet.
        """
        state = self._state
        if not isinstance(state, _Binned):
            raise InvalidStateError(
                f"Cannot split before binning: {self.samples_seen_} of "
                f"{self.observations_before_binning} observations seen"
            )

        child_majorities = np.argmax(state.sufficient_statistics, axis=0)
        return child_majorities, NumericSplitInfo(state.split_points.copy())

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the active phase.

        The record holds ``samplesSeen``, ``observationsBeforeBinning`` and
        ``bins``, followed by ``splitPoints`` and ``sufficientStatistics``
        once binned, or by ``numClasses`` and ``obs<i>``/``label<i>`` for
        each buffered sample before.
        """
        data: Dict[str, Any] = {
            'samplesSeen': self.samples_seen_,
            'observationsBeforeBinning': self.observations_before_binning,
            'bins': self.bins,
        }

        state = self._state
        if isinstance(state, _Binned):
            data['splitPoints'] = state.split_points.tolist()
            data['sufficientStatistics'] = state.sufficient_statistics.tolist()
        else:
            data['numClasses'] = self._num_classes
            for i in range(self.samples_seen_):
                data[f'obs{i}'] = float(state.values[i])
                data[f'label{i}'] = int(state.labels[i])

        return data

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        fitness: FitnessLike = 'gini',
        verbose: int = 0,
    ) -> "HoeffdingNumericSplit":
        """
        Restore an evaluator from a record produced by to_dict.

        Parameters
        ----------
        data : dict
            Persisted record.
        fitness : str, FitnessFunction or callable, default='gini'
            Fitness function of the restored evaluator (not persisted).
        verbose : int, default=0
            Verbosity level of the restored evaluator.

        Raises
        ------
        ValueError
            If the record is missing keys or is inconsistent.
        """
        try:
            samples_seen = int(data['samplesSeen'])
            observations_before_binning = int(data['observationsBeforeBinning'])
            bins = int(data['bins'])
        except KeyError as e:
            raise ValueError(f"Missing key in split record: {e}") from e

        if samples_seen < 0:
            raise ValueError(f"samplesSeen must be non-negative, got {samples_seen}")

        binned = samples_seen >= observations_before_binning
        try:
            if binned:
                split_points = np.asarray(data['splitPoints'], dtype=float).ravel()
                table = np.asarray(data['sufficientStatistics'], dtype=np.int64)
                if table.ndim != 2:
                    raise ValueError(
                        f"sufficientStatistics must be 2D (classes x bins), "
                        f"got {table.ndim}D"
                    )
                num_classes = table.shape[0]
            else:
                num_classes = int(data['numClasses'])
        except KeyError as e:
            raise ValueError(f"Missing key in split record: {e}") from e

        split = cls(
            num_classes,
            bins=bins,
            observations_before_binning=observations_before_binning,
            fitness=fitness,
            verbose=verbose,
        )

        if binned:
            if table.shape != (num_classes, bins):
                raise ValueError(
                    f"sufficientStatistics has shape {table.shape}, "
                    f"expected ({num_classes}, {bins})"
                )
            if split_points.shape != (bins - 1,):
                raise ValueError(
                    f"splitPoints has {split_points.size} entries, expected {bins - 1}"
                )
            if np.any(np.diff(split_points) < 0):
                raise ValueError("splitPoints must be non-decreasing")
            if np.any(table < 0):
                raise ValueError("sufficientStatistics must not contain negative counts")
            if table.sum() != samples_seen:
                raise ValueError(
                    f"sufficientStatistics holds {table.sum()} samples, "
                    f"but samplesSeen is {samples_seen}"
                )
            split._state = _Binned(split_points=split_points, sufficient_statistics=table)
        else:
            state = split._state
            try:
                for i in range(samples_seen):
                    state.values[i] = check_value(data[f'obs{i}'])
                    state.labels[i] = check_label(data[f'label{i}'], num_classes)
            except KeyError as e:
                raise ValueError(f"Missing key in split record: {e}") from e

        split.samples_seen_ = samples_seen
        log_debug(
            f"Restored {'binned' if binned else 'collecting'} split "
            f"with {samples_seen} samples seen",
            verbose=verbose,
        )
        return split

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _empty_buffer(self) -> _Collecting:
        capacity = self.observations_before_binning - 1
        return _Collecting(
            values=np.zeros(capacity, dtype=float),
            labels=np.zeros(capacity, dtype=np.int64),
        )

    def __repr__(self) -> str:
        phase = 'binned' if self.is_binned else 'collecting'
        return (
            f"{self.__class__.__name__}(num_classes={self._num_classes}, "
            f"bins={self.bins}, "
            f"observations_before_binning={self.observations_before_binning}, "
            f"samples_seen={self.samples_seen_}, phase={phase})"
        )


__all__ = ['HoeffdingNumericSplit']
