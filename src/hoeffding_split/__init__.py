"""
Hoeffding Split - streaming split evaluation for incremental decision trees.

This package provides the per-attribute split evaluators an incrementally
grown (Hoeffding) decision tree uses to decide whether and where to split
while seeing training samples one at a time.

Features:
- Bounded-memory equal-width binning of numeric attributes
- One-time discretization once enough samples have been seen
- Gini and information gain fitness functions, or any custom callable
- Majority class queries in both phases
- JSON checkpointing in either phase

Example usage:
    >>> from hoeffding_split import HoeffdingNumericSplit
    >>>
    >>> split = HoeffdingNumericSplit(num_classes=2, bins=2, observations_before_binning=3)
    >>> split.train(1.0, 0)
    >>> split.train(3.0, 1)
    >>> split.train(5.0, 0)
    >>> split.majority_class()
    0
    >>> child_majorities, split_info = split.split()
    >>> split_info.calculate_direction(4.0)
    1
"""

__version__ = "0.1.0"
__author__ = "Hoeffding Split Contributors"

# Core evaluator
from .numeric_split import HoeffdingNumericSplit

# Split routing
from .split_info import NumericSplitInfo
from .binning import compute_split_points, find_bin, find_bins, value_range

# Fitness functions
from .fitness import (
    FitnessFunction,
    GiniImpurity,
    InformationGain,
    CallableFitness,
    get_fitness_function,
)

# Base classes
from .base import BaseSplit, SplitParams

# Utility functions
from .utils import (
    InvalidConfigurationError,
    InvalidStateError,
    check_label,
    check_value,
    check_stream,
    log_message,
    log_debug,
)

# Public API
__all__ = [
    # Version
    "__version__",
    # Core evaluator
    "HoeffdingNumericSplit",
    # Split routing
    "NumericSplitInfo",
    "compute_split_points",
    "find_bin",
    "find_bins",
    "value_range",
    # Fitness functions
    "FitnessFunction",
    "GiniImpurity",
    "InformationGain",
    "CallableFitness",
    "get_fitness_function",
    # Base classes
    "BaseSplit",
    "SplitParams",
    # Utilities
    "InvalidConfigurationError",
    "InvalidStateError",
    "check_label",
    "check_value",
    "check_stream",
    "log_message",
    "log_debug",
]
