"""
Utility functions for input validation, errors and logging.

This module provides the validation helpers shared by the split evaluators,
the package exceptions and the verbose-gated console logging helpers.
All validation is done with NumPy.
"""

from __future__ import annotations

import numbers
from typing import Any, List, Tuple, Union

import numpy as np


# =============================================================================
# Type Aliases
# =============================================================================

ArrayLike = Union[np.ndarray, List[Any], Tuple[Any, ...]]


# =============================================================================
# Custom Exceptions
# =============================================================================

class InvalidConfigurationError(ValueError):
    """
    Exception raised when an evaluator is constructed with unusable parameters.

    Zero bins or a zero binning threshold leave the discretization rule
    undefined.
    """
    pass


class InvalidStateError(RuntimeError):
    """
    Exception raised when a query is not answerable in the current phase.

    Raised when asking for the majority probability before any sample has
    been seen, or when splitting before the bins exist.
    """
    pass


# =============================================================================
# Input Validation Functions
# =============================================================================

def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a strictly positive integer configuration parameter.

    Parameters
    ----------
    value : int
        Value to validate.
    name : str
        Parameter name used in the error message.

    Returns
    -------
    value : int
        The value as a Python int.

    Raises
    ------
    InvalidConfigurationError
        If the value is not an integer or is smaller than 1.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise InvalidConfigurationError(f"{name} must be >= 1, got {value}")
    return int(value)


def check_label(label: Any, num_classes: int) -> int:
    """
    Validate a class label against the number of classes.

    Parameters
    ----------
    label : int
        Class index.
    num_classes : int
        Number of label categories.

    Returns
    -------
    label : int
        The label as a Python int.

    Raises
    ------
    ValueError
        If the label is not an integer or is outside [0, num_classes).
    """
    if isinstance(label, (bool, np.bool_)):
        raise ValueError(f"label must be an integer class index, got {label!r}")
    if not isinstance(label, numbers.Integral):
        if isinstance(label, numbers.Real) and float(label).is_integer():
            label = int(label)
        else:
            raise ValueError(
                f"label must be an integer class index, got {label!r}"
            )
    if not 0 <= label < num_classes:
        raise ValueError(
            f"label must be in [0, {num_classes}), got {label}"
        )
    return int(label)


def check_value(value: Any) -> float:
    """
    Validate a single attribute value.

    Raises
    ------
    ValueError
        If the value is NaN or infinite.
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"value must be a real number, got {value!r}") from e

    if not np.isfinite(value):
        raise ValueError(f"value must be finite, got {value}")
    return value


def check_stream(
    values: ArrayLike,
    labels: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate a batch of (value, label) pairs.

    Parameters
    ----------
    values : array-like of shape (n_samples,)
        Attribute values. pandas Series are accepted.
    labels : array-like of shape (n_samples,)
        Class labels.

    Returns
    -------
    values : np.ndarray of shape (n_samples,)
        Values as float64.
    labels : np.ndarray of shape (n_samples,)
        Labels as given (checked individually on training).

    Raises
    ------
    ValueError
        If the inputs are not 1D or have different lengths.
    """
    if hasattr(values, 'values') and not isinstance(values, np.ndarray):
        values = values.values
    if hasattr(labels, 'values') and not isinstance(labels, np.ndarray):
        labels = labels.values

    values = np.asarray(values, dtype=float)
    labels = np.asarray(labels)

    if values.ndim != 1 or labels.ndim != 1:
        raise ValueError(
            f"Expected 1D values and labels, got {values.ndim}D and {labels.ndim}D"
        )

    if values.shape[0] != labels.shape[0]:
        raise ValueError(
            f"Found inputs with inconsistent numbers of samples: "
            f"values has {values.shape[0]} samples, labels has {labels.shape[0]} samples."
        )

    return values, labels


# =============================================================================
# Logging Utilities
# =============================================================================

def log_message(message: str, *, verbose: int = 0) -> None:
    """
    Print a log message if verbose level is sufficient.

    Parameters
    ----------
    message : str
        Message to print.
    verbose : int, default=0
        Verbosity level. Message is printed if verbose >= 1.
    """
    if verbose >= 1:
        print(f"[HoeffdingSplit] {message}")


def log_debug(message: str, *, verbose: int = 0) -> None:
    """Print a debug message if verbose >= 2."""
    if verbose >= 2:
        print(f"[HoeffdingSplit] {message}")


__all__ = [
    'ArrayLike',
    'InvalidConfigurationError',
    'InvalidStateError',
    'check_positive_int',
    'check_label',
    'check_value',
    'check_stream',
    'log_message',
    'log_debug',
]
