"""Per-column statistics used to fit the scalers.

Every reduction runs over rows (axis 0) and returns one value per column.
Min and max skip NaN; mean and standard deviation propagate it.
"""

import warnings
from typing import Callable, Dict, Iterable

import numpy as np

from ..utils import MatrixLike, as_matrix


def _nan_reduction(matrix: np.ndarray, func: Callable[..., np.ndarray]) -> np.ndarray:
    # An empty column has no min/max; report NaN like an all-NaN column.
    if matrix.shape[0] == 0:
        return np.full(matrix.shape[1], np.nan, dtype=matrix.dtype)
    with warnings.catch_warnings():
        # "All-NaN slice encountered"
        warnings.simplefilter("ignore", category=RuntimeWarning)
        return func(matrix, axis=0)


def column_min(X: MatrixLike) -> np.ndarray:
    """Column minimums ignoring NaN. All-NaN columns give NaN."""
    return _nan_reduction(as_matrix(X), np.nanmin)


def column_max(X: MatrixLike) -> np.ndarray:
    """Column maximums ignoring NaN. All-NaN columns give NaN."""
    return _nan_reduction(as_matrix(X), np.nanmax)


def column_mean(X: MatrixLike) -> np.ndarray:
    """Column means. A NaN anywhere in a column makes its mean NaN."""
    matrix = as_matrix(X)
    with warnings.catch_warnings(), np.errstate(invalid="ignore", divide="ignore"):
        # "Mean of empty slice"
        warnings.simplefilter("ignore", category=RuntimeWarning)
        return np.mean(matrix, axis=0)


def column_std(X: MatrixLike, ddof: int = 1) -> np.ndarray:
    """
    Column standard deviations, NaN-propagating.

    Uses the sample standard deviation (Bessel's correction, ``ddof=1``) by default.
    Columns with fewer than ``ddof + 1`` rows give NaN. A column whose values
    are all equal gives exactly 0.0, even where the two-pass formula would
    leave rounding residue (e.g. ``[0.1, 0.1, 0.1]``) or overflow.
    """
    matrix = as_matrix(X)
    with warnings.catch_warnings(), np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        # "Degrees of freedom <= 0 for slice"
        warnings.simplefilter("ignore", category=RuntimeWarning)
        stds = np.std(matrix, axis=0, ddof=ddof)

    if matrix.shape[0] > ddof:
        constant = (matrix == matrix[0]).all(axis=0)
        stds = np.where(constant, 0.0, stds).astype(stds.dtype, copy=False)
    return stds


STATISTICS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "min": column_min,
    "max": column_max,
    "mean": column_mean,
    "std": column_std,
}


def column_statistics(
    X: MatrixLike, stats: Iterable[str] = ("min", "max", "mean", "std")
) -> Dict[str, np.ndarray]:
    """
    Compute several column statistics from a single conversion of the input.

    Args:
        X: Input matrix.
        stats: Names from ``STATISTICS``.

    Returns:
        Dictionary mapping statistic name to its column vector.
    """
    names = list(stats)
    unknown = [name for name in names if name not in STATISTICS]
    if unknown:
        raise ValueError(f"Unknown statistic(s): {unknown}. Available: {sorted(STATISTICS)}")

    matrix = as_matrix(X)
    return {name: STATISTICS[name](matrix) for name in names}


def constant_columns(data_min: np.ndarray, data_max: np.ndarray) -> np.ndarray:
    """Positions of columns whose min equals their max."""
    return np.flatnonzero(np.asarray(data_min) == np.asarray(data_max))


def zero_variance_columns(stds: np.ndarray) -> np.ndarray:
    """Positions of columns with a standard deviation of exactly zero."""
    return np.flatnonzero(np.asarray(stds) == 0.0)
