import logging
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..exceptions import ZeroVarianceError
from ..utils import MatrixLike, as_matrix, column_labels, restore_container
from .base import BaseCalculator, FittedState, frozen_vector, json_vector
from .statistics import (
    column_max,
    column_mean,
    column_min,
    column_std,
    constant_columns,
    zero_variance_columns,
)

logger = logging.getLogger(__name__)

DEFAULT_FEATURE_RANGE = (0.0, 1.0)


# --- MinMax Scaler ---
@dataclass(frozen=True, eq=False)
class FittedMinMaxScaler(FittedState):
    """
    Per-column min and max, ignoring NaN.

    Transform maps ``data_min`` to ``feature_range[0]`` and ``data_max`` to
    ``feature_range[1]``:

        z = (x - data_min) / (data_max - data_min) * (high - low) + low

    NaN in the input passes through. A constant column (``data_min == data_max``)
    divides by zero and yields NaN or +/-inf; this is not treated as an error.
    """

    data_min: np.ndarray
    data_max: np.ndarray
    feature_range: Tuple[float, float] = DEFAULT_FEATURE_RANGE

    def __post_init__(self):
        object.__setattr__(self, "data_min", frozen_vector(self.data_min))
        object.__setattr__(self, "data_max", frozen_vector(self.data_max))
        object.__setattr__(self, "feature_range", _check_feature_range(self.feature_range))
        if self.data_min.shape != self.data_max.shape:
            raise ValueError(
                f"data_min and data_max must have the same length, "
                f"got {self.data_min.shape[0]} and {self.data_max.shape[0]}"
            )

    @property
    def n_features(self) -> int:
        return self.data_min.shape[0]

    def transform(self, X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
        matrix = self._check_input(X)
        low, high = self.feature_range

        with np.errstate(divide="ignore", invalid="ignore"):
            scaled = (matrix - self.data_min) / (self.data_max - self.data_min)
            if (low, high) != DEFAULT_FEATURE_RANGE:
                scaled = scaled * (high - low) + low

        return restore_container(scaled, X)

    def summary(self) -> Dict[str, Any]:
        return {
            "type": "minmax_scaler",
            "data_min": json_vector(self.data_min),
            "data_max": json_vector(self.data_max),
            "feature_range": list(self.feature_range),
            "n_features": self.n_features,
        }

    def __str__(self) -> str:
        return f"Min: {self.data_min}\nMax: {self.data_max}"


class MinMaxScaler(BaseCalculator):
    """Scales each feature to ``feature_range``, [0, 1] by default."""

    def __init__(self, feature_range: Sequence[float] = DEFAULT_FEATURE_RANGE):
        self.feature_range = _check_feature_range(feature_range)

    def fit(self, X: MatrixLike) -> FittedMinMaxScaler:
        matrix = as_matrix(X)
        data_min = column_min(matrix)
        data_max = column_max(matrix)

        if matrix.shape[0] > 0:
            all_nan = np.flatnonzero(np.isnan(data_min))
            if all_nan.size:
                logger.warning(
                    "MinMaxScaler: column(s) %s contain only NaN; their min/max are undefined.",
                    column_labels(X, all_nan),
                )
            constant = constant_columns(data_min, data_max)
            if constant.size:
                logger.warning(
                    "MinMaxScaler: column(s) %s are constant; transform will divide by zero.",
                    column_labels(X, constant),
                )

        logger.debug("Fitted MinMaxScaler on %d rows x %d columns", matrix.shape[0], matrix.shape[1])
        return FittedMinMaxScaler(data_min=data_min, data_max=data_max, feature_range=self.feature_range)

    def __repr__(self) -> str:
        return f"MinMaxScaler(feature_range={self.feature_range})"


# --- Standard Scaler ---
@dataclass(frozen=True, eq=False)
class FittedStandardScaler(FittedState):
    """
    Per-column means and sample standard deviations.

    Transform computes ``z = (x - means) / stds``. A NaN anywhere in a fitted
    column makes its mean and std NaN, so that column transforms to all NaN.
    """

    means: np.ndarray
    stds: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "means", frozen_vector(self.means))
        object.__setattr__(self, "stds", frozen_vector(self.stds))
        if self.means.shape != self.stds.shape:
            raise ValueError(
                f"means and stds must have the same length, "
                f"got {self.means.shape[0]} and {self.stds.shape[0]}"
            )
        zero = zero_variance_columns(self.stds)
        if zero.size:
            raise ZeroVarianceError(columns=zero)

    @property
    def n_features(self) -> int:
        return self.means.shape[0]

    def transform(self, X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
        matrix = self._check_input(X)
        with np.errstate(divide="ignore", invalid="ignore"):
            standardized = (matrix - self.means) / self.stds
        return restore_container(standardized, X)

    def summary(self) -> Dict[str, Any]:
        return {
            "type": "standard_scaler",
            "mean": json_vector(self.means),
            "std": json_vector(self.stds),
            "n_features": self.n_features,
        }

    def __str__(self) -> str:
        return f"Means: {self.means}\nStds: {self.stds}"


class StandardScaler(BaseCalculator):
    """
    Standardizes features by subtracting the mean and dividing by the sample
    standard deviation (``ddof=1``), giving zero mean and unit variance.
    """

    def fit(self, X: MatrixLike) -> FittedStandardScaler:
        """
        Raises:
            ZeroVarianceError: if any column is constant. Its standard deviation
                is zero and transforming would divide by zero.
        """
        matrix = as_matrix(X)
        stds = column_std(matrix, ddof=1)

        zero = zero_variance_columns(stds)
        if zero.size:
            raise ZeroVarianceError(columns=zero, labels=column_labels(X, zero))

        means = column_mean(matrix)
        logger.debug("Fitted StandardScaler on %d rows x %d columns", matrix.shape[0], matrix.shape[1])
        return FittedStandardScaler(means=means, stds=stds)

    def __repr__(self) -> str:
        return "StandardScaler()"


def min_max_scale(X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
    """Scale every column of X to [0, 1]. Equivalent to ``custom_scale(X, 0, 1)``."""
    return MinMaxScaler().fit_transform(X)


def standard_scale(X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
    """
    Standardize every column of X to zero mean and unit sample variance.

    Raises ZeroVarianceError for constant columns, same as ``StandardScaler.fit``.
    """
    return StandardScaler().fit_transform(X)


def _check_feature_range(feature_range: Sequence[float]) -> Tuple[float, float]:
    values = tuple(float(v) for v in feature_range)
    if len(values) != 2:
        raise ValueError(f"feature_range must be (min, max), got {feature_range!r}")
    return values
