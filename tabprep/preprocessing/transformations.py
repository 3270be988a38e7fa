import logging
from dataclasses import dataclass
from typing import Any, Dict, Union

import numpy as np
import pandas as pd

from ..utils import MatrixLike, as_matrix, restore_container
from .base import BaseCalculator, FittedState
from .scaling import MinMaxScaler

logger = logging.getLogger(__name__)


def custom_scale(X: MatrixLike, min_value: float, max_value: float) -> Union[np.ndarray, pd.DataFrame]:
    """
    Transforms each feature into the range [min_value, max_value].

    For each feature x returns
    ``((x - x.min) / (x.max - x.min)) * (max_value - min_value) + min_value``,
    with x.min and x.max computed from X itself, ignoring NaN.

    No fitted state is kept. Constant columns produce NaN or +/-inf, as in
    min-max scaling.
    """
    return MinMaxScaler(feature_range=(min_value, max_value)).fit_transform(X)


def binarize(X: MatrixLike, threshold: float) -> Union[np.ndarray, pd.DataFrame]:
    """
    Maps each value to 0.0 if it is below threshold, else 1.0.

    NaN never compares less than anything, so NaN always becomes 1.0
    regardless of threshold.
    """
    matrix = as_matrix(X)
    binarized = np.where(matrix < threshold, 0.0, 1.0).astype(matrix.dtype, copy=False)
    return restore_container(binarized, X)


@dataclass(frozen=True, eq=False)
class FittedBinarizer(FittedState):
    threshold: float
    fitted_features: int

    @property
    def n_features(self) -> int:
        return self.fitted_features

    def transform(self, X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
        self._check_input(X)
        return binarize(X, self.threshold)

    def summary(self) -> Dict[str, Any]:
        return {"type": "binarizer", "threshold": self.threshold, "n_features": self.n_features}

    def __str__(self) -> str:
        return f"Threshold: {self.threshold}"


class Binarizer(BaseCalculator):
    """Step-function transform for use in pipelines. Fit only records the column count."""

    def __init__(self, threshold: float = 0.0):
        self.threshold = float(threshold)

    def fit(self, X: MatrixLike) -> FittedBinarizer:
        matrix = as_matrix(X)
        logger.debug("Fitted Binarizer(threshold=%s) on %d columns", self.threshold, matrix.shape[1])
        return FittedBinarizer(threshold=self.threshold, fitted_features=matrix.shape[1])

    def __repr__(self) -> str:
        return f"Binarizer(threshold={self.threshold})"
