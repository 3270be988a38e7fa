from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

import numpy as np
import pandas as pd

from ..exceptions import FeatureCountMismatchError
from ..utils import MatrixLike, as_matrix


def frozen_vector(values: Any) -> np.ndarray:
    """Read-only float copy of a statistic vector."""
    vector = np.array(values, copy=True).reshape(-1)
    if vector.dtype.kind != "f":
        vector = vector.astype(float)
    vector.setflags(write=False)
    return vector


def json_vector(vector: np.ndarray) -> List[Optional[float]]:
    """Plain list of floats with NaN and inf replaced by None."""
    return [float(v) if np.isfinite(v) else None for v in vector]


class FittedState(ABC):
    """
    Statistics produced by ``BaseCalculator.fit``.

    Instances are immutable: every statistic vector is a read-only copy and
    there are no mutation methods, so a fitted state can be shared freely.
    """

    @property
    @abstractmethod
    def n_features(self) -> int:
        """Number of columns of the matrix this state was fitted on."""

    @abstractmethod
    def transform(self, X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
        """
        Applies the transformation using the fitted statistics.
        Returns a new matrix with the same shape (and container type) as X.
        """
        pass

    @abstractmethod
    def summary(self) -> Dict[str, Any]:
        """JSON-friendly view of the fitted statistics. Non-finite values become None."""
        pass

    def _check_input(self, X: MatrixLike) -> np.ndarray:
        matrix = as_matrix(X)
        if matrix.shape[1] != self.n_features:
            raise FeatureCountMismatchError(expected=self.n_features, received=matrix.shape[1])
        return matrix


class BaseCalculator(ABC):
    @abstractmethod
    def fit(self, X: MatrixLike) -> FittedState:
        """
        Calculates statistics from the training data.
        Must not modify X.
        """
        pass

    def fit_transform(self, X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
        return self.fit(X).transform(X)
