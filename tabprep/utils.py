from typing import Any, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .config import get_settings
from .exceptions import InvalidMatrixError

MatrixLike = Union[np.ndarray, pd.DataFrame, Sequence[Sequence[float]]]


def as_matrix(X: MatrixLike) -> np.ndarray:
    """
    Coerce input to a 2-D floating point array.

    Accepts ndarrays, DataFrames and nested sequences. The input is never
    modified; an ndarray already of the configured dtype is returned as is.
    """
    dtype = get_settings().DTYPE
    try:
        if isinstance(X, pd.DataFrame):
            matrix = X.to_numpy(dtype=dtype)
        else:
            matrix = np.asarray(X, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrixError(
            f"Input cannot be converted to a numeric matrix: {exc}",
            details={"type": type(X).__name__},
        ) from exc

    if matrix.ndim != 2:
        raise InvalidMatrixError(
            f"Expected a 2-D matrix (rows = samples, columns = features), got {matrix.ndim}-D input.",
            details={"ndim": matrix.ndim, "shape": list(matrix.shape)},
        )
    return matrix


def restore_container(result: np.ndarray, original: Any) -> Union[np.ndarray, pd.DataFrame]:
    """Wrap result back into a DataFrame if the caller passed one."""
    if isinstance(original, pd.DataFrame):
        return pd.DataFrame(result, index=original.index, columns=original.columns)
    return result


def column_labels(X: Any, indices: Sequence[int]) -> List[Any]:
    """Column names for DataFrames, positions otherwise."""
    if isinstance(X, pd.DataFrame):
        return [X.columns[i] for i in indices]
    return [int(i) for i in indices]


def get_matrix_stats(X: Any) -> Tuple[int, int]:
    """Returns (rows, columns) for a matrix-like input."""
    if hasattr(X, "shape") and len(X.shape) == 2:
        return int(X.shape[0]), int(X.shape[1])
    matrix = as_matrix(X)
    return matrix.shape[0], matrix.shape[1]
