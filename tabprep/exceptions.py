from typing import Any, Dict, List, Optional, Sequence


class TabprepError(Exception):
    """Base exception for preprocessing errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidMatrixError(TabprepError, ValueError):
    """Raised when input cannot be read as a 2-D numeric matrix."""


class ZeroVarianceError(TabprepError, ValueError):
    """
    Raised by StandardScaler.fit when a column has a standard deviation of zero.

    Standardizing such a column would divide by zero, so no fitted state is produced.
    """

    def __init__(self, columns: Sequence[int], labels: Optional[Sequence[Any]] = None):
        self.columns: List[int] = [int(c) for c in columns]
        self.labels: List[Any] = list(labels) if labels is not None else list(self.columns)
        message = (
            f"Column(s) {self.labels} have a standard deviation of zero. "
            "Cannot standardize due to division by zero."
        )
        super().__init__(message, details={"columns": self.columns, "labels": self.labels})


class FeatureCountMismatchError(TabprepError, ValueError):
    """Raised when transform receives a different column count than fit saw."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        message = f"Expected {expected} feature column(s), got {received}."
        super().__init__(message, details={"expected": expected, "received": received})
