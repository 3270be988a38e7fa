"""Tabular feature preprocessing: min-max, standard and custom-range scaling, binarization."""

import logging

from .exceptions import FeatureCountMismatchError, InvalidMatrixError, TabprepError, ZeroVarianceError
from .preprocessing import (
    Binarizer,
    FeatureEngineer,
    MinMaxScaler,
    StandardScaler,
    binarize,
    custom_scale,
    min_max_scale,
    standard_scale,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MinMaxScaler",
    "StandardScaler",
    "Binarizer",
    "FeatureEngineer",
    "min_max_scale",
    "standard_scale",
    "custom_scale",
    "binarize",
    "TabprepError",
    "ZeroVarianceError",
    "FeatureCountMismatchError",
    "InvalidMatrixError",
]
