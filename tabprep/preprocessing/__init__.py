from .base import BaseCalculator, FittedState
from .pipeline import FeatureEngineer, FittedFeatureEngineer
from .scaling import (
    FittedMinMaxScaler,
    FittedStandardScaler,
    MinMaxScaler,
    StandardScaler,
    min_max_scale,
    standard_scale,
)
from .statistics import column_max, column_mean, column_min, column_statistics, column_std
from .transformations import Binarizer, FittedBinarizer, binarize, custom_scale

__all__ = [
    "BaseCalculator",
    "FittedState",
    "FeatureEngineer",
    "FittedFeatureEngineer",
    "MinMaxScaler",
    "FittedMinMaxScaler",
    "StandardScaler",
    "FittedStandardScaler",
    "Binarizer",
    "FittedBinarizer",
    "min_max_scale",
    "standard_scale",
    "custom_scale",
    "binarize",
    "column_min",
    "column_max",
    "column_mean",
    "column_std",
    "column_statistics",
]
