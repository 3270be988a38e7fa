"""Feature Engineering Pipeline Orchestrator."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Type, Union

import numpy as np
import pandas as pd

from ..schemas import StepConfig
from ..utils import MatrixLike, as_matrix, get_matrix_stats, restore_container
from .base import BaseCalculator, FittedState
from .scaling import MinMaxScaler, StandardScaler
from .transformations import Binarizer

logger = logging.getLogger(__name__)

TRANSFORMERS: Dict[str, Type[BaseCalculator]] = {
    "MinMaxScaler": MinMaxScaler,
    "StandardScaler": StandardScaler,
    "Binarizer": Binarizer,
}


@dataclass(frozen=True, eq=False)
class FittedFeatureEngineer(FittedState):
    """Fitted steps, applied in order by ``transform``."""

    steps: Tuple[Tuple[str, FittedState], ...]
    fitted_features: int

    @property
    def n_features(self) -> int:
        return self.fitted_features

    @property
    def metrics(self) -> Dict[str, Dict[str, Any]]:
        return {name: state.summary() for name, state in self.steps}

    def transform(self, X: MatrixLike) -> Union[np.ndarray, pd.DataFrame]:
        matrix = self._check_input(X)
        if not self.steps:
            return restore_container(matrix.copy(), X)

        current = X
        for name, state in self.steps:
            logger.debug(f"Applying step {name}")
            current = state.transform(current)
        return current

    def summary(self) -> Dict[str, Any]:
        return {
            "type": "feature_engineer",
            "steps": [name for name, _ in self.steps],
            "n_features": self.n_features,
        }

    def __str__(self) -> str:
        return "\n".join(f"[{name}]\n{state}" for name, state in self.steps)


class FeatureEngineer(BaseCalculator):
    """
    Orchestrates a sequence of feature engineering steps.

    Each step is fitted on the output of the previous one, so
    ``[MinMaxScaler, StandardScaler, Binarizer]`` is equivalent to
    ``binarize(standard_scale(min_max_scale(X)), threshold)`` on the fit data.
    """

    def __init__(self, steps_config: List[Union[Dict[str, Any], StepConfig]]):
        self.steps_config = [
            step if isinstance(step, StepConfig) else StepConfig(**step) for step in steps_config
        ]
        names = [step.name for step in self.steps_config]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate step names: {duplicates}")
        for step in self.steps_config:
            # Fail on unknown transformers before any data is seen
            self._get_calculator(step)

    @staticmethod
    def _get_calculator(step: StepConfig) -> BaseCalculator:
        calculator_cls = TRANSFORMERS.get(step.transformer)
        if calculator_cls is None:
            raise ValueError(
                f"Unknown transformer type: {step.transformer}. Available: {sorted(TRANSFORMERS)}"
            )
        return calculator_cls(**step.params)

    def fit(self, X: MatrixLike) -> FittedFeatureEngineer:
        n_features = as_matrix(X).shape[1]
        current = X
        fitted: List[Tuple[str, FittedState]] = []

        for i, step in enumerate(self.steps_config):
            logger.info(f"Running step {i}: {step.name} ({step.transformer})")
            rows, cols = get_matrix_stats(current)
            logger.debug(f"Step {i} input: {rows} rows x {cols} columns")

            state = self._get_calculator(step).fit(current)
            current = state.transform(current)
            fitted.append((step.name, state))

        return FittedFeatureEngineer(steps=tuple(fitted), fitted_features=n_features)
