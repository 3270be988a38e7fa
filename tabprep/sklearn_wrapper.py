from typing import Any, Optional

from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from .preprocessing.base import BaseCalculator


class SklearnTransformer(TransformerMixin, BaseEstimator):
    """
    Exposes a tabprep calculator through the scikit-learn estimator API so it
    can be used inside ``sklearn.pipeline.Pipeline``.

    ``fit`` keeps the immutable fitted state in ``state_``.
    """

    def __init__(self, calculator: BaseCalculator):
        self.calculator = calculator

    def fit(self, X: Any, y: Optional[Any] = None) -> "SklearnTransformer":
        self.state_ = self.calculator.fit(X)
        self.n_features_in_ = self.state_.n_features
        return self

    def transform(self, X: Any) -> Any:
        check_is_fitted(self, "state_")
        return self.state_.transform(X)
