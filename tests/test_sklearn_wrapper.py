import numpy as np
import pytest
from sklearn.base import clone
from sklearn.exceptions import NotFittedError
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import MinMaxScaler as SkMinMaxScaler

from tabprep.preprocessing.scaling import MinMaxScaler, StandardScaler
from tabprep.preprocessing.transformations import Binarizer, binarize
from tabprep.sklearn_wrapper import SklearnTransformer


def test_matches_sklearn_min_max(random_data: np.ndarray) -> None:
    ours = SklearnTransformer(MinMaxScaler()).fit_transform(random_data)
    theirs = SkMinMaxScaler().fit_transform(random_data)
    np.testing.assert_allclose(ours, theirs, atol=1e-12)


def test_feature_range_matches_sklearn(random_data: np.ndarray) -> None:
    ours = SklearnTransformer(MinMaxScaler(feature_range=(-3, 5))).fit_transform(random_data)
    theirs = SkMinMaxScaler(feature_range=(-3, 5)).fit_transform(random_data)
    np.testing.assert_allclose(ours, theirs, atol=1e-9)


def test_inside_sklearn_pipeline(reference_data: np.ndarray) -> None:
    pipeline = Pipeline([
        ("minmax", SklearnTransformer(MinMaxScaler())),
        ("standard", SklearnTransformer(StandardScaler())),
        ("binarize", SklearnTransformer(Binarizer(threshold=0.0))),
    ])
    result = pipeline.fit_transform(reference_data)
    np.testing.assert_array_equal(result, [[0.0, 0.0], [0.0, 0.0], [1.0, 1.0], [1.0, 1.0]])
    assert pipeline.named_steps["standard"].n_features_in_ == 2


def test_not_fitted() -> None:
    with pytest.raises(NotFittedError):
        SklearnTransformer(MinMaxScaler()).transform([[1.0]])


def test_clone_and_params(reference_data: np.ndarray) -> None:
    estimator = SklearnTransformer(Binarizer(threshold=5.0))
    assert estimator.get_params()["calculator"] is estimator.calculator

    cloned = clone(estimator)
    assert cloned.calculator is not estimator.calculator
    assert cloned.calculator.threshold == 5.0
    np.testing.assert_array_equal(cloned.fit_transform(reference_data), binarize(reference_data, 5.0))
