"""Pytest fixtures for tabprep tests."""

import logging

import numpy as np
import pandas as pd
import pytest

from tabprep.config import PACKAGE_LOGGER, get_settings


@pytest.fixture(autouse=True)
def reset_settings():
    """Settings are cached; drop the cache so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def reference_data() -> np.ndarray:
    """4x2 matrix used throughout the examples."""
    return np.array([[-1.0, 2.0], [-0.5, 6.0], [0.0, 10.0], [1.0, 18.0]])


@pytest.fixture
def small_data() -> np.ndarray:
    """3x3 matrix with known means and sample stds."""
    return np.array([[1.0, 3.0, 2.0], [0.0, 0.0, 1.0], [2.0, 0.0, 3.0]])


@pytest.fixture
def random_data() -> np.ndarray:
    """Finite data with no constant column."""
    np.random.seed(42)
    return np.column_stack([
        np.random.normal(0, 1, 50),
        np.random.normal(100, 25, 50),
        np.random.uniform(-5, 5, 50),
        np.random.exponential(2, 50),
    ])


@pytest.fixture
def reference_df(reference_data: np.ndarray) -> pd.DataFrame:
    return pd.DataFrame(reference_data, columns=["a", "b"], index=[10, 11, 12, 13])
