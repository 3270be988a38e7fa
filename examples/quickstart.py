"""
tabprep Quickstart Example.

This script demonstrates how to:
1. Fit scalers on training data and reuse the fitted state on new data.
2. Chain the functional transforms.
3. Define a config-driven FeatureEngineer pipeline.
"""

import numpy as np
import pandas as pd

from tabprep import (
    FeatureEngineer,
    MinMaxScaler,
    StandardScaler,
    ZeroVarianceError,
    binarize,
    custom_scale,
    min_max_scale,
    standard_scale,
)
from tabprep.config import setup_logging


def create_dummy_data():
    """Create a dummy dataset for demonstration."""
    np.random.seed(42)
    n = 200
    df = pd.DataFrame(
        {
            "age": np.random.randint(18, 80, n).astype(float),
            "income": np.random.normal(50000, 15000, n),
            "tenure": np.random.exponential(4, n),
        }
    )
    # Add some missing values
    df.loc[0:10, "income"] = np.nan
    return df


def main():
    setup_logging()

    print("1. Creating dummy data...")
    data = create_dummy_data()
    train, test = data.iloc[:160], data.iloc[160:]
    print(f"   Train shape: {train.shape}, test shape: {test.shape}")

    print("\n2. Min-max scaling (NaN ignored during fit, passed through on transform)...")
    minmax = MinMaxScaler().fit(train)
    print(minmax)
    print(minmax.transform(test).head())

    print("\n3. Standard scaling (NaN in a column makes the whole column NaN)...")
    standard = StandardScaler().fit(train.dropna())
    print(standard)
    print(standard.transform(test.dropna()).head())

    print("\n4. Constant columns are rejected by StandardScaler...")
    try:
        StandardScaler().fit(train.assign(constant=1.0))
    except ZeroVarianceError as e:
        print(f"   {e}")

    print("\n5. Functional transforms compose directly...")
    matrix = np.array([[-1.0, 2.0], [-0.5, 6.0], [0.0, 10.0], [1.0, 18.0]])
    print(custom_scale(matrix, -3.0, 5.0))
    print(binarize(standard_scale(min_max_scale(matrix)), 0.0))

    print("\n6. Config-driven pipeline...")
    config = [
        {"name": "minmax", "transformer": "MinMaxScaler", "params": {"feature_range": [-1, 1]}},
        {"name": "standard", "transformer": "StandardScaler"},
        {"name": "binarize", "transformer": "Binarizer", "params": {"threshold": 0.0}},
    ]
    fitted = FeatureEngineer(config).fit(matrix)
    print(fitted.transform(matrix))
    print(f"   Metrics: {fitted.metrics}")


if __name__ == "__main__":
    main()
