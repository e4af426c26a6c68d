from __future__ import annotations

import pandas as pd

from ..model.errors import InvalidWeights


def validate_weight_table(df: pd.DataFrame, weight_column: str = "weight") -> None:
    """Check that a weight table has one non-negative integer weight per row."""
    if weight_column not in df.columns:
        msg = f"Missing required column: '{weight_column}'"
        raise ValueError(msg)

    weights = df[weight_column]
    if weights.isna().any():
        msg = f"Column '{weight_column}' contains missing weights."
        raise InvalidWeights(msg)
    if not pd.api.types.is_integer_dtype(weights):
        msg = f"Column '{weight_column}' must hold integer weights."
        raise InvalidWeights(msg)
    if (weights < 0).any():
        msg = f"Column '{weight_column}' contains negative weights."
        raise InvalidWeights(msg)
