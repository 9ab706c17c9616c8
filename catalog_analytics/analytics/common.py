"""
Small numeric helpers shared by the summary and the API.
"""
from __future__ import annotations

import math

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    return numerator / denominator


def pct_of_total(part: float, total: float) -> float:
    """Share of total as a percentage rounded to one decimal."""
    return round(safe_divide(part, total) * 100, 1)


def to_native(obj):
    """Recursively turn numpy/pandas scalars into plain Python for JSON.

    NaN, NA and infinities become None.
    """
    if isinstance(obj, dict):
        return {str(k): to_native(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [to_native(v) for v in obj]
    if isinstance(obj, np.ndarray):
        return to_native(obj.tolist())
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        v = float(obj)
        return None if math.isnan(v) or math.isinf(v) else v
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
