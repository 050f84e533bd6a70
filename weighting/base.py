# -*- coding: utf-8 -*-
"""
Weight result container shared by weighting components.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np
import pandas as pd


@dataclass
class WeightResult:
    """
    Snapshot of a criterion weight vector.

    Attributes
    ----------
    weights : dict
        {criterion: weight} in criterion order
    method : str
        How the weights were produced (e.g. ``'equal'``, ``'manual'``)
    details : dict
        Bookkeeping such as the criterion count
    """
    weights: Dict[str, float]
    method: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def as_array(self) -> np.ndarray:
        return np.array(list(self.weights.values()), dtype=float)

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self.weights, name='Weight', dtype=float)

    @property
    def total(self) -> float:
        return float(self.as_array.sum())
