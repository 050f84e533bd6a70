# -*- coding: utf-8 -*-
"""
Criterion Weight Vector

Subjective criterion weights supplied by the decision maker, kept
normalised after every update.

Mathematical Formula:
    w_j = r_j / Σ r_k

where:
    r_j = raw (pre-normalisation) weight assigned to criterion j

When every raw weight is zero the divisor falls back to 1, so the vector
stays all-zero instead of becoming NaN.
"""

import logging
import math
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from mcdm.exceptions import ValidationError
from .base import WeightResult

logger = logging.getLogger('fuzzy_mcdm')

CriterionKey = Union[str, int]


def _check_weight(value: float) -> float:
    try:
        w = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Weight must be a number, got {value!r}") from None
    if not math.isfinite(w) or w < 0:
        raise ValidationError(f"Weight must be a finite non-negative number, got {value!r}")
    return w


def _normalize(raw: np.ndarray) -> np.ndarray:
    total = raw.sum() or 1.0
    return raw / total


class CriteriaWeights:
    """
    Ordered criterion names with a normalised, non-negative weight vector.

    Parameters
    ----------
    criteria : sequence of str
        Criterion names, unique and non-blank; order is preserved.
    weights : sequence of float, optional
        Initial raw weights (normalised on construction).
        Default: equal weights 1/n.

    Examples
    --------
    >>> w = CriteriaWeights(['Price', 'Camera'])
    >>> _ = w.set_weight('Price', 1.5)
    >>> w.as_dict()
    {'Price': 0.75, 'Camera': 0.25}
    """

    def __init__(self, criteria: Sequence[str],
                 weights: Optional[Sequence[float]] = None):
        names: List[str] = []
        for name in criteria:
            self._check_name(name, names)
            names.append(name)

        if weights is None:
            raw = np.full(len(names), 1.0 / len(names)) if names else np.zeros(0)
        else:
            if len(weights) != len(names):
                raise ValidationError(
                    f"Got {len(weights)} weights for {len(names)} criteria")
            raw = np.array([_check_weight(w) for w in weights], dtype=float)

        self._criteria = names
        self._weights = _normalize(raw)
        self._method = 'equal' if weights is None else 'manual'

    @staticmethod
    def _check_name(name: str, existing: Sequence[str]) -> None:
        if name is None or not str(name).strip():
            raise ValidationError("Criterion name must not be blank")
        if name in existing:
            raise ValidationError(f"Criterion '{name}' already exists")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_weight(self, criterion: CriterionKey, value: float) -> np.ndarray:
        """
        Assign a raw weight to one criterion and renormalise the whole vector.

        Parameters
        ----------
        criterion : str or int
            Criterion name or position
        value : float
            Raw, non-negative weight

        Returns
        -------
        np.ndarray
            The new normalised weight vector

        Raises
        ------
        ValidationError
            Unknown criterion or invalid value; weights are unchanged.
        """
        j = self.index_of(criterion)
        w = _check_weight(value)
        raw = self._weights.copy()
        raw[j] = w
        self._weights = _normalize(raw)
        self._method = 'manual'
        logger.debug(f"Weight of {self._criteria[j]!r} set to {w} -> {self.as_dict()}")
        return self.as_array

    def validate_criterion(self, name: str, weight: float = 0.0) -> float:
        """
        Check that *name* could be added with raw *weight*, without adding it.

        Returns the weight as a float; raises ValidationError otherwise.
        """
        self._check_name(name, self._criteria)
        return _check_weight(weight)

    def add_criterion(self, name: str, weight: float = 0.0) -> None:
        """Append a criterion with raw *weight*, then renormalise."""
        w = self.validate_criterion(name, weight)
        self._criteria = self._criteria + [name]
        self._weights = _normalize(np.append(self._weights, w))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def index_of(self, criterion: CriterionKey) -> int:
        """Position of *criterion* (given by name or index)."""
        if isinstance(criterion, (int, np.integer)) and not isinstance(criterion, bool):
            if 0 <= criterion < len(self._criteria):
                return int(criterion)
            raise ValidationError(f"Criterion index {criterion} out of range")
        try:
            return self._criteria.index(criterion)
        except ValueError:
            raise ValidationError(f"Unknown criterion '{criterion}'") from None

    @property
    def criteria(self) -> List[str]:
        return list(self._criteria)

    @property
    def as_array(self) -> np.ndarray:
        return self._weights.copy()

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self._weights, index=self._criteria, name='Weight', dtype=float)

    def as_dict(self) -> Dict[str, float]:
        return {c: float(w) for c, w in zip(self._criteria, self._weights)}

    def result(self) -> WeightResult:
        """Snapshot of the current vector as a :class:`WeightResult`."""
        return WeightResult(
            weights=self.as_dict(),
            method=self._method,
            details={'n_criteria': len(self._criteria)},
        )

    def __getitem__(self, criterion: CriterionKey) -> float:
        return float(self._weights[self.index_of(criterion)])

    def __len__(self) -> int:
        return len(self._criteria)

    def __repr__(self) -> str:
        return f"CriteriaWeights({self.as_dict()})"
