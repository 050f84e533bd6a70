# -*- coding: utf-8 -*-
"""
Weighting Methods Module

Criterion weights for fuzzy linguistic MCDM:

- CriteriaWeights: Ordered criteria with a decision-maker supplied weight
  vector, renormalised to sum to 1 after every update
- WeightResult: Immutable snapshot (dict / array / Series views)
"""

from .base import WeightResult
from .criteria import CriteriaWeights

__all__ = [
    'WeightResult',
    'CriteriaWeights',
]
