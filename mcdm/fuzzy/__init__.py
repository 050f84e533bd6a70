# -*- coding: utf-8 -*-
"""
Fuzzy Number Module
===================

Triangular fuzzy numbers and the linguistic terms that name them.

Core Components:
    - TriangularFuzzyNumber: Fuzzy number representation (a, b, c)
    - add / scale / centroid: Arithmetic used by weighted aggregation
    - to_interval / to_trapezoid: Display conversions
    - LinguisticTermRegistry: Ordered name -> TFN store with normalisation

Example Usage:
    >>> from mcdm.fuzzy import LinguisticTermRegistry, to_interval
    >>>
    >>> registry = LinguisticTermRegistry.from_scale()
    >>> to_interval(registry.get('Medium'))
    (2.0, 4.0)
"""

from .base import (
    TriangularFuzzyNumber,
    TFN,
    Interval,
    Trapezoid,
    add,
    scale,
    centroid,
    to_interval,
    to_trapezoid,
    membership,
    membership_points,
)
from .linguistic import LinguisticTermRegistry, DEFAULT_LINGUISTIC_SCALE

__all__ = [
    # Core types
    'TriangularFuzzyNumber',
    'TFN',
    'Interval',
    'Trapezoid',
    # Algebra
    'add',
    'scale',
    'centroid',
    'to_interval',
    'to_trapezoid',
    'membership',
    'membership_points',
    # Linguistic terms
    'LinguisticTermRegistry',
    'DEFAULT_LINGUISTIC_SCALE',
]
