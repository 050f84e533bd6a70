# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

Fuzzy linguistic building blocks shared by weighting and ranking.

Submodules
----------
fuzzy
    Triangular fuzzy numbers, shape conversions, linguistic term registry
exceptions
    ValidationError, IntegrityError, DegenerateInputError

Usage
-----
>>> from mcdm.fuzzy import TriangularFuzzyNumber, LinguisticTermRegistry
>>> from mcdm.exceptions import ValidationError
"""

from .exceptions import (
    FuzzyMCDMError,
    ValidationError,
    IntegrityError,
    DegenerateInputError,
)
from .fuzzy import (
    TriangularFuzzyNumber,
    LinguisticTermRegistry,
    DEFAULT_LINGUISTIC_SCALE,
)


__all__ = [
    # Errors
    'FuzzyMCDMError',
    'ValidationError',
    'IntegrityError',
    'DegenerateInputError',

    # Fuzzy types
    'TriangularFuzzyNumber',
    'LinguisticTermRegistry',
    'DEFAULT_LINGUISTIC_SCALE',
]
