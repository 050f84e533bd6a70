# -*- coding: utf-8 -*-
"""
Error Taxonomy for the Fuzzy MCDM Engine
========================================

- ValidationError      - user-supplied data breaks a structural rule
                         (blank / duplicate name, malformed TFN, bad weight).
- IntegrityError       - internal inconsistency (dangling term reference,
                         ratings row that does not match the criteria).
- DegenerateInputError - normalisation over a registry whose components
                         are all equal (max == min).

Every failed operation leaves the state it was called on untouched.
"""


class FuzzyMCDMError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(FuzzyMCDMError, ValueError):
    """User input violates a structural invariant; the call was a no-op."""


class IntegrityError(FuzzyMCDMError, LookupError):
    """Internal state is inconsistent (treated as a defect, not user error)."""


class DegenerateInputError(FuzzyMCDMError, ArithmeticError):
    """Operation undefined for the given input (e.g. division by max - min == 0)."""


__all__ = [
    'FuzzyMCDMError',
    'ValidationError',
    'IntegrityError',
    'DegenerateInputError',
]
