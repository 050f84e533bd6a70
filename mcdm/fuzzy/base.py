# -*- coding: utf-8 -*-
"""
Triangular Fuzzy Number Algebra
===============================

Pure operations on triangular fuzzy numbers and their display shapes:
- TriangularFuzzyNumber (TFN): immutable (a, b, c) triple
- add / scale / centroid: the arithmetic used by weighted aggregation
- to_interval / to_trapezoid: shape conversions for display

Mathematical Foundation:
    A Triangular Fuzzy Number (TFN) is denoted as Ã = (a, b, c) where:
    - a: left end of the support (membership 0)
    - b: peak (membership 1)
    - c: right end of the support (membership 0)

    The membership function μ_Ã(x) is:
        μ_Ã(x) = (x - a)/(b - a)  if a ≤ x ≤ b
               = (c - x)/(c - b)  if b ≤ x ≤ c
               = 0                otherwise

    A crisp number is the degenerate TFN (x, x, x).
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..exceptions import ValidationError


Interval = Tuple[float, float]
Trapezoid = Tuple[float, float, float, float]


@dataclass(frozen=True)
class TriangularFuzzyNumber:
    """
    Triangular Fuzzy Number (TFN) representation.

    Instances are immutable; every operation returns a new TFN. The
    constructor does not enforce ``a ≤ b ≤ c`` so that scaling by a
    negative factor stays total; use :meth:`validated` (or check
    :attr:`is_valid`) wherever the ordering is a user-facing rule.

    Attributes:
        a: Left end of the support
        b: Peak (membership = 1)
        c: Right end of the support

    Example:
        >>> low = TriangularFuzzyNumber(0, 1, 2)
        >>> (low * 0.5 + low).as_tuple()
        (0.0, 1.5, 3.0)
    """
    a: float
    b: float
    c: float

    def __post_init__(self):
        object.__setattr__(self, 'a', float(self.a))
        object.__setattr__(self, 'b', float(self.b))
        object.__setattr__(self, 'c', float(self.c))

    @classmethod
    def validated(cls, a: float, b: float, c: float) -> 'TriangularFuzzyNumber':
        """
        Build a TFN, rejecting anything that is not ``a ≤ b ≤ c``.

        Raises:
            ValidationError: If a component is not a finite number or the
                ordering is violated
        """
        try:
            tfn = cls(a, b, c)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"TFN components must be numbers: {exc}") from exc
        if not all(math.isfinite(x) for x in tfn.as_tuple()):
            raise ValidationError(f"TFN components must be finite, got {tfn.as_tuple()}")
        if not tfn.is_valid:
            raise ValidationError(
                f"Malformed TFN ({tfn.a}, {tfn.b}, {tfn.c}): expected a ≤ b ≤ c"
            )
        return tfn

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> 'TriangularFuzzyNumber':
        """Validated construction from any (a, b, c) sequence."""
        values = list(values)
        if len(values) != 3:
            raise ValidationError(f"A TFN needs exactly 3 components, got {len(values)}")
        return cls.validated(*values)

    @staticmethod
    def zero() -> 'TriangularFuzzyNumber':
        """Additive identity (0, 0, 0)."""
        return TriangularFuzzyNumber(0.0, 0.0, 0.0)

    @property
    def is_valid(self) -> bool:
        return self.a <= self.b <= self.c

    @property
    def is_crisp(self) -> bool:
        return self.a == self.b == self.c

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def __iter__(self):
        return iter(self.as_tuple())

    def __add__(self, other: 'TriangularFuzzyNumber') -> 'TriangularFuzzyNumber':
        """Ã + B̃ = (a₁ + a₂, b₁ + b₂, c₁ + c₂)"""
        if not isinstance(other, TriangularFuzzyNumber):
            return NotImplemented
        return add(self, other)

    def __mul__(self, k: float) -> 'TriangularFuzzyNumber':
        """Scalar multiplication k·Ã = (k·a, k·b, k·c)"""
        if isinstance(k, TriangularFuzzyNumber):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: float) -> 'TriangularFuzzyNumber':
        return self.__mul__(k)

    def __repr__(self) -> str:
        return f"TFN({self.a:.4f}, {self.b:.4f}, {self.c:.4f})"


TFN = TriangularFuzzyNumber


# =============================================================================
# ARITHMETIC
# =============================================================================

def add(t1: TriangularFuzzyNumber, t2: TriangularFuzzyNumber) -> TriangularFuzzyNumber:
    """Component-wise sum. No normalisation is re-applied to the result."""
    return TriangularFuzzyNumber(t1.a + t2.a, t1.b + t2.b, t1.c + t2.c)


def scale(t: TriangularFuzzyNumber, k: float) -> TriangularFuzzyNumber:
    """
    Component-wise multiplication by the scalar *k*.

    The ordering is not re-checked: with k < 0 the result has a > c.
    Criterion weights are non-negative, so aggregation never hits that case.
    """
    k = float(k)
    return TriangularFuzzyNumber(t.a * k, t.b * k, t.c * k)


def centroid(t: TriangularFuzzyNumber) -> float:
    """Centre of gravity (a + b + c) / 3."""
    return (t.a + t.b + t.c) / 3


# =============================================================================
# SHAPE CONVERSIONS
# =============================================================================

def to_interval(t: TriangularFuzzyNumber) -> Interval:
    """Support of the TFN, (a, c). The peak is discarded."""
    return (t.a, t.c)


def to_trapezoid(t: TriangularFuzzyNumber) -> Trapezoid:
    """
    Widen a TFN into the trapezoid (a, b, b, a + 2δ) with δ = (c - a) / 2.

    Both interior points are the peak and the right edge equals c, so the
    result outlines the same triangle in trapezoid form.
    """
    delta = (t.c - t.a) / 2
    return (t.a, t.b, t.b, t.a + delta * 2)


def membership(t: TriangularFuzzyNumber, x: float) -> float:
    """
    Membership degree μ(x) of *x* in *t*.

    Vertical edges (a == b or b == c) are treated as steps so that the peak
    always has membership 1, including for crisp numbers.
    """
    if x == t.b:
        return 1.0
    if x < t.a or x > t.c:
        return 0.0
    if x < t.b:
        return (x - t.a) / (t.b - t.a)
    return (t.c - x) / (t.c - t.b)


def membership_points(t: TriangularFuzzyNumber) -> List[Tuple[float, float]]:
    """Vertices [(a, 0), (b, 1), (c, 0)] of the membership polyline."""
    return [(t.a, 0.0), (t.b, 1.0), (t.c, 0.0)]


__all__ = [
    'TriangularFuzzyNumber',
    'TFN',
    'Interval',
    'Trapezoid',
    'add',
    'scale',
    'centroid',
    'to_interval',
    'to_trapezoid',
    'membership',
    'membership_points',
]
