# -*- coding: utf-8 -*-
"""
Posture-based defuzzification.

    pessimistic → a           (worst plausible outcome)
    neutral     → (a + b + c) / 3
    optimistic  → c           (best plausible outcome)
"""

from typing import Union

from config import DecisionPosture
from mcdm.exceptions import ValidationError
from mcdm.fuzzy import TriangularFuzzyNumber, centroid

PostureLike = Union[DecisionPosture, str]


def resolve_posture(posture: PostureLike) -> DecisionPosture:
    """Accept a :class:`DecisionPosture` or its string value."""
    if isinstance(posture, DecisionPosture):
        return posture
    try:
        return DecisionPosture(str(posture).strip().lower())
    except ValueError:
        valid = ', '.join(p.value for p in DecisionPosture)
        raise ValidationError(
            f"Unknown decision posture: {posture!r} (expected one of {valid})"
        ) from None


def score(tfn: TriangularFuzzyNumber, posture: PostureLike = DecisionPosture.NEUTRAL) -> float:
    """
    Reduce *tfn* to a crisp score under *posture*.

    Raises:
        ValidationError: If the posture is unknown
    """
    posture = resolve_posture(posture)
    if posture is DecisionPosture.PESSIMISTIC:
        return tfn.a
    elif posture is DecisionPosture.OPTIMISTIC:
        return tfn.c
    return centroid(tfn)


__all__ = ['resolve_posture', 'score']
