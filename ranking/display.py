# -*- coding: utf-8 -*-
"""Display conversions selected by :class:`config.DisplayMode`."""

from typing import Tuple, Union

from config import DisplayMode
from mcdm.exceptions import ValidationError
from mcdm.fuzzy import TriangularFuzzyNumber, to_interval, to_trapezoid

DisplayModeLike = Union[DisplayMode, str]


def resolve_display_mode(mode: DisplayModeLike) -> DisplayMode:
    if isinstance(mode, DisplayMode):
        return mode
    try:
        return DisplayMode(str(mode).strip().lower())
    except ValueError:
        valid = ', '.join(m.value for m in DisplayMode)
        raise ValidationError(
            f"Unknown display mode: {mode!r} (expected one of {valid})"
        ) from None


def convert(tfn: TriangularFuzzyNumber,
            mode: DisplayModeLike = DisplayMode.TRIANGULAR) -> Tuple[float, ...]:
    """
    Representation of *tfn* for display.

    triangular → (a, b, c); interval → (a, c); trapezoid → (a, b, b, c).
    """
    mode = resolve_display_mode(mode)
    if mode is DisplayMode.INTERVAL:
        return to_interval(tfn)
    if mode is DisplayMode.TRAPEZOID:
        return to_trapezoid(tfn)
    return tfn.as_tuple()


def format_values(values: Tuple[float, ...], precision: int = 3) -> str:
    """``[0.000, 1.000, 2.000]`` style label."""
    return '[' + ', '.join(f'{v:.{precision}f}' for v in values) + ']'


__all__ = ['resolve_display_mode', 'convert', 'format_values']
