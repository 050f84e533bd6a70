# -*- coding: utf-8 -*-
"""
Linguistic Term Registry
========================

Ordered, name-keyed store of linguistic terms ("Low", "High", ...) and the
TFN each one stands for. Insertion order is preserved so rating selectors
and chart legends are populated deterministically.

Normalisation rescales every component of every term into [0, 1] using the
global minimum and maximum across the whole registry:

    x' = (x - min) / (max - min)
"""

import logging
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .base import TriangularFuzzyNumber
from ..exceptions import DegenerateInputError, IntegrityError, ValidationError

logger = logging.getLogger('fuzzy_mcdm')

TermSpec = Union[TriangularFuzzyNumber, Sequence[float]]


# =============================================================================
# DEFAULT SCALE
# =============================================================================

# 5-point scale on [0, 8] used to rate smartphones in the reference session
DEFAULT_LINGUISTIC_SCALE: Dict[str, Tuple[float, float, float]] = {
    'Very low': (0.0, 0.0, 1.0),
    'Low': (0.0, 1.0, 2.0),
    'Medium': (2.0, 3.0, 4.0),
    'High': (4.0, 5.0, 6.0),
    'Very high': (6.0, 7.0, 8.0),
}


def _as_tfn(spec: TermSpec) -> TriangularFuzzyNumber:
    if isinstance(spec, TriangularFuzzyNumber):
        return TriangularFuzzyNumber.validated(spec.a, spec.b, spec.c)
    return TriangularFuzzyNumber.from_sequence(spec)


class LinguisticTermRegistry:
    """
    Insertion-ordered mapping from term name to TFN.

    Terms are only ever added or bulk-rescaled; nothing is removed, so a
    rating that resolved once keeps resolving.

    Example:
        >>> reg = LinguisticTermRegistry()
        >>> reg.insert('Low', TriangularFuzzyNumber(0, 1, 2))
        >>> reg.insert('High', (4, 5, 6))
        >>> reg.list_names()
        ['Low', 'High']
    """

    def __init__(self, terms: Optional[Mapping[str, TermSpec]] = None):
        self._terms: Dict[str, TriangularFuzzyNumber] = {}
        for name, spec in (terms or {}).items():
            self.insert(name, spec)

    @classmethod
    def from_scale(cls, scale: Optional[Mapping[str, TermSpec]] = None) -> 'LinguisticTermRegistry':
        """Registry pre-filled with *scale* (default: the 5-point scale)."""
        return cls(DEFAULT_LINGUISTIC_SCALE if scale is None else scale)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, name: str, tfn: TermSpec) -> TriangularFuzzyNumber:
        """
        Add a new term.

        Args:
            name: Unique, non-blank term name
            tfn: TFN or (a, b, c) sequence with a ≤ b ≤ c

        Returns:
            The stored TFN

        Raises:
            ValidationError: Blank name, duplicate name or malformed TFN.
                The registry is left unchanged.
        """
        if name is None or not str(name).strip():
            raise ValidationError("Term name must not be blank")
        if name in self._terms:
            raise ValidationError(f"Linguistic term '{name}' already exists")
        value = _as_tfn(tfn)
        self._terms[name] = value
        logger.debug(f"Registered linguistic term {name!r} = {value!r}")
        return value

    def normalize(self) -> None:
        """
        Rescale every term component-wise into [0, 1].

        Raises:
            DegenerateInputError: If every component of every term is equal
                (max == min), including the empty registry. Nothing changes.
        """
        if not self._terms:
            raise DegenerateInputError("Cannot normalize an empty term registry")

        names = list(self._terms)
        values = np.array([self._terms[n].as_tuple() for n in names], dtype=float)
        lo, hi = values.min(), values.max()
        with np.errstate(over='ignore', invalid='ignore'):
            span = hi - lo
            if span == 0:
                raise DegenerateInputError(
                    f"Cannot normalize terms: all components equal {lo} (max == min)"
                )
            if not np.isfinite(span):
                raise DegenerateInputError(
                    f"Cannot normalize terms: range [{lo}, {hi}] overflows"
                )
            scaled = (values - lo) / span
        if not np.isfinite(scaled).all():
            raise DegenerateInputError("Cannot normalize terms: non-finite rescaled value")

        self._terms = {
            name: TriangularFuzzyNumber(*row) for name, row in zip(names, scaled)
        }
        logger.info(f"Normalized {len(names)} linguistic terms from [{lo}, {hi}] to [0, 1]")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> TriangularFuzzyNumber:
        """
        Resolve *name* to its TFN.

        Raises:
            IntegrityError: If no term has that name
        """
        try:
            return self._terms[name]
        except KeyError:
            raise IntegrityError(f"Unknown linguistic term '{name}'") from None

    def list_names(self) -> List[str]:
        return list(self._terms)

    def items(self) -> List[Tuple[str, TriangularFuzzyNumber]]:
        return list(self._terms.items())

    def to_dataframe(self) -> pd.DataFrame:
        """Terms as a DataFrame (index = name, columns = a, b, c)."""
        return pd.DataFrame(
            [t.as_tuple() for t in self._terms.values()],
            index=pd.Index(list(self._terms), name='Term'),
            columns=['a', 'b', 'c'],
        )

    def __contains__(self, name: object) -> bool:
        return name in self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._terms))

    def __repr__(self) -> str:
        return f"LinguisticTermRegistry({self.list_names()})"


__all__ = [
    'LinguisticTermRegistry',
    'DEFAULT_LINGUISTIC_SCALE',
]
