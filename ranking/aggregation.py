# -*- coding: utf-8 -*-
"""
Weighted Fuzzy Aggregation
==========================

Collapses one alternative's row of linguistic ratings into a single TFN:

    Ã_i = Σ_j  w_j · T(r_ij)

where T(r_ij) is the TFN registered for the term chosen for alternative i
on criterion j and w_j is the (already normalised) criterion weight.
Accumulation starts from (0, 0, 0) and follows criterion order.
"""

import logging
from typing import Dict, Mapping, Sequence, Union

import numpy as np

from mcdm.exceptions import IntegrityError
from mcdm.fuzzy import LinguisticTermRegistry, TriangularFuzzyNumber, add, scale
from weighting import CriteriaWeights

logger = logging.getLogger('fuzzy_mcdm')

WeightVector = Union[CriteriaWeights, Sequence[float], np.ndarray]
RatingsMatrix = Union[Mapping[str, Sequence[str]], Sequence[Sequence[str]]]


def _weight_array(weights: WeightVector) -> np.ndarray:
    if isinstance(weights, CriteriaWeights):
        return weights.as_array
    return np.asarray(weights, dtype=float)


def aggregate(alternative: str,
              ratings_row: Sequence[str],
              weights: WeightVector,
              registry: LinguisticTermRegistry) -> TriangularFuzzyNumber:
    """
    Weighted sum of the TFNs behind *ratings_row*.

    Parameters
    ----------
    alternative : str
        Name used in error messages only.
    ratings_row : sequence of str
        One term name per criterion, in criterion order.
    weights : CriteriaWeights or sequence of float
        Normalised weights; not renormalised here.
    registry : LinguisticTermRegistry
        Resolves term names to TFNs.

    Returns
    -------
    TriangularFuzzyNumber

    Raises
    ------
    IntegrityError
        Row length differs from the weight vector, or a term is unknown.
    """
    w = _weight_array(weights)
    if len(ratings_row) != len(w):
        raise IntegrityError(
            f"Alternative '{alternative}' has {len(ratings_row)} ratings "
            f"for {len(w)} criteria"
        )

    agg = TriangularFuzzyNumber.zero()
    for j, term in enumerate(ratings_row):
        try:
            tfn = registry.get(term)
        except IntegrityError as exc:
            raise IntegrityError(
                f"Alternative '{alternative}', criterion #{j}: {exc}"
            ) from exc
        agg = add(agg, scale(tfn, w[j]))
    return agg


def aggregate_all(alternatives: Sequence[str],
                  ratings: RatingsMatrix,
                  weights: WeightVector,
                  registry: LinguisticTermRegistry) -> Dict[str, TriangularFuzzyNumber]:
    """
    Aggregate every alternative.

    *ratings* is either a mapping ``{alternative: row}`` or a list of rows
    aligned with *alternatives*. The result preserves alternative order.
    """
    if isinstance(ratings, Mapping):
        missing = [a for a in alternatives if a not in ratings]
        if missing:
            raise IntegrityError(f"No ratings for alternatives: {missing}")
        rows = [ratings[a] for a in alternatives]
    else:
        rows = list(ratings)
        if len(rows) != len(alternatives):
            raise IntegrityError(
                f"Got {len(rows)} rating rows for {len(alternatives)} alternatives"
            )

    w = _weight_array(weights)
    result = {alt: aggregate(alt, row, w, registry) for alt, row in zip(alternatives, rows)}
    logger.debug(f"Aggregated {len(result)} alternatives over {len(w)} criteria")
    return result


__all__ = ['aggregate', 'aggregate_all']
