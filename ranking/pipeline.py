# -*- coding: utf-8 -*-
"""
Fuzzy Ranking Pipeline
======================

Turns aggregated TFNs into a total order over alternatives.

Architecture
------------
Stage 1 - Aggregation
    For each alternative: weighted fuzzy sum of its linguistic ratings
    (see :mod:`ranking.aggregation`).

Stage 2 - Scoring & ordering
    • Defuzzify each aggregated TFN under the selected posture.
    • Sort by descending score. Exact ties keep the order in which the
      alternatives were supplied (stable sort), so the displayed ranking
      never reshuffles between identical scores.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Union

import pandas as pd

from config import DecisionPosture, DisplayMode
from mcdm.exceptions import IntegrityError
from mcdm.fuzzy import LinguisticTermRegistry, TriangularFuzzyNumber
from .aggregation import RatingsMatrix, WeightVector, aggregate_all
from .defuzzification import PostureLike, resolve_posture, score
from .display import DisplayModeLike, convert, format_values, resolve_display_mode

logger = logging.getLogger('fuzzy_mcdm')


# =========================================================================
# Result containers
# =========================================================================

@dataclass(frozen=True)
class RankedAlternative:
    """One row of a ranking (rank 1 = best)."""
    alternative: str
    tfn: TriangularFuzzyNumber
    score: float
    rank: int


@dataclass
class RankingResult:
    """Container for the output of :func:`rank`.

    Attributes
    ----------
    entries : list of RankedAlternative
        Sorted best first.
    posture : DecisionPosture
        Posture the scores were computed under.
    """

    entries: List[RankedAlternative]
    posture: DecisionPosture = DecisionPosture.NEUTRAL
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def order(self) -> List[str]:
        return [e.alternative for e in self.entries]

    @property
    def scores(self) -> pd.Series:
        return pd.Series({e.alternative: e.score for e in self.entries},
                         name='Score', dtype=float)

    @property
    def winner(self) -> Optional[RankedAlternative]:
        return self.entries[0] if self.entries else None

    def top_n(self, n: int = 3) -> List[RankedAlternative]:
        return self.entries[:n]

    def to_dataframe(self, display_mode: DisplayModeLike = DisplayMode.TRIANGULAR,
                     precision: int = 3) -> pd.DataFrame:
        """Ranking table with the aggregated value shown in *display_mode*."""
        mode = resolve_display_mode(display_mode)
        return pd.DataFrame({
            'Rank': [e.rank for e in self.entries],
            'Alternative': [e.alternative for e in self.entries],
            'Score': [e.score for e in self.entries],
            'Aggregated': [format_values(convert(e.tfn, mode), precision)
                           for e in self.entries],
        })

    def __iter__(self) -> Iterator[RankedAlternative]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            "FUZZY RANKING RESULTS",
            f"{'='*60}",
            f"\nPosture (LPR): {self.posture.value}",
        ]
        for e in self.entries:
            lines.append(f"  {e.rank}. {e.alternative} (Score: {e.score:.4f}, {e.tfn!r})")
        lines.append("=" * 60)
        return "\n".join(lines)


# =========================================================================
# Ranking
# =========================================================================

def rank(alternatives: Sequence[str],
         tfns: Union[Mapping[str, TriangularFuzzyNumber], Sequence[TriangularFuzzyNumber]],
         posture: PostureLike = DecisionPosture.NEUTRAL) -> RankingResult:
    """
    Order *alternatives* by descending defuzzified score.

    Parameters
    ----------
    alternatives : sequence of str
        Alternatives in insertion order (the tie-break order).
    tfns : mapping or sequence
        ``{alternative: TFN}`` or TFNs aligned with *alternatives*.
    posture : DecisionPosture or str

    Returns
    -------
    RankingResult
    """
    posture = resolve_posture(posture)
    if isinstance(tfns, Mapping):
        missing = [a for a in alternatives if a not in tfns]
        if missing:
            raise IntegrityError(f"No aggregated value for alternatives: {missing}")
        values = [tfns[a] for a in alternatives]
    else:
        values = list(tfns)
        if len(values) != len(alternatives):
            raise IntegrityError(
                f"Got {len(values)} aggregated values for {len(alternatives)} alternatives"
            )

    scored = [(alt, t, score(t, posture)) for alt, t in zip(alternatives, values)]
    # sorted() is stable, also with reverse=True: equal scores keep input order
    scored = sorted(scored, key=lambda item: item[2], reverse=True)

    entries = [
        RankedAlternative(alternative=alt, tfn=t, score=s, rank=i)
        for i, (alt, t, s) in enumerate(scored, start=1)
    ]
    return RankingResult(entries=entries, posture=posture)


class FuzzyRankingPipeline:
    """
    Aggregation followed by ranking.

    Parameters
    ----------
    posture : DecisionPosture or str
        Default posture for :meth:`rank`.
    """

    def __init__(self, posture: PostureLike = DecisionPosture.NEUTRAL):
        self.posture = resolve_posture(posture)

    def rank(self,
             alternatives: Sequence[str],
             ratings: RatingsMatrix,
             weights: WeightVector,
             registry: LinguisticTermRegistry,
             posture: Optional[PostureLike] = None) -> RankingResult:
        """
        Aggregate every alternative and rank the results.

        Raises
        ------
        IntegrityError
            A rating references an unknown term or a row is misaligned.
        """
        posture = self.posture if posture is None else resolve_posture(posture)
        aggregated = aggregate_all(alternatives, ratings, weights, registry)
        result = rank(alternatives, aggregated, posture)
        result.details['n_criteria'] = len(weights)
        if result.winner is not None:
            logger.info(
                f"Ranked {len(result)} alternatives ({posture.value}); "
                f"best: {result.winner.alternative} ({result.winner.score:.4f})"
            )
        return result


__all__ = [
    'RankedAlternative',
    'RankingResult',
    'rank',
    'FuzzyRankingPipeline',
]
