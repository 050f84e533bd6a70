# -*- coding: utf-8 -*-
"""
Fuzzy Ranking
=============

Weighted fuzzy aggregation, posture-based defuzzification and stable
ranking of alternatives.
"""

from .aggregation import aggregate, aggregate_all
from .defuzzification import resolve_posture, score
from .display import convert, format_values, resolve_display_mode
from .pipeline import FuzzyRankingPipeline, RankedAlternative, RankingResult, rank

__all__ = [
    'aggregate',
    'aggregate_all',
    'resolve_posture',
    'score',
    'convert',
    'format_values',
    'resolve_display_mode',
    'rank',
    'FuzzyRankingPipeline',
    'RankedAlternative',
    'RankingResult',
]
