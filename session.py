# -*- coding: utf-8 -*-
"""Caller-owned decision session.

A session bundles the mutable state of one decision problem:

1. the linguistic term registry,
2. the criteria and their normalised weights,
3. the ordered alternatives,
4. the ratings matrix (one term name per alternative × criterion),
5. the selected decision posture and display mode.

The engine itself keeps no global state; every core operation receives what
it needs from the session. Invariant: every alternative holds exactly one
rating per criterion, and every rating names a registered term. Each
mutating method either completes or raises without changing anything.

Sessions are not thread-safe; one caller mutates a session at a time.
"""

import copy
import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from config import (Config, DecisionPosture, DisplayMode, RatingPolicy,
                    get_default_config)
from mcdm.exceptions import ValidationError
from mcdm.fuzzy import LinguisticTermRegistry, TriangularFuzzyNumber, membership_points
from ranking import (FuzzyRankingPipeline, RankingResult, aggregate_all,
                     convert, format_values, resolve_display_mode, resolve_posture)
from weighting import CriteriaWeights

logger = logging.getLogger('fuzzy_mcdm')

AlternativeKey = Union[str, int]
CriterionKey = Union[str, int]


class DecisionSession:
    """
    Alternatives rated with linguistic terms against weighted criteria.

    Parameters
    ----------
    registry : LinguisticTermRegistry, optional
        Term store (default: empty registry). The session keeps its own copy.
    criteria : sequence of str, optional
        Criterion names, ignored when *weights* is given.
    weights : CriteriaWeights, optional
        Criteria with their weights (default: equal weights over *criteria*).
        Copied like *registry*; the ``registry`` and ``weights`` properties
        also return copies, so changes go through the session methods.
    posture : DecisionPosture or str
        Initial decision posture (LPR).
    display_mode : DisplayMode or str
        Initial display mode.
    rating_policy : RatingPolicy
        How cells created by :meth:`add_alternative` / :meth:`add_criterion`
        are filled: first registered term, or a random term.
    seed : int, optional
        Seed of the random rating policy.
    """

    def __init__(self,
                 registry: Optional[LinguisticTermRegistry] = None,
                 criteria: Optional[Sequence[str]] = None,
                 weights: Optional[CriteriaWeights] = None,
                 posture: Union[DecisionPosture, str] = DecisionPosture.NEUTRAL,
                 display_mode: Union[DisplayMode, str] = DisplayMode.TRIANGULAR,
                 rating_policy: RatingPolicy = RatingPolicy.FIRST_TERM,
                 seed: Optional[int] = None):
        self._registry = copy.deepcopy(registry) if registry is not None else LinguisticTermRegistry()
        self._weights = (copy.deepcopy(weights) if weights is not None
                         else CriteriaWeights(criteria or []))
        self.posture = resolve_posture(posture)
        self.display_mode = resolve_display_mode(display_mode)
        self.rating_policy = rating_policy
        self._rng = np.random.RandomState(seed)
        self._alternatives: List[str] = []
        self._ratings: Dict[str, List[str]] = {}

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'DecisionSession':
        """Build the default session described by *config*."""
        config = config or get_default_config()
        d = config.defaults
        session = cls(
            registry=LinguisticTermRegistry(d.linguistic_terms),
            weights=CriteriaWeights(d.criteria, d.weights),
            posture=config.ranking.posture,
            display_mode=config.ranking.display_mode,
            rating_policy=config.rating.policy,
            seed=config.random.seed,
        )
        for alt in d.alternatives:
            session.add_alternative(alt)
        return session

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def registry(self) -> LinguisticTermRegistry:
        """Copy of the term registry; add terms through :meth:`add_term`."""
        return copy.deepcopy(self._registry)

    @property
    def weights(self) -> CriteriaWeights:
        """Copy of the criterion weights; change them through the session."""
        return copy.deepcopy(self._weights)

    @property
    def alternatives(self) -> List[str]:
        return list(self._alternatives)

    @property
    def criteria(self) -> List[str]:
        return self._weights.criteria

    def ratings_row(self, alternative: AlternativeKey) -> List[str]:
        return list(self._ratings[self._alternative_name(alternative)])

    def rating(self, alternative: AlternativeKey, criterion: CriterionKey) -> str:
        alt = self._alternative_name(alternative)
        return self._ratings[alt][self._weights.index_of(criterion)]

    def normalized_weights(self) -> Dict[str, float]:
        return self._weights.as_dict()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_term(self, name: str, a: float, b: float, c: float) -> TriangularFuzzyNumber:
        """Register a new linguistic term (see :meth:`LinguisticTermRegistry.insert`)."""
        return self._registry.insert(name, (a, b, c))

    def normalize_terms(self) -> None:
        """Rescale all terms into [0, 1]; raises DegenerateInputError if max == min."""
        self._registry.normalize()

    def add_alternative(self, name: str,
                        ratings: Optional[Sequence[str]] = None) -> None:
        """
        Append an alternative with one rating per existing criterion.

        Parameters
        ----------
        name : str
            Unique, non-blank name.
        ratings : sequence of str, optional
            Explicit row; defaults follow :attr:`rating_policy`.

        Raises
        ------
        ValidationError
            Blank or duplicate name, malformed explicit row, or no terms to
            rate with.
        """
        if name is None or not str(name).strip():
            raise ValidationError("Alternative name must not be blank")
        if name in self._ratings:
            raise ValidationError(f"Alternative '{name}' already exists")

        if ratings is None:
            row = [self._default_term() for _ in self.criteria]
        else:
            row = list(ratings)
            if len(row) != len(self.criteria):
                raise ValidationError(
                    f"Expected {len(self.criteria)} ratings for '{name}', got {len(row)}")
            for term in row:
                self._check_term(term)

        self._alternatives.append(name)
        self._ratings[name] = row
        logger.debug(f"Added alternative {name!r} with ratings {row}")

    def add_criterion(self, name: str, weight: float = 0.0) -> None:
        """
        Append a criterion; every existing alternative gets a default rating.

        *weight* is a raw value; the vector is renormalised afterwards.
        """
        self._weights.validate_criterion(name, weight)
        defaults = [self._default_term() for _ in self._alternatives]
        self._weights.add_criterion(name, weight)
        for alt, term in zip(self._alternatives, defaults):
            self._ratings[alt].append(term)
        logger.debug(f"Added criterion {name!r}; weights now {self._weights.as_dict()}")

    def set_rating(self, alternative: AlternativeKey, criterion: CriterionKey,
                   term: str) -> None:
        """Select *term* for one cell of the ratings matrix."""
        alt = self._alternative_name(alternative)
        j = self._weights.index_of(criterion)
        self._check_term(term)
        self._ratings[alt][j] = term

    def set_weight(self, criterion: CriterionKey, value: float) -> Dict[str, float]:
        """Assign a raw weight; returns the renormalised weight vector."""
        self._weights.set_weight(criterion, value)
        return self._weights.as_dict()

    def set_posture(self, posture: Union[DecisionPosture, str]) -> None:
        self.posture = resolve_posture(posture)

    def set_display_mode(self, mode: Union[DisplayMode, str]) -> None:
        self.display_mode = resolve_display_mode(mode)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def aggregated(self) -> Dict[str, TriangularFuzzyNumber]:
        return aggregate_all(self._alternatives, self._ratings, self._weights, self._registry)

    def ranking(self, posture: Optional[Union[DecisionPosture, str]] = None) -> RankingResult:
        """Current ranking under *posture* (default: the session posture)."""
        pipeline = FuzzyRankingPipeline(self.posture)
        return pipeline.rank(self._alternatives, self._ratings, self._weights,
                             self._registry, posture=posture)

    def display(self, tfn: TriangularFuzzyNumber) -> Tuple[float, ...]:
        """*tfn* converted according to the current display mode."""
        return convert(tfn, self.display_mode)

    def ratings_frame(self) -> pd.DataFrame:
        """Term names, alternatives × criteria."""
        return pd.DataFrame(
            [self._ratings[a] for a in self._alternatives],
            index=pd.Index(self._alternatives, name='Alternative'),
            columns=self.criteria,
        )

    def rating_display_frame(self, precision: int = 2) -> pd.DataFrame:
        """Each rated term's TFN rendered in the current display mode."""
        return self.ratings_frame().apply(
            lambda col: col.map(
                lambda term: format_values(self.display(self._registry.get(term)), precision)
            )
        )

    def term_chart_data(self) -> Dict[str, List[Tuple[float, float]]]:
        """Membership polyline of every term, in registry order."""
        return {name: membership_points(tfn) for name, tfn in self._registry.items()}

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _alternative_name(self, alternative: AlternativeKey) -> str:
        if isinstance(alternative, (int, np.integer)) and not isinstance(alternative, bool):
            if 0 <= alternative < len(self._alternatives):
                return self._alternatives[alternative]
            raise ValidationError(f"Alternative index {alternative} out of range")
        if alternative not in self._ratings:
            raise ValidationError(f"Unknown alternative '{alternative}'")
        return alternative

    def _check_term(self, term: str) -> None:
        if term not in self._registry:
            raise ValidationError(f"Unknown linguistic term '{term}'")

    def _default_term(self) -> str:
        names = self._registry.list_names()
        if not names:
            raise ValidationError("No linguistic terms registered to rate with")
        if self.rating_policy is RatingPolicy.RANDOM:
            return names[self._rng.randint(len(names))]
        return names[0]

    def __repr__(self) -> str:
        return (f"DecisionSession({len(self._alternatives)} alternatives, "
                f"{len(self.criteria)} criteria, {len(self._registry)} terms, "
                f"posture={self.posture.value})")


__all__ = ['DecisionSession']
