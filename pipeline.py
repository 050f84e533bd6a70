# -*- coding: utf-8 -*-
"""
Fuzzy MCDM Pipeline Orchestrator
================================

Three-phase run over a decision session:

  Phase 1  Session Setup          (default smartphone session or caller's own)
  Phase 2  Term Normalization     (optional rescale of terms into [0, 1])
  Phase 3  Aggregation & Ranking  (weighted fuzzy sum + posture score)
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from config import Config, get_default_config
from loggers import log_context, log_execution, setup_logging, timed_operation
from mcdm.exceptions import DegenerateInputError
from ranking import RankingResult
from session import DecisionSession
from weighting import WeightResult


# =========================================================================
# Result container
# =========================================================================

@dataclass
class PipelineResult:
    """Container for all pipeline results."""
    session: DecisionSession
    ranking: RankingResult
    weights: WeightResult

    # Meta
    terms_normalized: bool = False
    execution_time: float = 0.0
    debug_log_path: Optional[str] = None
    config: Optional[Config] = None


# =========================================================================
# Pipeline
# =========================================================================

class FuzzyMCDMPipeline:
    """
    Runs a decision session end to end with console and debug logging.

    Parameters
    ----------
    config : Config, optional
        Defaults to :func:`config.get_default_config`.
    use_color : bool, optional
        Force console colours on/off (default: autodetect).
    """

    TOTAL_PHASES = 3

    def __init__(self, config: Optional[Config] = None,
                 use_color: Optional[bool] = None):
        self.config = config or get_default_config()
        self.config.paths.ensure_directories()

        # Logging (console + debug JSON)
        self.console, self.debug_log = setup_logging(self.config.paths.logs_dir,
                                                     use_color=use_color)
        self.logger = logging.getLogger('fuzzy_mcdm')

    @log_execution()
    def run(self, session: Optional[DecisionSession] = None) -> PipelineResult:
        """Execute every phase and return the collected results."""
        start = time.time()
        self.console.banner('FUZZY LINGUISTIC MCDM',
                            'Weighted aggregation of triangular fuzzy ratings')
        try:
            with timed_operation(self.logger, 'fuzzy MCDM run'):
                session = self._setup_session(session)
                normalized = self._normalize_terms(session)
                with log_context(posture=session.posture.value):
                    ranking = self._rank(session)
        except Exception as exc:
            self.debug_log.exception(f'Pipeline failed: {exc}', exc)
            raise
        finally:
            self.debug_log.log_phases(self.console.phases)
            debug_path = self.debug_log.close()

        return PipelineResult(
            session=session,
            ranking=ranking,
            weights=session.weights.result(),
            terms_normalized=normalized,
            execution_time=time.time() - start,
            debug_log_path=debug_path,
            config=self.config,
        )

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _setup_session(self, session: Optional[DecisionSession]) -> DecisionSession:
        with self.console.phase('Session Setup', 1, self.TOTAL_PHASES) as p:
            if session is None:
                session = DecisionSession.from_config(self.config)
                p.detail('Built default session from configuration')
            p.metric('Alternatives', len(session.alternatives))
            p.metric('Criteria', len(session.criteria))
            p.metric('Linguistic terms', len(session.registry))
            self.console.show_terms(session.registry, self.config.ranking.precision)
            self.debug_log.log_data('linguistic_terms', session.registry.to_dataframe())
            self.debug_log.log_data('weights', session.normalized_weights())
            self.debug_log.log_data('ratings', session.ratings_frame())
        return session

    def _normalize_terms(self, session: DecisionSession) -> bool:
        with self.console.phase('Term Normalization', 2, self.TOTAL_PHASES) as p:
            if not self.config.ranking.normalize_terms:
                p.detail('Disabled in configuration; terms kept on their own scale')
                return False
            try:
                session.normalize_terms()
            except DegenerateInputError as exc:
                p.warning(f'Normalization skipped: {exc}')
                self.debug_log.warning('Normalization skipped', data={'reason': str(exc)})
                return False
            p.detail(f'{len(session.registry)} terms rescaled into [0, 1]')
            self.console.show_terms(session.registry, self.config.ranking.precision)
            self.debug_log.log_data('normalized_terms', session.registry.to_dataframe())
            return True

    def _rank(self, session: DecisionSession) -> RankingResult:
        with self.console.phase('Aggregation & Ranking', 3, self.TOTAL_PHASES) as p:
            ranking = session.ranking()
            p.metric('Posture (LPR)', ranking.posture.value)
            if ranking.winner is not None:
                p.metric('Best alternative', ranking.winner.alternative)
                p.metric('Best score', ranking.winner.score)
            self.debug_log.log_data(
                'ranking',
                [{'rank': e.rank, 'alternative': e.alternative,
                  'tfn': e.tfn, 'score': e.score} for e in ranking],
            )
        return ranking
