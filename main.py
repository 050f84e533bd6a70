#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Fuzzy Linguistic MCDM - Main Entry Point
========================================

Usage
-----
    python main.py [--posture {pessimistic,neutral,optimistic}]
                   [--display {triangular,interval,trapezoid}]
                   [--normalize] [--random-ratings] [--seed N]

Pipeline Phases
---------------
1. Session Setup          – default smartphone alternatives, criteria, terms
2. Term Normalization     – optional rescale of linguistic terms into [0, 1]
3. Aggregation & Ranking  – weighted TFN sum, posture score, stable ranking
"""

import argparse
import sys


def main(argv=None) -> None:
    """Configure and execute the fuzzy MCDM pipeline."""

    parser = argparse.ArgumentParser(description='Rank alternatives rated with fuzzy linguistic terms.')
    parser.add_argument('--posture', default='neutral',
                        choices=['pessimistic', 'neutral', 'optimistic'])
    parser.add_argument('--display', default='triangular',
                        choices=['triangular', 'interval', 'trapezoid'])
    parser.add_argument('--normalize', action='store_true',
                        help='rescale linguistic terms into [0, 1] before ranking')
    parser.add_argument('--random-ratings', action='store_true',
                        help='fill the default ratings with random terms')
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args(argv)

    # Lazy imports (avoids loading pandas on --help)
    from config import DecisionPosture, DisplayMode, RatingPolicy, get_default_config
    from pipeline import FuzzyMCDMPipeline

    config = get_default_config()
    config.ranking.posture = DecisionPosture(args.posture)
    config.ranking.display_mode = DisplayMode(args.display)
    config.ranking.normalize_terms = args.normalize
    if args.random_ratings:
        config.rating.policy = RatingPolicy.RANDOM
    if args.seed is not None:
        config.random.seed = args.seed

    # ------------------------------------------------------------------
    # Execute
    # ------------------------------------------------------------------
    pipeline = FuzzyMCDMPipeline(config)

    try:
        result = pipeline.run()
        pipeline.console.show_run_summary(result, config.ranking.precision)
    except Exception as e:
        pipeline.console.error(f'{type(e).__name__}: {e}')
        sys.exit(1)


if __name__ == '__main__':
    main()
