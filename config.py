# -*- coding: utf-8 -*-
"""
Centralised Configuration for the Fuzzy MCDM Engine
===================================================

All configurable parameters are defined here as typed dataclasses.
The master ``Config`` class composes every sub-config and provides
serialisation, summary printing, and global singleton management.

Configuration Groups
--------------------
- PathConfig      - output / log directories
- DefaultsConfig  - initial linguistic terms, criteria and alternatives
- RandomConfig    - reproducibility seed
- RatingConfig    - how new rating cells are filled
- RankingConfig   - decision posture, display mode, normalisation
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from enum import Enum
import json

from mcdm.fuzzy.linguistic import DEFAULT_LINGUISTIC_SCALE


# =========================================================================
# Enumerations
# =========================================================================

class DecisionPosture(Enum):
    """Decision maker's risk posture (LPR); selects the defuzzification rule."""
    PESSIMISTIC = "pessimistic"   # left end of the support
    NEUTRAL = "neutral"           # centroid
    OPTIMISTIC = "optimistic"     # right end of the support


class DisplayMode(Enum):
    """Representation used when showing a TFN. Never affects scores."""
    TRIANGULAR = "triangular"
    INTERVAL = "interval"
    TRAPEZOID = "trapezoid"


class RatingPolicy(Enum):
    """Default term assigned to rating cells created by a new alternative/criterion."""
    FIRST_TERM = "first_term"
    RANDOM = "random"


# =========================================================================
# Path Configuration
# =========================================================================

@dataclass
class PathConfig:
    """File and directory paths, all derived from *base_dir*."""
    base_dir: Path = field(default_factory=lambda: Path.cwd())

    @property
    def output_dir(self) -> Path:
        return self.base_dir / "result"

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    def ensure_directories(self) -> None:
        """Create every output directory if missing."""
        for d in [self.output_dir, self.logs_dir]:
            d.mkdir(parents=True, exist_ok=True)


# =========================================================================
# Session Defaults
# =========================================================================

@dataclass
class DefaultsConfig:
    """Initial state of a decision session (smartphone selection)."""
    linguistic_terms: Dict[str, Tuple[float, float, float]] = field(
        default_factory=lambda: dict(DEFAULT_LINGUISTIC_SCALE)
    )
    criteria: List[str] = field(default_factory=lambda: [
        "Design", "Popularity", "Price", "Battery capacity",
        "Camera", "Performance", "Memory", "Display",
    ])
    alternatives: List[str] = field(default_factory=lambda: [
        "iPhone 17",
        "Samsung Galaxy S25 FE",
        "Xiaomi Redmi Note 14 Pro",
        "Nothing Phone",
        "Oppo",
    ])
    # None → equal weights 1/n
    weights: Optional[List[float]] = None


# =========================================================================
# Reproducibility
# =========================================================================

@dataclass
class RandomConfig:
    """Random-state defaults."""
    seed: Optional[int] = 42


# =========================================================================
# Rating / Ranking
# =========================================================================

@dataclass
class RatingConfig:
    """Default ratings for freshly created cells."""
    policy: RatingPolicy = RatingPolicy.FIRST_TERM


@dataclass
class RankingConfig:
    """Scoring and display settings."""
    posture: DecisionPosture = DecisionPosture.NEUTRAL
    display_mode: DisplayMode = DisplayMode.TRIANGULAR
    normalize_terms: bool = False
    precision: int = 3


# =========================================================================
# Master Configuration
# =========================================================================

@dataclass
class Config:
    """Master configuration composing every sub-config."""
    paths: PathConfig = field(default_factory=PathConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    random: RandomConfig = field(default_factory=RandomConfig)
    rating: RatingConfig = field(default_factory=RatingConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)

    # --- serialisation ---

    def to_dict(self) -> Dict:
        def _cvt(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _cvt(v) for k, v in obj.__dict__.items()}
            if isinstance(obj, Enum):
                return obj.value
            if isinstance(obj, Path):
                return str(obj)
            if isinstance(obj, (list, tuple)):
                return [_cvt(i) for i in obj]
            if isinstance(obj, dict):
                return {k: _cvt(v) for k, v in obj.items()}
            return obj
        return _cvt(self)

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def summary(self) -> str:
        d = self.defaults
        return (
            f"\n{'='*72}\n"
            f"  Fuzzy MCDM Configuration Summary\n"
            f"{'='*72}\n\n"
            f"  SESSION DEFAULTS\n"
            f"    Linguistic terms : {len(d.linguistic_terms)}  "
            f"({', '.join(d.linguistic_terms)})\n"
            f"    Criteria         : {len(d.criteria)}\n"
            f"    Alternatives     : {len(d.alternatives)}\n"
            f"    Weights          : {'equal' if d.weights is None else 'manual'}\n\n"
            f"  RATINGS\n"
            f"    Default policy   : {self.rating.policy.value}\n"
            f"    Seed             : {self.random.seed}\n\n"
            f"  RANKING\n"
            f"    Posture (LPR)    : {self.ranking.posture.value}\n"
            f"    Display mode     : {self.ranking.display_mode.value}\n"
            f"    Normalize terms  : {self.ranking.normalize_terms}\n"
            f"{'='*72}\n"
        )


# =========================================================================
# Global Config Singleton
# =========================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """Return global config (create default on first call)."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_default_config() -> Config:
    """Return a *fresh* default Config instance."""
    return Config()


def set_config(config: Config) -> None:
    """Replace the global config singleton."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset to a fresh default Config."""
    global _config
    _config = Config()
