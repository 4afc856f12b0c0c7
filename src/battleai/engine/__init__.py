"""Deterministic, headless targeting engine for automated card battles.

IMPORTANT: This package must never import a rendering library.
"""

from .ai import InvalidStateError, rank_pairs, select_decision
from .difficulty import apply_targeting_error, difficulty_profile
from .evaluate import evaluate
from .matchup import classify, matchup_bonus
from .threat import assess_threat
from .types import (
    DEFAULT_SCORING,
    Archetype,
    Decision,
    DifficultyProfile,
    ScoredPair,
    ScoringConfig,
    Unit,
)

__all__ = [
    "DEFAULT_SCORING",
    "Archetype",
    "Decision",
    "DifficultyProfile",
    "InvalidStateError",
    "ScoredPair",
    "ScoringConfig",
    "Unit",
    "apply_targeting_error",
    "assess_threat",
    "classify",
    "difficulty_profile",
    "evaluate",
    "matchup_bonus",
    "rank_pairs",
    "select_decision",
]
