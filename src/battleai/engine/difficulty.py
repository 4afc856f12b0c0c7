from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import replace

from .types import Decision, DifficultyProfile, Unit


def difficulty_profile(level: int) -> DifficultyProfile:
    """Pacing and noise knobs for a given difficulty level.

    Higher levels react faster, plan better and miss less. The engine itself
    never reads these; callers decide whether to apply them.
    """
    return DifficultyProfile(
        reaction_delay_ms=max(1000, 3000 - level * 200),
        strategic_accuracy=min(0.9, 0.3 + level * 0.1),
        targeting_error=max(0.05, 0.3 - level * 0.05),
    )


def apply_targeting_error(
    decision: Decision,
    defenders: Sequence[Unit],
    profile: DifficultyProfile,
    rng: random.Random,
) -> Decision:
    """Occasionally swap the chosen defender for another alive one.

    Uses the caller's `rng` so replays stay deterministic for a given seed.
    """
    others = [
        i for i, d in enumerate(defenders) if d.is_alive and i != decision.defender_index
    ]
    if not others or rng.random() >= profile.targeting_error:
        return decision

    new_index = rng.choice(others)
    return replace(
        decision,
        defender_index=new_index,
        rationale=f"{decision.rationale} (missed, hit {defenders[new_index].name} instead)",
    )
