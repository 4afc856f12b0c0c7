from __future__ import annotations

from .matchup import matchup_bonus
from .threat import assess_threat
from .types import DEFAULT_SCORING, ScoringConfig, Unit

# Rationale above this score reads as a deliberate focus target.
HIGH_PRIORITY_SCORE = 60.0


def _is_support(unit: Unit) -> bool:
    name = unit.name.lower()
    ability = (unit.ability_text or "").lower()
    if "priest" in name or "healer" in name:
        return True
    # "healer" is covered by "heal"
    return "priest" in ability or "heal" in ability


def is_finishing_blow(attacker: Unit, defender: Unit, *, config: ScoringConfig | None = None) -> bool:
    cfg = config or DEFAULT_SCORING
    return attacker.damage(cfg) >= defender.current_health


def evaluate(attacker: Unit, defender: Unit, *, config: ScoringConfig | None = None) -> float:
    """Score how desirable it is for `attacker` to strike `defender`.

    Only the ordering of scores is meaningful. The sum is left unclamped.
    """
    cfg = config or DEFAULT_SCORING
    damage = attacker.damage(cfg)
    score = 0.0

    if damage >= defender.current_health:
        score += cfg.finishing_blow_bonus

    if defender.current_health > 0:
        ratio = min(damage / defender.current_health, 1.0)
    else:
        ratio = 1.0
    score += ratio * cfg.efficiency_weight

    score += assess_threat(defender, config=cfg)

    if attacker.health_ratio(cfg) < cfg.low_health_threshold:
        score -= cfg.low_health_penalty

    score += matchup_bonus(attacker, defender, config=cfg)

    if _is_support(defender):
        score += cfg.support_bonus

    return score


def describe(attacker: Unit, defender: Unit, score: float, *, config: ScoringConfig | None = None) -> str:
    if is_finishing_blow(attacker, defender, config=config):
        return f"{attacker.name} targets {defender.name} for a finishing blow!"
    if score > HIGH_PRIORITY_SCORE:
        return f"{attacker.name} focuses on high-priority target {defender.name}"
    name = defender.name.lower()
    if "priest" in name or "healer" in name:
        return f"{attacker.name} targets healer {defender.name} to prevent healing"
    return f"{attacker.name} attacks {defender.name} tactically"
