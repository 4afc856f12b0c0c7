from __future__ import annotations

from .types import DEFAULT_SCORING, ScoringConfig, Unit


def assess_threat(unit: Unit, *, config: ScoringConfig | None = None) -> float:
    """How dangerous `unit` is on its own, ignoring who it faces.

    Offense is scaled down so it does not swamp the health and ability terms.
    """
    cfg = config or DEFAULT_SCORING
    threat = unit.damage(cfg) * cfg.threat_power_weight
    threat += unit.health_ratio(cfg) * cfg.threat_health_weight

    ability = (unit.ability_text or "").lower()
    if "heal" in ability:
        threat += cfg.threat_heal_bonus
    if "area" in ability or "all" in ability:
        threat += cfg.threat_area_bonus
    return threat
