from __future__ import annotations

from .types import DEFAULT_SCORING, Archetype, ScoringConfig, Unit

# Checked in order; the first archetype with a matching keyword wins.
_NAME_KEYWORDS: tuple[tuple[Archetype, tuple[str, ...]], ...] = (
    (Archetype.WARRIOR, ("warrior", "knight", "berserker")),
    (Archetype.MAGE, ("mage", "wizard", "sorcerer")),
    (Archetype.ARCHER, ("archer", "ranger", "hunter")),
    (Archetype.PRIEST, ("priest", "healer")),
    (Archetype.ASSASSIN, ("assassin", "blade", "shadow")),
    (Archetype.GUARDIAN, ("guardian", "paladin", "templar")),
)

# Ability text only matters for priests.
_ABILITY_KEYWORDS: dict[Archetype, tuple[str, ...]] = {
    Archetype.PRIEST: ("heal",),
}

ADVANTAGES: dict[Archetype, frozenset[Archetype]] = {
    Archetype.WARRIOR: frozenset({Archetype.MAGE, Archetype.ARCHER}),
    Archetype.MAGE: frozenset({Archetype.PRIEST, Archetype.ASSASSIN}),
    Archetype.ARCHER: frozenset({Archetype.PRIEST, Archetype.MAGE}),
    Archetype.PRIEST: frozenset({Archetype.WARRIOR, Archetype.GUARDIAN}),
    Archetype.ASSASSIN: frozenset({Archetype.ARCHER, Archetype.PRIEST}),
    Archetype.GUARDIAN: frozenset({Archetype.ASSASSIN, Archetype.WARRIOR}),
}


def classify(unit: Unit) -> Archetype:
    name = unit.name.lower()
    ability = (unit.ability_text or "").lower()
    for archetype, keywords in _NAME_KEYWORDS:
        if any(k in name for k in keywords):
            return archetype
        if any(k in ability for k in _ABILITY_KEYWORDS.get(archetype, ())):
            return archetype
    return Archetype.NEUTRAL


def beats(a: Archetype, b: Archetype) -> bool:
    return b in ADVANTAGES.get(a, frozenset())


def matchup_bonus(
    attacker: Unit, defender: Unit, *, config: ScoringConfig | None = None
) -> float:
    """Signed bonus for attacker vs defender: advantage, disadvantage or 0.

    Neutral units never gain or lose anything.
    """
    cfg = config or DEFAULT_SCORING
    a = classify(attacker)
    d = classify(defender)
    if beats(a, d):
        return cfg.advantage_bonus
    if beats(d, a):
        return -cfg.disadvantage_penalty
    return 0.0
