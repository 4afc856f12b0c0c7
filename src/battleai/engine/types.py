from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

Rarity = Literal["common", "rare", "epic", "legendary"]


class Archetype(Enum):
    """Role categories inferred from a unit's name and ability text."""

    WARRIOR = "warrior"
    MAGE = "mage"
    ARCHER = "archer"
    PRIEST = "priest"
    ASSASSIN = "assassin"
    GUARDIAN = "guardian"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ScoringConfig:
    """Tuning constants for the attack evaluator and threat assessor."""

    damage_per_level: int = 10
    health_per_level: int = 15

    finishing_blow_bonus: float = 100.0
    efficiency_weight: float = 50.0

    threat_power_weight: float = 0.3
    threat_health_weight: float = 20.0
    threat_heal_bonus: float = 25.0
    threat_area_bonus: float = 20.0

    low_health_threshold: float = 0.3
    low_health_penalty: float = 20.0

    # Penalties are positive magnitudes; scoring subtracts them.
    advantage_bonus: float = 15.0
    disadvantage_penalty: float = 10.0

    support_bonus: float = 30.0


DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class Unit:
    """Read-only snapshot of a combat participant.

    `current_health` <= 0 means the unit is defeated.
    """

    name: str
    base_attack: int
    base_health: int
    current_health: int
    level: int = 1
    rarity: Rarity = "common"
    ability_name: str | None = None
    ability_text: str | None = None
    id: str | None = None

    @property
    def is_alive(self) -> bool:
        return self.current_health > 0

    def damage(self, config: ScoringConfig = DEFAULT_SCORING) -> int:
        return self.base_attack + self.level * config.damage_per_level

    def max_health(self, config: ScoringConfig = DEFAULT_SCORING) -> int:
        return self.base_health + self.level * config.health_per_level

    def health_ratio(self, config: ScoringConfig = DEFAULT_SCORING) -> float:
        cap = self.max_health(config)
        if cap <= 0:
            return 0.0
        return self.current_health / cap


@dataclass(frozen=True)
class Decision:
    attacker_index: int
    defender_index: int
    rationale: str
    score: float | None = None


@dataclass(frozen=True)
class ScoredPair:
    attacker_index: int
    defender_index: int
    score: float


@dataclass(frozen=True)
class DifficultyProfile:
    reaction_delay_ms: int
    strategic_accuracy: float
    targeting_error: float
