from __future__ import annotations

from collections.abc import Mapping

from .types import Decision, DifficultyProfile, Unit


def unit_from_dict(d: Mapping[str, object]) -> Unit:
    """Build a Unit from an already schema-validated mapping."""
    return Unit(
        name=str(d["name"]),
        base_attack=int(d["base_attack"]),  # type: ignore[call-overload]
        base_health=int(d["base_health"]),  # type: ignore[call-overload]
        current_health=int(d["current_health"]),  # type: ignore[call-overload]
        level=int(d.get("level", 1)),  # type: ignore[call-overload]
        rarity=str(d.get("rarity", "common")),  # type: ignore[arg-type]
        ability_name=_optional_str(d, "ability_name"),
        ability_text=_optional_str(d, "ability_text"),
        id=_optional_str(d, "id"),
    )


def _optional_str(d: Mapping[str, object], key: str) -> str | None:
    v = d.get(key)
    return None if v is None else str(v)


def decision_to_dict(decision: Decision) -> dict[str, object]:
    return {
        "attacker_index": decision.attacker_index,
        "defender_index": decision.defender_index,
        "rationale": decision.rationale,
        "score": decision.score,
    }


def profile_to_dict(profile: DifficultyProfile) -> dict[str, object]:
    return {
        "reaction_delay_ms": profile.reaction_delay_ms,
        "strategic_accuracy": profile.strategic_accuracy,
        "targeting_error": profile.targeting_error,
    }
