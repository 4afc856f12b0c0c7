from __future__ import annotations

import logging
from collections.abc import Sequence

from .evaluate import describe, evaluate
from .types import Decision, ScoredPair, ScoringConfig, Unit

logger = logging.getLogger(__name__)


class InvalidStateError(RuntimeError):
    pass


def _alive(units: Sequence[Unit]) -> list[tuple[int, Unit]]:
    return [(i, u) for i, u in enumerate(units) if u.is_alive]


def _alive_or_raise(
    attackers: Sequence[Unit], defenders: Sequence[Unit]
) -> tuple[list[tuple[int, Unit]], list[tuple[int, Unit]]]:
    alive_atk = _alive(attackers)
    alive_def = _alive(defenders)
    if not alive_atk or not alive_def:
        raise InvalidStateError("No valid units for a decision")
    return alive_atk, alive_def


def rank_pairs(
    attackers: Sequence[Unit],
    defenders: Sequence[Unit],
    *,
    config: ScoringConfig | None = None,
) -> list[ScoredPair]:
    """Score every alive attacker/defender pair, best first.

    Equal scores keep roster order (attackers outer, defenders inner).
    """
    alive_atk, alive_def = _alive_or_raise(attackers, defenders)
    pairs = [
        ScoredPair(attacker_index=ai, defender_index=di, score=evaluate(a, d, config=config))
        for ai, a in alive_atk
        for di, d in alive_def
    ]
    # sorted() is stable, so ties stay in iteration order
    return sorted(pairs, key=lambda p: -p.score)


def select_decision(
    attackers: Sequence[Unit],
    defenders: Sequence[Unit],
    *,
    config: ScoringConfig | None = None,
) -> Decision:
    """Pick which of `attackers` should strike which of `defenders`.

    Indices refer to the original rosters. Defeated units are skipped; the
    first pair to reach the highest score wins. Raises InvalidStateError if
    either side has nobody left standing.
    """
    alive_atk, alive_def = _alive_or_raise(attackers, defenders)

    best: tuple[float, int, int] | None = None
    for ai, a in alive_atk:
        for di, d in alive_def:
            score = evaluate(a, d, config=config)
            if best is None or score > best[0]:
                best = (score, ai, di)

    if best is None:
        # unreachable while both alive lists are non-empty
        ai, a = alive_atk[0]
        di, d = alive_def[0]
        return Decision(
            attacker_index=ai,
            defender_index=di,
            rationale=f"{a.name} attacks {d.name} as a fallback",
        )

    score, ai, di = best
    logger.debug(
        "Chose attacker %d -> defender %d (score %.2f) from %d candidates",
        ai,
        di,
        score,
        len(alive_atk) * len(alive_def),
    )
    return Decision(
        attacker_index=ai,
        defender_index=di,
        rationale=describe(attackers[ai], defenders[di], score, config=config),
        score=score,
    )
