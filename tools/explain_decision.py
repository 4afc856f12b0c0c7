from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from battleai.engine import difficulty_profile, rank_pairs, select_decision
from battleai.engine.serialize import decision_to_dict, profile_to_dict
from battleai.paths import get_paths
from battleai.services.roster import RosterService
from battleai.services.telemetry import TelemetryService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="explain_decision")
    parser.add_argument("battle", nargs="?", type=Path, help="battle snapshot JSON (default: bundled sample)")
    parser.add_argument(
        "--telemetry",
        nargs="?",
        const=Path("userdata") / "telemetry.jsonl",
        type=Path,
        help="append the decision to this JSONL file (default: userdata/telemetry.jsonl)",
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    paths = get_paths()
    rosters = RosterService(paths.data_dir, paths.schema_dir)
    battle = rosters.load_battle(args.battle) if args.battle else rosters.load_sample()

    decision = select_decision(battle.attackers, battle.defenders)
    out = {
        "decision": decision_to_dict(decision),
        "candidates": [
            {
                "attacker": battle.attackers[p.attacker_index].name,
                "defender": battle.defenders[p.defender_index].name,
                "score": round(p.score, 2),
            }
            for p in rank_pairs(battle.attackers, battle.defenders)
        ],
        "difficulty": profile_to_dict(difficulty_profile(battle.difficulty)),
    }
    print(json.dumps(out, indent=2, ensure_ascii=False))

    if args.telemetry is not None:
        telemetry_path = args.telemetry
        if not telemetry_path.is_absolute():
            telemetry_path = paths.repo_root / telemetry_path
        TelemetryService(telemetry_path).log_decision(
            decision, battle.attackers, battle.defenders
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
