from __future__ import annotations

import json
from pathlib import Path

from battleai.engine import Unit, select_decision
from battleai.services.telemetry import TelemetryService


def test_log_decision_appends_jsonl(tmp_path: Path) -> None:
    attackers = [Unit(name="Fire Warrior", base_attack=100, base_health=85, current_health=100)]
    defenders = [
        Unit(name="Stone Guardian", base_attack=40, base_health=485, current_health=500),
        Unit(name="Village Priest", base_attack=20, base_health=85, current_health=5, ability_text="heals allies"),
    ]
    decision = select_decision(attackers, defenders)

    svc = TelemetryService(tmp_path / "logs" / "telemetry.jsonl")
    svc.log_decision(decision, attackers, defenders)
    svc.log("BATTLE_ENDED", {"winner": "enemy"})

    lines = svc.path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    rec = json.loads(lines[0])
    assert rec["type"] == "AI_DECISION"
    assert rec["payload"]["attacker"] == "Fire Warrior"
    assert rec["payload"]["defender"] == "Village Priest"
    assert rec["payload"]["defender_index"] == 1
    assert "ts" in rec
    assert json.loads(lines[1])["payload"] == {"winner": "enemy"}
