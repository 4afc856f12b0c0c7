from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from battleai.engine.serialize import decision_to_dict
from battleai.engine.types import Decision, Unit


@dataclass
class TelemetryService:
    """Append-only JSON Lines log of AI events."""

    path: Path

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def log_decision(
        self, decision: Decision, attackers: Sequence[Unit], defenders: Sequence[Unit]
    ) -> None:
        payload = decision_to_dict(decision)
        payload["attacker"] = attackers[decision.attacker_index].name
        payload["defender"] = defenders[decision.defender_index].name
        self.log("AI_DECISION", payload)
