from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from battleai.paths import get_paths
from battleai.services.roster import RosterError, RosterService, _parse_units


def _service() -> RosterService:
    paths = get_paths()
    return RosterService(paths.data_dir, paths.schema_dir)


def test_sample_battle_validates() -> None:
    battle = _service().load_sample()
    assert battle.difficulty == 3
    assert [u.name for u in battle.attackers] == ["Fire Warrior", "Night Blade", "Fallen Ranger"]
    assert not battle.attackers[2].is_alive
    assert battle.defenders[0].ability_text == "heals allies"
    assert battle.defenders[1].rarity == "legendary"


def test_defaults_applied(tmp_path: Path) -> None:
    path = tmp_path / "battle.json"
    unit = {"name": "Goblin", "base_attack": 5, "base_health": 20, "current_health": 20}
    path.write_text(json.dumps({"attackers": [unit], "defenders": [unit]}), encoding="utf-8")
    battle = _service().load_battle(path)
    assert battle.difficulty == 1
    assert battle.attackers[0].level == 1
    assert battle.attackers[0].rarity == "common"
    assert battle.attackers[0].ability_text is None


def test_schema_violation_is_reported() -> None:
    raw = {"attackers": [{"name": "Goblin", "base_attack": "lots", "base_health": 20}], "defenders": []}
    with pytest.raises(RosterError) as exc:
        _service().parse_battle(raw, context="inline")
    msg = str(exc.value)
    assert msg.startswith("Schema validation failed for inline:")
    assert "attackers/0" in msg


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RosterError, match="Missing roster file"):
        _service().load_battle(tmp_path / "nope.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RosterError, match="Invalid JSON"):
        _service().load_battle(path)


def test_non_object_unit_is_rejected_not_skipped() -> None:
    unit = {"name": "Goblin", "base_attack": 5, "base_health": 20, "current_health": 20}
    with pytest.raises(RosterError, match=r"defenders\[1\] must be an object"):
        _parse_units([unit, "Goblin", unit], "defenders")


def test_schema_is_read_once(tmp_path: Path) -> None:
    paths = get_paths()
    schema_dir = tmp_path / "schemas"
    schema_dir.mkdir()
    shutil.copy(paths.schema_dir / "battle.schema.json", schema_dir / "battle.schema.json")
    service = RosterService(paths.data_dir, schema_dir)

    unit = {"name": "Goblin", "base_attack": 5, "base_health": 20, "current_health": 20}
    raw = {"attackers": [unit], "defenders": [unit]}
    service.parse_battle(raw)
    (schema_dir / "battle.schema.json").unlink()
    battle = service.parse_battle(raw)
    assert battle.defenders[0].name == "Goblin"
