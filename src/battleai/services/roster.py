from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from jsonschema import Draft202012Validator

from battleai.engine.serialize import unit_from_dict
from battleai.engine.types import Unit


class RosterError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RosterError(f"Missing roster file: {path}") from e
    except json.JSONDecodeError as e:
        raise RosterError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise RosterError("\n".join(lines))


def _parse_units(raw: object, key: str) -> tuple[Unit, ...]:
    if not isinstance(raw, list):
        raise RosterError(f"{key} must be a list")
    units: list[Unit] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise RosterError(f"{key}[{i}] must be an object")
        units.append(unit_from_dict(item))
    return tuple(units)


@dataclass(frozen=True)
class Battle:
    """Snapshot of both rosters at one attack opportunity."""

    attackers: tuple[Unit, ...]
    defenders: tuple[Unit, ...]
    difficulty: int = 1


class RosterService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir
        self._battle_schema: object | None = None

    def _schema(self) -> object:
        if self._battle_schema is None:
            self._battle_schema = _load_json(self._schema_dir / "battle.schema.json")
        return self._battle_schema

    def parse_battle(self, raw: object, *, context: str = "<battle>") -> Battle:
        validate_json(raw, self._schema(), context=context)
        if not isinstance(raw, dict):
            raise RosterError("battle snapshot must be an object")

        difficulty = raw.get("difficulty", 1)
        if not isinstance(difficulty, int):
            raise RosterError("Expected int for difficulty")
        return Battle(
            attackers=_parse_units(raw.get("attackers"), "attackers"),
            defenders=_parse_units(raw.get("defenders"), "defenders"),
            difficulty=difficulty,
        )

    def load_battle(self, path: Path) -> Battle:
        return self.parse_battle(_load_json(path), context=str(path))

    def load_sample(self) -> Battle:
        return self.load_battle(self._data_dir / "sample_battle.json")
