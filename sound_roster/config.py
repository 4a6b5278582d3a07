"""Load and validate roster configuration (YAML or JSON)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional

import yaml


SERVICE_WEEKDAYS = (0, 3, 6)  # Sunday, Wednesday, Saturday

DEFAULT_DB_URL = "sqlite:///roster.db"

DEFAULT_ROLE_LABELS = {"leader": "Líder", "participant": "Auxiliar"}

DEFAULT_WEEKDAY_LABELS = ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"]

DEFAULT_LEADER_COLORS = [
    "#6366f1", "#10b981", "#f59e0b", "#f43f5e",
    "#8b5cf6", "#06b6d4", "#ec4899", "#f97316",
]


@dataclass
class RosterConfig:
    service_weekdays: List[int] = field(default_factory=lambda: list(SERVICE_WEEKDAYS))
    min_leaders: int = 6
    min_participants: int = 4
    role_labels: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ROLE_LABELS))
    weekday_labels: List[str] = field(default_factory=lambda: list(DEFAULT_WEEKDAY_LABELS))
    default_unavailable_reason: str = "Ocupado"
    leader_colors: List[str] = field(default_factory=lambda: list(DEFAULT_LEADER_COLORS))
    seed: Optional[int] = None
    db_url: str = DEFAULT_DB_URL

    def __post_init__(self) -> None:
        weekdays = []
        for d in self.service_weekdays:
            if isinstance(d, bool) or not isinstance(d, int):
                raise ValueError(f"service_weekdays entries must be integers, got {d!r}")
            if not 0 <= d <= 6:
                raise ValueError(f"service_weekdays entries must be in 0..6, got {d}")
            weekdays.append(d)
        if not weekdays:
            raise ValueError("service_weekdays must not be empty")
        self.service_weekdays = sorted(set(weekdays))

        if int(self.min_leaders) < 1:
            raise ValueError("min_leaders must be at least 1")
        if int(self.min_participants) < 0:
            raise ValueError("min_participants must not be negative")

        labels = dict(DEFAULT_ROLE_LABELS)
        labels.update(self.role_labels or {})
        unknown = set(labels) - set(DEFAULT_ROLE_LABELS)
        if unknown:
            raise ValueError(f"Unknown role_labels keys: {sorted(unknown)}")
        self.role_labels = labels

        if len(self.weekday_labels) != 7:
            raise ValueError("weekday_labels must list 7 names, Sunday first")
        if not self.leader_colors:
            raise ValueError("leader_colors must not be empty")


def _read_raw(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format: {path.suffix or path.name}")
    return data or {}


def load_config(path: str | Path | None = None) -> RosterConfig:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Config file path; None returns the defaults

    Returns:
        RosterConfig

    Raises:
        ValueError: On unknown keys or invalid values
    """
    if path is None:
        return RosterConfig()
    raw = _read_raw(Path(path))
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(RosterConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return RosterConfig(**raw)
