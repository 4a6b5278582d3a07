"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from sound_roster.config import RosterConfig, load_config

REPO_CONFIG = Path(__file__).resolve().parent.parent / "roster_config.yaml"


def test_defaults():
    cfg = load_config()
    assert cfg.service_weekdays == [0, 3, 6]
    assert cfg.min_leaders == 6
    assert cfg.min_participants == 4
    assert cfg.role_labels == {"leader": "Líder", "participant": "Auxiliar"}
    assert cfg.seed is None


def test_sample_config_loads():
    cfg = load_config(REPO_CONFIG)
    assert cfg.service_weekdays == [0, 3, 6]
    assert cfg.weekday_labels[0] == "Domingo"
    assert cfg.default_unavailable_reason == "Ocupado"


def test_yaml_overrides(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("min_leaders: 2\nmin_participants: 0\nseed: 11\nrole_labels:\n  leader: Leader\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.min_leaders == 2
    assert cfg.seed == 11
    assert cfg.role_labels == {"leader": "Leader", "participant": "Auxiliar"}


def test_json_config(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"service_weekdays": [6, 0]}), encoding="utf-8")
    assert load_config(path).service_weekdays == [0, 6]


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("max_leaders: 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        RosterConfig(service_weekdays=[7])
    with pytest.raises(ValueError):
        RosterConfig(service_weekdays=[])
    with pytest.raises(ValueError):
        RosterConfig(min_leaders=0)
    with pytest.raises(ValueError):
        RosterConfig(role_labels={"deacon": "Diácono"})


def test_unsupported_format(tmp_path):
    path = tmp_path / "cfg.toml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
