import json
from pathlib import Path

import pytest

from registry_add.core.files import safe_write_json


def test_safe_write_json_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "record.json"

    safe_write_json(target, {"versions": [{"version": "v1.0.0"}]})

    assert json.loads(target.read_text(encoding="utf-8")) == {"versions": [{"version": "v1.0.0"}]}
    assert target.read_text(encoding="utf-8").endswith("\n")


def test_safe_write_json_replaces_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "record.json"
    target.write_text("old", encoding="utf-8")

    safe_write_json(target, {"new": True})

    assert json.loads(target.read_text(encoding="utf-8")) == {"new": True}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["record.json"]


def test_safe_write_json_leaves_no_temp_file_on_failure(tmp_path: Path) -> None:
    target = tmp_path / "record.json"

    with pytest.raises(TypeError):
        safe_write_json(target, {"not serializable": object()})

    assert list(tmp_path.iterdir()) == []


def test_safe_write_json_onto_directory_fails_cleanly(tmp_path: Path) -> None:
    target = tmp_path / "record.json"
    target.mkdir()

    with pytest.raises(OSError):
        safe_write_json(target, {"a": 1})

    assert sorted(p.name for p in tmp_path.iterdir()) == ["record.json"]
