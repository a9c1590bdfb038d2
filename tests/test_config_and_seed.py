# tests/test_config_and_seed.py
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from boardz.app_context import AppContext
from boardz.models.entities import Task
from boardz.models.seed import DEFAULT_TASKS, Seed, load_seed_file
from boardz.utils.config import load_settings, save_settings
from boardz.utils.logging_setup import setup_logging
from boardz.utils.paths import config_dir, ensure_dirs, logs_dir


@pytest.fixture()
def xdg(tmp_path: Path, monkeypatch) -> Path:
    for var in ("XDG_CONFIG_HOME", "XDG_STATE_HOME", "XDG_DATA_HOME"):
        monkeypatch.setenv(var, str(tmp_path / var.lower()))
    return tmp_path


# --- paths / settings -------------------------------------------------------

def test_paths_follow_xdg(xdg: Path):
    assert config_dir() == xdg / "xdg_config_home" / "boardZ"
    assert logs_dir() == xdg / "xdg_state_home" / "boardZ" / "logs"
    ensure_dirs()
    assert config_dir().is_dir() and logs_dir().is_dir()


def test_missing_settings_give_defaults(xdg: Path):
    s = load_settings()
    assert s["main_window"]["width"] == 1280
    assert s["board"]["seed_file"] is None


def test_settings_roundtrip_merges_sections(xdg: Path):
    save_settings({"main_window": {"width": 900}, "extra": 1})
    s = load_settings()
    assert s["main_window"] == {"width": 900, "height": 800, "is_maximized": False}
    assert s["board"] == {"seed_file": None}
    assert s["extra"] == 1


def test_corrupt_settings_fall_back(xdg: Path, caplog):
    p = config_dir() / "settings.json"
    p.parent.mkdir(parents=True)
    p.write_text("{not json")
    with caplog.at_level(logging.WARNING):
        assert load_settings()["main_window"]["height"] == 800
    assert "unreadable" in caplog.text


def test_setup_logging_writes_file(xdg: Path, monkeypatch):
    root = logging.getLogger()
    before = list(root.handlers)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    level = root.level
    try:
        logfile = setup_logging("boardZ-test", console=False)
        logging.getLogger("boardz.test").warning("hello from test")
        for h in root.handlers:
            h.flush()
        assert logfile.parent == logs_dir()
        assert "hello from test" in logfile.read_text(encoding="utf-8")
    finally:
        root.setLevel(level)
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
                h.close()


# --- seed -------------------------------------------------------------------

def test_default_seed_matches_dashboard_defaults():
    seed = Seed()
    assert [t.id for t in seed.tasks] == ["1", "2", "3"]
    assert len(seed.activities) == 2
    assert [m.title for m in seed.metrics][0] == "Total Projects"
    assert seed.metrics[0].change_label == "+8%"


def test_load_seed_file(tmp_path: Path):
    p = tmp_path / "seed.json"
    p.write_text(json.dumps({
        "tasks": [{"id": 7, "title": "Ship", "status": "done", "assignee": "Zoe", "dueDate": "2024-01-31"}],
    }))
    seed = load_seed_file(p)
    assert seed.tasks == [Task("7", "Ship", "done", "Zoe", "2024-01-31")]
    assert seed.activities   # defaults kept
    assert seed.tasks[0].to_dict()["dueDate"] == "2024-01-31"


@pytest.mark.parametrize("content", [
    "[1, 2]",
    "{broken",
    json.dumps({"tasks": [{"title": "no id"}]}),
    json.dumps({"tasks": [{"id": "1", "status": "blocked"}]}),
])
def test_bad_seed_files_raise_value_error(tmp_path: Path, content: str):
    p = tmp_path / "seed.json"
    p.write_text(content)
    with pytest.raises(ValueError):
        load_seed_file(p)


def test_app_context_defaults(qapp):
    ctx = AppContext.create()
    assert ctx.store.snapshot() == DEFAULT_TASKS
    assert ctx.dashboard.lanes()["in-progress"][0].id == "1"
    assert ctx.dashboard.projects[0] == "Website Redesign"
