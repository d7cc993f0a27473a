#!/usr/bin/env python3
"""시각화 상태 + 저장소 테스트"""

import json
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from config.settings import DEFAULT_COLORS, STORAGE_KEYS
from report.parser import parse_report
from state.storage import (
    JsonFileStorage,
    MemoryStorage,
    SessionStateStorage,
    StorageError,
)
from state.store import (
    VisualizerState,
    load_state,
    register_schedulers,
    save_state,
    select_trial,
    selected_schedulers,
    set_color,
    toggle_scheduler,
)

FIRST = (
    "TRIAL RUN 1 - DEADLINE == 1 SECURITY UTILITY == 1\n"
    "Beta,x,1,1\n"
    "Alpha,x,1,1\n"
)
SECOND = (
    "TRIAL RUN 3 - DEADLINE == 1 SECURITY UTILITY == 1\n"
    "Alpha,x,1,1\n"
    "Gamma,x,1,1\n"
)


def test_register_new_schedulers():
    state = register_schedulers(VisualizerState(), parse_report(FIRST))

    assert state.schedulers == ["Alpha", "Beta"]
    assert state.selected == {"Alpha": True, "Beta": True}
    assert state.colors == {"Alpha": DEFAULT_COLORS[0], "Beta": DEFAULT_COLORS[1]}
    assert state.selected_trial == 1


def test_preferences_survive_reparse():
    state = register_schedulers(VisualizerState(), parse_report(FIRST))
    state = toggle_scheduler(state, "Alpha")
    state = set_color(state, "Beta", "#123456")

    state = register_schedulers(state, parse_report(SECOND))

    assert state.schedulers == ["Alpha", "Gamma"]
    assert state.selected["Alpha"] is False
    assert state.selected["Gamma"] is True
    assert state.colors["Beta"] == "#123456"
    assert state.colors["Alpha"] == DEFAULT_COLORS[0]
    assert state.colors["Gamma"] == DEFAULT_COLORS[0]
    # 트라이얼 1이 없어졌으므로 가장 작은 번호로 이동
    assert state.selected_trial == 3
    assert selected_schedulers(state) == ["Gamma"]


def test_transitions_return_new_objects():
    state = VisualizerState(selected={"A": True})
    toggled = toggle_scheduler(state, "A")

    assert state.selected == {"A": True}
    assert toggled.selected == {"A": False}
    assert toggle_scheduler(toggled, "A").selected == {"A": True}
    assert select_trial(state, 5).selected_trial == 5
    assert state.selected_trial == 1


def test_toggle_unknown_scheduler_excludes_it():
    assert toggle_scheduler(VisualizerState(), "New").selected == {"New": False}


def test_dict_round_trip():
    state = VisualizerState(
        selected={"A": False}, colors={"A": "#FFFFFF"}, schedulers=["A"], selected_trial=2
    )
    assert VisualizerState.from_dict(json.loads(json.dumps(state.to_dict()))) == state


def test_save_and_load_memory_storage():
    storage = MemoryStorage()
    state = VisualizerState(selected={"A": False, "B": True}, colors={"A": "#000000"})

    assert save_state(storage, state) is True
    assert json.loads(storage.get(STORAGE_KEYS["selection"])) == {"A": False, "B": True}

    loaded = load_state(storage)
    assert loaded.selected == state.selected
    assert loaded.colors == state.colors


def test_save_skipped_without_selection():
    storage = MemoryStorage()
    assert save_state(storage, VisualizerState()) is False
    assert storage.data == {}


def test_load_defaults_on_missing_or_corrupt_data():
    assert load_state(MemoryStorage()) == VisualizerState()

    corrupt = MemoryStorage({STORAGE_KEYS["selection"]: "{not json"})
    assert load_state(corrupt) == VisualizerState()

    wrong_type = MemoryStorage({STORAGE_KEYS["colors"]: "[1, 2]"})
    assert load_state(wrong_type) == VisualizerState()


def test_json_file_storage(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    storage = JsonFileStorage(path)

    assert storage.get("missing") is None
    storage.set("k", "v")
    storage.set("k2", "v2")

    assert JsonFileStorage(path).get("k") == "v"
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v", "k2": "v2"}


def test_json_file_storage_corrupt_file(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("garbage", encoding="utf-8")

    with pytest.raises(StorageError):
        JsonFileStorage(path).get("k")

    # 상태 복원은 기본값으로 진행
    assert load_state(JsonFileStorage(path)) == VisualizerState()


def test_save_state_reports_storage_failure(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("[]", encoding="utf-8")

    assert save_state(JsonFileStorage(path), VisualizerState(selected={"A": True})) is False


def test_session_state_storage():
    session = {}
    storage = SessionStateStorage(session)
    save_state(storage, VisualizerState(selected={"A": True}, colors={"A": "#111111"}))

    assert load_state(storage).colors == {"A": "#111111"}
    assert all(key.startswith(SessionStateStorage.PREFIX) for key in session)
