import json

import pytest

from lingopop.core.exceptions import ConfigStoreError
from lingopop.models.language import Language
from lingopop.schemas.app_state import AppState
from lingopop.services.config_store import AppStateStore


def test_load_without_file_returns_defaults(tmp_path):
    store = AppStateStore(tmp_path / "config.json")
    assert store.load() == AppState()


def test_save_then_load(tmp_path):
    store = AppStateStore(tmp_path / "nested" / "config.json")
    state = AppState(native_lang=Language.SPANISH, target_lang=Language.KOREAN, has_onboarded=True)
    store.save(state)

    assert AppStateStore(tmp_path / "nested" / "config.json").load() == state


def test_value_is_stored_serialized_under_key(tmp_path):
    path = tmp_path / "config.json"
    AppStateStore(path).save(AppState(has_onboarded=True))

    raw = json.loads(path.read_text(encoding="utf-8"))
    stored = json.loads(raw["lingopop_config"])
    assert stored == {
        "nativeLang": "Chinese (Simplified)",
        "targetLang": "English",
        "hasOnboarded": True,
    }


def test_save_keeps_other_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"other": "value"}), encoding="utf-8")
    AppStateStore(path).save(AppState())

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["other"] == "value"
    assert "lingopop_config" in raw


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps({"lingopop_config": "{broken"}),
    json.dumps({"lingopop_config": json.dumps({"nativeLang": "Klingon"})}),
])
def test_invalid_stored_state_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    assert AppStateStore(path).load() == AppState()


def test_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = AppStateStore(blocker / "config.json")

    with pytest.raises(ConfigStoreError):
        store.save(AppState())


def test_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    def failing_dump(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("lingopop.services.config_store.json.dump", failing_dump)
    store = AppStateStore(tmp_path / "config.json")

    with pytest.raises(ConfigStoreError):
        store.save(AppState())

    assert list(tmp_path.iterdir()) == []
