import json

import pytest

from oklch import hex_to_oklch
from ramp import generate_ramp
from storage import STORAGE_VERSION, clear_saved_ramps, load_ramps, save_ramps


@pytest.fixture(scope="module")
def ramps():
    return [
        generate_ramp("Blue", "#5C8FBF", is_saved=True),
        generate_ramp("Scratch", "#389C70"),
    ]


@pytest.fixture
def store(tmp_path):
    return tmp_path / "ramps.json"


def test_only_saved_ramps_written(ramps, store):
    save_ramps(ramps, store)
    data = json.loads(store.read_text())

    assert data["version"] == STORAGE_VERSION
    assert data["timestamp"]
    assert [r["name"] for r in data["ramps"]] == ["Blue"]


def test_oklch_not_persisted(ramps, store):
    save_ramps(ramps, store)
    stored = json.loads(store.read_text())["ramps"][0]

    assert set(stored) == {"id", "name", "baseHex", "isSaved", "steps"}
    assert set(stored["steps"][0]) == {"step", "hex"}


def test_round_trip(ramps, store):
    save_ramps(ramps, store)
    loaded = load_ramps(store)

    assert len(loaded) == 1
    ramp = loaded[0]
    assert ramp.id == ramps[0].id
    assert ramp.name == "Blue"
    assert ramp.base_hex == "#5C8FBF"
    assert ramp.is_saved is True
    assert ramp.hex_by_step() == ramps[0].hex_by_step()
    for step in ramp.steps:
        assert step.oklch == hex_to_oklch(step.hex)


def test_missing_file(store):
    assert load_ramps(store) is None


def test_no_ramps_list(store):
    store.write_text(json.dumps({"version": "1.0"}))
    assert load_ramps(store) is None


def test_is_saved_defaults_true(store):
    store.write_text(json.dumps({
        "ramps": [{"id": "x", "name": "Old", "baseHex": "#5C8FBF", "steps": [{"step": 50, "hex": "#F0F6FC"}]}],
    }))
    assert load_ramps(store)[0].is_saved is True


@pytest.mark.parametrize("content", ["{not json", json.dumps({"ramps": [{"name": "no id"}]})])
def test_malformed_file_reported(store, capsys, content):
    store.write_text(content)

    assert load_ramps(store) is None
    assert "Failed to load ramps" in capsys.readouterr().err


def test_clear(ramps, store):
    save_ramps(ramps, store)
    clear_saved_ramps(store)
    assert not store.exists()

    # Clearing again is harmless
    clear_saved_ramps(store)
