import json

import pytest
from cryptography.fernet import Fernet

from storage.local_store import LocalStore, RECORDINGS_KEY


def test_save_then_load_round_trips(store):
    collection = [{"id": "a", "n": 1}, {"id": "b", "nested": {"x": [1, 2]}}]
    assert store.save("slot", collection) is True
    assert store.load("slot", []) == collection


def test_missing_slot_returns_fallback_object(store):
    fallback = [{"seed": True}]
    assert store.load("nothing-here", fallback) is fallback


@pytest.mark.parametrize("payload", ['{"not": "an array"}', '"text"', "42", "null"])
def test_non_array_json_returns_fallback(store, payload):
    store.slot_path("slot").parent.mkdir(parents=True, exist_ok=True)
    store.slot_path("slot").write_text(payload, encoding="utf-8")
    fallback = ["seed"]
    assert store.load("slot", fallback) is fallback


def test_corrupt_json_returns_fallback(store):
    store.slot_path("slot").parent.mkdir(parents=True, exist_ok=True)
    store.slot_path("slot").write_text("[{broken", encoding="utf-8")
    fallback = ["seed"]
    assert store.load("slot", fallback) is fallback


def test_empty_array_is_a_real_value(store):
    store.save("slot", [])
    assert store.load("slot", ["seed"]) == []


def test_save_failure_is_swallowed(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file, not a directory")
    store = LocalStore(blocker)

    assert store.save("slot", [1, 2, 3]) is False
    assert store.load("slot", ["fallback"]) == ["fallback"]


def test_unserializable_collection_is_not_written(store):
    store.save("slot", [1])
    assert store.save("slot", [object()]) is False
    assert store.load("slot", []) == [1]


def test_slot_file_is_plain_json_without_key(store):
    store.save(RECORDINGS_KEY, [{"a": 1}])
    on_disk = store.slot_path(RECORDINGS_KEY).read_text(encoding="utf-8")
    assert json.loads(on_disk) == [{"a": 1}]


def test_encrypted_slots_round_trip(tmp_path):
    store = LocalStore(tmp_path, cipher=Fernet(Fernet.generate_key()))
    store.save("slot", [{"family_contact_phone": "555-123-4567"}])

    raw = store.slot_path("slot").read_text(encoding="utf-8")
    assert "555-123-4567" not in raw
    assert store.load("slot", []) == [{"family_contact_phone": "555-123-4567"}]


def test_slot_encrypted_with_other_key_falls_back(tmp_path):
    LocalStore(tmp_path, cipher=Fernet(Fernet.generate_key())).save("slot", [1])
    other = LocalStore(tmp_path, cipher=Fernet(Fernet.generate_key()))
    fallback = ["seed"]
    assert other.load("slot", fallback) is fallback


def test_deeply_nested_slot_returns_fallback(store):
    store.slot_path("slot").parent.mkdir(parents=True, exist_ok=True)
    store.slot_path("slot").write_text("[" * 200_000 + "]" * 200_000, encoding="utf-8")
    fallback = ["seed"]
    assert store.load("slot", fallback) is fallback


def test_deeply_nested_collection_is_not_saved(store):
    nested: list = []
    for _ in range(200_000):
        nested = [nested]
    assert store.save("slot", nested) is False
    assert not store.slot_path("slot").exists()
