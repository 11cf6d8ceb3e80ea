# tests/test_storage.py

import os

import pytest

from core.storage import JsonFileStorage, MemoryStorage


def test_memory_storage_get_set_remove():
    storage = MemoryStorage()

    assert storage.get_item("alunosData") is None

    storage.set_item("alunosData", "[]")
    assert storage.get_item("alunosData") == "[]"

    storage.remove_item("alunosData")
    assert storage.get_item("alunosData") is None


def test_json_file_storage_missing_key(tmp_path):
    storage = JsonFileStorage(str(tmp_path / "roster"))

    assert storage.get_item("alunosData") is None


def test_json_file_storage_creates_directory_and_round_trips(tmp_path):
    dir_path = tmp_path / "nested" / "roster"
    storage = JsonFileStorage(str(dir_path))

    storage.set_item("alunosData", '[{"name": "Ana"}]')

    assert os.path.isfile(dir_path / "alunosData.json")
    assert storage.get_item("alunosData") == '[{"name": "Ana"}]'
    assert not os.path.exists(dir_path / "alunosData.json.tmp")


def test_json_file_storage_overwrites_in_full(tmp_path):
    storage = JsonFileStorage(str(tmp_path))

    storage.set_item("alunosData", "a much longer first payload")
    storage.set_item("alunosData", "[]")

    assert storage.get_item("alunosData") == "[]"


def test_json_file_storage_remove_item(tmp_path):
    storage = JsonFileStorage(str(tmp_path))
    storage.set_item("alunosData", "[]")

    storage.remove_item("alunosData")
    storage.remove_item("alunosData")

    assert storage.get_item("alunosData") is None


def test_json_file_storage_failed_write_removes_temp_file(tmp_path, monkeypatch):
    storage = JsonFileStorage(str(tmp_path))

    def failing_replace(src, dst):
        raise OSError("No space left on device")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(OSError):
        storage.set_item("alunosData", "[]")

    assert not os.path.exists(tmp_path / "alunosData.json.tmp")
    assert storage.get_item("alunosData") is None


def test_json_file_storage_unencodable_value_removes_temp_file(tmp_path):
    storage = JsonFileStorage(str(tmp_path))

    with pytest.raises(UnicodeEncodeError):
        storage.set_item("alunosData", "\ud800")

    assert not os.path.exists(tmp_path / "alunosData.json.tmp")
