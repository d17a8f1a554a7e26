import json
import logging

import pytest

from mandarin_reader.core import DataUnavailableError
from mandarin_reader.io import ResourceRepository, clear_resource_cache, load_resource
from mandarin_reader.io import resource_loader
from mandarin_reader.io.resource_loader import read_json_resource


def test_read_json_resource_returns_read_only_mapping(tmp_path):
    path = tmp_path / "hsk.json"
    path.write_text(json.dumps({"你好": 1}, ensure_ascii=False), encoding="utf-8")

    data = read_json_resource(path)

    assert data["你好"] == 1
    with pytest.raises(TypeError):
        data["好"] = 2


def test_read_json_resource_missing_file(tmp_path):
    with pytest.raises(DataUnavailableError, match="Failed to load resource"):
        read_json_resource(tmp_path / "missing.json")


def test_read_json_resource_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DataUnavailableError):
        read_json_resource(path)


def test_read_json_resource_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(DataUnavailableError, match="not a JSON object"):
        read_json_resource(path)


def test_load_resource_is_cached(tmp_path):
    path = tmp_path / "radicals.json"
    path.write_text(json.dumps({"人": "person"}), encoding="utf-8")

    first = load_resource(path)
    path.write_text(json.dumps({"人": "changed"}), encoding="utf-8")
    second = load_resource(path)

    assert second is first
    assert second["人"] == "person"


def test_failed_load_is_logged_once_and_cached(tmp_path, caplog, monkeypatch):
    path = tmp_path / "cedict.json"
    reads = []
    real_read = resource_loader.read_json_resource

    def counting_read(resource_path):
        reads.append(resource_path)
        return real_read(resource_path)

    monkeypatch.setattr(resource_loader, "read_json_resource", counting_read)

    with caplog.at_level(logging.ERROR):
        for _ in range(5):
            assert dict(load_resource(path)) == {}

    assert len(reads) == 1
    assert caplog.text.count("Failed to load resource") == 1


def test_clear_resource_cache_retries_failed_load(tmp_path):
    path = tmp_path / "cedict.json"
    assert dict(load_resource(path)) == {}

    path.write_text(json.dumps({"人": []}), encoding="utf-8")
    assert dict(load_resource(path)) == {}

    clear_resource_cache()
    assert "人" in load_resource(path)


def test_repository_reads_all_resources(resources):
    resources.preload()

    assert "你好" in resources.cedict()
    assert resources.unihan()["你"]["sc"] == 7
    assert resources.radicals()["女"] == "woman"
    assert resources.hsk()["学生"] == 1


def test_repository_with_missing_directory_is_empty(tmp_path):
    repository = ResourceRepository(tmp_path / "nowhere")

    assert len(repository.cedict()) == 0
    assert len(repository.hsk()) == 0
