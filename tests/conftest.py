"""Shared fixtures: a small CC-CEDICT/Unihan data set and wired services."""

import json

import pytest

from mandarin_reader.io import DatabaseManager, ResourceRepository, clear_resource_cache
from mandarin_reader.services import (
    ComponentIndexService,
    DictionaryService,
    InMemoryReplicaStore,
    LookupService,
    VocabularyService,
)

CEDICT = {
    "你好": [{"t": "你好", "s": "你好", "p": "ni3 hao3", "d": ["hello", "hi"]}],
    "你": [{"t": "你", "s": "你", "p": "ni3", "d": ["you (informal)"]}],
    "好": [
        {"t": "好", "s": "好", "p": "hao3", "d": ["good", "well", "proper"]},
        {"t": "好", "s": "好", "p": "hao4", "d": ["to be fond of", "to have a tendency to"]},
    ],
    "中国": [{"t": "中國", "s": "中国", "p": "Zhong1 guo2", "d": ["China"]}],
    "中國": [{"t": "中國", "s": "中国", "p": "Zhong1 guo2", "d": ["China"]}],
    "中国人": [{"t": "中國人", "s": "中国人", "p": "Zhong1 guo2 ren2", "d": ["Chinese person"]}],
    "中": [{"t": "中", "s": "中", "p": "zhong1", "d": ["within", "among", "in", "middle"]}],
    "国": [{"t": "國", "s": "国", "p": "guo2", "d": ["country", "nation", "state"]}],
    "國": [{"t": "國", "s": "国", "p": "guo2", "d": ["country", "nation", "state"]}],
    "人": [{"t": "人", "s": "人", "p": "ren2", "d": ["person", "people"]}],
    "个": [
        {"t": "個", "s": "个", "p": "ge4", "d": ["variant of 個"]},
        {"t": "個", "s": "个", "p": "ge4", "d": ["a measure word"]},
    ],
    "女": [{"t": "女", "s": "女", "p": "nu:3", "d": ["female", "woman"]}],
    "学生": [{"t": "學生", "s": "学生", "p": "xue2 sheng5", "d": ["student", "schoolchild"]}],
}

UNIHAN = {
    "你": {"r": "人", "sc": 7, "c": ["亻", "尔"]},
    "好": {"r": "女", "sc": 6, "c": ["女", "子"]},
    "妈": {"r": "女", "sc": 6, "c": ["女", "马"]},
    "中": {"r": "丨", "sc": 4},
    "国": {"r": "囗", "sc": 8, "c": ["囗", "玉"]},
    "人": {"r": "人", "sc": 2},
}

RADICALS = {"人": "person", "女": "woman", "丨": "line", "囗": "enclosure"}

HSK = {"你好": 1, "中国": 1, "学生": 1, "人": 1}


class FakeClock:
    """Deterministic epoch-millis clock; advances by step on every call."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture(autouse=True)
def _fresh_resource_cache():
    clear_resource_cache()
    yield
    clear_resource_cache()


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    for name, content in (
        ("cedict.json", CEDICT),
        ("unihan.json", UNIHAN),
        ("radicals.json", RADICALS),
        ("hsk.json", HSK),
    ):
        (directory / name).write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return directory


@pytest.fixture
def resources(data_dir):
    return ResourceRepository(data_dir)


@pytest.fixture
def dictionary_service(resources):
    return DictionaryService(resources)


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(tmp_path / "vocab.db")
    manager.ensure_schema()
    yield manager
    manager.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def replica():
    return InMemoryReplicaStore()


@pytest.fixture
def component_index(db):
    return ComponentIndexService(db)


@pytest.fixture
def vocabulary_service(db, replica, component_index, clock):
    return VocabularyService(db, replica, component_index, clock=clock)


@pytest.fixture
def lookup_service(dictionary_service, vocabulary_service, component_index):
    return LookupService(dictionary_service, vocabulary_service, component_index)
