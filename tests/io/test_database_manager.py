import pytest

from mandarin_reader.core import CharacterInfo, ContextEntry, VocabularyEntry
from mandarin_reader.io import DatabaseManager


@pytest.fixture
def manager(tmp_path):
    db_path = tmp_path / "vocab.db"
    db_manager = DatabaseManager(db_path)
    db_manager.ensure_schema()
    yield db_manager
    db_manager.close()


def make_entry(word, count=1, first=1000, last=1000, pinyin=""):
    return VocabularyEntry(
        id=word,
        word=word,
        pinyin_display=pinyin,
        definitions=["def"],
        lookup_count=count,
        first_seen_at=first,
        last_seen_at=last,
    )


def test_schema_created(manager):
    cur = manager.connection.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
    table_names = {row["name"] for row in cur.fetchall()}
    assert {"vocabulary", "component_map"}.issubset(table_names)


def test_ensure_schema_is_idempotent(manager):
    manager.put_vocabulary_entry(make_entry("你好"))
    manager.ensure_schema()
    assert manager.get_vocabulary_entry("你好") is not None


def test_entry_round_trips_nested_fields(manager):
    entry = VocabularyEntry(
        id="你好",
        word="你好",
        pinyin_display="nǐ hǎo",
        definitions=["hello", "hi"],
        lookup_count=2,
        first_seen_at=1000,
        last_seen_at=2000,
        contexts=[ContextEntry(sentence="你好，世界", source_url="https://example.com", timestamp=1000)],
        characters=[
            CharacterInfo(character="你", radical="人", stroke_count=7, radical_meaning="person", components=["亻", "尔"]),
            CharacterInfo(character="好", radical="女", stroke_count=6),
        ],
        hsk_level=1,
    )
    manager.put_vocabulary_entry(entry)

    assert manager.get_vocabulary_entry("你好") == entry


def test_get_missing_entry_returns_none(manager):
    assert manager.get_vocabulary_entry("没有") is None


def test_put_overwrites_existing_row(manager):
    manager.put_vocabulary_entry(make_entry("好", count=1))
    manager.put_vocabulary_entry(make_entry("好", count=4, last=5000))

    stored = manager.get_vocabulary_entry("好")
    assert stored.lookup_count == 4
    assert stored.last_seen_at == 5000
    assert len(manager.list_vocabulary()) == 1


def test_list_vocabulary_orderings(manager):
    manager.put_vocabulary_entry(make_entry("中", count=2, last=3000, pinyin="zhong"))
    manager.put_vocabulary_entry(make_entry("安", count=5, last=1000, pinyin="an"))
    manager.put_vocabulary_entry(make_entry("好", count=2, last=2000, pinyin="hao"))

    assert [e.word for e in manager.list_vocabulary()] == ["中", "安", "好"]
    assert [e.word for e in manager.list_vocabulary("lookup_count")] == ["安", "中", "好"]
    assert [e.word for e in manager.list_vocabulary("last_seen")] == ["中", "好", "安"]
    assert [e.word for e in manager.list_vocabulary("pinyin")] == ["安", "好", "中"]


def test_list_vocabulary_rejects_unknown_ordering(manager):
    with pytest.raises(ValueError, match="Unknown vocabulary ordering"):
        manager.list_vocabulary("alphabet")


def test_component_characters_round_trip(manager):
    assert manager.get_component_characters("女") == []

    manager.put_component_characters("女", ["好", "妈"])
    manager.put_component_characters("女", ["好", "妈", "她"])

    assert manager.get_component_characters("女") == ["好", "妈", "她"]
