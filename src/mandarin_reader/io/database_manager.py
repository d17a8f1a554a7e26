"""SQLite-backed vocabulary and component index persistence."""

import json
import sqlite3
import threading
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from mandarin_reader.core import CharacterInfo, ContextEntry, VocabularyEntry

_ORDERINGS = {
    "lookup_count": "lookup_count DESC, id ASC",
    "last_seen": "last_seen_at DESC, id ASC",
    "pinyin": "pinyin_display ASC, id ASC",
}


class DatabaseManager:
    """Owns SQLite connection, schema, and vocabulary persistence helpers."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        # Lookups run on worker threads; every statement goes through _lock.
        self.connection = sqlite3.connect(self.db_path, check_same_thread=False)
        self.connection.row_factory = sqlite3.Row
        self._lock = threading.RLock()

    def ensure_schema(self) -> None:
        """Create tables and indexes if they do not exist."""
        with self._lock:
            cur = self.connection.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS vocabulary (
                    id TEXT PRIMARY KEY,
                    word TEXT NOT NULL,
                    pinyin_display TEXT NOT NULL DEFAULT '',
                    definitions TEXT NOT NULL DEFAULT '[]',
                    lookup_count INTEGER NOT NULL DEFAULT 1,
                    first_seen_at INTEGER NOT NULL,
                    last_seen_at INTEGER NOT NULL,
                    contexts TEXT NOT NULL DEFAULT '[]',
                    characters TEXT NOT NULL DEFAULT '[]',
                    hsk_level INTEGER
                );
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS component_map (
                    component TEXT PRIMARY KEY,
                    characters TEXT NOT NULL DEFAULT '[]'
                );
                """
            )
            cur.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_vocabulary_lookup_count
                ON vocabulary(lookup_count);
                """
            )
            cur.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_vocabulary_last_seen
                ON vocabulary(last_seen_at);
                """
            )
            cur.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_vocabulary_pinyin
                ON vocabulary(pinyin_display);
                """
            )
            self.connection.commit()

    def get_vocabulary_entry(self, entry_id: str) -> Optional[VocabularyEntry]:
        with self._lock:
            cur = self.connection.cursor()
            cur.execute("SELECT * FROM vocabulary WHERE id = ?", (entry_id,))
            row = cur.fetchone()
        return self._row_to_vocabulary_entry(row) if row else None

    def put_vocabulary_entry(self, entry: VocabularyEntry) -> None:
        """Insert or fully overwrite the row for entry.id."""
        contexts_json = json.dumps([asdict(c) for c in entry.contexts], ensure_ascii=False)
        characters_json = json.dumps([asdict(c) for c in entry.characters], ensure_ascii=False)
        definitions_json = json.dumps(entry.definitions, ensure_ascii=False)
        with self._lock:
            self.connection.execute(
                """
                INSERT INTO vocabulary (
                    id, word, pinyin_display, definitions, lookup_count,
                    first_seen_at, last_seen_at, contexts, characters, hsk_level
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    word = excluded.word,
                    pinyin_display = excluded.pinyin_display,
                    definitions = excluded.definitions,
                    lookup_count = excluded.lookup_count,
                    first_seen_at = excluded.first_seen_at,
                    last_seen_at = excluded.last_seen_at,
                    contexts = excluded.contexts,
                    characters = excluded.characters,
                    hsk_level = excluded.hsk_level
                """,
                (
                    entry.id,
                    entry.word,
                    entry.pinyin_display,
                    definitions_json,
                    entry.lookup_count,
                    entry.first_seen_at,
                    entry.last_seen_at,
                    contexts_json,
                    characters_json,
                    entry.hsk_level,
                ),
            )
            self.connection.commit()

    def list_vocabulary(self, order_by: Optional[str] = None) -> List[VocabularyEntry]:
        """
        List all vocabulary entries.

        Args:
            order_by: None for insertion order, or one of "lookup_count",
                "last_seen" (both most first) or "pinyin" (alphabetical).

        Raises:
            ValueError: If order_by is not a known ordering.
        """
        if order_by is None:
            clause = "rowid ASC"
        elif order_by in _ORDERINGS:
            clause = _ORDERINGS[order_by]
        else:
            raise ValueError(f"Unknown vocabulary ordering: {order_by}")
        with self._lock:
            cur = self.connection.cursor()
            cur.execute(f"SELECT * FROM vocabulary ORDER BY {clause}")
            rows = cur.fetchall()
        return [self._row_to_vocabulary_entry(row) for row in rows]

    def get_component_characters(self, component: str) -> List[str]:
        with self._lock:
            cur = self.connection.cursor()
            cur.execute(
                "SELECT characters FROM component_map WHERE component = ?", (component,)
            )
            row = cur.fetchone()
        return json.loads(row["characters"]) if row else []

    def put_component_characters(self, component: str, characters: List[str]) -> None:
        with self._lock:
            self.connection.execute(
                """
                INSERT INTO component_map (component, characters)
                VALUES (?, ?)
                ON CONFLICT(component) DO UPDATE SET
                    characters = excluded.characters
                """,
                (component, json.dumps(characters, ensure_ascii=False)),
            )
            self.connection.commit()

    def close(self) -> None:
        with self._lock:
            self.connection.close()

    @staticmethod
    def _row_to_vocabulary_entry(row: sqlite3.Row) -> VocabularyEntry:
        contexts = [ContextEntry(**c) for c in json.loads(row["contexts"] or "[]")]
        characters = [CharacterInfo(**c) for c in json.loads(row["characters"] or "[]")]
        return VocabularyEntry(
            id=row["id"],
            word=row["word"],
            pinyin_display=row["pinyin_display"],
            definitions=json.loads(row["definitions"] or "[]"),
            lookup_count=row["lookup_count"],
            first_seen_at=row["first_seen_at"],
            last_seen_at=row["last_seen_at"],
            contexts=contexts,
            characters=characters,
            hsk_level=row["hsk_level"],
        )
