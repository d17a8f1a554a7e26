"""Vocabulary Service - authoritative word store and replica merging."""

import logging
import threading
import time
import weakref
from dataclasses import replace
from typing import Callable, List, Optional

from mandarin_reader.core import (
    CharacterInfo,
    ContextEntry,
    QuotaExceededError,
    ReplicaTransportError,
    VocabularyEntry,
    word_id,
)
from mandarin_reader.io import DatabaseManager
from mandarin_reader.services.component_index import ComponentIndexService
from mandarin_reader.services.replication import (
    ReplicaStore,
    check_quota,
    merge_inbound,
    merge_outbound,
)

logger = logging.getLogger(__name__)

MAX_CONTEXTS_PER_WORD = 5


def _now_millis() -> int:
    return int(time.time() * 1000)


class VocabularyService:
    """Application service for the personal lexicon.

    Depends on DatabaseManager for the authoritative local store and a
    ReplicaStore for the compact projection shared with other devices.
    Saves of the same normalized word are serialized; different words
    do not wait on each other.
    """

    def __init__(
        self,
        db: DatabaseManager,
        replica: ReplicaStore,
        component_index: ComponentIndexService,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._db = db
        self._replica = replica
        self._component_index = component_index
        self._clock = clock or _now_millis
        # Entries disappear once no save holds the lock.
        self._key_locks: "weakref.WeakValueDictionary[str, threading.Lock]" = (
            weakref.WeakValueDictionary()
        )
        self._key_locks_guard = threading.Lock()
        self._replica_lock = threading.Lock()

    def save_or_update(
        self,
        word: str,
        pinyin_display: str,
        definitions: List[str],
        characters: List[CharacterInfo],
        context: Optional[str] = None,
        source_url: Optional[str] = None,
        hsk_level: Optional[int] = None,
    ) -> VocabularyEntry:
        """Record one lookup of word, creating its entry on first sight.

        Every call increments lookup_count by exactly one. Definitions and
        characters are only replaced by non-empty values. A context sentence is
        kept only while fewer than MAX_CONTEXTS_PER_WORD are stored and no
        stored context has the same sentence.

        Returns:
            The entry as persisted locally.
        """
        entry_id = word_id(word)
        with self._lock_for(entry_id):
            now = self._clock()
            existing = self._db.get_vocabulary_entry(entry_id)

            if existing is None:
                contexts = [self._context(context, source_url, now)] if context else []
                entry = VocabularyEntry(
                    id=entry_id,
                    word=word,
                    pinyin_display=pinyin_display,
                    definitions=list(definitions),
                    lookup_count=1,
                    first_seen_at=now,
                    last_seen_at=now,
                    contexts=contexts,
                    characters=list(characters),
                    hsk_level=hsk_level,
                )
            else:
                contexts = list(existing.contexts)
                if (
                    context
                    and len(contexts) < MAX_CONTEXTS_PER_WORD
                    and all(c.sentence != context for c in contexts)
                ):
                    contexts.append(self._context(context, source_url, now))
                entry = replace(
                    existing,
                    lookup_count=existing.lookup_count + 1,
                    last_seen_at=max(now, existing.first_seen_at),
                    definitions=list(definitions) if definitions else existing.definitions,
                    characters=list(characters) if characters else existing.characters,
                    contexts=contexts,
                    hsk_level=hsk_level if hsk_level is not None else existing.hsk_level,
                )

            self._db.put_vocabulary_entry(entry)
            self._push_to_replica(entry)

        return entry

    def sync_from_replica(self) -> int:
        """
        Merge every replicated record into the local store.

        Run once at startup before serving lookups. Transport failures are
        logged and leave the local store untouched.

        Returns:
            Number of records merged.
        """
        try:
            records = self._replica.read()
        except ReplicaTransportError as exc:
            logger.warning("Failed to read replica: %s", exc)
            return 0

        for remote in records.values():
            entry_id = word_id(remote.word)
            with self._lock_for(entry_id):
                local = self._db.get_vocabulary_entry(entry_id)
                self._db.put_vocabulary_entry(merge_inbound(local, remote))

        logger.info("Merged %d replicated vocabulary records", len(records))
        return len(records)

    def get_all(self) -> List[VocabularyEntry]:
        return self._db.list_vocabulary()

    def get_entry(self, word: str) -> Optional[VocabularyEntry]:
        return self._db.get_vocabulary_entry(word_id(word))

    def get_sorted(self, by: str) -> List[VocabularyEntry]:
        """
        Args:
            by: "lookup_count" or "last_seen" (highest first), or "pinyin".

        Raises:
            ValueError: If by is not a known ordering.
        """
        return self._db.list_vocabulary(order_by=by)

    def characters_with_component(self, component: str) -> List[str]:
        return self._component_index.characters_with_component(component)

    def is_word_known(self, word: str) -> bool:
        """A word counts as known once it has been looked up more than once."""
        entry = self.get_entry(word)
        return entry is not None and entry.lookup_count > 1

    def _push_to_replica(self, entry: VocabularyEntry) -> None:
        """Project entry into the replica; the local store stays authoritative."""
        with self._replica_lock:
            try:
                records = self._replica.read()
                records[entry.id] = merge_outbound(records.get(entry.id), entry)
                check_quota(records)
                self._replica.write(records)
            except QuotaExceededError as exc:
                logger.warning("Skipping replica write for %r: %s", entry.word, exc)
            except ReplicaTransportError as exc:
                logger.warning("Failed to sync %r to replica: %s", entry.word, exc)

    def _lock_for(self, entry_id: str) -> threading.Lock:
        with self._key_locks_guard:
            lock = self._key_locks.get(entry_id)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[entry_id] = lock
            return lock

    @staticmethod
    def _context(sentence: str, source_url: Optional[str], now: int) -> ContextEntry:
        return ContextEntry(sentence=sentence, source_url=source_url or "", timestamp=now)
