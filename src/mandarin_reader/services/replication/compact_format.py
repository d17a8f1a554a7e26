"""Compact replica format and the merge rules between it and the local store."""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from mandarin_reader.core import CompactRecord, QuotaExceededError, VocabularyEntry, word_id

logger = logging.getLogger(__name__)

SYNC_KEY = "vocab_sync"
MAX_REPLICA_BYTES = 100_000
MAX_SYNCED_DEFINITIONS = 3
MAX_SYNCED_DEFINITION_LENGTH = 100
ELLIPSIS = "…"


def truncate_definitions(definitions: List[str]) -> List[str]:
    """Keep the first three definitions, each cut to at most 100 characters."""
    truncated = []
    for definition in definitions[:MAX_SYNCED_DEFINITIONS]:
        if len(definition) > MAX_SYNCED_DEFINITION_LENGTH:
            definition = definition[:MAX_SYNCED_DEFINITION_LENGTH - 1] + ELLIPSIS
        truncated.append(definition)
    return truncated


def to_compact(entry: VocabularyEntry) -> CompactRecord:
    return CompactRecord(
        word=entry.word,
        pinyin_display=entry.pinyin_display,
        definitions=truncate_definitions(entry.definitions),
        lookup_count=entry.lookup_count,
        first_seen_at=entry.first_seen_at,
        last_seen_at=entry.last_seen_at,
    )


def merge_outbound(existing: Optional[CompactRecord], entry: VocabularyEntry) -> CompactRecord:
    """
    Project entry for the replica, never regressing what another device wrote.

    The counter and last-seen take the max and first-seen the min of the two
    sides.
    """
    compact = to_compact(entry)
    if existing is None:
        return compact
    return CompactRecord(
        word=compact.word,
        pinyin_display=compact.pinyin_display,
        definitions=compact.definitions,
        lookup_count=max(existing.lookup_count, entry.lookup_count),
        first_seen_at=min(existing.first_seen_at, entry.first_seen_at),
        last_seen_at=max(existing.last_seen_at, entry.last_seen_at),
    )


def merge_inbound(local: Optional[VocabularyEntry], remote: CompactRecord) -> VocabularyEntry:
    """
    Fold a replicated record into the local store.

    Lookup counts from two devices are disjoint events and are summed;
    first-seen takes the min and last-seen the max. Without a local record a
    stub is built with no contexts or character data.
    """
    if local is None:
        return VocabularyEntry(
            id=word_id(remote.word),
            word=remote.word,
            pinyin_display=remote.pinyin_display,
            definitions=list(remote.definitions),
            lookup_count=remote.lookup_count,
            first_seen_at=remote.first_seen_at,
            last_seen_at=max(remote.first_seen_at, remote.last_seen_at),
        )

    return VocabularyEntry(
        id=local.id,
        word=local.word,
        pinyin_display=local.pinyin_display,
        definitions=local.definitions,
        lookup_count=local.lookup_count + remote.lookup_count,
        first_seen_at=min(local.first_seen_at, remote.first_seen_at),
        last_seen_at=max(local.last_seen_at, remote.last_seen_at),
        contexts=local.contexts,
        characters=local.characters,
        hsk_level=local.hsk_level,
    )


def encode_record(record: CompactRecord) -> Dict[str, Any]:
    return {
        "w": record.word,
        "p": record.pinyin_display,
        "d": list(record.definitions),
        "c": record.lookup_count,
        "f": record.first_seen_at,
        "l": record.last_seen_at,
    }


def decode_record(raw: Mapping[str, Any]) -> CompactRecord:
    """
    Raises:
        ValueError: If a field is missing or has the wrong type.
    """
    try:
        word = raw["w"]
        definitions = raw.get("d") or []
        if not isinstance(word, str) or not word or not isinstance(definitions, list):
            raise ValueError(f"Malformed compact record: {raw!r}")
        return CompactRecord(
            word=word,
            pinyin_display=str(raw.get("p") or ""),
            definitions=[str(d) for d in definitions],
            lookup_count=int(raw["c"]),
            first_seen_at=int(raw["f"]),
            last_seen_at=int(raw["l"]),
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed compact record: {raw!r}") from exc


def encode_payload(records: Mapping[str, CompactRecord]) -> Dict[str, Any]:
    return {SYNC_KEY: {key: encode_record(record) for key, record in records.items()}}


def decode_payload(payload: Mapping[str, Any]) -> Dict[str, CompactRecord]:
    """Decode a stored payload, skipping (and logging) malformed records."""
    raw_records = payload.get(SYNC_KEY) or {}
    if not isinstance(raw_records, dict):
        logger.warning("Ignoring replica payload with non-object %s", SYNC_KEY)
        return {}

    records: Dict[str, CompactRecord] = {}
    for key, raw in raw_records.items():
        try:
            records[key] = decode_record(raw)
        except ValueError as exc:
            logger.warning("Skipping replica record %r: %s", key, exc)
    return records


def serialize_payload(records: Mapping[str, CompactRecord]) -> str:
    return json.dumps(encode_payload(records), ensure_ascii=False, separators=(",", ":"))


def payload_size(records: Mapping[str, CompactRecord]) -> int:
    """Size in bytes of the serialized replica payload."""
    return len(serialize_payload(records).encode("utf-8"))


def check_quota(records: Mapping[str, CompactRecord], limit: int = MAX_REPLICA_BYTES) -> None:
    """
    Raises:
        QuotaExceededError: If the serialized payload is larger than limit.
    """
    size = payload_size(records)
    if size > limit:
        raise QuotaExceededError(size, limit)
