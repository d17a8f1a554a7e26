"""Replication services - compact format, merge rules and replica stores."""

from mandarin_reader.services.replication.compact_format import (
    MAX_REPLICA_BYTES,
    SYNC_KEY,
    check_quota,
    decode_payload,
    decode_record,
    encode_payload,
    encode_record,
    merge_inbound,
    merge_outbound,
    payload_size,
    serialize_payload,
    to_compact,
    truncate_definitions,
)
from mandarin_reader.services.replication.replica_store import ReplicaStore
from mandarin_reader.services.replication.in_memory_replica_store import InMemoryReplicaStore
from mandarin_reader.services.replication.file_replica_store import FileReplicaStore

__all__ = [
    "MAX_REPLICA_BYTES",
    "SYNC_KEY",
    "check_quota",
    "decode_payload",
    "decode_record",
    "encode_payload",
    "encode_record",
    "merge_inbound",
    "merge_outbound",
    "payload_size",
    "serialize_payload",
    "to_compact",
    "truncate_definitions",
    "ReplicaStore",
    "InMemoryReplicaStore",
    "FileReplicaStore",
]
