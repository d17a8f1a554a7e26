"""In-memory replica store for testing and single-session use."""

from typing import Any, Dict, Optional

from mandarin_reader.core import CompactRecord
from mandarin_reader.services.replication.compact_format import decode_payload, encode_payload
from mandarin_reader.services.replication.replica_store import ReplicaStore


class InMemoryReplicaStore(ReplicaStore):
    """
    Keeps the wire payload in a dict. No persistence.

    Records go through the same encoding as the file store, so malformed
    payloads can be injected through `payload`.
    """

    def __init__(self, payload: Optional[Dict[str, Any]] = None):
        self.payload: Dict[str, Any] = payload if payload is not None else {}

    def read(self) -> Dict[str, CompactRecord]:
        return decode_payload(self.payload)

    def write(self, records: Dict[str, CompactRecord]) -> None:
        self.payload = encode_payload(records)
