"""File-based replica store, a JSON file standing in for the sync channel."""

import json
import os
from pathlib import Path
from typing import Dict

from mandarin_reader.core import CompactRecord, ReplicaTransportError
from mandarin_reader.services.replication.compact_format import decode_payload, serialize_payload
from mandarin_reader.services.replication.replica_store import ReplicaStore


class FileReplicaStore(ReplicaStore):
    """
    Stores the replica payload in a single JSON file.

    Format:
    {
        "vocab_sync": {
            "你好": {"w": "你好", "p": "nǐ hǎo", "d": ["hello"], "c": 3, "f": 1700000000000, "l": 1700000500000}
        }
    }
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> Dict[str, CompactRecord]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ReplicaTransportError(f"Error reading replica file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ReplicaTransportError(f"Replica file {self.path} is not a JSON object")
        return decode_payload(data)

    def write(self, records: Dict[str, CompactRecord]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(serialize_payload(records), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise ReplicaTransportError(f"Error writing replica file {self.path}: {e}") from e
