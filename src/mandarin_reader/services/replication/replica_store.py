"""Replica Store abstraction - the key/value channel shared between devices."""

from abc import ABC, abstractmethod
from typing import Dict

from mandarin_reader.core import CompactRecord


class ReplicaStore(ABC):
    """
    Abstract interface for the size-constrained replication channel.

    The store holds a single map from normalized word to CompactRecord. The
    vocabulary service enforces the byte quota before calling write().
    Implementations raise ReplicaTransportError when the channel fails.
    """

    @abstractmethod
    def read(self) -> Dict[str, CompactRecord]:
        """
        Return every replicated record keyed by normalized word.

        Malformed records are skipped; an empty channel returns {}.
        """
        pass

    @abstractmethod
    def write(self, records: Dict[str, CompactRecord]) -> None:
        """Replace the replicated map with records."""
        pass
