"""Error types shared across the lookup pipeline and vocabulary store."""


class MandarinReaderError(Exception):
    """Base class for errors raised by this package."""


class DataUnavailableError(MandarinReaderError):
    """A static dictionary or character resource could not be loaded."""


class QuotaExceededError(MandarinReaderError):
    """The serialized replica payload is larger than the channel allows."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Replica payload of {size} bytes exceeds {limit} byte quota")
        self.size = size
        self.limit = limit


class ReplicaTransportError(MandarinReaderError):
    """Reading from or writing to the replica channel failed."""
