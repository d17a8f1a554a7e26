"""I/O layer - SQLite persistence and static resource loading."""

from .database_manager import DatabaseManager
from .resource_loader import ResourceRepository, clear_resource_cache, load_resource

__all__ = ["DatabaseManager", "ResourceRepository", "load_resource", "clear_resource_cache"]
