"""Coordinators - Orchestration layer between callers and business logic."""

from .lookup_coordinator import LookupCoordinator

__all__ = [
    "LookupCoordinator",
]
