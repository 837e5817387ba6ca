"""Reference storage for metric records."""

from .memory_store import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
