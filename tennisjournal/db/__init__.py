"""Persistence for the tennis match journal."""

from tennisjournal.db.store import JournalStore, JournalStoreError

__all__ = ["JournalStore", "JournalStoreError"]
