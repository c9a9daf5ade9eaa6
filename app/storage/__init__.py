"""
Record store backends and the factory that picks one from settings.
"""

from app.core.config import Settings
from .base import RecordStore
from .memory_storage import MemoryRecordStore
from .database_storage import DatabaseRecordStore


def create_record_store(config: Settings) -> RecordStore:
    backend = config.STORAGE_BACKEND.lower()
    if backend == "memory":
        return MemoryRecordStore(
            seed_demo_data=config.SEED_DEMO_DATA,
            demo_password=config.DEMO_USER_PASSWORD,
        )
    if backend == "database":
        return DatabaseRecordStore(config.DATABASE_URL)
    raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND}")


__all__ = [
    "RecordStore",
    "MemoryRecordStore",
    "DatabaseRecordStore",
    "create_record_store",
]
