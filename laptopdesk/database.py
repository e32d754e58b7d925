# laptopdesk/database.py

from functools import lru_cache

from laptopdesk.core.config import settings
from laptopdesk.store import RecordStore


@lru_cache
def get_store() -> RecordStore:
    # One store per process so every request shares the collection locks
    return RecordStore(settings.DATA_DIR)
