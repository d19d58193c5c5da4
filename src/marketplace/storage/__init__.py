"""Object storage factory.

``MARKETPLACE_BACKEND=supabase`` selects Supabase Storage; otherwise files
are kept in memory.
"""

from marketplace.config import backend, supabase_credentials
from marketplace.storage.port import StorageError, StorageGateway

_current_storage: StorageGateway | None = None


def get_storage() -> StorageGateway:
    global _current_storage
    if _current_storage is None:
        if backend() == "supabase":
            from marketplace.storage.supabase_adapter import SupabaseStorage

            _current_storage = SupabaseStorage.connect(*supabase_credentials())
        else:
            from marketplace.storage.memory_adapter import InMemoryStorage

            _current_storage = InMemoryStorage()
    return _current_storage


def set_storage(storage: StorageGateway) -> None:
    global _current_storage
    _current_storage = storage


def reset_storage() -> None:
    global _current_storage
    _current_storage = None


__all__ = ["StorageError", "StorageGateway", "get_storage", "reset_storage", "set_storage"]
