from functools import lru_cache

from quillnote_api.config import load_settings
from quillnote_api.repository import NotesRepository
from quillnote_api.storage import JsonFileStore, MemoryStore


@lru_cache()
def get_settings():
    return load_settings()


@lru_cache()
def get_store():
    settings = get_settings()
    if settings.store_backend == "memory":
        return MemoryStore()
    return JsonFileStore(settings.data_dir)


@lru_cache()
def get_repository():
    return NotesRepository(get_store())


def clear_caches() -> None:
    get_repository.cache_clear()
    get_store.cache_clear()
    get_settings.cache_clear()
