from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, TypeVar

from .domain.exceptions import StoreKeyError
from .util import atomic_write_json

T = TypeVar("T")

logger = logging.getLogger("quillnote.storage")

_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")


def validate_key(key: str) -> str:
    if not key:
        raise StoreKeyError("store_key_empty")
    if not _KEY_RE.fullmatch(key):
        raise StoreKeyError("store_key_invalid")
    return key


class JsonFileStore:
    """One JSON document per key, stored as ``<data_dir>/<KEY>.json``."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{validate_key(key)}.json"

    def read(self, key: str, default: T) -> T:
        path = self._path(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("store_unreadable", extra={"key": key, "path": str(path)})
            return default

    def write(self, key: str, value: Any) -> None:
        atomic_write_json(self._path(key), value)


class MemoryStore:
    """Keeps serialized JSON text per key; nothing survives the process."""

    def __init__(self) -> None:
        self.raw: dict[str, str] = {}

    def read(self, key: str, default: T) -> T:
        text = self.raw.get(validate_key(key))
        if text is None:
            return default
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.warning("store_unreadable", extra={"key": key})
            return default

    def write(self, key: str, value: Any) -> None:
        self.raw[validate_key(key)] = json.dumps(value)
