from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    store_backend: str
    api_debug_log: bool


def load_settings() -> Settings:
    data_dir = Path(os.environ.get("DATA_DIR", "./data")).resolve()
    store_backend = os.environ.get("STORE_BACKEND", "file").strip().lower()
    if store_backend not in ("file", "memory"):
        raise ValueError(f"unsupported STORE_BACKEND: {store_backend}")
    api_debug_log = os.environ.get("API_DEBUG_LOG", "false").lower() == "true"
    return Settings(
        data_dir=data_dir,
        store_backend=store_backend,
        api_debug_log=api_debug_log,
    )
