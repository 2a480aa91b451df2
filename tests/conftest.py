from __future__ import annotations

import pytest

from quillnote_api.dependencies import clear_caches


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STORE_BACKEND", raising=False)
    monkeypatch.delenv("API_DEBUG_LOG", raising=False)
    clear_caches()
    yield
    clear_caches()
