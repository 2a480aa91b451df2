from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class KeyValueStore(Protocol):
    def read(self, key: str, default: T) -> T:
        ...

    def write(self, key: str, value: Any) -> None:
        ...
