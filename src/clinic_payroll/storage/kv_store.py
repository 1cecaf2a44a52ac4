from __future__ import annotations

import copy
from typing import Any, Iterable, Optional, Protocol, Sequence


class KeyValueStore(Protocol):
    """Key-value persistence used by every repository.

    Values are JSON-compatible documents. Keys are composite natural keys such
    as ``attendance:2025-04-01:staff-1``; writes are upserts.
    """

    def get(self, key: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def set(self, key: str, value: dict[str, Any]) -> None:
        raise NotImplementedError

    def mset(self, items: Iterable[tuple[str, dict[str, Any]]]) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def get_by_prefix(self, prefix: str) -> Sequence[dict[str, Any]]:
        """Values whose key starts with ``prefix``, in key order."""

        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and the ``memory`` storage backend."""

    def __init__(self, initial: Optional[dict[str, dict[str, Any]]] = None):
        self._data: dict[str, dict[str, Any]] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[dict[str, Any]]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)

    def mset(self, items: Iterable[tuple[str, dict[str, Any]]]) -> None:
        for key, value in items:
            self.set(key, value)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def get_by_prefix(self, prefix: str) -> Sequence[dict[str, Any]]:
        return [copy.deepcopy(self._data[k]) for k in sorted(self._data) if k.startswith(prefix)]

    def keys(self) -> list[str]:
        return sorted(self._data)
