from __future__ import annotations

from typing import Optional

from ..core.constants import SETTINGS_KEY
from ..storage.kv_store import KeyValueStore
from .model import RateConfig
from .repository import SettingsRepository


class KVSettingsRepository(SettingsRepository):
    """System settings stored as a single document under ``system:settings``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self) -> Optional[RateConfig]:
        doc = self._store.get(SETTINGS_KEY)
        if doc is None:
            return None
        return RateConfig.from_dict(doc)

    def save(self, config: RateConfig) -> None:
        self._store.set(SETTINGS_KEY, config.to_dict())
