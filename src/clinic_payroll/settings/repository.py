from __future__ import annotations

from typing import Optional, Protocol

from .model import RateConfig


class SettingsRepository(Protocol):
    def get(self) -> Optional[RateConfig]:
        """Stored configuration, or None when nothing was saved yet."""

        raise NotImplementedError

    def save(self, config: RateConfig) -> None:
        raise NotImplementedError
