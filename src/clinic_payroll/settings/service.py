from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Mapping

from ..common.validators import require_hour_of_day, require_non_negative
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import DEFAULT_RATE_CONFIG, HOUR_FIELDS, RateConfig, to_wire_keys
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Use case: read and update the clinic's labor-rule configuration."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> RateConfig:
        return self._settings.get() or DEFAULT_RATE_CONFIG

    def save(self, *, current_role: Role, data: Mapping[str, Any]) -> RateConfig:
        if current_role != Role.SYSTEM_ADMIN:
            raise AuthorizationError("System administrator role required")

        try:
            merged = {**self.get().to_dict(), **to_wire_keys(data)}
            config = RateConfig.from_dict(merged)
        except TypeError as e:
            raise ValidationError(f"Invalid settings: {e}") from e

        validate_rate_config(config)
        self._settings.save(config)
        logger.info("system settings updated")
        return config


def validate_rate_config(config: RateConfig) -> RateConfig:
    for f in fields(config):
        value = getattr(config, f.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"{f.name} must be a number")
        require_non_negative(value, f.name)

    for name in HOUR_FIELDS:
        require_hour_of_day(getattr(config, name), name)
    return config
