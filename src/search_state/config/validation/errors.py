"""Config validation errors."""
from __future__ import annotations

from collections.abc import Sequence

from search_state.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded from their source."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is outside the values the search state understands."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, allowed: Sequence[str]) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}; expected one of {', '.join(allowed)}",
            detail={"setting": setting_name, "value": value, "allowed": list(allowed)},
        )
        self.setting_name = setting_name
        self.value = value
        self.allowed = tuple(allowed)


__all__ = ["ConfigError", "InvalidSettingValueError"]
