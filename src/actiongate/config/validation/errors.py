"""Config validation errors.

Raised while building :class:`~actiongate.config.settings.DispatchSettings`,
before any dispatch happens; they never reach a completion.
"""
from actiongate.kernel.errors import BaseError


class ConfigError(BaseError):
    default_code = "ERR_CONFIG"


class MissingRequiredSettingError(ConfigError):
    """No loader supplied a value for a field without a default.

    ``setting_name`` is the key the caller must provide: the environment
    variable (``ACTIONGATE_ROOT_PATH``) for env loading, the field name after
    a merge.
    """

    default_code = "ERR_CONFIG_MISSING"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} must be set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A naming rule or path setting was given an unusable value."""

    default_code = "ERR_CONFIG_INVALID"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
