"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A setting is missing or unusable for the current environment."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting}: {reason}")
