"""Configuration exceptions: report roots, config files, settings."""

from pathlib import Path
from typing import Any, Union

from .base import GoscopeError


class ConfigurationError(GoscopeError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when the path given for a report cannot be used as a module root."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Invalid module root: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class ConfigFileError(ConfigurationError):
    """Raised when a TOML config file is missing or cannot be decoded."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Cannot load config file: {path}", details={"reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised for an unknown config key or a value of the wrong type."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid setting {key} = {value!r}",
            details={"reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
