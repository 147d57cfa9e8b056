"""Exception hierarchy for goscope."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ModuleFileError,
    ParsingError,
    UnsupportedNodeError,
)
from .base import GoscopeError
from .config import (
    ConfigFileError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "GoscopeError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ModuleFileError",
    "UnsupportedNodeError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidPathError",
    "InvalidConfigError",
]
