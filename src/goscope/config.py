"""Configuration loading and management for goscope.

A report run is driven by one immutable ``Config``. Sources are merged in
priority order (lowest to highest):
    1. Defaults (defined in Config)
    2. Global config (~/.goscope.toml)
    3. Project config (./goscope.toml)
    4. Explicit config file
    5. Environment variables (GOSCOPE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(exclude="mock,fake", exclude_stdlib=True)
    >>> sorted(config.exclude)
    ['fake', 'mock']
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .exceptions import ConfigFileError, InvalidConfigError

SetLike = Union[str, Iterable[str], None]

_SET_FIELDS = ("exclude", "select_exact", "select")
_BOOL_FIELDS = ("exclude_stdlib", "include_tests", "skip_build_constrained")


def parse_set(value: SetLike) -> frozenset[str]:
    """Turn a comma-separated flag value (or any iterable) into a set.

    Empty items are dropped, so ``"a,,b,"`` yields ``{"a", "b"}``.
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        items: Iterable[str] = value.split(",")
    else:
        items = value
    return frozenset(item.strip() for item in items if item and item.strip())


@dataclass(frozen=True)
class Config:
    """Filters threaded into the package walker for one report.

    Attributes:
        exclude: Skip packages whose module path contains any of these
        select_exact: Keep only packages whose module path (or path relative
            to the module root) equals one of these
        select: Keep only packages whose module path contains one of these
        exclude_stdlib: Drop standard library imports from the model
        include_tests: Keep ``_test`` packages
        skip_build_constrained: Skip packages that have any file carrying a
            build constraint instead of annotating those files
    """

    exclude: frozenset[str] = frozenset()
    select_exact: frozenset[str] = frozenset()
    select: frozenset[str] = frozenset()
    exclude_stdlib: bool = False
    include_tests: bool = False
    skip_build_constrained: bool = False

    def __post_init__(self) -> None:
        for name in _SET_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                if not isinstance(value, (str, list, tuple, set)):
                    raise InvalidConfigError(name, value, "expected a string or a list of strings")
                object.__setattr__(self, name, parse_set(value))
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigError(name, value, "expected true or false")

    def matches(self, module_path: str, relative_path: str = "") -> bool:
        """Return True if a package at ``module_path`` takes part in the report."""
        if any(pattern in module_path for pattern in self.exclude):
            return False

        if not self.select_exact and not self.select:
            return True

        if module_path in self.select_exact or (
            relative_path and relative_path in self.select_exact
        ):
            return True
        return any(pattern in module_path for pattern in self.select)


DEFAULT_CONFIG = Config()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Config:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset flags never mask file settings.

    Returns:
        Validated Config instance

    Raises:
        ConfigFileError: If a config file is missing or invalid
        InvalidConfigError: If a key is unknown or a value has the wrong type
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".goscope.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "goscope.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigFileError(config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(Config)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown configuration key")

    return Config(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GOSCOPE_* environment variables.

    Supported environment variables:
        GOSCOPE_EXCLUDE: comma-separated list
        GOSCOPE_SELECT_EXACT: comma-separated list
        GOSCOPE_SELECT: comma-separated list
        GOSCOPE_EXCLUDE_STDLIB: bool (true/false/1/0)
        GOSCOPE_INCLUDE_TESTS: bool
        GOSCOPE_SKIP_BUILD_CONSTRAINED: bool
    """
    result: dict[str, Any] = {}

    for name in _SET_FIELDS + _BOOL_FIELDS:
        env_key = f"GOSCOPE_{name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        if name in _SET_FIELDS:
            result[name] = parse_set(env_value)
        else:
            result[name] = _parse_bool(env_key, env_value)

    return result


def _parse_bool(key: str, value: str) -> bool:
    lower = value.strip().lower()
    if lower in ("true", "1", "yes", "on"):
        return True
    if lower in ("false", "0", "no", "off"):
        return False
    raise InvalidConfigError(key, value, "expected true/false")


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigFileError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(path, str(e))
