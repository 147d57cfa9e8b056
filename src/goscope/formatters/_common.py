"""Helpers shared by the report formatters."""

from __future__ import annotations

from typing import Iterator, Mapping

from ..model import Directory, Package


def iter_packages(directories: Mapping[str, Directory]) -> Iterator[Package]:
    """All packages of all directories, ordered by module path then name."""
    packages = [p for d in directories.values() for p in d.packages.values()]
    packages.sort(key=lambda p: (p.module_path, p.name))
    return iter(packages)


def is_internal(path: str, module: str) -> bool:
    """True if ``path`` is the module itself or one of its packages."""
    return path == module or path.startswith(module + "/")
