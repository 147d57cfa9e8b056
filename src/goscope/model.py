"""Structural model of an analyzed Go module.

Built once per run by the scanning layer and read-only afterwards:

    Directory -> Package -> File -> Struct -> Field / Method
                                 -> Import

A directory can hold several packages (``foo`` and ``foo_test``, or
build-tag-gated ``main`` packages), so ``Directory.packages`` is keyed by
package name.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Field:
    """A struct field. ``name`` is empty for embedded fields."""

    name: str
    type: str


@dataclass
class Method:
    """A method, rendered as ``name(paramTypes) resultTypes``."""

    signature: str


@dataclass
class Struct:
    name: str
    fields: list[Field] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)


@dataclass
class Import:
    """An import spec.

    Attributes:
        name: Explicit alias ("" when absent, "." or "_" kept verbatim)
        path: Import path without quotes
        stdlib: True if the path belongs to the Go standard library
    """

    name: str
    path: str
    stdlib: bool = False


@dataclass
class File:
    path: str
    build_constraints: list[str] = field(default_factory=list)
    structs: list[Struct] = field(default_factory=list)
    imports: list[Import] = field(default_factory=list)

    @property
    def is_constrained(self) -> bool:
        return bool(self.build_constraints)


@dataclass
class Package:
    """A Go package found directly inside one directory.

    Attributes:
        name: Package clause name
        module_path: Module root path plus the directory suffix; the identity
            of the package in graphs and reports
        path: Filesystem path of the directory
        files: Files in filename order
    """

    name: str
    module_path: str
    path: str = ""
    files: list[File] = field(default_factory=list)

    @property
    def structs(self) -> list[Struct]:
        return [s for f in self.files for s in f.structs]

    @property
    def import_paths(self) -> list[str]:
        """Unique import paths across all files, sorted."""
        return sorted({i.path for f in self.files for i in f.imports})

    @property
    def is_test(self) -> bool:
        return self.name.endswith("_test")


@dataclass
class Directory:
    """A directory of the module.

    Attributes:
        path: Filesystem path
        module_path: Module-qualified import path
        relative_path: Path relative to the module root ("" for the root)
        packages: Packages found directly inside, keyed by name
    """

    path: str
    module_path: str
    relative_path: str = ""
    packages: dict[str, Package] = field(default_factory=dict)
