"""Rich console formatters: import table, type listing, entrypoints, stats.

Each formatter returns a rich renderable; printing is left to the caller so
tests can inspect plain text and styles without a terminal.
"""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..model import Directory
from ..scanning.stdlib import is_stdlib
from ._common import is_internal, iter_packages

INTERNAL_STYLE = "green"
STDLIB_STYLE = "yellow"

ENTRYPOINT_FILE = "main.go"


def import_style(path: str, module: str) -> Optional[str]:
    if is_internal(path, module):
        return INTERNAL_STYLE
    if is_stdlib(path):
        return STDLIB_STYLE
    return None


def import_counts(directories: Mapping[str, Directory]) -> Counter:
    """Number of packages importing each path."""
    counts: Counter = Counter()
    for pkg in iter_packages(directories):
        counts.update(pkg.import_paths)
    return counts


def format_imports_table(directories: Mapping[str, Directory], module: str) -> Text:
    """Import frequency table, most imported first, ties by path.

    Counts are right-aligned to the widest count. Module-internal paths are
    green, standard library paths yellow.
    """
    counts = import_counts(directories)
    text = Text()
    if not counts:
        return text

    width = len(str(max(counts.values())))
    for path, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        text.append(f"{count:>{width}} ")
        text.append(path, style=import_style(path, module))
        text.append("\n")
    return text


def format_types(directories: Mapping[str, Directory], module: str) -> Tree:
    """Tree of packages and the structs they declare, with fields and methods."""
    tree = Tree(Text(module, style="bold"))

    for pkg in iter_packages(directories):
        if not pkg.structs:
            continue

        branch = tree.add(Text.assemble((pkg.module_path, "bold cyan"), (f" ({pkg.name})", "dim")))
        for file in pkg.files:
            for s in file.structs:
                label = Text.assemble(("type ", "magenta"), (s.name, "bold"), (" struct", "magenta"))
                if file.build_constraints:
                    label.append(f"  build: {', '.join(file.build_constraints)}", style=STDLIB_STYLE)
                node = branch.add(label)

                for f in s.fields:
                    if f.name:
                        node.add(Text.assemble(f.name, " ", (f.type, "cyan")))
                    else:
                        node.add(Text(f.type, style="italic cyan"))
                for m in s.methods:
                    node.add(Text.assemble(("func ", "green"), m.signature))

    return tree


def format_entrypoints(directories: Mapping[str, Directory], module: str) -> Text:
    """Module-qualified paths of every ``main.go`` of a main package, sorted."""
    entries: list[tuple[str, list[str]]] = []
    for pkg in iter_packages(directories):
        if pkg.name != "main":
            continue
        for file in pkg.files:
            if os.path.basename(file.path) == ENTRYPOINT_FILE:
                entries.append((f"{pkg.module_path}/{ENTRYPOINT_FILE}", file.build_constraints))

    text = Text()
    for path, constraints in sorted(entries):
        text.append(path, style=INTERNAL_STYLE if is_internal(path, module) else None)
        if constraints:
            text.append(f"  build: {', '.join(constraints)}", style="dim")
        text.append("\n")
    return text


@dataclass
class ModuleStats:
    directories: int = 0
    packages: int = 0
    test_packages: int = 0
    files: int = 0
    constrained_files: int = 0
    structs: int = 0
    fields: int = 0
    methods: int = 0
    stdlib_imports: int = 0
    internal_imports: int = 0
    external_imports: int = 0


def collect_stats(directories: Mapping[str, Directory], module: str) -> ModuleStats:
    """Totals over the whole model; imports are counted as unique paths."""
    stats = ModuleStats(directories=len(directories))

    for pkg in iter_packages(directories):
        stats.packages += 1
        stats.test_packages += int(pkg.is_test)
        for file in pkg.files:
            stats.files += 1
            stats.constrained_files += int(file.is_constrained)
            for s in file.structs:
                stats.structs += 1
                stats.fields += len(s.fields)
                stats.methods += len(s.methods)

    for path in import_counts(directories):
        if is_internal(path, module):
            stats.internal_imports += 1
        elif is_stdlib(path):
            stats.stdlib_imports += 1
        else:
            stats.external_imports += 1

    return stats


def format_stats(directories: Mapping[str, Directory], module: str) -> Table:
    stats = collect_stats(directories, module)

    table = Table(title=module, show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Count", justify="right")

    rows = [
        ("Directories", stats.directories),
        ("Packages", stats.packages),
        ("Test packages", stats.test_packages),
        ("Files", stats.files),
        ("Files with build constraints", stats.constrained_files),
        ("Structs", stats.structs),
        ("Fields", stats.fields),
        ("Methods", stats.methods),
        ("Imports (internal)", stats.internal_imports),
        ("Imports (stdlib)", stats.stdlib_imports),
        ("Imports (external)", stats.external_imports),
    ]
    for label, value in rows:
        table.add_row(label, str(value))
    return table
