"""Graphviz DOT formatters.

    format_structs   - one node per struct of a single file
    format_packages  - one cluster per package, its structs inside
    format_imports   - package import graph keyed by module path

Struct nodes use HTML-like labels: a header row with the name, a row of
fields and a row of methods, one entry per line ending in ``<br/>``.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from ..model import Directory, Field, Package, Struct
from ..scanning.stdlib import is_stdlib
from ._common import iter_packages

INDENT = "    "

# Packages holding test doubles are left out of the import graph.
IMPORT_GRAPH_SKIPPED = frozenset({"fake", "mock", "test"})

_GRAPH_HEADER = """\
digraph {
    graph [
        labelloc = t
        fontname = "Helvetica,Arial,sans-serif"
        fontsize = 20
        layout = dot
        rankdir = LR
        newrank = true
    ]

    node [
        style = filled
        shape = plaintext
        pencolor = "#00000044"
        fontname = "Helvetica,Arial,sans-serif"
    ]
"""


def escape(value: str) -> str:
    """Escape text for a Graphviz HTML-like label."""
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def cluster_id(value: str) -> str:
    return "cluster_" + re.sub(r"[^A-Za-z0-9_]", "_", value)


def field_row(field: Field) -> str:
    if not field.name:
        return escape(field.type)
    return f"{escape(field.name)} {escape(field.type)}"


def struct_node(struct: Struct, node_id: str, depth: int = 1) -> list[str]:
    """Lines of one struct node, indented ``depth`` levels."""
    pad = INDENT * depth
    row = pad + INDENT * 3

    lines = [
        f'{pad}"{node_id}" [',
        f'{pad}    fillcolor = "#88ff0022"',
        f'{pad}    label = <<table border="0" cellborder="1" cellspacing="0" cellpadding="3">',
        f'{pad}        <tr><td sides="ltr"><b>{escape(struct.name)}</b></td></tr>',
        f'{pad}        <tr><td align="left">',
    ]
    lines.extend(f"{row}{field_row(f)}<br/>" for f in struct.fields)
    lines.append(f"{pad}        </td></tr>")
    lines.append(f'{pad}        <tr><td align="left">')
    lines.extend(f"{row}{escape(m.signature)}<br/>" for m in struct.methods)
    lines.append(f"{pad}        </td></tr>")
    lines.append(f"{pad}    </table>>")
    lines.append(f"{pad}    shape = plain")
    lines.append(f"{pad}]")
    return lines


def format_structs(structs: Iterable[Struct]) -> str:
    """DOT graph of the structs of one file."""
    lines = [_GRAPH_HEADER.rstrip("\n")]
    for s in structs:
        lines.append("")
        lines.extend(struct_node(s, s.name))
    lines.append("}")
    return "\n".join(lines) + "\n"


def _package_node_id(package: Package, struct: Struct) -> str:
    return f"{package.module_path}#{package.name}.{struct.name}"


def format_packages(directories: Mapping[str, Directory]) -> str:
    """DOT graph with one cluster per package, sorted by name then path."""
    packages = sorted(iter_packages(directories), key=lambda p: (p.name, p.module_path))

    lines = [_GRAPH_HEADER.rstrip("\n")]
    for pkg in packages:
        label = pkg.module_path if not pkg.is_test else f"{pkg.module_path} ({pkg.name})"
        lines.append("")
        lines.append(f"{INDENT}subgraph {cluster_id(pkg.module_path + '_' + pkg.name)} {{")
        lines.append(f'{INDENT * 2}label = "{label}"')
        for s in pkg.structs:
            lines.append("")
            lines.extend(struct_node(s, _package_node_id(pkg, s), depth=2))
        lines.append(f"{INDENT}}}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def import_edges(directories: Mapping[str, Directory]) -> list[tuple[str, str]]:
    """Unique ``(module path, import path)`` edges, stdlib and self-edges excluded."""
    edges: set[tuple[str, str]] = set()
    for pkg in iter_packages(directories):
        if pkg.name in IMPORT_GRAPH_SKIPPED:
            continue
        for path in pkg.import_paths:
            if is_stdlib(path) or path == pkg.module_path:
                continue
            edges.add((pkg.module_path, path))
    return sorted(edges)


def format_imports(directories: Mapping[str, Directory]) -> str:
    """DOT graph of package imports, one edge per importing package and path."""
    lines = ["digraph {", f'{INDENT}rankdir = "LR"', ""]
    lines.extend(f'{INDENT}"{src}" -> "{dst}"' for src, dst in import_edges(directories))
    lines.append("}")
    return "\n".join(lines) + "\n"
