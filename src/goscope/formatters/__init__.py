"""Report formatters for goscope."""

from .console import (
    ModuleStats,
    collect_stats,
    format_entrypoints,
    format_imports_table,
    format_stats,
    format_types,
)
from .graphviz import format_imports, format_packages, format_structs, import_edges

__all__ = [
    "format_structs",
    "format_packages",
    "format_imports",
    "import_edges",
    "format_imports_table",
    "format_types",
    "format_entrypoints",
    "format_stats",
    "collect_stats",
    "ModuleStats",
]
