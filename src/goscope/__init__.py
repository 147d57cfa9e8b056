"""
goscope - Structural analysis for Go source trees

Walks tree-sitter syntax trees of a Go module and reconstructs a normalized
model of its packages, files, structs, methods and imports. Reports render
that model as Graphviz graphs, import frequency tables and type listings.
"""

__version__ = "0.1.0"

from .config import Config, load_config
from .model import Directory, Field, File, Import, Method, Package, Struct
from .scanning.loader import load_directories, load_structs

__all__ = [
    "Config",
    "load_config",
    "Directory",
    "Package",
    "File",
    "Import",
    "Struct",
    "Field",
    "Method",
    "load_directories",  # Main entry point for whole-module analysis
    "load_structs",
]
