"""Go source scanning: tree-sitter parsing and structural extraction.

Pipeline for one module:
    loader.enumerate_directories -> treesitter_parser.GoParser.parse_dir
    -> walker.PackageWalker -> extractor (structs, methods) -> render (types)
"""

from .extractor import bind_methods, collect_method, extract_struct, receiver_base_name
from .loader import enumerate_directories, load_directories, load_structs, read_module_path
from .render import ExtractionContext, render_type
from .stdlib import is_stdlib
from .treesitter_parser import GoParser, ParsedFile
from .walker import PackageWalker

__all__ = [
    "GoParser",
    "ParsedFile",
    "ExtractionContext",
    "render_type",
    "extract_struct",
    "collect_method",
    "receiver_base_name",
    "bind_methods",
    "PackageWalker",
    "is_stdlib",
    "read_module_path",
    "enumerate_directories",
    "load_directories",
    "load_structs",
]
