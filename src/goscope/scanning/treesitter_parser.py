"""Tree-sitter parser wrapper for Go sources.

Produces the syntax trees the extraction layer walks. A directory parse
groups files by their ``package`` clause, mirroring how the Go toolchain
sees one directory: several packages may share it (``foo`` and
``foo_test``, or build-tag-gated ``main`` packages).

Usage:
    parser = GoParser()
    packages = parser.parse_dir("/path/to/module/internal")
    for name, files in packages.items():
        for parsed in files:
            print(parsed.path, parsed.root.type)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import tree_sitter
import tree_sitter_go

from ..exceptions import FileAccessError, ParsingError
from ..logging_config import get_logger

logger = get_logger(__name__)

GO_LANGUAGE = tree_sitter.Language(tree_sitter_go.language())

GO_SUFFIX = ".go"


@dataclass
class ParsedFile:
    """One parsed Go file.

    Attributes:
        path: File path as given to the parser
        source: Raw file bytes the tree was built from
        root: The ``source_file`` node
        package: Name from the package clause
    """

    path: str
    source: bytes
    root: Any
    package: str


class GoParser:
    """Wrapper around a tree-sitter parser for the Go grammar."""

    def __init__(self) -> None:
        self._parser = tree_sitter.Parser(GO_LANGUAGE)

    def parse(self, code: bytes, path: str = "<memory>") -> ParsedFile:
        """Parse Go source bytes.

        Raises:
            ParsingError: If the tree contains syntax errors or the file has
                no package clause
        """
        tree = self._parser.parse(code)
        root = tree.root_node

        if root.has_error:
            error_node = _first_error(root)
            line = error_node.start_point[0] + 1 if error_node is not None else None
            raise ParsingError(path, "syntax error", line=line)

        package = package_name(root)
        if package is None:
            raise ParsingError(path, "missing package clause")

        return ParsedFile(path=path, source=code, root=root, package=package)

    def parse_file(self, path: Union[str, Path]) -> ParsedFile:
        """Read and parse a single Go file."""
        path = str(path)
        try:
            with open(path, "rb") as fh:
                code = fh.read()
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e))
        logger.debug(f"Parsing {path}")
        return self.parse(code, path)

    def parse_dir(self, path: Union[str, Path]) -> dict[str, list[ParsedFile]]:
        """Parse every ``.go`` file directly inside ``path``.

        Returns:
            Parsed files grouped by package name, each group in filename order
        """
        path = str(path)
        try:
            with os.scandir(path) as it:
                names = sorted(
                    entry.name
                    for entry in it
                    if entry.name.endswith(GO_SUFFIX) and entry.is_file(follow_symlinks=False)
                )
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e))

        packages: dict[str, list[ParsedFile]] = {}
        for name in names:
            parsed = self.parse_file(os.path.join(path, name))
            packages.setdefault(parsed.package, []).append(parsed)
        return packages


def package_name(root: Any) -> Optional[str]:
    """Return the package clause name of a ``source_file`` node."""
    for child in root.named_children:
        if child.type != "package_clause":
            continue
        for ident in child.named_children:
            if ident.type == "package_identifier":
                return ident.text.decode("utf-8")
    return None


def _first_error(node: Any) -> Optional[Any]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None
