"""File/package walker.

Turns the parsed files of one directory into ``Package`` records:

    1. Each file: imports, build constraints, structs, collected methods
    2. Each package: bind all collected methods to all structs by name

Binding runs once per package after every file was visited, so a method
declared in ``a.go`` on a struct declared in ``b.go`` is found, and a
method never crosses into another package.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Optional

from ..config import DEFAULT_CONFIG, Config
from ..logging_config import get_logger
from ..model import Directory, File, Import, Package, Struct
from .extractor import CollectedMethod, bind_methods, collect_method, extract_struct
from .render import ExtractionContext, named_children, node_text
from .stdlib import is_stdlib
from .treesitter_parser import ParsedFile

logger = get_logger(__name__)

TEST_PACKAGE_SUFFIX = "_test"

_BUILD_CONSTRAINT = re.compile(r"^//(?:go:build|\s*\+build)\s+(.*?)\s*$")

# Top-level nodes that carry nothing for the structural model.
_IGNORED_TOP_LEVEL = frozenset(
    {
        "comment",
        "package_clause",
        "function_declaration",
        "const_declaration",
        "var_declaration",
    }
)


def build_constraints(root: Any) -> list[str]:
    """Build constraint expressions from the header of a file.

    Only comments before the package clause count. Both ``//go:build`` and
    legacy ``// +build`` lines are returned with the prefix stripped.
    """
    constraints: list[str] = []
    for child in root.named_children:
        if child.type == "package_clause":
            break
        if child.type != "comment":
            continue
        match = _BUILD_CONSTRAINT.match(node_text(child))
        if match and match.group(1):
            constraints.append(match.group(1))
    return constraints


def import_specs(node: Any) -> Iterator[Any]:
    """Yield the ``import_spec`` nodes of an import declaration."""
    for child in named_children(node):
        if child.type == "import_spec":
            yield child
        elif child.type == "import_spec_list":
            yield from (c for c in named_children(child) if c.type == "import_spec")


def parse_import(spec: Any) -> Import:
    name_node = spec.child_by_field_name("name")
    path = node_text(spec.child_by_field_name("path")).strip('"`')
    return Import(
        name=node_text(name_node) if name_node is not None else "",
        path=path,
        stdlib=is_stdlib(path),
    )


class PackageWalker:
    """Assembles the packages of one directory under a report Config."""

    def __init__(self, config: Config = DEFAULT_CONFIG) -> None:
        self.config = config

    def walk(self, parsed: dict[str, list[ParsedFile]], directory: Directory) -> dict[str, Package]:
        """Build every participating package of ``directory``.

        Args:
            parsed: Parsed files grouped by package name
            directory: Directory shell providing paths

        Returns:
            Packages keyed by name; skipped packages are absent
        """
        packages: dict[str, Package] = {}

        if not self.config.matches(directory.module_path, directory.relative_path):
            logger.debug(f"Skipping {directory.module_path}: not selected")
            return packages

        for name in sorted(parsed):
            if name.endswith(TEST_PACKAGE_SUFFIX) and not self.config.include_tests:
                logger.debug(f"Skipping test package {name} in {directory.path}")
                continue

            package = self.walk_package(name, parsed[name], directory)
            if package is not None:
                packages[name] = package

        return packages

    def walk_package(
        self, name: str, parsed_files: list[ParsedFile], directory: Directory
    ) -> Optional[Package]:
        files: list[File] = []
        structs: list[Struct] = []
        methods: list[CollectedMethod] = []

        for parsed in parsed_files:
            file, file_methods = self.walk_file(parsed)
            files.append(file)
            structs.extend(file.structs)
            methods.extend(file_methods)

        if self.config.skip_build_constrained and any(f.is_constrained for f in files):
            logger.debug(f"Skipping package {name} in {directory.path}: build constraints")
            return None

        for receiver, method in bind_methods(structs, methods):
            logger.debug(f"Dropping method {receiver}.{method.signature}: no struct {receiver}")

        return Package(
            name=name,
            module_path=directory.module_path,
            path=directory.path,
            files=files,
        )

    def walk_file(self, parsed: ParsedFile) -> tuple[File, list[CollectedMethod]]:
        """Extract one file; methods are returned unbound."""
        ctx = ExtractionContext(path=parsed.path)
        file = File(path=parsed.path, build_constraints=build_constraints(parsed.root))
        methods: list[CollectedMethod] = []

        for node in parsed.root.named_children:
            kind = node.type
            if kind in _IGNORED_TOP_LEVEL:
                continue

            if kind == "import_declaration":
                for spec in import_specs(node):
                    imp = parse_import(spec)
                    if imp.stdlib and self.config.exclude_stdlib:
                        continue
                    file.imports.append(imp)
            elif kind == "type_declaration":
                for spec in named_children(node):
                    s = extract_struct(spec, ctx)
                    if s is not None:
                        file.structs.append(s)
            elif kind == "method_declaration":
                collected = collect_method(node, ctx)
                if collected is not None:
                    methods.append(collected)
            else:
                raise ctx.unsupported(node)

        return file, methods
