"""Directory loader.

Enumerates the directories of a Go module and drives parsing and walking
of each one:

    module = read_module_path(root)
    directories = enumerate_directories(root, module)   # empty shells
    module, directories = load_directories(root)        # fully populated

Directory keys are filesystem paths; the module-qualified path of each
directory is the module root path with the directory's suffix appended.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, Config
from ..exceptions import FileAccessError, ModuleFileError
from ..logging_config import get_logger
from ..model import Directory, Struct
from .extractor import bind_methods
from .treesitter_parser import GoParser
from .walker import PackageWalker

logger = get_logger(__name__)

MODULE_FILE = "go.mod"

# Vendored dependencies, version control metadata, and directories the go
# tool itself ignores.
SKIP_DIR_NAMES = frozenset({"vendor", ".git", ".hg", ".svn", ".bzr", "testdata"})


def read_module_path(root: Union[str, Path]) -> str:
    """Return the module path declared in ``root/go.mod``.

    Raises:
        ModuleFileError: If go.mod is missing, unreadable, or has no
            module directive
    """
    mod_file = os.path.join(str(root), MODULE_FILE)
    try:
        with open(mod_file, encoding="utf-8") as fh:
            lines = fh.readlines()
    except OSError as e:
        raise ModuleFileError(mod_file, e.strerror or str(e))

    for line in lines:
        parts = line.split("//", 1)[0].split(None, 1)
        if not parts or parts[0] != "module":
            continue
        value = parts[1].strip().strip('"`') if len(parts) > 1 else ""
        if value:
            return value
        break

    raise ModuleFileError(mod_file, "no module directive")


def enumerate_directories(root: Union[str, Path], module: str) -> dict[str, Directory]:
    """Walk ``root`` recursively and create one empty Directory per folder.

    Symbolic links are never followed. Skipped directories take their whole
    subtree with them.

    Raises:
        FileAccessError: If a directory cannot be listed
    """
    root = str(root)

    def _on_error(err: OSError) -> None:
        raise FileAccessError(err.filename or root, err.strerror or str(err))

    directories: dict[str, Directory] = {}
    for dirpath, dirnames, _ in os.walk(root, onerror=_on_error, followlinks=False):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIR_NAMES)

        relative = os.path.relpath(dirpath, root)
        relative = "" if relative == os.curdir else relative.replace(os.sep, "/")
        directories[dirpath] = Directory(
            path=dirpath,
            module_path=f"{module}/{relative}" if relative else module,
            relative_path=relative,
        )

    logger.debug(f"Found {len(directories)} directories under {root}")
    return directories


def load_directories(
    root: Union[str, Path],
    config: Config = DEFAULT_CONFIG,
    parser: Optional[GoParser] = None,
) -> tuple[str, dict[str, Directory]]:
    """Load, parse and walk every directory of the module at ``root``.

    Returns:
        The module root path and the populated directory index
    """
    root = str(root)
    parser = parser or GoParser()
    walker = PackageWalker(config)

    module = read_module_path(root)
    directories = enumerate_directories(root, module)

    for directory in directories.values():
        if not config.matches(directory.module_path, directory.relative_path):
            continue
        parsed = parser.parse_dir(directory.path)
        directory.packages = walker.walk(parsed, directory)

    return module, directories


def load_structs(path: Union[str, Path], parser: Optional[GoParser] = None) -> list[Struct]:
    """Extract the structs of a single file, with that file's methods bound."""
    parser = parser or GoParser()
    parsed = parser.parse_file(path)

    file, methods = PackageWalker().walk_file(parsed)
    bind_methods(file.structs, methods)
    return file.structs
