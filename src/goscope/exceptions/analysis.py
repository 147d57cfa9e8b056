"""Analysis-related exceptions: file access, parsing, module manifests."""

from pathlib import Path
from typing import Optional, Union

from .base import GoscopeError

PathLike = Union[str, Path]


class AnalysisError(GoscopeError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file or directory cannot be accessed or read."""

    def __init__(self, filepath: PathLike, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when Go source cannot be parsed into a clean syntax tree."""

    def __init__(self, filepath: PathLike, reason: str, line: Optional[int] = None):
        details = {"filepath": str(filepath), "reason": reason}
        if line is not None:
            details["line"] = str(line)
        super().__init__(f"Failed to parse go file: {filepath}", details=details)
        self.filepath = filepath
        self.reason = reason
        self.line = line


class ModuleFileError(AnalysisError):
    """Raised when go.mod is missing or has no module directive."""

    def __init__(self, filepath: PathLike, reason: str):
        super().__init__(
            f"Cannot read module path from {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnsupportedNodeError(GoscopeError):
    """Raised when the extractor meets a syntax node kind it does not cover.

    The Go grammar is closed, so this is a coverage gap in goscope and not a
    problem with the analyzed code. Callers should let it abort the run.
    """

    def __init__(self, kind: str, filepath: PathLike = "", line: Optional[int] = None):
        details = {"kind": kind}
        if filepath:
            details["filepath"] = str(filepath)
        if line is not None:
            details["line"] = str(line)
        super().__init__(f"Unsupported syntax node: {kind}", details=details)
        self.kind = kind
        self.filepath = filepath
        self.line = line
