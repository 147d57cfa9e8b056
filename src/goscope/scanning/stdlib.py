"""Go standard library classification.

An import path is standard library if it is listed in ``STDLIB_PACKAGES``
or sits under one of ``STDLIB_PREFIXES``. The table is fixed; nothing is
resolved against an installed Go toolchain.
"""

STDLIB_PACKAGES = frozenset(
    {
        "archive/tar",
        "archive/zip",
        "bufio",
        "builtin",
        "bytes",
        "cmp",
        "compress/bzip2",
        "compress/flate",
        "compress/gzip",
        "compress/lzw",
        "compress/zlib",
        "container/heap",
        "container/list",
        "container/ring",
        "context",
        "crypto",
        "database/sql",
        "embed",
        "encoding",
        "errors",
        "expvar",
        "flag",
        "fmt",
        "hash",
        "html",
        "html/template",
        "image",
        "io",
        "iter",
        "log",
        "maps",
        "math",
        "mime",
        "net",
        "os",
        "path",
        "plugin",
        "reflect",
        "regexp",
        "runtime",
        "slices",
        "sort",
        "strconv",
        "strings",
        "structs",
        "sync",
        "syscall",
        "testing",
        "time",
        "unicode",
        "unique",
        "unsafe",
        "weak",
    }
)

# Namespaces whose every subpackage belongs to the standard library.
STDLIB_PREFIXES = (
    "archive/",
    "compress/",
    "container/",
    "crypto/",
    "database/",
    "debug/",
    "encoding/",
    "go/",
    "hash/",
    "image/",
    "index/",
    "io/",
    "log/",
    "math/",
    "mime/",
    "net/",
    "os/",
    "path/",
    "regexp/",
    "runtime/",
    "sync/",
    "testing/",
    "text/",
    "time/",
    "unicode/",
)


def is_stdlib(path: str) -> bool:
    """Return True if ``path`` is a standard library import path."""
    if path in STDLIB_PACKAGES:
        return True
    return path.startswith(STDLIB_PREFIXES)
