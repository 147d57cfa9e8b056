"""Tests for module loading against the sample Go project."""

import os

import pytest

from goscope.config import Config
from goscope.exceptions import FileAccessError, ModuleFileError, ParsingError
from goscope.scanning.loader import (
    enumerate_directories,
    load_directories,
    load_structs,
    read_module_path,
)

GO_MODULE = "example.com/garage"


def _by_module_path(directories):
    return {d.module_path: d for d in directories.values()}


class TestReadModulePath:
    """Tests for go.mod parsing."""

    def test_fixture_module(self, go_project):
        """The module directive of the sample project is read."""
        assert read_module_path(go_project) == GO_MODULE

    def test_tabs_and_comments(self, tmp_path):
        """Tab separators and trailing comments are tolerated."""
        (tmp_path / "go.mod").write_text("// header\nmodule\texample.com/x // trailing\n")
        assert read_module_path(tmp_path) == "example.com/x"

    def test_quoted(self, tmp_path):
        """A quoted module path is unquoted."""
        (tmp_path / "go.mod").write_text('module "example.com/quoted"\n')
        assert read_module_path(tmp_path) == "example.com/quoted"

    def test_missing_file(self, tmp_path):
        """A directory without go.mod raises ModuleFileError."""
        with pytest.raises(ModuleFileError):
            read_module_path(tmp_path)

    def test_no_module_directive(self, tmp_path):
        """A go.mod without a module line raises ModuleFileError."""
        (tmp_path / "go.mod").write_text("go 1.22\n")
        with pytest.raises(ModuleFileError) as exc_info:
            read_module_path(tmp_path)

        assert "no module directive" in str(exc_info.value)


class TestEnumerateDirectories:
    """Tests for directory enumeration."""

    def test_module_paths(self, go_project):
        """Each directory gets the module path plus its relative path."""
        directories = enumerate_directories(go_project, GO_MODULE)

        assert sorted(d.module_path for d in directories.values()) == [
            "example.com/garage",
            "example.com/garage/cars",
            "example.com/garage/cmd",
            "example.com/garage/cmd/garage",
            "example.com/garage/dealer",
            "example.com/garage/gated",
            "example.com/garage/generics",
            "example.com/garage/other",
        ]

    def test_relative_paths(self, go_project):
        """The root has an empty relative path; nested ones use slashes."""
        directories = _by_module_path(enumerate_directories(go_project, GO_MODULE))

        assert directories[GO_MODULE].relative_path == ""
        assert directories["example.com/garage/cmd/garage"].relative_path == "cmd/garage"

    def test_keys_are_filesystem_paths(self, go_project):
        """Index keys are the filesystem paths of the directories."""
        directories = enumerate_directories(go_project, GO_MODULE)

        for key, directory in directories.items():
            assert key == directory.path
            assert os.path.isdir(key)

    def test_vendor_skipped(self, go_project):
        """Nothing under vendor is enumerated."""
        directories = enumerate_directories(go_project, GO_MODULE)
        assert not any("vendor" in d.module_path for d in directories.values())

    def test_symlinks_not_followed(self, tmp_path):
        """A symlink loop is neither followed nor enumerated."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "loop").symlink_to(tmp_path, target_is_directory=True)

        directories = enumerate_directories(tmp_path, "m")

        assert sorted(d.module_path for d in directories.values()) == ["m", "m/a"]

    def test_vcs_metadata_skipped(self, tmp_path):
        """Version control directories are skipped with their subtrees."""
        for name in (".git/objects/ab", ".hg/store", ".svn", "pkg"):
            (tmp_path / name).mkdir(parents=True)

        directories = enumerate_directories(tmp_path, "m")

        assert sorted(d.module_path for d in directories.values()) == ["m", "m/pkg"]

    def test_missing_root(self, tmp_path):
        """An unreadable root raises FileAccessError."""
        with pytest.raises(FileAccessError):
            enumerate_directories(tmp_path / "absent", "example.com/x")


class TestLoadDirectories:
    """Tests for the full load of the sample module."""

    def test_packages(self, go_project, go_parser):
        """Directories carry their packages; empty ones carry none."""
        module, directories = load_directories(go_project, parser=go_parser)
        by_path = _by_module_path(directories)

        assert module == GO_MODULE
        assert list(by_path[GO_MODULE].packages) == ["auto"]
        assert list(by_path["example.com/garage/cmd/garage"].packages) == ["main"]
        assert by_path["example.com/garage/cmd"].packages == {}

    def test_root_package_structs(self, go_project, go_parser):
        """Root package structs have methods bound across files."""
        _, directories = load_directories(go_project, parser=go_parser)
        auto = _by_module_path(directories)[GO_MODULE].packages["auto"]

        structs = {s.name: s for s in auto.structs}
        assert list(structs) == ["Factory", "Mechanic", "Manager", "tool"]
        assert [m.signature for m in structs["Mechanic"].methods] == [
            "Fix(string, int) bool, error",
            "Rest()",
        ]
        assert [m.signature for m in structs["Factory"].methods] == ["Open(...string) error"]
        assert [(f.name, f.type) for f in structs["Mechanic"].fields] == [
            ("Skills", "[]string"),
            ("Colleagues", "[]*Mechanic"),
        ]

    def test_include_tests(self, go_project, go_parser):
        """Test packages load when include_tests is set."""
        _, directories = load_directories(
            go_project, Config(include_tests=True), parser=go_parser
        )
        root = _by_module_path(directories)[GO_MODULE]

        assert list(root.packages) == ["auto", "auto_test"]
        assert [s.name for s in root.packages["auto_test"].structs] == ["fixture"]

    def test_same_struct_name_in_two_packages(self, go_project, go_parser):
        """Same-named structs in two packages keep their own methods."""
        _, directories = load_directories(go_project, parser=go_parser)
        by_path = _by_module_path(directories)

        other_vehicle = by_path["example.com/garage/other"].packages["other"].structs[0]
        dealer_structs = {
            s.name: s for s in by_path["example.com/garage/dealer"].packages["dealer"].structs
        }

        assert [m.signature for m in other_vehicle.methods] == ["StartEngine() error", "StopEngine() error"]
        assert [m.signature for m in dealer_structs["Vehicle"].methods] == ["Sell(float64) bool"]
        assert [(f.name, f.type) for f in dealer_structs["Dealer"].fields] == [
            ("", "other.Vehicle"),
            ("Doors", "int"),
            ("Books", "*ledger.Book"),
            ("lock", "sync.RWMutex"),
        ]

    def test_generic_receivers(self, go_project, go_parser):
        """Methods on generic receivers bind to the generic struct."""
        _, directories = load_directories(go_project, parser=go_parser)
        generics = _by_module_path(directories)["example.com/garage/generics"]
        stack = generics.packages["generics"].structs[0]

        assert stack.name == "Stack"
        assert [m.signature for m in stack.methods] == ["Push(T)", "Len() int"]

    def test_build_constraints_recorded(self, go_project, go_parser):
        """Build constraints are recorded per file."""
        _, directories = load_directories(go_project, parser=go_parser)
        gated = _by_module_path(directories)["example.com/garage/gated"].packages["gated"]

        assert [f.build_constraints for f in gated.files] == [[], ["linux", "linux"]]

    def test_skip_build_constrained(self, go_project, go_parser):
        """Packages with constrained files are dropped when requested."""
        _, directories = load_directories(
            go_project, Config(skip_build_constrained=True), parser=go_parser
        )
        by_path = _by_module_path(directories)

        assert by_path["example.com/garage/gated"].packages == {}
        assert "cars" in by_path["example.com/garage/cars"].packages

    def test_selection_skips_directories(self, go_project, go_parser):
        """Unselected directories stay empty."""
        _, directories = load_directories(go_project, Config(select={"dealer"}), parser=go_parser)
        populated = sorted(d.module_path for d in directories.values() if d.packages)

        assert populated == ["example.com/garage/dealer"]

    def test_select_exact_by_relative_path(self, go_project, go_parser):
        """select_exact matches the path relative to the module root."""
        _, directories = load_directories(
            go_project, Config(select_exact={"cars"}), parser=go_parser
        )
        populated = sorted(d.module_path for d in directories.values() if d.packages)

        assert populated == ["example.com/garage/cars"]

    def test_broken_file_aborts(self, write_module, go_parser):
        """A syntax error anywhere aborts the load."""
        root = write_module("example.com/broken", {"bad.go": "package bad\n\ntype X struct {\n"})

        with pytest.raises(ParsingError):
            load_directories(root, parser=go_parser)

    def test_missing_go_mod(self, tmp_path, go_parser):
        """Loading without go.mod raises ModuleFileError."""
        with pytest.raises(ModuleFileError):
            load_directories(tmp_path, parser=go_parser)


class TestLoadStructs:
    """Tests for single-file extraction."""

    def test_camaro_fields(self, go_project, go_parser):
        """Every field form of the Camaro struct renders canonically."""
        structs = load_structs(go_project / "cars" / "car.go", parser=go_parser)
        camaro = {s.name: s for s in structs}["Camaro"]

        assert [(f.name, f.type) for f in camaro.fields] == [
            ("Name", "string"),
            ("Features", "map[string]int"),
            ("Callback", "func(string, int) (int64, error)"),
            ("Fuel", "interface{}"),
            ("ChNoPos", "chan string"),
            ("ChRecv", "<-chan int32"),
            ("ChSend", "chan<- int32"),
            ("Struct", "struct{ XXX int }"),
            ("One", "string"),
            ("Two", "string"),
            ("Ellipsis", "func(...string)"),
            ("ExampleMutex", "func(sync.Mutex)"),
            ("Three", "sync.Mutex"),
            ("Four", "sync.Mutex"),
            ("AnotherStruct", "struct{ sync.Mutex }"),
            ("", "sync.Mutex"),
            ("", "*Engine"),
        ]

    def test_methods_limited_to_the_file(self, go_project, go_parser):
        """Methods declared in sibling files are not bound in single-file mode."""
        structs = load_structs(go_project / "factory.go", parser=go_parser)
        factory = {s.name: s for s in structs}["Factory"]

        assert factory.methods == []

    def test_missing_file(self, tmp_path, go_parser):
        """A missing source file raises FileAccessError."""
        with pytest.raises(FileAccessError):
            load_structs(tmp_path / "nope.go", parser=go_parser)
