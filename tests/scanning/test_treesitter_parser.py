"""Tests for the tree-sitter Go parser wrapper."""

import pytest

from goscope.exceptions import FileAccessError, ParsingError


class TestParse:
    """Tests for GoParser.parse."""

    def test_package_name(self, go_parser):
        """parse() records the package clause name."""
        parsed = go_parser.parse(b"package auto\n\ntype A struct{}\n", "a.go")

        assert parsed.package == "auto"
        assert parsed.path == "a.go"
        assert parsed.root.type == "source_file"

    def test_syntax_error(self, go_parser):
        """A tree with error nodes raises ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            go_parser.parse(b"package p\n\ntype X struct {\n\tA int\n", "broken.go")

        assert exc_info.value.filepath == "broken.go"

    def test_missing_package_clause(self, go_parser):
        """A file without a package clause raises ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            go_parser.parse(b"// just a comment\n", "empty.go")

        assert "missing package clause" in str(exc_info.value)


class TestParseDir:
    """Tests for GoParser.parse_dir."""

    def test_groups_by_package(self, write_module, go_parser):
        """parse_dir() groups .go files by package, in filename order."""
        root = write_module(
            "example.com/x",
            {
                "b.go": "package x\n",
                "a.go": "package x\n",
                "x_test.go": "package x_test\n",
                "notes.txt": "not go\n",
            },
        )

        packages = go_parser.parse_dir(root)

        assert sorted(packages) == ["x", "x_test"]
        assert [p.path.rsplit("/", 1)[-1] for p in packages["x"]] == ["a.go", "b.go"]

    def test_subdirectories_not_included(self, write_module, go_parser):
        """parse_dir() does not recurse."""
        root = write_module("example.com/x", {"a.go": "package x\n", "sub/b.go": "package sub\n"})

        assert list(go_parser.parse_dir(root)) == ["x"]

    def test_missing_directory(self, tmp_path, go_parser):
        """A missing directory raises FileAccessError."""
        with pytest.raises(FileAccessError):
            go_parser.parse_dir(tmp_path / "absent")
