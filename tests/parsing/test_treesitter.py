"""Tests for TreeBuilder and tree traversal helpers."""

from pathlib import Path

import pytest

from codesearch.core.errors import (
    ErrorCode,
    InvalidInputError,
    SourceDecodeError,
    SourceReadError,
)
from codesearch.parsing.treesitter import (
    SyntaxTree,
    TreeBuilder,
    format_tree,
    iter_leaves,
    iter_nodes,
)


@pytest.fixture(scope="module")
def builder() -> TreeBuilder:
    return TreeBuilder()


class TestBuild:
    """TreeBuilder.build tests."""

    def test_builds_program_root(self, builder: TreeBuilder) -> None:
        tree = builder.build("let x = 1;")

        assert isinstance(tree, SyntaxTree)
        assert tree.root_node.type == "program"
        assert tree.source == b"let x = 1;"
        assert tree.text == "let x = 1;"
        assert not tree.has_errors

    def test_root_spans_whole_source(self, builder: TreeBuilder) -> None:
        source = "function greet(name: string) {\n  return name;\n}\n"
        tree = builder.build(source)

        assert tree.root_node.start_byte == 0
        assert tree.root_node.end_byte == len(source.encode())

    def test_empty_source_rejected(self, builder: TreeBuilder) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            builder.build("")
        assert exc_info.value.code == ErrorCode.PARSE_INVALID_INPUT

    def test_bytes_accepted(self, builder: TreeBuilder) -> None:
        tree = builder.build('const s = "é";'.encode())

        assert tree.text == 'const s = "é";'
        assert not tree.has_errors

    def test_invalid_utf8_bytes_rejected(self, builder: TreeBuilder) -> None:
        with pytest.raises(SourceDecodeError):
            builder.build(b"let x = '\xff';")

    @pytest.mark.parametrize("value", [None, 42, ["let x;"]])
    def test_non_text_rejected(self, builder: TreeBuilder, value: object) -> None:
        with pytest.raises(InvalidInputError):
            builder.build(value)  # type: ignore[arg-type]

    def test_malformed_source_still_builds(self, builder: TreeBuilder) -> None:
        """Syntax errors become ERROR/missing nodes instead of raising."""
        tree = builder.build("class {")

        assert tree.root_node.type == "program"
        assert tree.has_errors
        assert tree.error_count >= 1

    def test_builder_is_reusable(self, builder: TreeBuilder) -> None:
        first = builder.build("let a = 1;")
        second = builder.build("let b = 2;")

        assert first.text == "let a = 1;"
        assert second.text == "let b = 2;"

    def test_source_lines_split_on_newline(self, builder: TreeBuilder) -> None:
        tree = builder.build("a;\nb;\n")
        assert tree.source_lines() == [b"a;", b"b;", b""]


class TestBuildFromPath:
    """File reading and decoding tests."""

    def test_reads_utf8_file(self, builder: TreeBuilder, tmp_path: Path) -> None:
        path = tmp_path / "a.ts"
        path.write_text('const s = "héllo";\n', encoding="utf-8")

        tree = builder.build_from_path(path)

        assert tree.path == str(path)
        assert "héllo" in tree.text

    def test_missing_file(self, builder: TreeBuilder, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError) as exc_info:
            builder.build_from_path(tmp_path / "missing.ts")
        assert exc_info.value.code == ErrorCode.PARSE_READ_ERROR

    def test_directory_is_unreadable(self, builder: TreeBuilder, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError):
            builder.build_from_path(tmp_path)

    def test_invalid_utf8(self, builder: TreeBuilder, tmp_path: Path) -> None:
        path = tmp_path / "bad.ts"
        path.write_bytes(b"let x = '\xff\xfe';\n")

        with pytest.raises(SourceDecodeError) as exc_info:
            builder.build_from_path(path)
        assert exc_info.value.details["offset"] == 9

    def test_empty_file(self, builder: TreeBuilder, tmp_path: Path) -> None:
        path = tmp_path / "empty.ts"
        path.write_text("")

        with pytest.raises(InvalidInputError):
            builder.build_from_path(path)


class TestTraversal:
    """iter_nodes / iter_leaves tests."""

    SOURCE = 'const greeting: string = "hi"; // note\n'

    def test_leaves_reconstruct_source(self, builder: TreeBuilder) -> None:
        """Leaves are ordered, match their byte spans, and only whitespace lies between them."""
        tree = builder.build(self.SOURCE)
        data = tree.source

        cursor = 0
        for leaf in iter_leaves(tree.root_node):
            assert leaf.start_byte >= cursor
            assert data[cursor : leaf.start_byte].strip() == b""
            assert leaf.text == data[leaf.start_byte : leaf.end_byte]
            cursor = leaf.end_byte
        assert data[cursor:].strip() == b""

    def test_iter_nodes_is_preorder(self, builder: TreeBuilder) -> None:
        tree = builder.build(self.SOURCE)
        nodes = list(iter_nodes(tree.root_node))

        assert nodes[0].type == "program"
        assert nodes[1].type == "lexical_declaration"
        starts = [n.start_byte for n in nodes]
        assert starts == sorted(starts)

    def test_every_node_text_is_its_source_slice(self, builder: TreeBuilder) -> None:
        tree = builder.build("class Foo { bar() { return this.bar; } }")
        for node in iter_nodes(tree.root_node):
            assert node.text == tree.source[node.start_byte : node.end_byte]

    def test_deep_nesting_does_not_recurse(self, builder: TreeBuilder) -> None:
        depth = 1500
        tree = builder.build("x = " + "(" * depth + "1" + ")" * depth + ";")

        assert sum(1 for _ in iter_nodes(tree.root_node)) > depth


class TestFormatTree:
    def test_one_kind_per_line_indented_by_depth(self, builder: TreeBuilder) -> None:
        tree = builder.build("let x = 1;")

        lines = format_tree(tree.root_node).splitlines()

        assert lines[0] == "program"
        assert lines[1] == "  lexical_declaration"
        assert lines[2] == "    let"
        assert "      identifier" in lines

    def test_custom_indent(self, builder: TreeBuilder) -> None:
        tree = builder.build("x;")
        lines = format_tree(tree.root_node, indent="-").splitlines()

        assert lines[0] == "program"
        assert lines[1] == "-expression_statement"
