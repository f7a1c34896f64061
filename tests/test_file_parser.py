"""
Tests for YAML loading and comment extraction.
"""
import pytest

from core.errors import DocumentError, YmlDiffError
from core.file_parser import extract_comments, parse_yaml_content, parse_yaml_file
from core.value import Scalar, ScalarKind

from conftest import v


class TestParseContent:

    def test_single_document(self):
        docs = parse_yaml_content("b: 2\na: [3, 1]\n")
        assert len(docs) == 1
        assert docs[0].data == v({"a": [1, 3], "b": 2})
        assert docs[0].index == 0

    def test_multiple_documents(self):
        docs = parse_yaml_content("a: 1\n---\nb: 2\n---\nc: 3\n")
        assert [d.data for d in docs] == [v({"a": 1}), v({"b": 2}), v({"c": 3})]
        assert [d.index for d in docs] == [0, 1, 2]

    def test_empty_content(self):
        assert parse_yaml_content("") == []

    def test_empty_document(self):
        docs = parse_yaml_content("---\n---\na: 1\n")
        assert docs[0].data is None
        assert docs[1].data == v({"a": 1})

    def test_timestamps_stay_text(self):
        docs = parse_yaml_content("date: 2024-01-15\n")
        assert docs[0].data == v({"date": "2024-01-15"})

    def test_scalar_types(self):
        docs = parse_yaml_content("s: '123'\ni: 123\nf: 1.5\nb: true\nn: null\n")
        fields = docs[0].data.as_dict()
        assert fields[Scalar(ScalarKind.TEXT, "s")] == Scalar(ScalarKind.TEXT, "123")
        assert fields[Scalar(ScalarKind.TEXT, "i")] == Scalar(ScalarKind.INT, 123)
        assert fields[Scalar(ScalarKind.TEXT, "f")] == Scalar(ScalarKind.FLOAT, 1.5)
        assert fields[Scalar(ScalarKind.TEXT, "b")] == Scalar(ScalarKind.BOOL, True)

    def test_malformed(self):
        with pytest.raises(DocumentError) as exc_info:
            parse_yaml_content("key: [unclosed\n", "broken.yaml")
        assert exc_info.value.path == "broken.yaml"
        assert "broken.yaml" in str(exc_info.value)

    def test_unsupported_value(self):
        with pytest.raises(DocumentError):
            parse_yaml_content("data: !!binary aGVsbG8=\n")

    def test_recursive_alias(self):
        with pytest.raises(DocumentError) as exc_info:
            parse_yaml_content("a: &x [*x]\n", "cycle.yaml")
        assert exc_info.value.path == "cycle.yaml"
        assert "recursive alias" in str(exc_info.value)

    def test_shared_alias_is_expanded(self):
        docs = parse_yaml_content("a: &x [1, 2]\nb: *x\n")
        assert docs[0].data == v({"a": [1, 2], "b": [1, 2]})

    def test_excessive_nesting(self):
        depth = 3000
        with pytest.raises(DocumentError):
            parse_yaml_content("[" * depth + "]" * depth + "\n")

    def test_document_error_is_ymldiff_error(self):
        with pytest.raises(YmlDiffError):
            parse_yaml_content("a: b: c\n")


class TestParseFile:

    def test_reads_file(self, write_yaml):
        path = write_yaml("doc.yaml", "name: John\nitems: [b, a]\n")
        docs = parse_yaml_file(path)
        assert docs[0].data == v({"name": "John", "items": ["a", "b"]})
        assert docs[0].source == path

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError) as exc_info:
            parse_yaml_file(str(tmp_path / "missing.yaml"))
        assert isinstance(exc_info.value.cause, OSError)

    def test_binary_file(self, tmp_path):
        path = tmp_path / "image.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n\x00\xff\xfe")
        with pytest.raises(DocumentError):
            parse_yaml_file(str(path))


class TestComments:

    def test_header_inline_and_footer(self):
        content = "# Header comment\nname: John # inline\nage: 30\n# Footer comment\n"
        assert extract_comments(content) == [["# Header comment", "# inline", "# Footer comment"]]

    def test_comments_start_with_marker(self):
        docs = parse_yaml_content("a: 1  #   spaced out  \n")
        assert docs[0].comments == ["#   spaced out"]

    def test_hash_inside_scalars_is_not_a_comment(self):
        content = 'url: "http://example.com/ #anchor"\ntag: a#b\nscript: |\n  echo hi # shell\nend: 1 # real\n'
        assert extract_comments(content) == [["# real"]]

    def test_comments_per_document(self):
        content = "# first\na: 1\n---\n# second\nb: 2\n---\nc: 3\n"
        docs = parse_yaml_content(content)
        assert [d.comments for d in docs] == [["# first"], ["# second"], []]

    def test_no_documents(self):
        assert extract_comments("") == []
