# ymldiff v1.0.0
"""
Core package for ymldiff.
Contains the canonicalizer, comparison engine, record matcher, renderer
and YAML parsing utilities.
"""
from core.value import (
    Value,
    Null,
    Scalar,
    ScalarKind,
    Mapping,
    Sequence,
    NULL,
    from_python,
    to_python,
    text_of,
)
from core.canonical import canonicalize, identifier_of, is_identifiable
from core.comparison import diff, Change, ChangeType
from core.matcher import match_and_diff
from core.render import render, format_value, RenderOptions
from core.file_parser import (
    parse_yaml_file,
    parse_yaml_content,
    extract_comments,
    Document,
)
from core.report import compare_documents, compare_files, render_report, DocumentDiff
from core.errors import YmlDiffError, DocumentError

__all__ = [
    "Value",
    "Null",
    "Scalar",
    "ScalarKind",
    "Mapping",
    "Sequence",
    "NULL",
    "from_python",
    "to_python",
    "text_of",
    "canonicalize",
    "identifier_of",
    "is_identifiable",
    "diff",
    "Change",
    "ChangeType",
    "match_and_diff",
    "render",
    "format_value",
    "RenderOptions",
    "parse_yaml_file",
    "parse_yaml_content",
    "extract_comments",
    "Document",
    "compare_documents",
    "compare_files",
    "render_report",
    "DocumentDiff",
    "YmlDiffError",
    "DocumentError",
]
