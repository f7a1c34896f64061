"""
Multi-document comparison and report assembly.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from core.comparison import Change, diff
from core.file_parser import Document, parse_yaml_file
from core.render import BLUE, NO_CHANGES, RenderOptions, paint, render

logger = logging.getLogger(__name__)


@dataclass
class DocumentDiff:
    """Result of comparing the documents found at one index of both files."""
    index: int
    total: int
    changes: list[Change] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @property
    def change_count(self) -> int:
        return len(self.changes)

    @property
    def is_identical(self) -> bool:
        return not self.changes

    def header(self, options: RenderOptions) -> str:
        if not options.show_separators:
            return "---"
        return f"--- # YAML Document: {self.index + 1}/{self.total}"


def compare_documents(old_docs: list[Document], new_docs: list[Document]) -> list[DocumentDiff]:
    """
    Compare documents pairwise by position.

    A document missing on one side is compared against an absent value.
    Comments come from the new document when it has any, otherwise from
    the old one.
    """
    total = max(len(old_docs), len(new_docs))
    results = []

    for index in range(total):
        old_doc = old_docs[index] if index < len(old_docs) else None
        new_doc = new_docs[index] if index < len(new_docs) else None

        comments = []
        if old_doc is not None:
            comments = old_doc.comments
        if new_doc is not None and new_doc.comments:
            comments = new_doc.comments

        changes = diff(
            old_doc.data if old_doc is not None else None,
            new_doc.data if new_doc is not None else None,
        )
        logger.debug(f"Document {index + 1}/{total}: {len(changes)} change(s)")
        results.append(DocumentDiff(index=index, total=total, changes=changes, comments=list(comments)))

    return results


def render_report(results: list[DocumentDiff], options: Optional[RenderOptions] = None) -> str:
    """
    Render every document that has changes, each under its own header.

    Returns "No changes found." when no document changed.
    """
    options = options or RenderOptions()
    parts = []

    for result in results:
        if result.is_identical:
            continue
        parts.append(paint(result.header(options), BLUE, options) + "\n")
        if options.show_comments:
            for comment in result.comments:
                parts.append(paint(comment, BLUE, options) + "\n")
        parts.append(render(result.changes, options))
        parts.append("\n")

    if not parts:
        return NO_CHANGES
    return "".join(parts)


def compare_files(old_path: str, new_path: str, options: Optional[RenderOptions] = None) -> str:
    """
    Compare two YAML files and return the rendered report.

    Raises:
        DocumentError: if either file cannot be parsed; nothing is rendered
    """
    old_docs = parse_yaml_file(old_path)
    new_docs = parse_yaml_file(new_path)
    return render_report(compare_documents(old_docs, new_docs), options)
