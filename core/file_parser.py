"""
YAML file parsing utilities.

Each file may hold several documents. Every document is converted to the
value model, canonicalized and paired with the comments found in its
part of the file.
"""
import bisect
import logging
import re
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field

import yaml

from core.canonical import canonicalize
from core.errors import DocumentError
from core.value import Value, from_python

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as plain text."""


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

_COMMENT_START = re.compile(r"(?:^|(?<=[ \t]))#", re.MULTILINE)


@dataclass
class Document:
    """One parsed document of a YAML file."""
    data: Optional[Value]
    comments: list[str] = field(default_factory=list)
    source: str = ""
    index: int = 0


def _document_starts(text: str) -> tuple[list[int], list[tuple[int, int]]]:
    """
    Scan the stream for document start offsets and scalar spans.

    The first document always starts at offset 0 so that leading comments
    belong to it.
    """
    starts = []
    scalar_spans = []
    in_document = False

    for token in yaml.scan(text, Loader=DocumentLoader):
        if isinstance(token, yaml.ScalarToken):
            scalar_spans.append((token.start_mark.index, token.end_mark.index))

        if isinstance(token, yaml.DocumentStartToken):
            starts.append(token.start_mark.index)
            in_document = True
        elif isinstance(token, yaml.DocumentEndToken):
            in_document = False
        elif not in_document and not isinstance(
            token, (yaml.StreamStartToken, yaml.StreamEndToken, yaml.DirectiveToken)
        ):
            starts.append(token.start_mark.index)
            in_document = True

    if starts:
        starts[0] = 0
    return starts, scalar_spans


def _inside_scalar(position: int, spans: list[tuple[int, int]], span_starts: list[int]) -> bool:
    slot = bisect.bisect_right(span_starts, position) - 1
    return slot >= 0 and spans[slot][0] <= position < spans[slot][1]


def extract_comments(text: str) -> list[list[str]]:
    """
    Extract comment lines per document.

    A '#' starts a comment at the beginning of a line or after whitespace,
    unless it sits inside a scalar (quoted strings, block scalars).

    Returns:
        One list of comments per document, each starting with '#'
    """
    starts, spans = _document_starts(text)
    if not starts:
        return []

    spans.sort()
    span_starts = [start for start, _ in spans]
    comments: list[list[str]] = [[] for _ in starts]
    comment_end = 0

    for match in _COMMENT_START.finditer(text):
        position = match.start()
        if position < comment_end or _inside_scalar(position, spans, span_starts):
            continue
        line_end = text.find("\n", position)
        comment_end = len(text) if line_end == -1 else line_end
        comment = text[position:comment_end].strip()
        if comment:
            document = max(bisect.bisect_right(starts, position) - 1, 0)
            comments[document].append(comment)

    return comments


def parse_yaml_content(content: str, source: str = "<string>") -> list[Document]:
    """
    Parse YAML content holding one or more documents.

    Args:
        content: YAML text
        source: Name used in error messages

    Returns:
        Canonicalized documents, in file order

    Raises:
        DocumentError: on malformed YAML or values outside the document model
    """
    try:
        raw_documents = list(yaml.load_all(content, Loader=DocumentLoader))
        data = [None if raw is None else canonicalize(from_python(raw)) for raw in raw_documents]
        comments = extract_comments(content)
    except (yaml.YAMLError, TypeError, RecursionError) as e:
        logger.debug(f"Failed to parse {source}: {e}")
        raise DocumentError(source, e) from e

    documents = []
    for index, value in enumerate(data):
        documents.append(Document(
            data=value,
            comments=comments[index] if index < len(comments) else [],
            source=source,
            index=index,
        ))

    logger.debug(f"Parsed {len(documents)} document(s) from {source}")
    return documents


def parse_yaml_file(file_path: str) -> list[Document]:
    """
    Parse a YAML file from disk.

    Raises:
        DocumentError: if the file cannot be read, is not UTF-8 text or is
            not valid YAML
    """
    path = Path(file_path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {file_path}: {e}")
        raise DocumentError(str(file_path), e) from e

    return parse_yaml_content(content, str(file_path))
