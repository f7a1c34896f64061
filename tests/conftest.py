"""Shared fixtures and helpers for the ymldiff test suite."""
import pytest

from core.canonical import canonicalize
from core.value import from_python


def v(obj):
    """Build a canonical Value from plain Python objects."""
    return canonicalize(from_python(obj))


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file in tmp_path and return its path."""
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
