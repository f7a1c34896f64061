"""
Document value model.

A parsed document is a tree of four closed variants: Null, Scalar,
Mapping and Sequence. Values are immutable; every transformation builds
a new tree.
"""
from typing import Any, Optional, Union
from dataclasses import dataclass
from enum import Enum
import math


class ScalarKind(str, Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    TEXT = "text"


@dataclass(frozen=True)
class Null:
    """The YAML null value (distinct from an absent value)."""


@dataclass(frozen=True)
class Scalar:
    """A leaf value that keeps its kind, so "123" never equals 123."""
    kind: ScalarKind
    value: Union[bool, int, float, str]


@dataclass(frozen=True)
class Mapping:
    """Key/value entries. Keys are Null or Scalar values."""
    entries: tuple = ()

    def as_dict(self) -> dict:
        return dict(self.entries)


@dataclass(frozen=True)
class Sequence:
    items: tuple = ()

    def __len__(self) -> int:
        return len(self.items)


Value = Union[Null, Scalar, Mapping, Sequence]

NULL = Null()


def text(value: str) -> Scalar:
    return Scalar(ScalarKind.TEXT, value)


def _format_float(number: float) -> str:
    if math.isnan(number):
        return ".nan"
    if math.isinf(number):
        return ".inf" if number > 0 else "-.inf"
    return repr(number)


def kind_of(value: Value) -> str:
    """
    Structural kind used to detect type changes.

    Scalars report their scalar kind, so text vs number is a kind change.
    """
    match value:
        case Null():
            return "null"
        case Scalar(kind=kind):
            return kind.value
        case Mapping():
            return "mapping"
        case Sequence():
            return "sequence"


def text_of(value: Value) -> str:
    """
    String representation of a value.

    Used for ordering keys and sequence elements, for record identifiers
    and for path segments.
    """
    match value:
        case Null():
            return "null"
        case Scalar(kind=ScalarKind.BOOL, value=flag):
            return "true" if flag else "false"
        case Scalar(kind=ScalarKind.FLOAT, value=number):
            return _format_float(number)
        case Scalar(value=scalar):
            return str(scalar)
        case Mapping(entries=entries):
            return "{" + ", ".join(f"{text_of(k)}: {text_of(v)}" for k, v in entries) + "}"
        case Sequence(items=items):
            return "[" + ", ".join(text_of(item) for item in items) + "]"


def structure_key(value: Value) -> tuple:
    """Total ordering key that separates values sharing the same text."""
    match value:
        case Null():
            return (0,)
        case Scalar(kind=kind, value=scalar):
            return (1, kind.value, repr(scalar))
        case Mapping(entries=entries):
            return (2, tuple((structure_key(k), structure_key(v)) for k, v in entries))
        case Sequence(items=items):
            return (3, tuple(structure_key(item) for item in items))


def sort_key(value: Value) -> tuple:
    return (text_of(value), structure_key(value))


def from_python(obj: Any, _parents: tuple = ()) -> Value:
    """
    Convert a plain Python tree (as produced by a YAML/JSON loader) to a Value.

    Raises:
        TypeError: for objects outside the document model (dates, bytes, ...)
            and for self-referencing containers built from recursive aliases
    """
    if isinstance(obj, (dict, list)):
        if any(obj is parent for parent in _parents):
            raise TypeError("recursive alias: a container includes itself")
        _parents = _parents + (obj,)

    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return Scalar(ScalarKind.BOOL, obj)
    if isinstance(obj, int):
        return Scalar(ScalarKind.INT, obj)
    if isinstance(obj, float):
        return Scalar(ScalarKind.FLOAT, obj)
    if isinstance(obj, str):
        return Scalar(ScalarKind.TEXT, obj)
    if isinstance(obj, dict):
        entries = []
        for key, item in obj.items():
            key_value = from_python(key)
            if isinstance(key_value, (Mapping, Sequence)):
                raise TypeError(f"unsupported mapping key: {key!r}")
            entries.append((key_value, from_python(item, _parents)))
        return Mapping(tuple(entries))
    if isinstance(obj, list):
        return Sequence(tuple(from_python(item, _parents) for item in obj))
    raise TypeError(f"unsupported value type: {type(obj).__name__}")


def to_python(value: Optional[Value]) -> Any:
    """Convert a Value back to plain Python objects (for serialization)."""
    match value:
        case None | Null():
            return None
        case Scalar(value=scalar):
            return scalar
        case Mapping(entries=entries):
            return {to_python(k): to_python(v) for k, v in entries}
        case Sequence(items=items):
            return [to_python(item) for item in items]
