"""
Canonical form for document values.

Mapping keys and plain sequences are put into a deterministic order so
that documents differing only in incidental ordering compare equal.
Sequences of records carrying a natural identifier keep their order;
they are matched by identifier when diffed.
"""
from typing import Optional

from core.value import (
    Mapping,
    Null,
    Scalar,
    Sequence,
    Value,
    sort_key,
    text,
    text_of,
)

# Checked in this priority order for every record
IDENTIFIER_FIELDS = ("name", "key", "id")

_IDENTIFIER_KEYS = tuple(text(field) for field in IDENTIFIER_FIELDS)


def identifier_of(value: Value) -> Optional[str]:
    """
    Extract the natural identifier of a record.

    Returns the string representation of the first of name/key/id present
    in the mapping, or None if the value is not a record with one.
    """
    if not isinstance(value, Mapping):
        return None
    fields = value.as_dict()
    for key in _IDENTIFIER_KEYS:
        if key in fields:
            return text_of(fields[key])
    return None


def is_identifiable(items) -> bool:
    """
    True for a non-empty sequence of mappings where at least one
    mapping carries an identifier field.
    """
    if not items:
        return False
    if not all(isinstance(item, Mapping) for item in items):
        return False
    return any(identifier_of(item) is not None for item in items)


def canonicalize(value: Value) -> Value:
    match value:
        case Null() | Scalar():
            return value
        case Mapping(entries=entries):
            ordered = sorted(entries, key=lambda entry: sort_key(entry[0]))
            return Mapping(tuple((key, canonicalize(item)) for key, item in ordered))
        case Sequence(items=items):
            elements = tuple(canonicalize(item) for item in items)
            if is_identifiable(elements):
                return Sequence(elements)
            return Sequence(tuple(sorted(elements, key=sort_key)))
