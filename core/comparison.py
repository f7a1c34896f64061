"""
Document Comparison Engine

Walks two canonical value trees in lockstep and reports every addition,
deletion and modification with a dotted/bracketed path. Sequences of
identifiable records are handed to the record matcher.
"""
from typing import Optional
from dataclasses import dataclass
from enum import Enum

from core.canonical import is_identifiable
from core.value import Mapping, Scalar, Sequence, Value, kind_of, text_of


class ChangeType(str, Enum):
    ADDITION = "addition"
    DELETION = "deletion"
    MODIFICATION = "modification"


@dataclass(frozen=True)
class Change:
    """Represents a single difference between two documents."""
    change_type: ChangeType
    path: str
    old_value: Optional[Value] = None
    new_value: Optional[Value] = None


def added(path: str, value: Value) -> Change:
    return Change(ChangeType.ADDITION, path, new_value=value)


def deleted(path: str, value: Value) -> Change:
    return Change(ChangeType.DELETION, path, old_value=value)


def modified(path: str, old_value: Value, new_value: Value) -> Change:
    return Change(ChangeType.MODIFICATION, path, old_value, new_value)


def _diff_mappings(old_map: Mapping, new_map: Mapping, path: str) -> list[Change]:
    changes = []
    old_fields = old_map.as_dict()
    new_fields = new_map.as_dict()

    for key, old_item in old_fields.items():
        key_path = f"{path}.{text_of(key)}"
        if key not in new_fields:
            changes.append(deleted(key_path, old_item))
        else:
            changes.extend(diff(old_item, new_fields[key], key_path))

    for key, new_item in new_fields.items():
        if key not in old_fields:
            changes.append(added(f"{path}.{text_of(key)}", new_item))

    return changes


def _diff_sequences(old_seq: Sequence, new_seq: Sequence, path: str) -> list[Change]:
    if is_identifiable(old_seq.items) and is_identifiable(new_seq.items):
        from core.matcher import match_and_diff
        return match_and_diff(old_seq, new_seq, path)

    # Plain sequences are already sorted, compare position by position
    changes = []
    common = min(len(old_seq), len(new_seq))
    for index in range(common):
        changes.extend(diff(old_seq.items[index], new_seq.items[index], f"{path}[{index}]"))

    for index in range(common, len(old_seq)):
        changes.append(deleted(f"{path}[{index}]", old_seq.items[index]))
    for index in range(common, len(new_seq)):
        changes.append(added(f"{path}[{index}]", new_seq.items[index]))

    return changes


def diff(old_value: Optional[Value], new_value: Optional[Value], path: str = "") -> list[Change]:
    """
    Recursively compare two canonical values and return all differences.

    None stands for an absent value (a missing document), which is not
    the same as a YAML null.

    Args:
        old_value: The previous value, or None if absent
        new_value: The current value, or None if absent
        path: Path of the values inside the document ("" for the root)

    Returns:
        List of Change records, in discovery order
    """
    if old_value == new_value:
        return []

    if old_value is None:
        return [added(path, new_value)]
    if new_value is None:
        return [deleted(path, old_value)]

    # Type changes are reported whole, never field by field
    if kind_of(old_value) != kind_of(new_value):
        return [modified(path, old_value, new_value)]

    match old_value, new_value:
        case Mapping(), Mapping():
            return _diff_mappings(old_value, new_value, path)
        case Sequence(), Sequence():
            return _diff_sequences(old_value, new_value, path)
        case Scalar(), Scalar():
            return [modified(path, old_value, new_value)]
        case _:
            # Null vs Null is caught by the equality check above
            return []
