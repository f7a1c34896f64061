"""
Record matching for sequences of identifiable records.

Elements are paired by their natural identifier (name, key or id)
rather than by position, so reordering a list of records is not a change
and an edit inside one record is reported under that record's path.
"""
import logging

from core.canonical import identifier_of
from core.comparison import Change, added, deleted, diff
from core.value import Sequence

logger = logging.getLogger(__name__)


def index_records(seq: Sequence) -> dict:
    """
    Map identifier -> record.

    Records without an identifier are skipped. When two records share an
    identifier the later one wins.
    """
    records = {}
    for item in seq.items:
        identifier = identifier_of(item)
        if identifier is None:
            continue
        if identifier in records:
            logger.debug(f"Duplicate record identifier {identifier!r}, keeping the later record")
        records[identifier] = item
    return records


def match_and_diff(old_seq: Sequence, new_seq: Sequence, path: str) -> list[Change]:
    """
    Compare two identifiable-record sequences by identifier.

    Args:
        old_seq: Records from the previous document
        new_seq: Records from the current document
        path: Path of the sequence; records are addressed as path[identifier]

    Returns:
        Additions and deletions for unmatched records, plus the nested
        changes of every matched pair
    """
    changes = []
    old_records = index_records(old_seq)
    new_records = index_records(new_seq)

    for identifier, old_record in old_records.items():
        record_path = f"{path}[{identifier}]"
        if identifier in new_records:
            changes.extend(diff(old_record, new_records[identifier], record_path))
        else:
            changes.append(deleted(record_path, old_record))

    for identifier, new_record in new_records.items():
        if identifier not in old_records:
            changes.append(added(f"{path}[{identifier}]", new_record))

    return changes
