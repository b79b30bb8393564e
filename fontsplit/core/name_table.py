"""
Parsing of ttx name table dumps.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, replace

# Name table IDs
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULL_NAME = 4
NAME_ID_POSTSCRIPT = 6

_FIELDS = {
    NAME_ID_FAMILY: "family_name",
    NAME_ID_SUBFAMILY: "subfamily",
    NAME_ID_FULL_NAME: "full_name",
    NAME_ID_POSTSCRIPT: "postscript_name",
}


@dataclass(frozen=True)
class NameTable:
    """The identification strings fontsplit reads from a font."""

    family_name: str | None = None
    subfamily: str | None = None
    full_name: str | None = None
    postscript_name: str | None = None


def iter_name_records(text: str) -> Iterator[tuple[int, str]]:
    """
    Yield (nameID, value) for every namerecord in document order.

    Values are whitespace-trimmed. Records with a non-numeric nameID are
    skipped; malformed XML yields nothing.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError:
        return

    for record in root.iter("namerecord"):
        try:
            name_id = int(record.get("nameID", ""))
        except ValueError:
            continue
        yield name_id, "".join(record.itertext()).strip()


def parse_name_table(text: str) -> NameTable:
    """
    Fold the records of a ttx name table dump into a NameTable.

    Only IDs 1, 2, 4 and 6 are kept. When an ID appears several times
    (one record per platform/language) the last record wins, including an
    empty one, which resets the field to unset.
    """
    table = NameTable()
    for name_id, value in iter_name_records(text):
        field_name = _FIELDS.get(name_id)
        if field_name:
            table = replace(table, **{field_name: value or None})
    return table


def is_well_formed(text: str) -> bool:
    """Whether text parses as XML."""
    try:
        ET.fromstring(text)
    except ET.ParseError:
        return False
    return True
