"""Bodyfile line parser: frozen dataclass + field-count validation."""

import re
from dataclasses import dataclass

from bdf2csv.errors import MalformedLineError
from bdf2csv.timestamps import ABSENT, EPOCH_PATTERN, format_timestamp

DELIMITER = "|"
FIELD_COUNTS = (10, 11)
EXPECTED_FIELDS = "10 or 11"

_DIGITS = re.compile(r"^[0-9]*$")


@dataclass(frozen=True)
class BodyfileRecord:
    marker: str
    name: str
    inode: str
    mode: str
    uid: str
    gid: str
    size: str
    atime: str
    mtime: str
    ctime: str
    crtime: str = ABSENT

    @property
    def atime_readable(self) -> str:
        return format_timestamp(self.atime)

    @property
    def mtime_readable(self) -> str:
        return format_timestamp(self.mtime)

    @property
    def ctime_readable(self) -> str:
        return format_timestamp(self.ctime)

    @property
    def crtime_readable(self) -> str:
        return format_timestamp(self.crtime)

    def passthrough(self) -> list[str]:
        """Columns 0..6 exactly as they appeared on the input line."""
        return [
            self.marker, self.name, self.inode, self.mode,
            self.uid, self.gid, self.size,
        ]

    def raw_timestamps(self) -> tuple[str, str, str, str]:
        return self.atime, self.mtime, self.ctime, self.crtime

    def readable_timestamps(self) -> tuple[str, str, str, str]:
        return (
            self.atime_readable,
            self.mtime_readable,
            self.ctime_readable,
            self.crtime_readable,
        )


def parse_line(line: str, repair_names: bool = False) -> BodyfileRecord:
    """Parse one trimmed bodyfile line into a BodyfileRecord.

    Raises MalformedLineError unless the line has 10 or 11 fields. With
    repair_names, lines whose name contains "|" are rejoined first when
    the trailing fields look like a bodyfile tail.
    """
    fields = line.split(DELIMITER)

    if repair_names and len(fields) > max(FIELD_COUNTS):
        repaired = repair_name_fields(fields)
        if repaired is not None:
            fields = repaired

    if len(fields) not in FIELD_COUNTS:
        raise MalformedLineError(expected=EXPECTED_FIELDS, got=len(fields))

    return _record_from_fields(fields)


def _record_from_fields(fields: list[str]) -> BodyfileRecord:
    # crtime may not be present on all filesystems
    crtime = fields[10] if len(fields) == 11 else ABSENT
    return BodyfileRecord(
        marker=fields[0],
        name=fields[1],
        inode=fields[2],
        mode=fields[3],
        uid=fields[4],
        gid=fields[5],
        size=fields[6],
        atime=fields[7],
        mtime=fields[8],
        ctime=fields[9],
        crtime=crtime,
    )


def _is_timestamp_like(value: str) -> bool:
    return value == "" or bool(EPOCH_PATTERN.match(value))


def _looks_like_tail(tail: list[str]) -> bool:
    """True if tail has the shape inode|mode|uid|gid|size|times..."""
    uid, gid, size = tail[2], tail[3], tail[4]
    if not all(_DIGITS.match(v) for v in (uid, gid, size)):
        return False
    return all(_is_timestamp_like(v) for v in tail[5:])


def repair_name_fields(fields: list[str]) -> list[str] | None:
    """Rejoin a name that was split on an embedded "|".

    Tries the 11-field layout first, then the 10-field one. Returns the
    repaired field list, or None if no layout fits.
    """
    for count in sorted(FIELD_COUNTS, reverse=True):
        tail_len = count - 2
        if len(fields) <= count:
            continue
        tail = fields[-tail_len:]
        if _looks_like_tail(tail):
            name = DELIMITER.join(fields[1:-tail_len])
            return [fields[0], name, *tail]
    return None
