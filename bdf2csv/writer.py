"""CSV emitter with a fixed 11-column schema."""

import csv
import logging
from typing import TextIO

from bdf2csv.errors import OutputOpenError, OutputWriteError
from bdf2csv.parser import BodyfileRecord
from bdf2csv.reader import ENCODING, ENCODING_ERRORS

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "0", "Name", "Inode", "Mode", "UID", "GID", "Size",
    "ATime", "MTime", "CTime", "CrTime",
]


def open_output(path: str) -> TextIO:
    """Create (or truncate) the CSV output file."""
    try:
        return open(
            path, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline=""
        )
    except OSError as e:
        raise OutputOpenError(f"failed to create output file: {e}") from e


def record_to_row(record: BodyfileRecord, epoch_only: bool = False) -> list[str]:
    """Build the CSV row: passthrough columns, then one timestamp quartet."""
    row = record.passthrough()
    if epoch_only:
        row.extend(record.raw_timestamps())
    else:
        row.extend(record.readable_timestamps())
    return row


class RecordWriter:
    """Serializes BodyfileRecords onto a text stream as CSV.

    QUOTE_MINIMAL wraps any field holding a comma, double quote, CR or LF
    in quotes and doubles embedded quotes.
    """

    def __init__(self, stream: TextIO, epoch_only: bool = False):
        self._stream = stream
        self._writer = csv.writer(stream, quoting=csv.QUOTE_MINIMAL)
        self.epoch_only = epoch_only
        self._header_written = False

    def write_header(self) -> None:
        if self._header_written:
            return
        try:
            self._writer.writerow(CSV_HEADER)
        except (OSError, csv.Error) as e:
            raise OutputWriteError(f"failed to write CSV header: {e}") from e
        self._header_written = True

    def write_record(self, record: BodyfileRecord, line_number: int | None = None) -> None:
        try:
            self._writer.writerow(record_to_row(record, self.epoch_only))
        except (OSError, csv.Error) as e:
            raise OutputWriteError(
                f"failed to write CSV record at line {line_number}: {e}",
                line_number=line_number,
            ) from e

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise OutputWriteError(f"failed to flush CSV output: {e}") from e

    def close(self) -> None:
        """Flush and release the output stream, even if the flush fails."""
        try:
            self._stream.close()
        except OSError as e:
            raise OutputWriteError(f"failed to close CSV output: {e}") from e
