"""Pipeline driver: Line Source -> Parser -> Emitter, one record at a time."""

import logging
from dataclasses import dataclass
from typing import Iterable

from bdf2csv.config import Config
from bdf2csv.errors import MalformedLineError, OutputWriteError
from bdf2csv.parser import DELIMITER, FIELD_COUNTS, parse_line
from bdf2csv.reader import open_input, read_lines
from bdf2csv.writer import RecordWriter, open_output

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    lines_read: int = 0
    records_written: int = 0
    empty_lines: int = 0
    malformed_lines: int = 0
    repaired_lines: int = 0


def convert_stream(
    source: Iterable[tuple[int, str]],
    writer: RecordWriter,
    repair_names: bool = False,
) -> ConversionStats:
    """Convert already-open (line_number, text) pairs into CSV rows.

    Malformed lines are logged and skipped. Read and write errors
    propagate and stop the conversion.
    """
    stats = ConversionStats()
    writer.write_header()

    for line_number, line in source:
        # Gaps in numbering are blank lines the reader skipped
        stats.empty_lines += line_number - stats.lines_read - 1
        stats.lines_read = line_number

        try:
            record = parse_line(line, repair_names=repair_names)
        except MalformedLineError as e:
            logger.warning("Failed to parse line %d: %s", line_number, e)
            stats.malformed_lines += 1
            continue

        if line.count(DELIMITER) >= max(FIELD_COUNTS):
            logger.info("Repaired pipe-separated name on line %d", line_number)
            stats.repaired_lines += 1

        writer.write_record(record, line_number)
        stats.records_written += 1

    writer.flush()
    return stats


def convert(config: Config) -> ConversionStats:
    """Convert config.input_path to config.output_path.

    Both handles are released on every exit path. The output is flushed
    best effort when a fatal error interrupts the conversion; a failing
    close never masks the error that stopped it.
    """
    with open_input(config.input_path) as infile:
        writer = RecordWriter(
            open_output(config.output_path), epoch_only=config.epoch_only
        )
        try:
            stats = convert_stream(
                read_lines(infile), writer, repair_names=config.repair_names
            )
        except BaseException:
            try:
                writer.close()
            except OutputWriteError as close_err:
                logger.debug("Close after failure also failed: %s", close_err)
            raise
        writer.close()

    logger.info(
        "Converted %d record(s) from %d line(s): %d malformed, %d empty, %d repaired",
        stats.records_written,
        stats.lines_read,
        stats.malformed_lines,
        stats.empty_lines,
        stats.repaired_lines,
    )
    return stats
