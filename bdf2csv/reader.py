"""Generator-based bodyfile reading."""

import logging
from typing import BinaryIO, Generator

from bdf2csv.errors import InputOpenError, InputReadError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Undecodable bytes round-trip to the output unchanged
ENCODING_ERRORS = "surrogateescape"

# Unicode White_Space; unlike str.strip() this keeps \x1c-\x1f
WHITESPACE = " \t\n\v\f\r\x85\xa0" + "".join(
    map(chr, [0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000])
)


def open_input(path: str) -> BinaryIO:
    """Open the bodyfile for buffered binary reading."""
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputOpenError(f"failed to open input file: {e}") from e


def read_lines(stream: BinaryIO) -> Generator[tuple[int, str], None, None]:
    """Yield (line_number, text) for each non-empty line.

    Lines split on LF; trimming drops the CR of CRLF endings along with
    other surrounding whitespace. Blank lines are skipped but still count.
    """
    line_number = 0
    lines = iter(stream)
    while True:
        try:
            raw = next(lines)
        except StopIteration:
            return
        except OSError as e:
            raise InputReadError(
                f"error reading input file at line {line_number + 1}: {e}",
                line_number=line_number + 1,
            ) from e

        line_number += 1
        text = raw.decode(ENCODING, ENCODING_ERRORS).strip(WHITESPACE)
        if not text:
            logger.debug("Skipping empty line %d", line_number)
            continue
        yield line_number, text
