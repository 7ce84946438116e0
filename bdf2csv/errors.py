"""Exception hierarchy for the conversion pipeline."""


class Bdf2CsvError(Exception):
    """Base class for all bdf2csv errors."""


class UsageError(Bdf2CsvError):
    """Raised when the command line or configuration is unusable."""


class ConfigError(UsageError):
    """Raised when a config file or environment setting is invalid."""


class IoOpenError(Bdf2CsvError):
    """Raised when the input or output file cannot be opened."""


class InputOpenError(IoOpenError):
    pass


class OutputOpenError(IoOpenError):
    pass


class InputReadError(Bdf2CsvError):
    """Raised when reading the bodyfile fails mid-stream."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number


class OutputWriteError(Bdf2CsvError):
    """Raised when writing a CSV row or flushing the output fails."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number


class MalformedLineError(Bdf2CsvError):
    """Raised for a bodyfile line with the wrong number of fields.

    Recoverable: the pipeline logs it and moves on to the next line.
    """

    def __init__(self, expected: str, got: int):
        super().__init__(
            f"invalid bodyfile format: expected {expected} fields, got {got}"
        )
        self.expected = expected
        self.got = got
