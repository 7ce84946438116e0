"""Shared pytest fixtures for the bdf2csv test suite."""

import csv
import io

import pytest

S1_LINE = "0|/etc/passwd|1234|0100644|0|0|2450|1700000000|1700000100|1700000200|1700000300"
S3_LINE = "0|/tmp/x|9|0|0|0|0|0|1700000000|0"
S5_LINE = "0|a,b|1|0|0|0|0|0|0|0|0"


@pytest.fixture()
def bodyfile(tmp_path):
    """Return a factory that writes bytes or lines to a bodyfile and returns its path."""
    def _write(content, name="bodyfile.txt") -> str:
        path = tmp_path / name
        if isinstance(content, (list, tuple)):
            content = "\n".join(content) + "\n"
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return str(path)
    return _write


@pytest.fixture()
def output_path(tmp_path) -> str:
    return str(tmp_path / "out.csv")


def read_csv_rows(path: str) -> list[list[str]]:
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return list(csv.reader(f))


def parse_csv_text(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text, newline="")))
