"""Delimited-text reader for SCDB CSV exports.

The SCDB files are plain comma-separated text with a header row. Fields may
be double-quoted (``"Smith, John"``), a doubled quote inside a quoted field
stands for one literal quote, and a quoted comma is not a separator. Rows
never span lines.

Rows whose field count differs from the header's are dropped rather than
failing the whole file; the legacy SCDB export has a handful of them.
"""

import re
from collections.abc import Iterator
from pathlib import Path

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_line(line: str) -> list[str]:
    """Split one CSV line into trimmed, unescaped field values."""
    values: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and line[i + 1 : i + 2] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    values.append("".join(current).strip())
    return values


def parse_rows(text: str) -> Iterator[dict[str, str]]:
    """Lazily yield one ``{header: value}`` dict per well-formed data row.

    The first non-blank line is the header. Blank lines are skipped.
    """
    headers: list[str] | None = None
    for raw in _LINE_SPLIT_RE.split(text):
        line = raw.strip()
        if not line:
            continue
        values = parse_line(line)
        if headers is None:
            headers = values
            continue
        if len(values) != len(headers):
            continue
        yield dict(zip(headers, values))


def read_records(path: Path) -> Iterator[dict[str, str]]:
    """Read a CSV file from disk and parse it with ``parse_rows``."""
    # utf-8-sig drops the byte-order mark some SCDB downloads carry
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse_rows(text)
