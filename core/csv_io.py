'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import csv
import io
from typing import List

from core.hierarchy import TableRow

__all__ = ["HEADER", "to_csv", "parse_csv"]

HEADER = ("category", "word", "definition")

# Newlines inside a field are stored as a literal backslash-n so every
# record stays on one physical line.
_NL = "\n"
_NL_ESCAPED = "\\n"


def _escape(value: str) -> str:
    return (value or "").replace("\r\n", _NL).replace(_NL, _NL_ESCAPED)


def _unescape(value: str) -> str:
    return (value or "").replace(_NL_ESCAPED, _NL)


def to_csv(rows: List[TableRow]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(HEADER)
    for row in rows:
        writer.writerow((_escape(row.category), _escape(row.term), _escape(row.definition)))
    return buf.getvalue().rstrip("\n")


def parse_csv(text: str) -> List[TableRow]:
    """
    Parse category/word/definition records. The first non-blank line is
    the header; fewer than one data line yields nothing. Short records are
    padded with empty fields.
    """
    lines = [line for line in (text or "").splitlines() if line.strip()]
    if len(lines) < 2:
        return []

    rows: List[TableRow] = []
    for fields in csv.reader(lines[1:]):
        fields = [_unescape(f) for f in fields] + ["", "", ""]
        rows.append(TableRow(fields[0].strip(), fields[1].strip(), fields[2].strip()))
    return rows
