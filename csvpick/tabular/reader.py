from __future__ import annotations

import csv
import io
from pathlib import Path

import pandas as pd

from ..errors import EmptyInput, InputMalformed, InputNotReadable
from ..models.table import TableData

"""CSV reader.

Row 0 is the header, rows 1..end are data rows. Every cell is read as a plain
string (dtype=str, no NA conversion), so values reach the filter and the
serializer exactly as they appear in the file.

Dialect: comma separator, double-quote quoting with doubled-quote escaping,
LF or CRLF line endings. Only truly empty lines are skipped; a line holding
just spaces is a one-field record.
"""

__all__ = [
    "read_csv_file",
    "normalize_table",
    "load_table",
]

# 先頭の空行数 (行番号の補正用) を DataFrame.attrs に保持する
FIRST_LINE_ATTR = "first_line"


def read_csv_file(path: Path | str, encoding: str = "utf-8") -> pd.DataFrame:
    """Read a CSV file into a raw, header-less DataFrame of strings.

    The file is opened exactly once and closed on every exit path. Empty lines
    come back as all-NaN rows and short rows are NaN padded; both are sorted
    out by :func:`normalize_table`.

    Raises:
        InputNotReadable: the file cannot be opened
        InputMalformed: the parser rejects the content (too many fields,
            quoting, undecodable bytes)
        EmptyInput: the file holds no rows at all
    """
    try:
        fh = open(path, "r", encoding=encoding, newline="")
    except OSError as e:
        raise InputNotReadable(e) from e

    with fh:
        try:
            text = fh.read()
        except UnicodeDecodeError as e:
            raise InputMalformed(e) from e

    # header=None では最初の行が列数を決めるため、先頭の空行は読み飛ばす
    body = text.lstrip("\r\n")
    if not body:
        raise EmptyInput()
    first_line = text[: len(text) - len(body)].count("\n") + 1

    try:
        df = pd.read_csv(
            io.StringIO(body),
            engine="python",  # 不足セルを NaN で埋める (C engine は版により '' になる)
            header=None,
            dtype=str,
            keep_default_na=False,  # "NA" / "" などを NaN に変換しない
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError as e:
        raise EmptyInput() from e
    except (pd.errors.ParserError, csv.Error) as e:
        raise InputMalformed(e) from e
    df.attrs[FIRST_LINE_ATTR] = first_line
    return df


def normalize_table(df: pd.DataFrame) -> TableData:
    """Split a raw DataFrame into header + data rows.

    Steps:
    1. Drop all-NaN rows (empty lines in the file)
    2. Reject an empty frame (no header row)
    3. Reject rows that are shorter than the header; the parser pads those
       with NaN, and NaN never appears otherwise since NA conversion is off
    4. Header = row 0, rows = 1..end
    """
    first_line = int(df.attrs.get(FIRST_LINE_ATTR, 1))
    df = df[~df.isna().all(axis=1)]
    if df.shape[0] == 0:
        raise EmptyInput()

    missing = df.isna().any(axis=1)
    if missing.any():
        position = int(df.index[missing.to_numpy().argmax()])
        raise InputMalformed(f"record on line {position + first_line}: wrong number of fields")

    columns = [str(c) for c in df.iloc[0].tolist()]
    rows = [[str(v) for v in raw] for raw in df.iloc[1:].itertuples(index=False, name=None)]
    return TableData(columns=columns, rows=rows)


def load_table(path: Path | str, encoding: str = "utf-8") -> TableData:
    return normalize_table(read_csv_file(path, encoding=encoding))
