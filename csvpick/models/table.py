from __future__ import annotations

from dataclasses import dataclass

"""Tabular models: the parsed header/rows pair and the keyed Record shape."""

__all__ = [
    "Record",
    "TableData",
]

# header name -> cell value. 値は常に文字列 (型推論なし)
Record = dict[str, str]


@dataclass
class TableData:
    """Header row plus raw data rows as read from the CSV file.

    Every row has exactly ``len(columns)`` cells; the reader rejects anything
    else before a TableData is built.
    """
    columns: list[str]
    rows: list[list[str]]

    @property
    def row_count(self) -> int:
        return len(self.rows)
