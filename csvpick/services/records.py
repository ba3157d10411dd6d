from __future__ import annotations

from ..models.table import Record, TableData
from .progress import RowProgress

"""Record shaping: raw rows -> header-keyed records (input order preserved)."""


def shape_records(table: TableData, *, progress_min_rows: int = 10_000) -> list[Record]:
    """Convert each data row into a ``{header: value}`` mapping.

    Duplicate header names collapse into one key; the rightmost column wins.
    """
    header = table.columns
    records: list[Record] = []
    with RowProgress(table.row_count, min_rows=progress_min_rows) as progress:
        for row in progress.track(table.rows):
            records.append(dict(zip(header, row)))
    return records
