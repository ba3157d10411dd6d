from __future__ import annotations

import json
from collections.abc import Sequence

import pandas as pd

from ..errors import SerializationFailed
from ..models.invocation import OutputFormat
from ..models.table import Record

"""Output encoders.

- TABULAR: header row first, then each record projected onto header order.
  Same dialect as the input (comma, minimal double-quote quoting), ``\\n``
  line endings.
- STRUCTURED: pretty printed JSON array of ``{header: value}`` objects,
  two-space indent, string values only, keys sorted.
"""

__all__ = [
    "encode",
    "encode_structured",
    "encode_tabular",
]


def encode_tabular(header: Sequence[str], records: Sequence[Record]) -> str:
    columns = list(header)
    # 辞書ではなく行リストで渡す (重複ヘッダ名でも列位置を保つ)
    rows = [[record.get(h, "") for h in columns] for record in records]
    try:
        frame = pd.DataFrame(rows, columns=columns, dtype=str)
        return frame.to_csv(index=False, lineterminator="\n")
    except (TypeError, ValueError) as e:
        raise SerializationFailed(e) from e


def encode_structured(records: Sequence[Record]) -> str:
    try:
        return json.dumps(list(records), indent=2, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError) as e:
        raise SerializationFailed(e) from e


def encode(fmt: OutputFormat, header: Sequence[str], records: Sequence[Record]) -> str:
    if fmt is OutputFormat.STRUCTURED:
        return encode_structured(records)
    return encode_tabular(header, records)
