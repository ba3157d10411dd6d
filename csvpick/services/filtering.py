from __future__ import annotations

from collections.abc import Sequence

from ..errors import NoMatches, UnknownColumn
from ..models.filter import Filter
from ..models.table import Record

"""Record selection.

Two modes:
- filter present: stable subsequence of records whose ``column`` equals ``value``
- filter absent: the first ``head_limit`` records
"""

DEFAULT_HEAD_LIMIT = 10


def apply_filter(header: Sequence[str], records: Sequence[Record], flt: Filter) -> list[Record]:
    """Return the records matching ``flt`` in input order.

    Raises:
        UnknownColumn: ``flt.column`` is not a header name
        NoMatches: no record matches
    """
    if flt.column not in header:
        raise UnknownColumn(flt.column)
    matched = [r for r in records if flt.matches(r)]
    if not matched:
        raise NoMatches()
    return matched


def head_slice(records: Sequence[Record], limit: int = DEFAULT_HEAD_LIMIT) -> list[Record]:
    return list(records[:limit])


def select_records(
    header: Sequence[str],
    records: Sequence[Record],
    flt: Filter | None,
    head_limit: int = DEFAULT_HEAD_LIMIT,
) -> list[Record]:
    if flt is None:
        return head_slice(records, head_limit)
    return apply_filter(header, records, flt)
