from __future__ import annotations

from dataclasses import dataclass

"""Filter model: optional exact-match predicate over a single column."""

__all__ = [
    "Filter",
]


@dataclass(frozen=True)
class Filter:
    """``column=value`` entered at the prompt.

    Matching is byte-exact string equality: no trimming, no case folding.
    """
    column: str
    value: str

    def matches(self, record: dict[str, str]) -> bool:
        return record.get(self.column) == self.value
