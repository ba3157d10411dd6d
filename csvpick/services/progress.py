from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from tqdm import tqdm

"""Row progress display with tqdm (TTY only).

Shaping a few thousand rows is instant, so the bar is only shown when stdout
is a TTY and the input is at least ``min_rows`` rows long. The bar renders on
stderr, leaving stdout untouched.
"""

__all__ = [
    "RowProgress",
    "is_tty_enabled",
]

T = TypeVar("T")


def is_tty_enabled() -> bool:
    """Return True when stdout is a TTY and a progress bar may be displayed."""
    return sys.stdout.isatty()


class RowProgress:
    """Progress bar over a row iterable.

    Usage::

        with RowProgress(len(rows), min_rows=10_000) as progress:
            for row in progress.track(rows):
                ...
    """

    def __init__(self, total_rows: int, *, min_rows: int, description: str = "Reading rows") -> None:
        self.total_rows = total_rows
        self.description = description
        self.enabled = is_tty_enabled() and total_rows >= min_rows and total_rows > 0
        self.pbar: Any | None = None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                leave=False,
                ncols=80,
                ascii=True,
            )

    def track(self, rows: Iterable[T]) -> Iterator[T]:
        for row in rows:
            yield row
            if self.pbar is not None:
                self.pbar.update(1)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> RowProgress:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
