from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .invocation import OutputFormat

"""Run result model used for the SUMMARY log line."""


@dataclass(frozen=True)
class RunResult:
    """Aggregated outcome of a successful run."""
    rows_read: int  # data rows (header excluded)
    rows_written: int
    output_format: OutputFormat
    output_path: Path
    filtered: bool  # True when a column=value filter was applied
    elapsed_seconds: float
