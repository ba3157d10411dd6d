from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from ..errors import OutputDirUnavailable, OutputWriteFailed
from ..models.invocation import OutputFormat

"""Output sink: directory preparation, timestamped file naming, writing, echo.

File name: ``output_<YYYYMMDDHHMMSS>.<csv|json>`` using process local time.
Two runs within the same second write to the same path; the later run wins.
"""

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "TIMESTAMP_FMT",
    "build_output_path",
    "emit",
    "ensure_output_dir",
    "write_output",
]

DEFAULT_OUTPUT_DIR = Path("outputs")
TIMESTAMP_FMT = "%Y%m%d%H%M%S"
FILE_MODE = 0o644


def ensure_output_dir(directory: Path = DEFAULT_OUTPUT_DIR) -> Path:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirUnavailable(e) from e
    return directory


def build_output_path(
    directory: Path, fmt: OutputFormat, now: datetime | None = None
) -> Path:
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FMT)
    return directory / f"output_{stamp}.{fmt.extension}"


def write_output(path: Path, data: str) -> Path:
    """Write ``data`` as UTF-8, creating the file with mode 0644 (umask applies)."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data.encode("utf-8"))
    except OSError as e:
        raise OutputWriteFailed(e) from e
    return path


def emit(
    data: str,
    fmt: OutputFormat,
    *,
    echo: bool = False,
    directory: Path = DEFAULT_OUTPUT_DIR,
    now: datetime | None = None,
) -> Path:
    """Ensure the directory, write the file, then echo or confirm on stdout."""
    ensure_output_dir(directory)
    path = build_output_path(directory, fmt, now)
    write_output(path, data)
    if echo:
        print(data)
    else:
        print(f"Output written to {path}")
    return path
