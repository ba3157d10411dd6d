from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering for a finished run."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Format very small numbers to avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: RunResult) -> str:
    """Render the summary payload (without the SUMMARY label).

    Format:
    rows_read={n} rows_written={m} filtered={yes|no} format={csv|json} output={path} elapsed_sec={s}

    Examples:
        >>> from pathlib import Path
        >>> from csvpick.models import OutputFormat, RunResult
        >>> r = RunResult(3, 1, OutputFormat.TABULAR, Path("outputs/output_20240101120000.csv"), True, 0.5)
        >>> render_summary_line(r)
        'rows_read=3 rows_written=1 filtered=yes format=csv output=outputs/output_20240101120000.csv elapsed_sec=0.5'
    """
    return (
        f"rows_read={result.rows_read} "
        f"rows_written={result.rows_written} "
        f"filtered={'yes' if result.filtered else 'no'} "
        f"format={result.output_format.extension} "
        f"output={result.output_path} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
