from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import TextIO

from csvpick.config.loader import resolve_settings
from csvpick.errors import CsvPickError
from csvpick.logging.init import get_logger, log_summary, setup_logging
from csvpick.models import InvocationConfig, OutputFormat, RunResult
from csvpick.services.filtering import select_records
from csvpick.services.output import emit
from csvpick.services.prompt import parse_filter, prompt_for_filter
from csvpick.services.records import shape_records
from csvpick.services.serializer import encode
from csvpick.services.summary import render_summary_line
from csvpick.tabular.reader import load_table

"""CLI entrypoint.

Flow:
- Parse arguments (usage + exit 0 when the input path is missing)
- Load settings and the CSV file
- List headers, prompt for ``column=value``
- Select records, encode, write ``outputs/output_<TS>.<ext>``

Every user-facing failure is printed as one line on stdout and the run ends
with exit status 0.
"""

PROG = "csvpick"
USAGE = f"Usage: {PROG} <input.csv> [--json] [--print]"

EXIT_OK = 0

JSON_FLAG = "--json"
PRINT_FLAG = "--print"


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    # add_help/allow_abbrev を無効化: 入力パスと未知の引数はすべて extras に残す
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Filter CSV rows by column=value and write CSV or JSON",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", default=None, help="YAML settings file")
    return p.parse_known_args(argv)


def parse_invocation(argv: list[str]) -> InvocationConfig | None:
    """Build the InvocationConfig, or None when no input path was given.

    The input path is the first argument that does not start with ``-``.
    ``--json`` / ``--print`` are matched by prefix (``--jsonl`` counts as
    ``--json``) anywhere on the command line; other unknown arguments are
    ignored.
    """
    args, extras = _parse_args(argv)
    positionals = [a for a in extras if not a.startswith("-")]
    if not positionals:
        return None
    output_format = OutputFormat.TABULAR
    echo = False
    for arg in extras:
        if arg.startswith(PRINT_FLAG):
            echo = True
        elif arg.startswith(JSON_FLAG):
            output_format = OutputFormat.STRUCTURED
    return InvocationConfig(
        input_path=positionals[0],
        output_format=output_format,
        echo=echo,
        debug=args.debug,
        config_path=args.config,
    )


def _print_headers(columns: list[str]) -> None:
    print("Headers:")
    for i, name in enumerate(columns):
        print(f"{i}: {name}")


def run(inv: InvocationConfig, stdin: TextIO) -> RunResult:
    """Execute one pipeline pass. Raises CsvPickError on any user-facing failure."""
    logger = get_logger()
    started = time.perf_counter()

    settings = resolve_settings(inv.config_path)
    logger.debug(f"settings: {settings}")

    table = load_table(inv.input_path, encoding=settings.encoding)
    logger.debug(f"loaded {table.row_count} data rows, {len(table.columns)} columns from {inv.input_path}")

    _print_headers(table.columns)

    token = prompt_for_filter(stdin, head_limit=settings.head_limit)
    flt = parse_filter(token)

    records = shape_records(table, progress_min_rows=settings.progress_min_rows)
    selected = select_records(table.columns, records, flt, head_limit=settings.head_limit)
    logger.debug(f"selected {len(selected)} of {len(records)} records (filter={flt})")

    data = encode(inv.output_format, table.columns, selected)
    path = emit(
        data,
        inv.output_format,
        echo=inv.echo,
        directory=Path(settings.output_dir),
    )

    return RunResult(
        rows_read=len(records),
        rows_written=len(selected),
        output_format=inv.output_format,
        output_path=path,
        filtered=flt is not None,
        elapsed_seconds=time.perf_counter() - started,
    )


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    # NOTE: [] を渡されたときに sys.argv[1:] (pytest の引数) を読まないよう None のみ判定
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin

    inv = parse_invocation(argv)
    if inv is None:
        print(USAGE)
        return EXIT_OK

    logger = setup_logging(debug=inv.debug)
    if inv.debug:
        logger.debug("debug mode enabled")

    try:
        result = run(inv, stdin)
    except CsvPickError as e:
        logger.debug(f"run aborted: {e.kind}")
        print(e)
        return EXIT_OK

    log_summary(render_summary_line(result))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
