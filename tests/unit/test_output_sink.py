from __future__ import annotations

import os
import re
import stat
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from csvpick.errors import OutputDirUnavailable, OutputWriteFailed
from csvpick.models import OutputFormat
from csvpick.services.output import build_output_path, emit, ensure_output_dir, write_output

NOW = datetime(2024, 3, 9, 7, 5, 2)


def test_build_output_path_schema():
    p = build_output_path(Path("outputs"), OutputFormat.TABULAR, NOW)
    assert p == Path("outputs/output_20240309070502.csv")
    p = build_output_path(Path("outputs"), OutputFormat.STRUCTURED, NOW)
    assert p.name == "output_20240309070502.json"


def test_build_output_path_uses_local_now():
    p = build_output_path(Path("outputs"), OutputFormat.TABULAR)
    assert re.fullmatch(r"output_[0-9]{14}\.csv", p.name)


def test_ensure_output_dir_idempotent(temp_workdir: Path):
    ensure_output_dir(Path("outputs"))
    ensure_output_dir(Path("outputs"))
    assert (temp_workdir / "outputs").is_dir()


def test_ensure_output_dir_failure(temp_workdir: Path):
    (temp_workdir / "outputs").write_text("not a dir", encoding="utf-8")
    with pytest.raises(OutputDirUnavailable) as e:
        ensure_output_dir(Path("outputs"))
    assert str(e.value).startswith("\n Error creating output directory: ")


def test_write_output_mode_and_content(temp_workdir: Path):
    old = os.umask(0o022)
    try:
        p = write_output(temp_workdir / "out.csv", "a,b\nZoë,1\n")
    finally:
        os.umask(old)
    assert p.read_bytes() == "a,b\nZoë,1\n".encode("utf-8")
    assert stat.S_IMODE(p.stat().st_mode) == 0o644


def test_write_output_truncates_existing(temp_workdir: Path):
    p = temp_workdir / "out.csv"
    p.write_text("x" * 100, encoding="utf-8")
    write_output(p, "short")
    assert p.read_text(encoding="utf-8") == "short"


def test_write_output_failure(temp_workdir: Path):
    with patch("csvpick.services.output.os.open", side_effect=PermissionError("denied")):
        with pytest.raises(OutputWriteFailed) as e:
            write_output(temp_workdir / "out.csv", "x")
    assert str(e.value) == "Error writing to output file: denied"


def test_emit_confirms_path(temp_workdir: Path, capsys):
    path = emit("a\n1\n", OutputFormat.TABULAR, now=NOW)
    out = capsys.readouterr().out
    assert path == Path("outputs/output_20240309070502.csv")
    assert out == "Output written to outputs/output_20240309070502.csv\n"
    assert (temp_workdir / path).read_text(encoding="utf-8") == "a\n1\n"


def test_emit_echo_prints_data_only(temp_workdir: Path, capsys):
    emit("[]", OutputFormat.STRUCTURED, echo=True, now=NOW)
    assert capsys.readouterr().out == "[]\n"


def test_emit_custom_directory(temp_workdir: Path, capsys):
    path = emit("x", OutputFormat.TABULAR, directory=Path("nested/dir"), now=NOW)
    assert path.parent == Path("nested/dir")
    assert path.exists()
