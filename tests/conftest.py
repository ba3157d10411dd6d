# Shared pytest fixtures
from __future__ import annotations

import io
from pathlib import Path

import pytest

from csvpick.logging.init import reset_logging

SAMPLE_CSV = "name,age\nAda,36\nGrace,85\nLinus,54\n"


@pytest.fixture(autouse=True)
def _fresh_logging():
    # ハンドラが前テストの capsys ストリームを掴まないようにする
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def sample_csv(temp_workdir: Path) -> Path:
    p = temp_workdir / "data.csv"
    p.write_text(SAMPLE_CSV, encoding="utf-8")
    return p


@pytest.fixture()
def run_cli(temp_workdir: Path, capsys):
    """Run the CLI with the given argv and stdin text; return (code, out, err)."""
    from csvpick.cli import main as cli_main

    def _run(argv: list[str], stdin_text: str = "\n"):
        code = cli_main(argv, stdin=io.StringIO(stdin_text))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


@pytest.fixture()
def output_files(temp_workdir: Path):
    """Callable listing files written under outputs/ (empty when the dir is absent)."""

    def _list() -> list[Path]:
        out_dir = temp_workdir / "outputs"
        if not out_dir.exists():
            return []
        return sorted(out_dir.iterdir())

    return _list
