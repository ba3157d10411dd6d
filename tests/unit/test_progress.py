from __future__ import annotations

from unittest.mock import patch

from csvpick.services.progress import RowProgress, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


def test_disabled_when_not_tty():
    with patch("csvpick.services.progress.is_tty_enabled", return_value=False), \
         patch("csvpick.services.progress.tqdm") as mock_tqdm:
        with RowProgress(50_000, min_rows=1) as progress:
            assert progress.enabled is False
            assert list(progress.track(["a", "b"])) == ["a", "b"]
    mock_tqdm.assert_not_called()


def test_enabled_creates_tqdm_with_row_unit():
    with patch("csvpick.services.progress.is_tty_enabled", return_value=True), \
         patch("csvpick.services.progress.tqdm") as mock_tqdm:
        progress = RowProgress(10, min_rows=5, description="Rows")
        assert progress.enabled is True
        mock_tqdm.assert_called_once_with(
            total=10,
            desc="Rows",
            unit="row",
            leave=False,
            ncols=80,
            ascii=True,
        )
        progress.close()
        progress.close()  # idempotent
        mock_tqdm.return_value.close.assert_called_once()


def test_zero_rows_never_enabled():
    with patch("csvpick.services.progress.is_tty_enabled", return_value=True):
        assert RowProgress(0, min_rows=0).enabled is False
