from __future__ import annotations

import pytest

from csvpick.cli.__main__ import parse_invocation
from csvpick.models import InvocationConfig, OutputFormat


def test_defaults():
    inv = parse_invocation(["data.csv"])
    assert inv == InvocationConfig(input_path="data.csv")
    assert inv.output_format is OutputFormat.TABULAR
    assert inv.echo is False


def test_missing_positional_returns_none():
    assert parse_invocation([]) is None


def test_only_flags_returns_none():
    assert parse_invocation(["--json", "--print"]) is None


@pytest.mark.parametrize(
    "argv, fmt, echo",
    [
        (["d.csv", "--json"], OutputFormat.STRUCTURED, False),
        (["d.csv", "--print"], OutputFormat.TABULAR, True),
        (["d.csv", "--jsonl"], OutputFormat.STRUCTURED, False),  # prefix match
        (["d.csv", "--printout", "--json=yes"], OutputFormat.STRUCTURED, True),
        (["d.csv", "-json", "print"], OutputFormat.TABULAR, False),
        (["--json", "d.csv"], OutputFormat.STRUCTURED, False),
    ],
)
def test_flag_prefix_matching(argv, fmt, echo):
    inv = parse_invocation(argv)
    assert inv is not None
    assert inv.input_path == "d.csv"
    assert inv.output_format is fmt
    assert inv.echo is echo


def test_flags_are_idempotent_and_order_free():
    a = parse_invocation(["d.csv", "--print", "--json", "--json"])
    b = parse_invocation(["d.csv", "--json", "--print"])
    assert a == b


def test_unknown_arguments_ignored():
    inv = parse_invocation(["d.csv", "--verbose", "-h", "extra.csv"])
    assert inv == InvocationConfig(input_path="d.csv")


def test_debug_and_config_options():
    inv = parse_invocation(["d.csv", "--debug", "--config", "conf.yml"])
    assert inv.debug is True
    assert inv.config_path == "conf.yml"
