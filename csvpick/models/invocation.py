from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Invocation model: parsed command line state for one csvpick run."""

__all__ = [
    "OutputFormat",
    "InvocationConfig",
]


class OutputFormat(Enum):
    """Output encoding selected on the command line (--json => STRUCTURED)."""
    TABULAR = "csv"
    STRUCTURED = "json"

    @property
    def extension(self) -> str:
        return self.value


@dataclass(frozen=True)
class InvocationConfig:
    """Immutable CLI state built once at startup.

    ``input_path`` is the first positional argument and is never empty.
    ``config_path`` / ``debug`` are operator switches that do not change the
    output contract.
    """
    input_path: str
    output_format: OutputFormat = OutputFormat.TABULAR
    echo: bool = False  # --print
    debug: bool = False
    config_path: str | None = None
