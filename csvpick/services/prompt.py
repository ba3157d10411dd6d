from __future__ import annotations

from typing import TextIO

from ..errors import InvalidFilterSyntax
from ..models.filter import Filter

"""Interactive filter prompt.

Only the first whitespace-delimited token of the entered line is used, so a
filter value cannot contain spaces.
"""

PROMPT_TEMPLATE = "Enter column=value to filter or press Enter to see the first {limit} entries:"


def read_filter_token(stdin: TextIO) -> str:
    """Read one line and return its first whitespace-delimited token.

    End of input and blank lines both yield ``""``.
    """
    line = stdin.readline()
    parts = line.split()
    return parts[0] if parts else ""


def prompt_for_filter(stdin: TextIO, *, head_limit: int = 10) -> str:
    print("\n")
    print(PROMPT_TEMPLATE.format(limit=head_limit))
    token = read_filter_token(stdin)
    print("\n")
    return token


def parse_filter(token: str) -> Filter | None:
    """Parse ``column=value`` (split at the first ``=``).

    Returns None for an empty token.

    Raises:
        InvalidFilterSyntax: the token has no ``=``
    """
    if token == "":
        return None
    column, sep, value = token.partition("=")
    if not sep:
        raise InvalidFilterSyntax()
    return Filter(column=column, value=value)
