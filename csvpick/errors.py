from __future__ import annotations

"""User-facing error taxonomy.

Every error carries exactly one human readable line (``str(err)``). The CLI
prints that line to stdout and terminates the run with exit status 0.
"""

__all__ = [
    "CsvPickError",
    "ConfigError",
    "InputNotReadable",
    "InputMalformed",
    "EmptyInput",
    "InvalidFilterSyntax",
    "UnknownColumn",
    "NoMatches",
    "OutputDirUnavailable",
    "OutputWriteFailed",
    "SerializationFailed",
]


class CsvPickError(Exception):
    """Base class. ``kind`` is a stable UPPER_SNAKE label used in debug logs."""

    kind = "CSVPICK_ERROR"


class ConfigError(CsvPickError):
    kind = "CONFIG_ERROR"

    def __init__(self, cause: object) -> None:
        super().__init__(f"Error loading config: {cause}")


class InputNotReadable(CsvPickError):
    kind = "INPUT_NOT_READABLE"

    def __init__(self, cause: object) -> None:
        super().__init__(f"Error opening file: {cause}")


class InputMalformed(CsvPickError):
    kind = "INPUT_MALFORMED"

    def __init__(self, cause: object) -> None:
        super().__init__(f"Error reading CSV: {cause}")


class EmptyInput(CsvPickError):
    kind = "EMPTY_INPUT"

    def __init__(self) -> None:
        super().__init__("No records found in the CSV file.")


class InvalidFilterSyntax(CsvPickError):
    kind = "INVALID_FILTER_SYNTAX"

    def __init__(self) -> None:
        super().__init__("\nInvalid filter format. Use <column>=<value>.")


class UnknownColumn(CsvPickError):
    kind = "UNKNOWN_COLUMN"

    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(f"\n Column name '{column}' not found.")


class NoMatches(CsvPickError):
    kind = "NO_MATCHES"

    def __init__(self) -> None:
        super().__init__("No matching records found.")


class OutputDirUnavailable(CsvPickError):
    kind = "OUTPUT_DIR_UNAVAILABLE"

    def __init__(self, cause: object) -> None:
        super().__init__(f"\n Error creating output directory: {cause}")


class OutputWriteFailed(CsvPickError):
    kind = "OUTPUT_WRITE_FAILED"

    def __init__(self, cause: object) -> None:
        super().__init__(f"Error writing to output file: {cause}")


class SerializationFailed(CsvPickError):
    kind = "SERIALIZATION_FAILED"

    def __init__(self, cause: object) -> None:
        super().__init__(f"Error creating output data: {cause}")
