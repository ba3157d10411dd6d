"""Domain models for the csvpick CLI.

This package contains the small value types passed between the reader,
filter, serializer and output stages.
"""

from .filter import Filter
from .invocation import InvocationConfig, OutputFormat
from .run_result import RunResult
from .table import Record, TableData

__all__ = [
    # CLI state
    "InvocationConfig",
    "OutputFormat",
    # Data
    "Record",
    "TableData",
    "Filter",
    # Results
    "RunResult",
]
