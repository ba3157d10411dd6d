"""csvpick: load a CSV file, filter rows by one column, write CSV or JSON output."""

__version__ = "0.1.0"
