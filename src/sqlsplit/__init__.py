"""Split SQL scripts into statements on top-level semicolons."""

from sqlsplit.scanner import Scanner
from sqlsplit.split import split

__all__ = [
    "Scanner",
    "split",
]
