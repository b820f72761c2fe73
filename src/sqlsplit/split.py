"""SQL script splitting on top-level semicolons."""

from __future__ import annotations

import logging

from sqlsplit.scanner import Scanner

logger = logging.getLogger(__name__)


def split(script: str | None) -> list[str]:
    """Split a multi-statement SQL script into individual statements.

    Semicolons inside single-quoted, double-quoted and backtick-quoted regions
    are kept as statement text. Line comments (``--``, ``#``, ``//``) and block
    comments (``/* ... */``) are removed together with any semicolons they
    contain, while optimizer hints (``/*+ ... */``) are kept verbatim. Each
    statement is stripped of surrounding whitespace and empty statements are
    dropped.

    Malformed input never raises: an unterminated quote, comment or hint simply
    runs to the end of the script.

    Args:
        script: A SQL script potentially containing multiple statements, or
            ``None``.

    Returns:
        A list of individual SQL statement strings in source order, without
        their terminating semicolons. Empty for ``None`` or ``""``.

    Raises:
        TypeError: If *script* is neither a ``str`` nor ``None``.

    Example:
        >>> split("select * from t1 where a='1;'; select * from t2;")
        ["select * from t1 where a='1;'", 'select * from t2']
    """
    if script is not None and not isinstance(script, str):
        raise TypeError(f"split() expects str or None, got {type(script).__name__}")

    statements = Scanner(script).split()
    logger.debug("Split %d characters into %d statements", len(script or ""), len(statements))
    return statements
