"""Single-pass scanner that splits a SQL script on top-level semicolons.

The scanner walks the script once, left to right. At each position it tries the
rules below in order and applies the first one that matches:

1. ``;`` closes the current statement.
2. A single quote, double quote or backtick opens a quoted region, copied
   verbatim up to the next occurrence of the same delimiter.
3. ``--``, ``#`` or ``//`` opens a line comment, dropped up to the line break.
4. ``/*+`` opens an optimizer hint, copied verbatim up to ``*/``.
5. ``/*`` opens a block comment, dropped up to and including ``*/``.
6. Anything else is copied as-is.

Unterminated regions run to the end of the input; the scanner never raises on
malformed SQL.
"""

from __future__ import annotations

_TERMINATOR = ";"
_QUOTES = ("'", '"', "`")
_LINE_COMMENT_MARKERS = ("--", "#", "//")
_LINE_BREAKS = ("\n", "\r")
_HINT_START = "/*+"
_BLOCK_COMMENT_START = "/*"
_BLOCK_COMMENT_END = "*/"


class Scanner:
    """Splits one SQL script into statements.

    The scanner keeps a reference to *script* (no copy) and owns its cursor,
    statement buffer and output list. Each call to :meth:`split` starts from a
    clean state, so calling it twice returns equal, independent lists.

    Args:
        script: The SQL script to split. ``None`` is treated as an empty script.

    Example:
        >>> Scanner("SELECT 1; SELECT ';'").split()
        ['SELECT 1', "SELECT ';'"]
    """

    def __init__(self, script: str | None) -> None:
        self._script = script or ""
        self._length = len(self._script)
        self._pos = 0
        self._buf: list[str] = []
        self._statements: list[str] = []

    def split(self) -> list[str]:
        """Scan the whole script and return its statements in source order.

        Returns:
            The stripped, non-empty statements. Empty when the script is empty
            or holds only whitespace, comments and terminators.
        """
        self._pos = 0
        self._buf.clear()
        self._statements = []

        while self._pos < self._length:
            ch = self._script[self._pos]
            if ch == _TERMINATOR:
                self._emit()
                self._pos += 1
            elif ch in _QUOTES:
                self._copy_quoted(ch)
            elif self._match_any(_LINE_COMMENT_MARKERS):
                self._skip_line_comment()
            elif self._match(_HINT_START):
                self._copy_hint()
            elif self._match(_BLOCK_COMMENT_START):
                self._skip_block_comment()
            else:
                self._buf.append(ch)
                self._pos += 1

        self._emit()
        return self._statements

    # -- Lookahead -------------------------------------------------------------

    def _match(self, token: str) -> bool:
        """Whether *token* starts at the cursor. Never moves the cursor."""
        return self._script.startswith(token, self._pos)

    def _match_any(self, tokens: tuple[str, ...]) -> bool:
        return self._script.startswith(tokens, self._pos)

    # -- Buffer ----------------------------------------------------------------

    def _copy_to(self, end: int) -> None:
        """Copy ``script[pos:end]`` into the buffer and move the cursor to *end*."""
        self._buf.append(self._script[self._pos : end])
        self._pos = end

    def _emit(self) -> None:
        """Close the buffered statement; whitespace-only statements are dropped."""
        if not self._buf:
            return
        sql = "".join(self._buf).strip()
        if sql:
            self._statements.append(sql)
        self._buf.clear()

    # -- Region rules ----------------------------------------------------------

    def _copy_quoted(self, quote: str) -> None:
        # The first later occurrence of the same character closes the region,
        # so a doubled quote ('it''s') reads as close-then-reopen.
        close = self._script.find(quote, self._pos + 1)
        self._copy_to(self._length if close == -1 else close + 1)

    def _skip_line_comment(self) -> None:
        # The line break itself stays in the input for the default rule.
        while self._pos < self._length and self._script[self._pos] not in _LINE_BREAKS:
            self._pos += 1

    def _copy_hint(self) -> None:
        close = self._script.find(_BLOCK_COMMENT_END, self._pos + len(_HINT_START))
        self._copy_to(self._length if close == -1 else close + len(_BLOCK_COMMENT_END))

    def _skip_block_comment(self) -> None:
        close = self._script.find(_BLOCK_COMMENT_END, self._pos + len(_BLOCK_COMMENT_START))
        self._pos = self._length if close == -1 else close + len(_BLOCK_COMMENT_END)
