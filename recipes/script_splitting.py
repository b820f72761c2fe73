"""Script Splitting Recipebook — interactive examples for turning SQL scripts into statements with sqlsplit."""

from __future__ import annotations

from typing import TYPE_CHECKING

import marimo

if TYPE_CHECKING:
    import types
    from collections.abc import Callable

__generated_with = "0.19.11"
app = marimo.App()


@app.cell
def _(mo: types.ModuleType):
    mo.md("""
    # Script Splitting Recipebook

    Interactive recipes demonstrating how **sqlsplit** breaks multi-statement
    SQL scripts into individual statements.

    Each recipe is self-contained: it defines a SQL input, runs `split`, and
    displays the results.

    **How to use this notebook:**

    - `marimo run recipes/script_splitting.py` — read-only app mode
    - `marimo edit recipes/script_splitting.py` — interactive editing mode
    """)
    return


@app.cell
def _():
    import sqlite3

    import marimo as mo

    from sqlsplit import split

    return mo, split, sqlite3


@app.cell
def _(
    mo: types.ModuleType,
    split: Callable[[str], list[str]],
):
    # --- Recipe: Split a migration file ---
    _migration = """
    CREATE TABLE departments (id serial PRIMARY KEY, name text NOT NULL);
    CREATE INDEX idx_departments_name ON departments (name);
    ALTER TABLE departments ADD COLUMN budget numeric DEFAULT 0;
    INSERT INTO departments (name, budget) VALUES ('R&D; Labs', 100), ('Sales', 50);
    """

    _statements = split(_migration)

    _rows: list[str] = []
    for _i, _stmt_sql in enumerate(_statements):
        _preview = _stmt_sql[:60]
        if len(_stmt_sql) > 60:
            _preview += "..."
        _rows.append(f"| {_i + 1} | `{_preview}` |")

    _table_rows = "\n".join(_rows)
    mo.md(
        f"""
        ## Recipe 1: Split a Migration File

        `split` divides a multi-statement migration into individual statements.
        The semicolon inside `'R&D; Labs'` belongs to a string literal, so it
        does not end the `INSERT`.

        **{len(_statements)} statements found:**

        | # | SQL Preview |
        |---|-------------|
        {_table_rows}
        """
    )
    return


@app.cell
def _(
    mo: types.ModuleType,
    split: Callable[[str], list[str]],
):
    # --- Recipe: Comments are dropped, hints are kept ---
    _sql = """
    -- nightly report; run after the ETL job
    SELECT /*+ INDEX(o idx_orders_created) */ o.id, o.total
    FROM orders o /* archived rows are excluded; see below */
    WHERE o.status <> 'archived';
    # MySQL-style comment
    // and a C++-style one
    SELECT `order count` FROM stats
    """

    _statements = split(_sql)
    _blocks = "\n\n".join(f"```sql\n{_stmt}\n```" for _stmt in _statements)

    mo.md(
        f"""
        ## Recipe 2: Comments Are Dropped, Hints Are Kept

        Line comments (`--`, `#`, `//`) and block comments (`/* ... */`) are
        removed together with the semicolons they contain.  Optimizer hints
        (`/*+ ... */`) are part of the statement and survive verbatim.  The last
        statement has no terminating semicolon and is still returned.

        **{len(_statements)} statements:**

        {_blocks}
        """
    )
    return


@app.cell
def _(
    mo: types.ModuleType,
    split: Callable[[str], list[str]],
    sqlite3: types.ModuleType,
):
    # --- Recipe: Execute a script one statement at a time ---
    _script = """
    CREATE TABLE notes (id INTEGER PRIMARY KEY, body TEXT);
    INSERT INTO notes (body) VALUES ('first; with a semicolon');
    INSERT INTO notes (body) VALUES ('it''s the second');
    /* cleanup happens elsewhere; nothing to drop here */
    SELECT count(*) FROM notes;
    """

    _conn = sqlite3.connect(":memory:")
    _log: list[str] = []
    try:
        for _stmt in split(_script):
            _cursor = _conn.execute(_stmt)
            _first_word = _stmt.split(None, 1)[0].upper()
            if _first_word == "SELECT":
                _log.append(f"| `{_stmt}` | {_cursor.fetchone()[0]} |")
            else:
                _log.append(f"| `{_stmt}` | {_cursor.rowcount} |")
        _bodies = [row[0] for row in _conn.execute("SELECT body FROM notes ORDER BY id")]
    finally:
        _conn.close()

    _log_rows = "\n".join(_log)
    _body_list = "\n".join(f"- `{_b}`" for _b in _bodies)

    mo.md(
        f"""
        ## Recipe 3: Execute a Script One Statement at a Time

        Most DB-API drivers execute a single statement per call.  Splitting the
        script first lets each statement run (and fail) on its own.  The
        doubled quote in `'it''s the second'` is kept verbatim, so the driver
        sees a valid literal.

        | Statement | Result |
        |-----------|--------|
        {_log_rows}

        **Stored bodies:**

        {_body_list}
        """
    )
    return


if __name__ == "__main__":
    app.run()
