from __future__ import annotations

from textwrap import dedent

import pytest

from sqlsplit import split

# -- Script fixtures -------------------------------------------------------------


@pytest.fixture
def migration_script() -> str:
    return dedent(
        """\
        -- 0042_departments.sql
        CREATE TABLE departments (id serial PRIMARY KEY, name text NOT NULL);
        /* seed data; kept small on purpose */
        INSERT INTO departments (name) VALUES ('R&D; Labs'), ("Sales");
        # MySQL-style comment; ignored
        SELECT /*+ INDEX(departments idx_name) */ `name` FROM departments;
        // trailing statement has no terminator
        DELETE FROM departments WHERE name = 'tmp'
        """
    )


# -- Assertion helpers -----------------------------------------------------------


def assert_split(script: str | None, expected: list[str]) -> None:
    """Assert that *script* splits into exactly *expected* and that every statement is stripped and non-empty."""
    result = split(script)
    assert result == expected
    for stmt in result:
        assert stmt
        assert stmt == stmt.strip()
