import pytest

from sqlsplit import Scanner, split


class TestScanner:
    def test_split_matches_function(self, migration_script: str):
        assert Scanner(migration_script).split() == split(migration_script)

    def test_none_script(self):
        assert Scanner(None).split() == []

    def test_repeated_split_returns_equal_independent_lists(self):
        scanner = Scanner("select 1; select 2")
        first = scanner.split()
        second = scanner.split()
        assert first == second == ["select 1", "select 2"]
        assert first is not second

    def test_scanner_does_not_copy_script(self):
        script = "select 1; select 2"
        scanner = Scanner(script)
        assert scanner._script is script  # pyright: ignore[reportPrivateUsage]

    def test_cursor_at_end_after_split(self):
        scanner = Scanner("select 'unterminated; select 2")
        scanner.split()
        assert scanner._pos == len("select 'unterminated; select 2")  # pyright: ignore[reportPrivateUsage]

    def test_buffer_cleared_after_split(self):
        scanner = Scanner("select 1")
        scanner.split()
        assert scanner._buf == []  # pyright: ignore[reportPrivateUsage]


class TestScannerPriority:
    """The first matching rule wins at each position."""

    def test_hint_checked_before_block_comment(self):
        assert Scanner("/*+ keep */ /* drop */").split() == ["/*+ keep */"]

    def test_hint_marker_needs_plus_right_after_star(self):
        assert Scanner("/* + not a hint */ select 1").split() == ["select 1"]

    def test_terminator_checked_before_anything_else(self):
        assert Scanner(";--x\n;").split() == []

    def test_quote_opening_wins_over_comment_marker(self):
        assert Scanner("'--';").split() == ["'--'"]

    def test_line_comment_wins_over_block_comment(self):
        assert Scanner("//* not a block\nselect 1").split() == ["select 1"]

    def test_hint_end_only_searched_after_opening(self):
        assert Scanner("/*+*/ select 1").split() == ["/*+*/ select 1"]

    def test_block_comment_end_only_searched_after_opening(self):
        assert Scanner("/*/ still comment */ select 1").split() == ["select 1"]


class TestScannerProperties:
    @pytest.mark.parametrize(
        "script",
        [
            "select 1; select 2; select 3",
            "create table t (a int);\ninsert into t values (1);\n\nselect a from t",
            "  update t set a = 2 where b = 3 ;  ; delete from t  ",
        ],
    )
    def test_resplitting_joined_statements_is_stable(self, script: str):
        statements = split(script)
        assert split(";".join(statements)) == statements

    @pytest.mark.parametrize(
        "script",
        [
            "a;b;;c",
            " x = 1 ; y = 2 ",
            "select 1\nfrom t\n;\n",
        ],
    )
    def test_plain_text_matches_naive_split(self, script: str):
        expected = [part.strip() for part in script.split(";") if part.strip()]
        assert split(script) == expected
