"""Tests for !! and !N history references."""

import pytest

from mysh.errors import HistorySubstitutionError, UserInputError
from mysh.substitution import substitute


@pytest.fixture
def filled(store):
    for line in ("ls -l", "pwd", "echo hi"):
        store.record(line)
    return store


class TestSubstitute:
    def test_plain_line_untouched(self, filled):
        assert substitute("ls", filled) is None

    def test_bang_inside_line_untouched(self, filled):
        assert substitute("echo hi!", filled) is None

    def test_repeat_last(self, filled):
        assert substitute("!!", filled) == "echo hi"

    def test_repeat_last_empty_history(self, store):
        with pytest.raises(HistorySubstitutionError, match="No previous command"):
            substitute("!!", store)

    def test_numbered(self, filled):
        assert substitute("!1", filled) == "ls -l"
        assert substitute("!2", filled) == "pwd"

    def test_leading_zeros(self, filled):
        assert substitute("!002", filled) == "pwd"

    def test_missing_number(self, filled):
        with pytest.raises(HistorySubstitutionError, match="No command #9"):
            substitute("!9", filled)

    def test_evicted_number(self, store):
        for n in range(1, 23):
            store.record(f"cmd {n}")
        with pytest.raises(HistorySubstitutionError, match="No command #1"):
            substitute("!1", store)
        assert substitute("!3", store) == "cmd 3"

    @pytest.mark.parametrize("line", ["!", "!abc", "!0", "!-1", "!1a", "!!x", "! 1", "!²"])
    def test_invalid(self, filled, line):
        with pytest.raises(HistorySubstitutionError, match="Invalid history substitution"):
            substitute(line, filled)

    def test_history_not_modified(self, filled):
        with pytest.raises(UserInputError):
            substitute("!42", filled)
        assert [e.sequence for e in filled.entries()] == [1, 2, 3]
        assert filled.next_sequence == 4

    def test_fetched_line_not_resubstituted(self, store):
        store.record("ls")
        store.record("!1")
        assert substitute("!2", store) == "!1"

    def test_overlong_number_reports_missing(self, filled):
        with pytest.raises(HistorySubstitutionError, match="No command #999"):
            substitute("!" + "9" * 5000, filled)
