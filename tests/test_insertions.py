import io

import pytest
from unidiff import UnidiffParseError

from diff_review import insertions
from diff_review.diff_parser import DiffParser
from diff_review.insertions import iter_insertions_report


class TestInsertionsReport:

    def test_single_hunk_example(self):
        diff = (
            "--- a/app.js\n"
            "+++ b/app.js\n"
            "@@ -1,2 +1,2 @@\n"
            "+foo\n"
            "-bar\n"
            " baz\n"
        )

        lines = list(iter_insertions_report(DiffParser.parse_diff(diff)))

        assert lines == ["+++++++++++ app.js ++++++++++++", "foo", "", ""]

    def test_insertions_joined_across_hunks(self, sample_diff):
        files = DiffParser.parse_diff(sample_diff)

        lines = list(iter_insertions_report(files))

        assert lines == [
            "+++++++++++ src/app.py ++++++++++++", "foo", "", "",
            "+++++++++++ lib/util.py ++++++++++++", "two\nTEN", "", "",
            "+++++++++++ /dev/null ++++++++++++", "", "",
        ]

    def test_no_insertions_prints_only_header_and_separators(self, deletions_only_diff):
        lines = list(iter_insertions_report(DiffParser.parse_diff(deletions_only_diff)))

        assert lines == ["+++++++++++ notes.md ++++++++++++", "", ""]

    def test_report_is_lazy(self, sample_diff):
        report = iter_insertions_report(DiffParser.parse_diff(sample_diff))

        assert next(report) == "+++++++++++ src/app.py ++++++++++++"


class TestInsertionsMain:

    def test_prints_report_from_stdin(self, monkeypatch, capsys, sample_diff):
        monkeypatch.setattr("sys.stdin", io.StringIO(sample_diff))

        insertions.main()

        out = capsys.readouterr().out
        assert out.startswith("+++++++++++ src/app.py ++++++++++++\nfoo\n\n\n")
        assert "+++++++++++ lib/util.py ++++++++++++\ntwo\nTEN\n\n\n" in out

    def test_malformed_diff_is_not_caught(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("--- a/x\n+++ b/x\n@@ -1,3 +1,3 @@\n x\n"))

        with pytest.raises(UnidiffParseError):
            insertions.main()
