"""Tests for the run report."""

import pytest

from pb_notes_anki.errors import OutputWriteError
from pb_notes_anki.report import RunStats, print_summary, render_report, write_report


@pytest.fixture
def report_text():
    return render_report(
        book_name="Moby Dick",
        deck_id=1700000000000000001,
        model_id=1607392319,
        source="/books/Moby Dick.html",
        min_count=2,
        deck_path="/books/Moby Dick.apkg",
        stats=RunStats(bookmarks_read=10, bookmarks_skipped=1, unique_words=6, cards_exported=3),
    )


class TestRenderReport:
    def test_contains_identity_and_threshold(self, report_text):
        assert "Book: Moby Dick" in report_text
        assert "Deck id: 1700000000000000001" in report_text
        assert "Model id: 1607392319" in report_text
        assert "Source: /books/Moby Dick.html" in report_text
        assert "Minimum count: 2" in report_text

    def test_contains_counts(self, report_text):
        assert "Bookmarks read: 10" in report_text
        assert "Bookmarks skipped (no text or note): 1" in report_text
        assert "Unique words: 6" in report_text
        assert "Cards exported: 3" in report_text

    def test_reuse_hint(self, report_text):
        assert "--deck-id 1700000000000000001 --model-id 1607392319" in report_text

    def test_stats_optional(self):
        text = render_report("b", 1, 2, "b.html", 1)
        assert "Cards exported: 0" in text


class TestWriteReport:
    def test_writes_and_returns_content(self, tmp_path, report_text):
        path = tmp_path / "Moby Dick_report.txt"
        assert write_report(path, report_text) == report_text
        assert path.read_text(encoding="utf-8") == report_text

    def test_unwritable_target_raises(self, tmp_path, report_text):
        with pytest.raises(OutputWriteError):
            write_report(tmp_path / "missing" / "x_report.txt", report_text)


class TestPrintSummary:
    def test_prints_counts(self, capsys):
        print_summary("book", 2, RunStats(bookmarks_read=4, bookmarks_skipped=1, unique_words=2, cards_exported=1))
        out = capsys.readouterr().out
        assert "Bookmarks Summary (book):" in out
        assert "Unique words:      2" in out
        assert "Cards (count>=2): 1" in out
