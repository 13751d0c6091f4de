"""Plain-text run report and console summary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import OutputWriteError

LOGGER = logging.getLogger(__name__)

REPORT_TEMPLATE = """\
Book: {book_name}
Source: {source}
Deck package: {deck_path}
Deck id: {deck_id}
Model id: {model_id}
Minimum count: {min_count}

Bookmarks read: {bookmarks_read}
Bookmarks skipped (no text or note): {bookmarks_skipped}
Unique words: {unique_words}
Cards exported: {cards_exported}

To add cards from another export to this deck, reuse the same ids:
  pb-notes-anki <file> --deck-id {deck_id} --model-id {model_id}
"""


@dataclass
class RunStats:
    bookmarks_read: int = 0
    bookmarks_skipped: int = 0
    unique_words: int = 0
    cards_exported: int = 0


def render_report(
    book_name: str,
    deck_id: int,
    model_id: int,
    source: str | Path,
    min_count: int,
    deck_path: str | Path = "",
    stats: RunStats | None = None,
) -> str:
    stats = stats or RunStats()
    return REPORT_TEMPLATE.format(
        book_name=book_name,
        source=source,
        deck_path=deck_path,
        deck_id=deck_id,
        model_id=model_id,
        min_count=min_count,
        bookmarks_read=stats.bookmarks_read,
        bookmarks_skipped=stats.bookmarks_skipped,
        unique_words=stats.unique_words,
        cards_exported=stats.cards_exported,
    )


def write_report(path: str | Path, content: str) -> str:
    """Write the report text to ``path`` and return it.

    Raises:
        OutputWriteError: If the target directory is missing or not writable
    """
    path = Path(path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write report {path}: {e}") from e
    LOGGER.info("Wrote report %s", path)
    return content


def print_summary(book_name: str, min_count: int, stats: RunStats) -> None:
    print(f"Bookmarks Summary ({book_name}):")
    print(f"  Bookmarks read:    {stats.bookmarks_read}")
    print(f"  Skipped:           {stats.bookmarks_skipped}")
    print(f"  Unique words:      {stats.unique_words}")
    print(f"  Cards (count>={min_count}): {stats.cards_exported}")
