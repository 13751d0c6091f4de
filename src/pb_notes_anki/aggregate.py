"""Merge repeated bookmarks into one entry per word."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

LOGGER = logging.getLogger(__name__)


@dataclass
class BookmarkEntry:
    """One word with its canonical translation and how often it was bookmarked.

    Attributes:
        word: Trimmed bookmarked text, the aggregation key
        translation_markup: Note HTML of the first occurrence
        occurrence_count: Number of bookmarks sharing ``word``
    """
    word: str
    translation_markup: str
    occurrence_count: int = 1


def aggregate(pairs: Iterable[Tuple[str, str]]) -> Dict[str, BookmarkEntry]:
    """Group pairs by exact word; the first translation wins, later ones only count."""
    entries: Dict[str, BookmarkEntry] = {}
    for word, markup in pairs:
        entry = entries.get(word)
        if entry is None:
            entries[word] = BookmarkEntry(word=word, translation_markup=markup)
        else:
            entry.occurrence_count += 1
    LOGGER.debug("Aggregated into %s unique words", len(entries))
    return entries


def filter_by_min_count(entries: Dict[str, BookmarkEntry], min_count: int) -> List[BookmarkEntry]:
    """Keep the entries bookmarked at least ``min_count`` times.

    Result is ordered by descending count, ties in first-seen order.
    """
    kept = [e for e in entries.values() if e.occurrence_count >= min_count]
    # sorted() is stable, so ties keep insertion order.
    return sorted(kept, key=lambda e: -e.occurrence_count)
