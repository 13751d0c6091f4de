"""CLI entrypoint: convert an e-reader bookmarks export into an Anki deck.

Usage:
  pb-notes-anki book.html --min-count 2
  python -m pb_notes_anki.cli book.html --deck-id 1700000000000000000
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .aggregate import aggregate, filter_by_min_count
from .config import load_config
from .deck import DeckIdentity, build_deck, write_deck
from .errors import PbNotesError
from .ingest import load_bookmarks
from .report import RunStats, print_summary, render_report, write_report
from .resolve import ResolvedArgs, resolve_arguments

LOGGER = logging.getLogger(__name__)


def convert(resolved: ResolvedArgs, cfg: dict, dry_run: bool = False) -> RunStats:
    """Run parse -> aggregate -> filter -> serialize -> report for one file."""
    extraction = load_bookmarks(
        resolved.file_path,
        encoding=cfg["encoding"],
        selectors=cfg["selectors"],
        nfc=cfg["nfc"],
    )
    entries = aggregate(extraction.pairs)
    kept = filter_by_min_count(entries, resolved.min_count)
    stats = RunStats(
        bookmarks_read=extraction.total,
        bookmarks_skipped=extraction.skipped,
        unique_words=len(entries),
        cards_exported=len(kept),
    )
    LOGGER.info(
        "%s: %s bookmarks, %s unique words, %s with count >= %s",
        resolved.book_name,
        stats.bookmarks_read,
        stats.unique_words,
        stats.cards_exported,
        resolved.min_count,
    )

    if dry_run:
        print_summary(resolved.book_name, resolved.min_count, stats)
        for entry in kept:
            print(f"  {entry.occurrence_count:>3}  {entry.word}")
        return stats

    identity = DeckIdentity(
        deck_id=resolved.deck_id,
        model_id=resolved.model_id,
        book_name=resolved.book_name,
    )
    write_deck(build_deck(kept, identity), resolved.deck_path)
    report = render_report(
        book_name=resolved.book_name,
        deck_id=resolved.deck_id,
        model_id=resolved.model_id,
        source=resolved.file_path,
        min_count=resolved.min_count,
        deck_path=resolved.deck_path,
        stats=stats,
    )
    write_report(resolved.report_path, report)
    return stats


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pb-notes-anki",
        description="Create an Anki deck from e-reader bookmark translation notes",
    )
    p.add_argument("file", help="Path to the exported bookmarks HTML file")
    p.add_argument("-d", "--deck-id", type=int, default=None, help="Deck id (default: time based)")
    p.add_argument(
        "-m",
        "--model-id",
        type=int,
        default=None,
        help="Model (note type) id (default: from config, shared across decks)",
    )
    p.add_argument(
        "-c",
        "--min-count",
        type=int,
        default=None,
        help="Export only words bookmarked at least this many times (default: 1)",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to config.json (optional; defaults will be used if missing)",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the words that would be exported without writing any file",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(message)s")

    try:
        cfg = load_config(args.config)
        resolved = resolve_arguments(
            args.file,
            deck_id=args.deck_id,
            model_id=args.model_id if args.model_id is not None else cfg["model_id"],
            min_count=args.min_count if args.min_count is not None else cfg["min_count"],
        )
        convert(resolved, cfg, dry_run=args.dry_run)
    except PbNotesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.dry_run:
        print(f"Anki deck was created with deck_id={resolved.deck_id}, model_id={resolved.model_id}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
