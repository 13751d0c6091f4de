"""HTML ingest for e-reader bookmark exports.

Expected layout (PocketBook "notes" export)::

    <div class="bookmark">
      <div class="bm-text"><p>word</p></div>
      <div class="bm-note"><p>translation <b>markup</b></p></div>
    </div>

Bookmarks without a text or note element are skipped and counted, never
reported as errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from bs4 import BeautifulSoup

from .config import DEFAULT_SELECTORS
from .errors import ParseError
from .normalize import clean_markup, clean_word

LOGGER = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    pairs: List[Tuple[str, str]] = field(default_factory=list)
    skipped: int = 0

    @property
    def total(self) -> int:
        return len(self.pairs) + self.skipped


def read_bookmarks_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Read the whole export file.

    Raises:
        ParseError: If the file is missing, unreadable or not valid ``encoding``
    """
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ParseError(f"Cannot read bookmarks file {path}: {e}") from e


def extract_bookmarks(
    html: str,
    selectors: Optional[Mapping[str, str]] = None,
    nfc: bool = False,
) -> ExtractionResult:
    """Extract ordered (word, translation_markup) pairs from an export.

    Args:
        html: Raw HTML document text
        selectors: CSS selectors for the ``bookmark``, ``text`` and ``note`` elements
        nfc: Whether to NFC-normalize words before trimming

    Returns:
        ExtractionResult with the pairs in document order and the skip count
    """
    sel = dict(DEFAULT_SELECTORS)
    sel.update(selectors or {})
    result = ExtractionResult()
    if not html or not html.strip():
        return result

    soup = BeautifulSoup(html, "html.parser")
    for index, bookmark in enumerate(soup.select(sel["bookmark"])):
        text_el = bookmark.select_one(sel["text"])
        note_el = bookmark.select_one(sel["note"])
        if text_el is None or note_el is None:
            LOGGER.debug(
                "Skipping bookmark #%s: missing %s element",
                index,
                "text" if text_el is None else "note",
            )
            result.skipped += 1
            continue

        word = clean_word(text_el.get_text(), nfc=nfc)
        if not word:
            LOGGER.debug("Skipping bookmark #%s: blank text", index)
            result.skipped += 1
            continue
        result.pairs.append((word, clean_markup(note_el.decode_contents())))

    LOGGER.debug("Extracted %s bookmarks, skipped %s", len(result.pairs), result.skipped)
    return result


def load_bookmarks(
    path: str | Path,
    encoding: str = "utf-8",
    selectors: Optional[Mapping[str, str]] = None,
    nfc: bool = False,
) -> ExtractionResult:
    return extract_bookmarks(read_bookmarks_file(path, encoding), selectors=selectors, nfc=nfc)
