"""Build and write the Anki deck with genanki."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

import genanki

from .aggregate import BookmarkEntry
from .errors import ExportError, OutputWriteError
from .normalize import find_forbidden_chars

LOGGER = logging.getLogger(__name__)

MODEL_NAME = "Pocket Book Notes Model"
TEMPLATE_NAME = "PB Notes card"
FIELD_NAMES = ("Word", "Translation")

FRONT_TEMPLATE = '<div class="wordstyle">{{Word}}</div>'
BACK_TEMPLATE = '{{FrontSide}}<hr id="answer">{{Translation}}'

CARD_CSS = """\
.card {
  font-family: Georgia, "Times New Roman", serif;
  font-size: 20px;
  text-align: center;
  color: #1d1d1d;
  background-color: #fbfaf6;
}

.wordstyle {
  font-size: 32px;
  font-weight: bold;
  margin: 0.5em 0;
}

hr#answer {
  border: none;
  border-top: 1px solid #c8c2b4;
  margin: 1em 0;
}
"""


@dataclass
class DeckIdentity:
    deck_id: int
    model_id: int
    book_name: str

    @property
    def description(self) -> str:
        return f"{self.book_name}. Deck created from Pocket Book translation notes"


def build_model(model_id: int) -> genanki.Model:
    """Card type shared by every deck; ``model_id`` should stay constant across runs."""
    return genanki.Model(
        model_id,
        MODEL_NAME,
        fields=[{"name": name} for name in FIELD_NAMES],
        templates=[
            {
                "name": TEMPLATE_NAME,
                "qfmt": FRONT_TEMPLATE,
                "afmt": BACK_TEMPLATE,
            }
        ],
        css=CARD_CSS,
    )


def _check_field(word: str, name: str, value: str) -> None:
    bad = find_forbidden_chars(value)
    if bad:
        raise ExportError(
            f"Field {name!r} of word {word!r} contains characters Anki cannot store: "
            f"{', '.join(repr(ch) for ch in bad)}"
        )


def build_deck(entries: Iterable[BookmarkEntry], identity: DeckIdentity) -> genanki.Deck:
    """Create one note per entry (front = word, back = translation markup).

    Entries are expected to be filtered already; see ``aggregate.filter_by_min_count``.

    Raises:
        ExportError: If a field holds a character Anki cannot store or genanki rejects a value
    """
    model = build_model(identity.model_id)
    deck = genanki.Deck(identity.deck_id, identity.book_name, description=identity.description)
    for entry in entries:
        fields: List[str] = [entry.word, entry.translation_markup]
        for name, value in zip(FIELD_NAMES, fields):
            _check_field(entry.word, name, value)
        try:
            note = genanki.Note(model=model, fields=fields)
        except (TypeError, ValueError) as e:
            raise ExportError(f"Cannot create card for {entry.word!r}: {e}") from e
        deck.add_note(note)
    LOGGER.debug("Built deck %r with %s notes", identity.book_name, len(deck.notes))
    return deck


def write_deck(deck: genanki.Deck, path: str | Path) -> Path:
    """Serialize ``deck`` to an .apkg package at ``path``.

    Raises:
        ExportError: If genanki or SQLite rejects the deck content
        OutputWriteError: If the package file cannot be written
    """
    path = Path(path)
    try:
        genanki.Package(deck).write_to_file(str(path))
    except OSError as e:
        raise OutputWriteError(f"Cannot write deck package {path}: {e}") from e
    except (TypeError, ValueError, OverflowError, sqlite3.Error) as e:
        raise ExportError(f"Cannot serialize deck {deck.name!r}: {e}") from e
    LOGGER.info("Wrote deck package %s", path)
    return path
