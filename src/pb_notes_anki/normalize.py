"""Text clean-up shared by extraction and deck building.

Policy:
- Words are compared exactly after trimming surrounding whitespace.
- NFC is applied only when the config asks for it.
- Translation markup is kept verbatim apart from trimming.
"""

from __future__ import annotations

import unicodedata as ud
from typing import List

# Anki joins note fields with \x1f in the collection database.
FIELD_SEPARATOR = "\x1f"
_FORBIDDEN_FIELD_CHARS = (FIELD_SEPARATOR, "\x00")


def normalize_text_nfc(text: str) -> str:
    """Apply Unicode NFC to input text (safe for None-like inputs)."""
    if text is None:
        return ""
    return ud.normalize("NFC", str(text))


def clean_word(text: str, nfc: bool = False) -> str:
    """Trim a bookmarked word; optionally NFC-normalize it first."""
    if not text:
        return ""
    if nfc:
        text = normalize_text_nfc(text)
    return text.strip()


def clean_markup(markup: str) -> str:
    if not markup:
        return ""
    return markup.strip()


def find_forbidden_chars(value: str) -> List[str]:
    """Return the characters in ``value`` that cannot be stored in an Anki field."""
    return [ch for ch in _FORBIDDEN_FIELD_CHARS if ch in (value or "")]
