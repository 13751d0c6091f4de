"""Shared builders for test HTML exports and .apkg inspection."""

from __future__ import annotations

import json
import sqlite3
import tempfile
import zipfile
from pathlib import Path
from typing import List, Optional, Tuple


def bookmark_html(word: Optional[str], note: Optional[str]) -> str:
    parts = ['<div class="bookmark">']
    if word is not None:
        parts.append(f'<div class="bm-text"><p>{word}</p></div>')
    if note is not None:
        parts.append(f'<div class="bm-note">{note}</div>')
    parts.append("</div>")
    return "".join(parts)


def export_html(*bookmarks: Tuple[Optional[str], Optional[str]]) -> str:
    body = "\n".join(bookmark_html(w, n) for w, n in bookmarks)
    return f"<html><head><meta charset='utf-8'></head><body>\n{body}\n</body></html>"


def read_apkg(path: str | Path) -> dict:
    """Return notes, deck ids and model ids stored in an .apkg package."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with zipfile.ZipFile(path) as zf:
            zf.extract("collection.anki2", tmpdir)
        conn = sqlite3.connect(str(Path(tmpdir) / "collection.anki2"))
        try:
            notes: List[List[str]] = [
                row[0].split("\x1f") for row in conn.execute("SELECT flds FROM notes")
            ]
            decks_json, models_json = conn.execute("SELECT decks, models FROM col").fetchone()
        finally:
            conn.close()
    return {
        "notes": notes,
        "decks": json.loads(decks_json),
        "models": json.loads(models_json),
    }
