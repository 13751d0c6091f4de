"""Optional JSON configuration for a conversion run.

Every key is optional; values from the file are merged over ``DEFAULT_CONFIG``
and command-line flags override both.
"""

from __future__ import annotations

import codecs
import copy
import json
from pathlib import Path

import soupsieve

from .errors import InvalidInputError

# Shared by every deck so Anki reuses one note type across books.
DEFAULT_MODEL_ID = 1607392319

DEFAULT_SELECTORS = {
    "bookmark": ".bookmark",
    "text": ".bm-text",
    "note": ".bm-note",
}

DEFAULT_CONFIG = {
    "model_id": DEFAULT_MODEL_ID,
    "min_count": 1,
    "encoding": "utf-8",
    "nfc": False,
    "selectors": DEFAULT_SELECTORS,
}


def default_config() -> dict:
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(path: str | Path | None) -> dict:
    """Load config JSON and merge it over the defaults.

    Args:
        path: Path to a JSON config file, or None for pure defaults

    Returns:
        Config dict with every key of ``DEFAULT_CONFIG`` present

    Raises:
        InvalidInputError: If the file is unreadable, the JSON is invalid, or a key or
            value is unknown or malformed
    """
    cfg = default_config()
    if path is None:
        return cfg
    path = Path(path)
    if not path.exists():
        return cfg

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInputError(f"Config file {path} must contain a JSON object")

    unknown = set(data) - set(DEFAULT_CONFIG)
    if unknown:
        raise InvalidInputError(f"Unknown keys in config file {path}: {sorted(unknown)}")

    selectors = data.pop("selectors", None) or {}
    if not isinstance(selectors, dict):
        raise InvalidInputError(f"'selectors' in config file {path} must be a JSON object")
    unknown_selectors = set(selectors) - set(DEFAULT_SELECTORS)
    if unknown_selectors:
        raise InvalidInputError(
            f"Unknown selectors in config file {path}: {sorted(unknown_selectors)}"
        )
    for name, selector in selectors.items():
        _check_selector(path, name, selector)

    if "encoding" in data:
        _check_encoding(path, data["encoding"])
    if "nfc" in data and not isinstance(data["nfc"], bool):
        raise InvalidInputError(f"'nfc' in config file {path} must be true or false")

    cfg.update(data)
    cfg["selectors"].update(selectors)
    return cfg


def _check_selector(path: Path, name: str, selector) -> None:
    if not isinstance(selector, str) or not selector.strip():
        raise InvalidInputError(
            f"Selector {name!r} in config file {path} must be a non-empty string"
        )
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise InvalidInputError(f"Invalid CSS selector {name!r} in config file {path}: {e}") from e


def _check_encoding(path: Path, encoding) -> None:
    if not isinstance(encoding, str):
        raise InvalidInputError(f"'encoding' in config file {path} must be a string")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidInputError(f"Unknown encoding {encoding!r} in config file {path}") from e
