"""Resolve invocation parameters into the paths and ids of one run."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import DEFAULT_MODEL_ID
from .errors import InvalidInputError

# Anki stores deck and model ids as signed 64-bit SQLite integers.
MAX_ANKI_ID = 2**63 - 1

DECK_SUFFIX = ".apkg"
REPORT_SUFFIX = "_report.txt"


class TimestampIdFactory:
    """Produce ids from wall-clock nanoseconds, never repeating within a process.

    A reading that is not greater than the last issued id is bumped to
    ``last + 1``.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        value = int(self._clock())
        if value <= self._last:
            value = self._last + 1
        self._last = value
        return value


time_based_id = TimestampIdFactory()


@dataclass
class ResolvedArgs:
    file_path: Path
    book_name: str
    deck_id: int
    model_id: int
    min_count: int

    @property
    def deck_path(self) -> Path:
        return self.file_path.with_suffix(DECK_SUFFIX)

    @property
    def report_path(self) -> Path:
        return report_path_for(self.file_path, self.book_name)


def book_name_for(path: str | Path) -> str:
    """Return the file stem used as the book and deck name.

    Raises:
        InvalidInputError: If the path has no usable stem
    """
    stem = Path(path).stem
    if not stem or stem in (".", ".."):
        raise InvalidInputError(f"Path has no valid file name: {str(path)!r}")
    return stem


def report_path_for(path: str | Path, book_name: str) -> Path:
    return Path(path).parent / f"{book_name}{REPORT_SUFFIX}"


def _check_id(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if not 0 < value <= MAX_ANKI_ID:
        raise InvalidInputError(f"{name} must be between 1 and {MAX_ANKI_ID}, got {value}")
    return value


def resolve_arguments(
    file: str | Path,
    deck_id: Optional[int] = None,
    model_id: Optional[int] = None,
    min_count: int = 1,
    id_factory: Callable[[], int] = time_based_id,
) -> ResolvedArgs:
    """Derive the absolute path, book name, ids and threshold of a run.

    ``deck_id`` falls back to ``id_factory()`` and ``model_id`` to the shared
    ``DEFAULT_MODEL_ID``.

    Raises:
        InvalidInputError: On a path without stem, a bad id or ``min_count < 1``
    """
    if file is None or str(file) == "":
        raise InvalidInputError("A bookmarks file path is required")
    book_name = book_name_for(file)
    file_path = Path(file).expanduser().resolve()

    if isinstance(min_count, bool) or not isinstance(min_count, int) or min_count < 1:
        raise InvalidInputError(f"min_count must be an integer >= 1, got {min_count!r}")

    deck_id = _check_id("deck_id", deck_id if deck_id is not None else id_factory())
    model_id = _check_id("model_id", model_id if model_id is not None else DEFAULT_MODEL_ID)

    return ResolvedArgs(
        file_path=file_path,
        book_name=book_name,
        deck_id=deck_id,
        model_id=model_id,
        min_count=min_count,
    )
