"""pb-notes-anki: turn e-reader bookmark notes into an Anki deck.

Pipeline: ingest (HTML) -> aggregate (dedupe + count) -> filter (min count)
-> deck (genanki) -> report.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "errors",
    "resolve",
    "normalize",
    "ingest",
    "aggregate",
    "deck",
    "report",
    "cli",
]
