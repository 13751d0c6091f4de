"""Exception types raised by the conversion pipeline.

Library code raises these; only the CLI catches them and turns them into an
``Error: ...`` message with a non-zero exit status.
"""

from __future__ import annotations


class PbNotesError(Exception):
    """Base class for every failure of a conversion run."""


class InvalidInputError(PbNotesError, ValueError):
    """Bad invocation parameters: path without a stem, bad ids or counts, bad config."""


class ParseError(PbNotesError):
    """The bookmarks file could not be read or decoded.

    Malformed HTML is not an error; it simply yields no bookmarks.
    """


class ExportError(PbNotesError):
    """The deck serializer rejected a field, model or id."""


class OutputWriteError(PbNotesError, OSError):
    """The deck package or the report could not be written."""
