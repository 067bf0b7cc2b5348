"""Error kinds raised by the loader, enrichers and writer.

The CLI turns any of these into a message on stderr and exit status 1.
"""


class CoherRestError(Exception):
    """Base class for every error the enrichment pipeline reports."""


class MissingFileError(CoherRestError):
    """The input path does not reference an existing file."""


class ParseError(CoherRestError):
    """The input could not be read or is not valid for its encoding."""


class FormatError(CoherRestError):
    """A part of the document is present but is not shaped as a mapping."""


class WriteError(CoherRestError):
    """The enriched document could not be written."""
