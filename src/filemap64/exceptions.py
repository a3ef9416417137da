# src/filemap64/exceptions.py


class FileMap64Error(Exception):
    """Base class for errors that abort the whole run."""


class CollectionError(FileMap64Error):
    """The directory walk could not be started."""


class SerializationError(FileMap64Error):
    """The file map could not be serialized."""


class OutputError(FileMap64Error):
    """The encoded result could not be written."""


class CompressionError(Exception):
    """Compressing a single item failed. The item is skipped, the run continues."""
