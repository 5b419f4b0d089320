"""Fatal conversion errors raised before any entry is processed"""


class ConversionError(Exception):
    """Base exception for doc2quarto run failures."""
    pass


class InputNotFound(ConversionError):
    """Source path does not exist or is not a directory."""
    pass


class DestinationUnwritable(ConversionError):
    """Destination root cannot be created."""
    pass
