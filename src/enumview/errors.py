class EnumerationError(Exception):
    """Base class for misuse of an enumeration."""


class OutOfRangeError(EnumerationError, IndexError):
    """A cursor was advanced or dereferenced past the last element."""


class ReadOnlyElementError(EnumerationError, TypeError):
    """An element obtained from a read-only enumeration was written to."""
