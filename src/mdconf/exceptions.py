"""Custom exceptions for mdconf."""


class MDConfError(Exception):
    """Base exception for mdconf operations."""


class NotFoundError(MDConfError, LookupError):
    """A requested key, section, or intermediate path segment does not exist."""


class EmptyKeyError(MDConfError, ValueError):
    """A key-oriented path operation was given an empty path."""


class EmptySubjectError(MDConfError, ValueError):
    """A mutation was attempted against an absent section."""


class ReadError(MDConfError):
    """Reading the underlying stream failed before end of input."""
