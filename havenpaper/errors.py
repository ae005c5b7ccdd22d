"""
havenpaper errors

Every failure that havenpaper expects to run into is raised as a subclass of
HavenpaperError. Each subclass marks one kind of failure so the command line
can report it, and the underlying exception (from requests, json, the os, etc.)
is chained with 'raise ... from error' so it is available as __cause__.
"""


class HavenpaperError(Exception):
    """Base class for all havenpaper errors."""

    pass


class LocalIOError(HavenpaperError):
    """Raise when reading or writing a local file, or launching a command, fails."""

    pass


class NetworkError(HavenpaperError):
    """Raise when an HTTP request fails or the server answers with an error status."""

    pass


class ParseError(HavenpaperError):
    """Raise when a config file or an API response does not have the expected shape."""

    pass


class ArgumentError(HavenpaperError):
    """Raise when a command line argument cannot be interpreted."""

    pass


class OutOfBoundsError(HavenpaperError):
    """Raise when a requested index is outside of the items in a collection."""

    pass
