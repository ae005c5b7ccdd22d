"""
havenpaper Decorators

Decorators shared by havenpaper commands.
"""

from sys import exit
from functools import wraps

from havenpaper.errors import HavenpaperError
from havenpaper.cli_utils.console import fail


def describe_error(error: BaseException) -> str:
    """
    Format error followed by every exception it was raised from, e.g.

        Could not reach the collection API: ... (caused by ConnectionError: ...)
    """

    msg = str(error)
    cause = error.__cause__

    while cause is not None:
        msg += f" (caused by {type(cause).__name__}: {cause})"
        cause = cause.__cause__

    return msg


def catch_errors(func):
    """
    Catch and format havenpaper errors with the "fail" console template and gracefully
    exit the application with an error code.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HavenpaperError as error:
            fail(describe_error(error))
            exit(1)

    return wrapper
