"""
havenpaper CLI Utilities

Helpers for turning command line input into values the rest of havenpaper understands.
"""

import click

from havenpaper.errors import ArgumentError


def parse_index(value) -> int:
    """
    Parse an item index from the command line. Only plain non-negative integers are accepted.
    Raise ArgumentError otherwise.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        number = value

    else:
        text = str(value).strip()

        # int() would also accept "+3", "1_000" or non-ascii digits
        if not (text.isascii() and text.isdigit()):
            raise ArgumentError(f"'{value}' is not a valid index, expected a non-negative integer.")

        number = int(text)

    if number < 0:
        raise ArgumentError(f"'{value}' is not a valid index, expected a non-negative integer.")

    return number


class IndexParamType(click.ParamType):
    """click parameter type for the INDEX argument, backed by parse_index."""

    name = "index"

    def convert(self, value, param, ctx):
        try:
            return parse_index(value)
        except ArgumentError as error:
            self.fail(str(error), param, ctx)


INDEX = IndexParamType()
