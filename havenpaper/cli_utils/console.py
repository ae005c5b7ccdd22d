"""
havenpaper console utilities

This module provides application-wide access to a Rich Console object for
handling writing to stdout and stderr. Progress messages go to stdout and can be
silenced with --quiet, warnings and failures always go to stderr.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

havenpaper_theme = Theme(
    {"warning": "orange_red1", "fail": "bold red", "confirm": "", "describe": ""}
)

console = Console(theme=havenpaper_theme)
error_console = Console(theme=havenpaper_theme, stderr=True)


"""
Formatting helpers
"""


def set_quiet(quiet: bool = True):
    """
    Silence (or restore) everything printed to stdout. Errors and warnings are unaffected.
    """

    console.quiet = quiet


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(
        f":exclamation_mark-emoji: [bold]warning: [/] {escape(msg)}", style="warning"
    )


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stdout.
    """

    console.print(f"{msg}", style="describe", **kwargs)


def confirm_success(msg: str, **kwargs):
    """
    Format confirmation msg and print to stdout. Accept any additional kwargs that console.print from
    rich module exposes.
    """

    console.print(f"{msg}", style="confirm", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr.
    """

    error_console.print(f":x-emoji: failed. {escape(msg)}", style="fail")
