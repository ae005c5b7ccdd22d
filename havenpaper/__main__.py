"""
__main__.py

This file adds support for running havenpaper as a python module instead of invoking the "havenpaper" command line entrypoint.
"""


from havenpaper.cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
