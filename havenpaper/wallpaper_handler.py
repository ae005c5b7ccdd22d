"""
Wallpaper Handler

Download the selected image, store it at the configured location and hand it over to an
external program that sets the desktop background.

The background is set with feh (https://feh.finalrewind.org/), which works for most X11
window managers: 'feh --bg-fill <file>' scales the image to fill the screen and also records
the call in ~/.fehbg so it can be restored at login. The program doing this is wrapped in a
WallpaperSetter so it can be swapped out, e.g. in tests.
"""

import subprocess

import requests

from havenpaper.errors import LocalIOError
from havenpaper.errors import NetworkError
from havenpaper.cli_utils.console import describe
from havenpaper.cli_utils.console import warn


class WallpaperSetter:
    """
    Sets the desktop background to an image file. Subclasses implement apply().
    """

    def apply(self, path) -> None:
        raise NotImplementedError


class FehSetter(WallpaperSetter):
    """Set the background by running 'feh --bg-fill <path>'."""

    def __init__(self, command: str = "feh"):
        self.command = command

    def apply(self, path) -> None:
        """
        Run feh on path. A non-zero exit status from feh is reported but not treated as an
        error. Raise LocalIOError if feh can't be started at all.
        """

        try:
            process = subprocess.run(
                [self.command, "--bg-fill", str(path)],
                capture_output=True,
                text=True,
            )

        except OSError as error:
            raise LocalIOError(f"Could not run '{self.command}': {error}") from error

        if process.returncode != 0:
            warn(
                f"'{self.command}' exited with status {process.returncode}: {process.stderr.strip()}"
            )


def download_image(url: str) -> bytes:
    """
    Download the raw bytes at url. Redirects are followed by requests.

    Raise NetworkError if the request fails or the server responds with an error status.
    """

    # TODO: implement timeout handling from requests module. default behavior is infinite (no timeout)

    try:
        r = requests.get(url)

    except requests.exceptions.RequestException as error:
        raise NetworkError(f"Download error: {error}") from error

    # successful request but received a bad response from the server.
    try:
        r.raise_for_status()
    except requests.exceptions.HTTPError as error:
        raise NetworkError(
            f"Download error: something went wrong trying to access {url} ({error})"
        ) from error

    return r.content


def local_wallpaper_path(config_home: str, file_location: str) -> str:
    """
    Return the file the wallpaper is stored at. This is a plain concatenation, so
    file_location needs its own leading separator, e.g. "/.wallpaper".
    """

    return config_home + file_location


def write_image(data: bytes, destination: str) -> str:
    """Write data to destination, replacing any existing file."""

    try:
        with open(destination, "wb") as file:
            file.write(data)

    except OSError as error:
        raise LocalIOError(f"Could not write wallpaper to {destination}: {error}") from error

    return destination


def apply(
    resolved_path: str,
    local_file_location: str,
    config_home: str,
    setter: WallpaperSetter = None,
) -> str:
    """
    Download the image at resolved_path, save it to config_home + local_file_location and set
    it as the desktop background with setter (feh by default). Returns the saved file.
    """

    if setter is None:
        setter = FehSetter()

    describe(f":earth_asia-emoji: downloading {resolved_path} ...")
    data = download_image(resolved_path)

    destination = write_image(data, local_wallpaper_path(config_home, local_file_location))
    describe(f":floppy_disk-emoji: saved wallpaper to {destination}")

    setter.apply(destination)

    return destination
