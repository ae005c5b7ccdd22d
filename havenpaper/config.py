"""
havenpaper Configuration Management

This file handles loading and saving the havenpaper configuration file. The file is
"wallhaven.json" and lives in the user's config home, which is $XDG_CONFIG_HOME or
~/.config as per modern Linux app development conventions. It looks like:

    {
        "file_location": "/.wallpaper",
        "username": "",
        "api_key": "",
        "collection_id": "",
        "current_selection": 0,
        "filepath": "https://....."
    }

Collections are addressed by username/collection_id. A private collection also needs
the owner's api_key, a public collection works with an empty one. current_selection
and filepath are written back after every run and record the last wallpaper picked.

Raise a LocalIOError when the file can't be read or written and a ParseError when its
content is not a valid configuration.
"""

import json
import os
from collections.abc import Mapping
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
from pathlib import Path

from havenpaper.errors import LocalIOError
from havenpaper.errors import ParseError
from havenpaper.cli_utils.console import warn

CONFIG_FILE_NAME = "wallhaven.json"

# used when neither XDG_CONFIG_HOME nor HOME is available in the environment
FALLBACK_CONFIG_HOME = str(Path("~/.config").expanduser())


@dataclass
class HavenpaperConfig:
    """
    Dataclass to represent the contents of wallhaven.json.

    The pattern applied is to instantiate a HavenpaperConfig by supplying variadic keyword arguments
    from a deserialized json object, so the rest of havenpaper references attributes instead of
    brittle dictionary keys. The json object is fully flat.
    """

    file_location: str
    username: str
    api_key: str
    collection_id: str
    current_selection: int
    filepath: str

    def __post_init__(self):
        """
        Check the field types, since json happily hands back whatever the file contains.
        """

        for field in fields(self):
            value = getattr(self, field.name)

            if field.type is int:
                # bool is a subclass of int, but true/false is never a valid selection
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ParseError(
                        f"'{field.name}' must be a non-negative integer, got {value!r}"
                    )

            elif not isinstance(value, str):
                raise ParseError(f"'{field.name}' must be a string, got {value!r}")


def resolve_config_home(environ: Mapping = os.environ) -> str:
    """
    Find the directory holding wallhaven.json. Prefer XDG_CONFIG_HOME, then HOME/.config,
    then FALLBACK_CONFIG_HOME. Empty variables count as unset.

    environ is any mapping of environment variables so callers (and tests) can supply
    their own environment instead of the process one.
    """

    config_home = environ.get("XDG_CONFIG_HOME")
    if config_home:
        return config_home

    home = environ.get("HOME")
    if home:
        return home + "/.config"

    return FALLBACK_CONFIG_HOME


def config_file_path(config_home: str) -> Path:
    """Return the location of wallhaven.json inside config_home."""

    return Path(config_home) / CONFIG_FILE_NAME


def load(path) -> HavenpaperConfig:
    """
    Load wallhaven.json from path and instantiate it as a HavenpaperConfig.

    Keys that are not part of the configuration are ignored with a warning, missing keys
    are an error.
    """

    path = Path(path)

    try:
        with path.open("r") as file:
            from_json = json.loads(file.read())

    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise ParseError(f"There was an issue reading the config {path}: {error}") from error

    except OSError as error:
        raise LocalIOError(f"There was an issue opening the config: {error}") from error

    if not isinstance(from_json, dict):
        raise ParseError(f"The config {path} must contain a JSON object.")

    known = {field.name for field in fields(HavenpaperConfig)}

    missing = sorted(known - set(from_json))
    if missing:
        raise ParseError(
            f"The config {path} is missing required field(s): {', '.join(missing)}"
        )

    extra = sorted(set(from_json) - known)
    if extra:
        warn(f"ignoring unknown field(s) in {path}: {', '.join(extra)}")

    return HavenpaperConfig(**{key: from_json[key] for key in known})


def save(config: HavenpaperConfig, path) -> Path:
    """
    Write the HavenpaperConfig to path, serializing to JSON. Any existing file is overwritten.
    Returns the path of the written file.
    """

    try:
        to_json = json.dumps(asdict(config), sort_keys=True, indent=4)

    except TypeError as error:
        raise ParseError(
            f"There was an error trying to serialize config data to JSON: {error}"
        ) from error

    path = Path(path)

    try:
        with path.open("w") as file:
            file.write(to_json)

    except OSError as error:
        raise LocalIOError(
            f"There was an error saving the configuration file: {error}."
        ) from error

    return path
