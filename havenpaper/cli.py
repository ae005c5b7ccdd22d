"""
havenpaper

Set your desktop background to a picture from a Wallhaven collection.

This module defines the entry point to the havenpaper CLI. A run goes through the same steps
every time: load wallhaven.json, pick an item of the collection (at random, or the one at
INDEX), download it, set it as the background and save the selection back to wallhaven.json.

Nothing is rolled back when a step fails. If saving the config fails, the wallpaper has
already been replaced.
"""

import os
import random
from pathlib import Path

import click

from havenpaper import config as config_store
from havenpaper import selector
from havenpaper import wallpaper_handler
from havenpaper.collection_handler import CollectionClient
from havenpaper.config import HavenpaperConfig

from havenpaper.cli_utils.console import describe
from havenpaper.cli_utils.console import set_quiet
from havenpaper.cli_utils.console import confirm_success
from havenpaper.cli_utils.decorators import catch_errors
from havenpaper.cli_utils.utils import INDEX


def run(
    index: int = None,
    config_path=None,
    environ=os.environ,
    setter=None,
    rng=random,
) -> HavenpaperConfig:
    """
    Run the whole pipeline and return the updated configuration.

    index selects an item of the collection, None picks one at random with rng. config_path
    defaults to wallhaven.json in the config home found in environ. setter is the
    WallpaperSetter used for the background (feh by default).
    """

    config_home = config_store.resolve_config_home(environ)

    if config_path is None:
        config_path = config_store.config_file_path(config_home)

    config = config_store.load(config_path)
    describe(
        f":open_file_folder-emoji: loaded {config_path} "
        f"(collection {config.username}/{config.collection_id})"
    )

    client = CollectionClient.from_config(config)

    if index is None:
        selection = selector.resolve_random(client, rng=rng)
    else:
        selection = selector.resolve_index(client, index)

    config.current_selection = selection.index
    config.filepath = selection.path

    wallpaper_handler.apply(
        config.filepath, config.file_location, config_home, setter=setter
    )

    config_store.save(config, config_path)
    confirm_success(
        f":white_check_mark-emoji: wallpaper updated to item {config.current_selection} ({config.filepath})"
    )

    return config


@click.command(name="havenpaper")
@click.argument("index", type=INDEX, required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Use this config file instead of $XDG_CONFIG_HOME/wallhaven.json.",
)
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    default=True,
    help="Print progress to stdout.",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence all output printed to stdout. Errors are still printed.",
)
@click.version_option(package_name="havenpaper")
@catch_errors
def cli(index, config_path, verbosity):
    """
    Set the desktop background to a picture from a Wallhaven collection.

    The collection is read from wallhaven.json in $XDG_CONFIG_HOME (or ~/.config).
    Without INDEX a random picture is chosen, with INDEX the picture at that position.

    Examples:

        $ havenpaper

        $ havenpaper 12
    """

    set_quiet(verbosity == "quiet")
    run(index=index, config_path=config_path)


if __name__ == "__main__":
    cli()
