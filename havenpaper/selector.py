"""
Selector

Pick one wallpaper out of a collection, either by its position in the collection or at random.

Page 0 is always requested first to learn the page size and the number of items. The item is
then read from page 1 + index // per_page at offset index % per_page. Note that the first
request is never reused for data, so index 0 is looked up on page 1 rather than on page 0.
Existing wallhaven.json files store indexes counted this way, so the arithmetic is kept as is.
"""

import random
from dataclasses import dataclass

from havenpaper.errors import OutOfBoundsError
from havenpaper.collection_handler import PageMeta
from havenpaper.cli_utils.console import describe


@dataclass
class Selection:
    """The position of the chosen item in the collection and the url of its image."""

    index: int
    path: str


def page_and_offset(index: int, per_page: int) -> tuple[int, int]:
    """
    Return the page to request for index and the offset of the item within that page.
    """

    return 1 + index // per_page, index % per_page


def _select(client, index: int, meta: PageMeta) -> Selection:
    if index >= meta.total:
        raise OutOfBoundsError(
            f"Index {index} is out of range, the collection has {meta.total} item(s)."
        )

    page, offset = page_and_offset(index, meta.per_page)
    describe(f":mag-emoji: fetching page {page} for item {index} ...")
    items = client.fetch_page(page).items

    if offset >= len(items):
        raise OutOfBoundsError(
            f"Index {index} is out of range, page {page} has only {len(items)} item(s)."
        )

    return Selection(index=index, path=items[offset].path)


def resolve_index(client, index: int) -> Selection:
    """
    Resolve the item at position index of the collection behind client.

    Raise OutOfBoundsError if index is not smaller than the collection's total, or if the
    page that should hold it comes back with fewer items than expected.
    """

    first = client.get_first()
    return _select(client, index, first.meta)


def resolve_random(client, rng=random) -> Selection:
    """
    Resolve a uniformly random item of the collection. rng is anything with a randrange
    method, the random module by default.
    """

    first = client.get_first()

    if first.meta.total == 0:
        raise OutOfBoundsError("The collection is empty, there is nothing to pick from.")

    index = rng.randrange(first.meta.total)
    describe(f":game_die-emoji: picked item {index} of {first.meta.total}")

    return _select(client, index, first.meta)
