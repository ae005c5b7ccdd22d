"""
Wallhaven Collection API

This module is a thin wrapper around the collections endpoint of the Wallhaven API
(https://wallhaven.cc/help/api). Only GET requests are made. A collection listing is
paginated and every page carries the same 'meta' block:

    {
        "data": [{"path": "https://w.wallhaven.cc/full/..../wallhaven-xxxx.jpg", ...}, ...],
        "meta": {"current_page": 1, "last_page": 3, "per_page": 24, "total": 60}
    }

Only meta.per_page, meta.total and data[].path are used, everything else is ignored.
Public collections can be read with an empty api key.
"""

from dataclasses import dataclass

import requests

from havenpaper.errors import NetworkError
from havenpaper.errors import ParseError

API_BASE_URL = "https://wallhaven.cc/api/v1"


@dataclass
class PageMeta:
    """Pagination info shared by every page of a collection."""

    per_page: int
    total: int


@dataclass
class CollectionItem:
    """A single wallpaper in a collection. path is a direct link to the image."""

    path: str


@dataclass
class CollectionPage:
    meta: PageMeta
    items: list[CollectionItem]

    @classmethod
    def from_json(cls, body) -> "CollectionPage":
        """
        Build a CollectionPage from a decoded response body. Raise ParseError if the body
        does not have the shape of a collection listing.
        """

        try:
            meta = body["meta"]
            per_page = _count(meta["per_page"], "per_page")
            total = _count(meta["total"], "total")
            items = [CollectionItem(path=entry["path"]) for entry in body["data"]]

        except (KeyError, TypeError) as error:
            raise ParseError(
                f"Unexpected response from the collection API, missing or invalid {error}"
            ) from error

        if per_page < 1:
            raise ParseError(f"Collection API reported an invalid page size: {per_page}")

        for item in items:
            if not isinstance(item.path, str):
                raise ParseError(f"Collection API returned an invalid path: {item.path!r}")

        return cls(meta=PageMeta(per_page=per_page, total=total), items=items)


def _count(value, name: str) -> int:
    """Convert a pagination count to a non-negative int. Numeric strings are accepted."""

    if isinstance(value, bool):
        raise ParseError(f"'{name}' must be an integer, got {value!r}")

    if isinstance(value, str) and value.isdigit():
        value = int(value)

    if not isinstance(value, int) or value < 0:
        raise ParseError(f"'{name}' must be a non-negative integer, got {value!r}")

    return value


def collection_url(username: str, collection_id: str) -> str:
    return f"{API_BASE_URL}/collections/{username}/{collection_id}/"


def fetch_page(
    username: str, collection_id: str, api_key: str, page_number: int
) -> CollectionPage:
    """
    Request one page of the collection username/collection_id and parse it.

    Raise NetworkError if the request fails or the server answers with an error status, and
    ParseError if the body is not a collection listing.
    """

    url = collection_url(username, collection_id)

    try:
        # query is always sent as ?apikey=...&page=..., even for an empty key
        r = requests.get(url, params={"apikey": api_key, "page": page_number})

    except requests.exceptions.RequestException as error:
        raise NetworkError(f"Could not reach the collection API: {error}") from error

    try:
        r.raise_for_status()
    except requests.exceptions.HTTPError as error:
        raise NetworkError(
            f"Collection API error for {username}/{collection_id} page {page_number}: {error}"
        ) from error

    try:
        body = r.json()
    except ValueError as error:
        raise ParseError(f"Collection API did not return JSON: {error}") from error

    return CollectionPage.from_json(body)


class CollectionClient:
    """
    Bind a collection (username/collection_id) and api key so pages can be requested by number.
    """

    def __init__(self, username: str, collection_id: str, api_key: str = ""):
        self.username = username
        self.collection_id = collection_id
        self.api_key = api_key

    @classmethod
    def from_config(cls, config) -> "CollectionClient":
        return cls(
            username=config.username,
            collection_id=config.collection_id,
            api_key=config.api_key,
        )

    def fetch_page(self, page_number: int) -> CollectionPage:
        return fetch_page(self.username, self.collection_id, self.api_key, page_number)

    def get_first(self) -> CollectionPage:
        """Fetch page 0, which is used for its pagination info."""

        return self.fetch_page(0)
