"""
conftest.py

Test configuration for havenpaper tests.

Defines Pytest fixtures for supplying test data to tests across the entire
test suite. Fixtures used within only a single module are defined
directly in that module. Conftest.py should only be used for universal
fixtures.

*** Network calls ***
No test talks to wallhaven.cc. Tests that go through the collection or download
code patch requests.get and use the 'make_response' and 'collection_api' fixtures
below to describe what the server answers.
"""

import json
import unittest.mock

import pytest
import requests

from havenpaper.config import HavenpaperConfig
from havenpaper.wallpaper_handler import WallpaperSetter


class RecordingSetter(WallpaperSetter):
    """WallpaperSetter that remembers the files it was asked to apply instead of running feh."""

    def __init__(self):
        self.applied = []

    def apply(self, path) -> None:
        self.applied.append(path)


@pytest.fixture
def sample_config() -> HavenpaperConfig:
    return HavenpaperConfig(
        file_location="/.wallpaper",
        username="u",
        api_key="",
        collection_id="c",
        current_selection=0,
        filepath="",
    )


@pytest.fixture
def config_home(tmp_path) -> str:
    """A config home directory that only lives for the duration of the test."""

    return str(tmp_path)


@pytest.fixture
def config_file(config_home, sample_config):
    """Write sample_config as wallhaven.json into config_home and return its path."""

    path = f"{config_home}/wallhaven.json"
    with open(path, "w") as file:
        json.dump(
            {
                "file_location": sample_config.file_location,
                "username": sample_config.username,
                "api_key": sample_config.api_key,
                "collection_id": sample_config.collection_id,
                "current_selection": sample_config.current_selection,
                "filepath": sample_config.filepath,
            },
            file,
        )

    return path


@pytest.fixture
def setter() -> RecordingSetter:
    return RecordingSetter()


@pytest.fixture
def make_response():
    """
    Return a factory for mocked requests.Response objects. Pass json_body for API responses or
    content for raw bytes. Status codes of 400 and above make raise_for_status() raise HTTPError,
    and leaving out json_body makes json() fail like it does for a non-JSON body.
    """

    def factory(json_body=None, content: bytes = b"", status_code: int = 200):
        response = unittest.mock.create_autospec(requests.Response, instance=True)
        response.status_code = status_code
        response.content = content

        if json_body is None:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = json_body

        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Client Error"
            )

        return response

    return factory


@pytest.fixture
def collection_api(make_response):
    """
    Return a factory for a requests.get side effect that plays the Wallhaven API. pages maps a
    page number to the response body for that page, images maps an image url to its bytes.
    Requests for anything else answer with 404.
    """

    def factory(pages: dict, images: dict = None):
        images = images or {}

        def get(url, params=None, **kwargs):
            if params is not None and params.get("page") in pages:
                return make_response(json_body=pages[params["page"]])

            if params is None and url in images:
                return make_response(content=images[url])

            return make_response(status_code=404)

        return get

    return factory


def collection_body(per_page: int, total: int, paths: list) -> dict:
    """Build a response body shaped like the collection listing of the Wallhaven API."""

    return {
        "data": [{"id": str(i), "path": path} for i, path in enumerate(paths)],
        "meta": {"current_page": 1, "last_page": 1, "per_page": per_page, "total": total},
    }


@pytest.fixture
def make_body():
    return collection_body
