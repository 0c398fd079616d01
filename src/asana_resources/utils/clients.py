"""Util functions for the API clients."""

from __future__ import annotations

from functools import cache

API_VERSION = "1.0"


@cache
def build_api_url(url: str, api_path: str, version: str = API_VERSION) -> str:
    """Cached function for building the api URLs.

    ``api_path`` is the resource path, with or without a leading slash, e.g. ``/sections/123``.
    """
    return url + "/api/" + version + "/" + api_path.lstrip("/")
