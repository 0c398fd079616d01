"""Unwrapping of response bodies into their ``data`` payload."""

from __future__ import annotations

from typing import Any

from asana_resources.errors.api import MalformedResponseError


def parse(body: Any) -> tuple[Any, dict]:  # noqa: ANN401
    """Splits a response body into its ``data`` payload and everything else.

    Returns:
        tuple: the data and a dict with the remaining keys e.g. ``next_page``

    Raises:
        MalformedResponseError: if the body is not an object with a ``data`` key
    """
    if not isinstance(body, dict) or "data" not in body:
        raise MalformedResponseError(info=f"Unexpected response body: {body!r}")
    return body["data"], {k: v for k, v in body.items() if k != "data"}


def parse_record(body: Any) -> dict:  # noqa: ANN401
    """Returns the single record of a response body."""
    data, _ = parse(body)
    if not isinstance(data, dict):
        raise MalformedResponseError(info=f"Expected a single record, got: {data!r}")
    return data


def parse_page(body: Any) -> tuple[list[dict], str | None]:  # noqa: ANN401
    """Returns the records of a list response body and the offset of the next page, if there is one."""
    data, extra = parse(body)
    if not isinstance(data, list):
        raise MalformedResponseError(info=f"Expected a list of records, got: {data!r}")
    next_page = extra.get("next_page")
    if next_page is None:
        return data, None
    if not isinstance(next_page, dict) or "offset" not in next_page:
        raise MalformedResponseError(info=f"Unexpected next_page: {next_page!r}")
    return data, next_page["offset"]
