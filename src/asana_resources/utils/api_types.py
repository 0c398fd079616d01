"""Defines types for the Asana API, for better readability of the code."""

from __future__ import annotations

from typing import Any, Protocol

Gid = str
"""A globally unique identifier of an Asana object."""

ProjectGid = Gid
"""The gid of a project."""

SectionGid = Gid
"""The gid of a section."""

TaskGid = Gid
"""The gid of a task."""

WorkspaceGid = Gid
"""The gid of a workspace or organization."""

Record = dict[str, Any]
"""The JSON representation of one object, as returned in the ``data`` field of a response."""

RequestOptions = dict[str, Any]
"""The options bag that is forwarded to the transport, e.g. ``{"fields": ["name"], "expand": ["project"]}``."""


class Transport(Protocol):
    """The four calls the resources need from an HTTP client.

    Each call returns the decoded JSON body of the response (an empty dict for an empty body)
    and raises an :py:class:`~asana_resources.errors.meta.AsanaAPIError` for non-success responses.
    :py:class:`asana_resources.clients.api_client.APIClient` is the implementation used by the context.
    """

    def get(self, path: str, params: dict | None = None, options: RequestOptions | None = None) -> dict: ...

    def post(self, path: str, body: dict | None = None, options: RequestOptions | None = None) -> dict: ...

    def put(self, path: str, body: dict | None = None, options: RequestOptions | None = None) -> dict: ...

    def delete(self, path: str, options: RequestOptions | None = None) -> dict: ...
