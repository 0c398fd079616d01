"""API client, the transport used by all resources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

import requests

from asana_resources.errors.api import MalformedResponseError
from asana_resources.errors.handling import ErrorHandlingConfig, raise_asana_api_error
from asana_resources.utils.clients import build_api_url

if TYPE_CHECKING:
    from requests import Response

    from asana_resources.config.context import AsanaContext
    from asana_resources.utils.api_types import RequestOptions


def split_options(options: RequestOptions | None) -> tuple[dict[str, str], dict[str, str]]:
    """Translates the options bag into query parameters and headers.

    ``headers`` is sent as HTTP headers, every other key ``k`` becomes the ``opt_k`` query parameter.
    Lists are joined with commas and booleans are sent as ``true``/``false``.

    Returns:
        tuple[dict, dict]: the query parameters and the headers
    """
    params: dict[str, str] = {}
    headers: dict[str, str] = {}
    for k, v in (options or {}).items():
        if k == "headers":
            headers.update(v or {})
        elif v is not None:
            params[f"opt_{k}"] = _option_value(v)
    return params, headers


def _option_value(value: Any) -> str:  # noqa: ANN401
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(v) for v in value)
    return str(value)


class APIClient:
    """The Asana REST API client.

    Implements the :py:class:`~asana_resources.utils.api_types.Transport` protocol on top of the
    context's :py:class:`requests.Session`: request bodies are wrapped in ``{"data": ...}``,
    the options bag is translated with :py:func:`split_options` and the decoded JSON body is returned.
    """

    def __init__(self, context: AsanaContext) -> None:
        self.context = context

    def api_url(self, api_path: str) -> str:
        """Returns the API URL for the specified path."""
        return build_api_url(self.context.token_provider.host.url, api_path)

    def api_request(
        self,
        method: str,
        api_path: str,
        params: dict | None = None,
        json: Any | None = None,  # noqa: ANN401
        headers: dict | None = None,
        timeout: Any | None = None,  # noqa: ANN401
        error_handling: ErrorHandlingConfig | Literal[False] | None = None,
    ) -> Response:
        """Make an authenticated request to the Asana API.

        The `api_path` argument is only the resource path and not the full URL.
        For https://app.asana.com/api/1.0/sections/123 this would be only "/sections/123".

        Args:
            method: see :py:meth:`requests.Session.request`
            api_path: **only** the resource path
            params: see :py:meth:`requests.Session.request`
            json: see :py:meth:`requests.Session.request`
            headers: see :py:meth:`requests.Session.request`, content-type defaults to application/json if not set
            timeout: see :py:meth:`asana_resources.clients.context_client.ContextHTTPClient.request`
            error_handling: error handling config; if set to False, errors won't be automatically handled
        """
        if headers:
            headers["content-type"] = headers.get("content-type") or headers.get("Content-Type") or "application/json"
        else:
            headers = {"content-type": "application/json"}

        response = self.context.client.request(
            method=method,
            url=self.api_url(api_path),
            params=params,
            json=json,
            headers=headers,
            timeout=timeout,
        )
        raise_asana_api_error(response, error_handling)
        return response

    def _request_json(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        body: dict | None = None,
        options: RequestOptions | None = None,
        send_body: bool = False,
    ) -> dict:
        option_params, headers = split_options(options)
        response = self.api_request(
            method,
            path,
            params={**(params or {}), **option_params} or None,
            json={"data": body or {}} if send_body else None,
            headers=headers or None,
        )
        if not response.content:
            return {}
        try:
            body_json = response.json()
        except requests.exceptions.JSONDecodeError as e:
            raise MalformedResponseError(response=response, info="The response body is not valid JSON.") from e
        if not isinstance(body_json, dict):
            raise MalformedResponseError(response=response, info="The response body is not a JSON object.")
        return body_json

    def get(self, path: str, params: dict | None = None, options: RequestOptions | None = None) -> dict:
        """GET request, ``params`` and the options are sent as query parameters."""
        return self._request_json("GET", path, params=params, options=options)

    def post(self, path: str, body: dict | None = None, options: RequestOptions | None = None) -> dict:
        """POST request, ``body`` is sent as ``{"data": body}``."""
        return self._request_json("POST", path, body=body, options=options, send_body=True)

    def put(self, path: str, body: dict | None = None, options: RequestOptions | None = None) -> dict:
        """PUT request, ``body`` is sent as ``{"data": body}``."""
        return self._request_json("PUT", path, body=body, options=options, send_body=True)

    def delete(self, path: str, options: RequestOptions | None = None) -> dict:
        """DELETE request."""
        return self._request_json("DELETE", path, options=options)
