from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests_mock

from asana_resources.config.config import Config
from asana_resources.config.config_types import Host, Token
from asana_resources.config.context import AsanaContext
from asana_resources.config.token_provider import PersonalAccessTokenProvider
from asana_resources.utils.clients import build_api_url

"""The domain for unit tests."""
TEST_DOMAIN = "asana-resources.test"
"""The url scheme, useful for :py:class:`requests_mock.Adapter`"""
TEST_SCHEME = "http+mock"
"""The default host for all tests."""
TEST_HOST = Host(TEST_DOMAIN, TEST_SCHEME)
"""Default token if no token was provided."""
DEFAULT_TOKEN = "default_mock_token"  # noqa: S105


def api_url(api_path: str) -> str:
    """The full URL of ``api_path`` on the test host."""
    return build_api_url(TEST_HOST.url, api_path)


class MockTokenProvider(PersonalAccessTokenProvider):
    """The mock token provider, sets the host to :py:attr:`TEST_HOST`."""

    def __init__(self, token: Token = DEFAULT_TOKEN):
        super().__init__(token, host=TEST_HOST)


class AsanaMockContext(AsanaContext):
    """The asana mock context uses a mock token provider and mounts a requests mock adapter."""

    mock_adapter: requests_mock.Adapter

    def __init__(
        self,
        config: Config | None = None,
        token_provider: MockTokenProvider | None = None,
        mock_adapter: requests_mock.Adapter | None = None,
    ):
        super().__init__(
            config=config or Config(),
            token_provider=token_provider or MockTokenProvider(),
        )
        self.mock_adapter = mock_adapter or requests_mock.Adapter()
        self.client.mount("http+mock://", self.mock_adapter)


@dataclass
class TransportCall:
    method: str
    path: str
    params: dict | None = None
    body: dict | None = None
    options: dict | None = None


class RecordingTransport:
    """Transport stub that records every call and answers with the queued response bodies.

    An exception in the queue is raised instead of returned.
    When the queue is empty, ``{}`` is returned.
    """

    def __init__(self, *responses: dict | Exception) -> None:
        self.responses: list[dict | Exception] = list(responses)
        self.calls: list[TransportCall] = []

    def _respond(self, call: TransportCall) -> Any:  # noqa: ANN401
        self.calls.append(call)
        if not self.responses:
            return {}
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, path: str, params: dict | None = None, options: dict | None = None) -> dict:
        return self._respond(TransportCall("GET", path, params=params, options=options))

    def post(self, path: str, body: dict | None = None, options: dict | None = None) -> dict:
        return self._respond(TransportCall("POST", path, body=body, options=options))

    def put(self, path: str, body: dict | None = None, options: dict | None = None) -> dict:
        return self._respond(TransportCall("PUT", path, body=body, options=options))

    def delete(self, path: str, options: dict | None = None) -> dict:
        return self._respond(TransportCall("DELETE", path, options=options))
