"""The asana-resources token providers."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from asana_resources.config.config_types import Host

if TYPE_CHECKING:
    import requests

    from asana_resources.config.config_types import Token


class TokenProvider:
    """Parent class for all TokenProviders.

    TokenProvider implementations always need to have these properties:
        host: the Asana host, set by this base class
        token: the token from the token provider, needs to be implemented
    """

    def __init__(self, host: Host | str | None = None):
        """The TokenProvider base class.

        Args:
            host: the Asana host, defaults to app.asana.com
        """
        if host is None:
            host = Host()
        elif isinstance(host, str):
            host = Host(host)
        self.host = host

    @property
    def token(self):
        """Returns the token from the provider."""
        msg = "This is only the base TokenProvider class and does not implement getting a token."
        raise NotImplementedError(msg)

    def requests_auth_handler(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        """Sets bearer authentication header on PreparedRequest object.

        Does not overwrite authorization header if present.
        """
        r.headers.setdefault("authorization", f"Bearer {self.token}")
        return r

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(host={self.host!r})>"


class PersonalAccessTokenProvider(TokenProvider):
    """Provides the host and a personal access token (or any other static bearer token)."""

    def __init__(self, token: Token, host: Host | str | None = None) -> None:
        """Initialize the PersonalAccessTokenProvider.

        Args:
            token: the personal access token
            host: the Asana host
        """
        super().__init__(host)
        self._token = token

    @cached_property
    def token(self) -> Token:
        """Returns the token supplied when creating this Provider."""
        return self._token


TOKEN_PROVIDER_MAPPING: dict[str, type[TokenProvider]] = {
    "token": PersonalAccessTokenProvider,
}
"""Maps the name used in the credentials config to the token provider implementation."""
