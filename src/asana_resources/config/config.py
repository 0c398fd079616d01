"""The Config class and the loading of config files, environment variables and profiles."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from asana_resources.config.config_types import DEFAULT_DOMAIN, Host
from asana_resources.config.token_provider import TOKEN_PROVIDER_MAPPING, TokenProvider
from asana_resources.errors.config import (
    AsanaConfigError,
    MissingAsanaHostError,
    MissingCredentialsConfigError,
    TokenProviderConfigError,
)
from asana_resources.utils.config import (
    accepted_kwargs,
    cfg_files,
    get_environment_variable_config,
    merge_dicts,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike
    from pathlib import Path

    import requests

# compatibility for python version < 3.11
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

RESERVED_SECTIONS = ("config", "credentials")
"""Top level tables of a config file that can't be used as profile names."""


def _flag(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        msg = f"The config option config.{name} needs to be true or false, got {value!r}."
        raise AsanaConfigError(msg)
    return value


class Config:
    """The general options of an :py:class:`~asana_resources.config.context.AsanaContext`.

    In a config file these are the keys of the ``[config]`` table.
    """

    def __init__(
        self,
        requests_ca_bundle: PathLike[str] | str | None = None,
        rich_traceback: bool = False,
        debug: bool = False,
        requests_session: requests.Session | None = None,
    ) -> None:
        """Creates the configuration.

        Args:
            requests_ca_bundle: path to a CA bundle, for networks that need custom certificates
            rich_traceback: installs the traceback handler of `rich`, see https://rich.readthedocs.io/en/stable/traceback.html
            debug: enables debug logging of every request and every page fetched by a collection
            requests_session: a session used instead of :py:class:`~asana_resources.clients.context_client.ContextHTTPClient`

        Raises:
            AsanaConfigError: if ``rich_traceback`` or ``debug`` is not a boolean
        """
        self.requests_ca_bundle = os.fspath(requests_ca_bundle) if requests_ca_bundle else None
        self.rich_traceback = _flag("rich_traceback", rich_traceback)
        self.debug = _flag("debug", debug)
        self.requests_session = requests_session

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.__dict__!s})>"


def read_config_files(config_files: Iterable[Path]) -> dict:
    """Parses the TOML files that exist and merges them, values of later files win.

    Raises:
        AsanaConfigError: if a file is not valid TOML
    """
    merged: dict = {}
    for path in config_files:
        if not path.is_file():
            continue
        with path.open("rb") as config_file:
            try:
                content = tomllib.load(config_file)
            except tomllib.TOMLDecodeError as e:
                msg = f"The config file {path} is not valid TOML: {e}"
                raise AsanaConfigError(msg) from e
        merged = merge_dicts(merged, content)
    return merged


def get_config_dict(profile: str | None = None, env: bool = True) -> dict | None:
    """Reads the config files and environment variables and applies the profile.

    A profile overrides the ``config`` and ``credentials`` tables with its own:

    .. code-block:: toml

        [config]
        debug = false

        [credentials]
        token = "0/123"

        [work.config]
        debug = true

        [work.credentials]
        token = "0/456"

    The profile is the argument, or else the top level ``profile`` key (``ASANA_RESOURCES_PROFILE``).

    Args:
        profile: the profile to apply
        env: whether the environment variables are read

    Returns:
        dict | None: a dict with the ``config`` table, if it is not empty, and the ``credentials`` table,
            if a token provider is configured. None if no configuration was found at all.
    """
    raw = read_config_files(cfg_files())
    if env:
        raw = merge_dicts(raw, get_environment_variable_config())
    if not raw:
        return None

    if profile is None:
        profile = raw.get("profile")
    if profile in RESERVED_SECTIONS:
        msg = f"Profile name can't be {profile}"
        raise AsanaConfigError(msg)
    profile_tables = raw.get(profile) if profile else None
    if not isinstance(profile_tables, dict):
        profile_tables = {}

    general = merge_dicts(raw.get("config") or {}, profile_tables.get("config"))
    credentials = merge_dicts(raw.get("credentials") or {}, profile_tables.get("credentials"))

    result = {}
    if general:
        result["config"] = general
    # the last configured token provider is used
    provider = next((key for key in reversed(credentials) if key in TOKEN_PROVIDER_MAPPING), None)
    if provider is not None:
        result["credentials"] = {"domain": credentials.get("domain", DEFAULT_DOMAIN), provider: credentials[provider]}
        if credentials.get("scheme") is not None:
            result["credentials"]["scheme"] = credentials["scheme"]
    return result


def parse_credentials_config(config_dict: dict | None) -> TokenProvider:
    """Creates the token provider configured in the ``credentials`` table of ``config_dict``.

    ``token = "0/123"`` is short for ``token = { token = "0/123" }``.
    """
    credentials = dict((config_dict or {}).get("credentials") or {})
    if not credentials:
        raise MissingCredentialsConfigError
    domain = credentials.pop("domain", DEFAULT_DOMAIN)
    if not domain:
        raise MissingAsanaHostError
    host = Host(domain, credentials.pop("scheme", None))
    if not credentials:
        raise MissingCredentialsConfigError

    provider, options = credentials.popitem()
    provider_class = TOKEN_PROVIDER_MAPPING.get(provider)
    if provider_class is None:
        msg = f"The token provider implementation {provider} does not exist."
        raise TokenProviderConfigError(msg)
    if options is None:
        options = {}
    elif not isinstance(options, dict):
        options = {provider: options}
    return provider_class(**accepted_kwargs(provider_class, "credentials", {"host": host, **options}))


def parse_general_config(config_dict: dict | None = None) -> Config:
    """Creates the :py:class:`Config` from the ``config`` table of ``config_dict``."""
    general = (config_dict or {}).get("config")
    if not general:
        return Config()
    return Config(**accepted_kwargs(Config, "config", general))
