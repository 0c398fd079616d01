"""Contains the AsanaContext class, a state object for the API client and the resources."""

from __future__ import annotations

import logging
from functools import cached_property
from typing import TYPE_CHECKING

import requests

from asana_resources.__about__ import __version__
from asana_resources.clients import api_client, context_client
from asana_resources.config.config import Config, get_config_dict, parse_credentials_config, parse_general_config
from asana_resources.resources.project import Project
from asana_resources.resources.resource import DEFAULT_PAGE_SIZE
from asana_resources.resources.section import Section
from asana_resources.resources.task import Task

if TYPE_CHECKING:
    from asana_resources.config.config_types import Host, Token
    from asana_resources.config.token_provider import TokenProvider
    from asana_resources.resources.collection import Collection
    from asana_resources.utils import api_types


class AsanaContext:
    """AsanaContext holds config and token provider for the API client.

    .. code-block:: python

        ctx = AsanaContext(token_provider=PersonalAccessTokenProvider("0/123"))
        section = Section.create_in_project(ctx.api, project="999", name="Todo")

    """

    config: Config
    token_provider: TokenProvider
    client: requests.Session

    def __init__(
        self,
        config: Config | None = None,
        token_provider: TokenProvider | None = None,
        profile: str | None = None,
    ) -> None:
        if config is None or token_provider is None:
            config_dict = get_config_dict(profile)
            self.config = config or parse_general_config(config_dict)
            self.token_provider = token_provider or parse_credentials_config(config_dict)
        else:
            self.token_provider = token_provider
            self.config = config

        if not self.config.requests_session:
            self.client = context_client.ContextHTTPClient(
                debug=self.config.debug, requests_ca_bundle=self.config.requests_ca_bundle
            )
        else:
            self.client = self.config.requests_session

        self.client.auth = lambda r: self.token_provider.requests_auth_handler(r)
        self.client.headers["User-Agent"] = requests.utils.default_user_agent(
            f"asana-resources/{__version__}/python-requests"
        )

        if self.config.debug:
            logging.getLogger("asana_resources").setLevel(logging.DEBUG)

        if self.config.rich_traceback:
            from rich.traceback import install

            install()

    @property
    def host(self) -> Host:
        """Returns the host from the token provider."""
        return self.token_provider.host

    @property
    def token(self) -> Token:
        """Returns the token from the token provider."""
        return self.token_provider.token

    @cached_property
    def api(self) -> api_client.APIClient:
        """Returns :py:class:`asana_resources.clients.api_client.APIClient`, the transport for the resources."""
        return api_client.APIClient(self)

    def get_section(self, gid: api_types.SectionGid, /, *, options: api_types.RequestOptions | None = None) -> Section:
        """Returns the section with the gid, see :py:meth:`Section.find_by_id`."""
        return Section.find_by_id(self.api, gid, options=options)

    def get_project(self, gid: api_types.ProjectGid, /, *, options: api_types.RequestOptions | None = None) -> Project:
        """Returns the project with the gid, see :py:meth:`Project.find_by_id`."""
        return Project.find_by_id(self.api, gid, options=options)

    def get_task(self, gid: api_types.TaskGid, /, *, options: api_types.RequestOptions | None = None) -> Task:
        """Returns the task with the gid, see :py:meth:`Task.find_by_id`."""
        return Task.find_by_id(self.api, gid, options=options)

    def get_sections_of_project(
        self,
        project: api_types.ProjectGid,
        /,
        *,
        per_page: int = DEFAULT_PAGE_SIZE,
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Section]:
        """Returns the sections of a project, see :py:meth:`Section.find_by_project`."""
        return Section.find_by_project(self.api, project=project, per_page=per_page, options=options)

    def __repr__(self) -> str:
        return (
            "<"
            + self.__class__.__name__
            + "(config="
            + self.config.__str__()
            + ", token_provider="
            + self.token_provider.__str__()
            + ")>"
        )
