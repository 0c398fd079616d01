"""Python binding for the Asana REST API, built around live resource objects and lazy collections."""

from asana_resources.__about__ import __version__
from asana_resources.config.config import Config
from asana_resources.config.config_types import Host
from asana_resources.config.context import AsanaContext
from asana_resources.config.token_provider import PersonalAccessTokenProvider, TokenProvider
from asana_resources.errors.meta import AsanaAPIError, AsanaResourcesError
from asana_resources.resources import Collection, Project, Resource, Section, Task

__all__ = [
    "__version__",
    "AsanaAPIError",
    "AsanaContext",
    "AsanaResourcesError",
    "Collection",
    "Config",
    "Host",
    "PersonalAccessTokenProvider",
    "Project",
    "Resource",
    "Section",
    "Task",
    "TokenProvider",
]
