"""Project resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from asana_resources.resources import resource
from asana_resources.resources.section import Section
from asana_resources.utils.params import check_required

if TYPE_CHECKING:
    import sys

    from asana_resources.resources.collection import Collection
    from asana_resources.utils import api_types

    if sys.version_info < (3, 11):
        from typing_extensions import Self
    else:
        from typing import Self


class Project(resource.Resource):
    """A project is a prioritized list of tasks, divided into sections."""

    plural_name: ClassVar[str] = "projects"
    type_name: ClassVar[str] = "project"

    name: str
    archived: bool
    workspace: dict

    @classmethod
    def create_in_workspace(
        cls,
        client: api_types.Transport,
        workspace: api_types.WorkspaceGid | None = None,
        name: str | None = None,
        options: api_types.RequestOptions | None = None,
        **data,
    ) -> Self:
        """Creates a project in a workspace.

        Args:
            client: the transport
            workspace: the workspace or organization to create the project in
            name: the name of the project
            options: the request options
            **data: further fields of the new project, e.g. ``team`` in organizations
        """
        check_required(workspace=workspace, name=name)
        return cls._create(client, f"/workspaces/{workspace}/projects", {**data, "name": name}, options=options)

    @classmethod
    def find_by_workspace(
        cls,
        client: api_types.Transport,
        workspace: api_types.WorkspaceGid | None = None,
        archived: bool | None = None,
        per_page: int = resource.DEFAULT_PAGE_SIZE,
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Self]:
        """Returns the compact project records in a workspace.

        Args:
            client: the transport
            workspace: the workspace or organization
            archived: only return projects whose ``archived`` field takes this value
            per_page: the number of records to fetch per page
            options: the request options
        """
        check_required(workspace=workspace)
        return cls._find_all(
            client,
            f"/workspaces/{workspace}/projects",
            {"archived": archived, "limit": per_page},
            options=options,
        )

    def sections(
        self,
        per_page: int = resource.DEFAULT_PAGE_SIZE,
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Section]:
        """Returns the sections of this project, see :py:meth:`Section.find_by_project`."""
        return Section.find_by_project(self._client, project=self.gid, per_page=per_page, options=options)


resource.RESOURCE_TYPE_REGISTRY[Project.type_name] = Project
