"""Task resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from asana_resources.resources import resource
from asana_resources.utils.params import check_required

if TYPE_CHECKING:
    import sys

    from asana_resources.resources.collection import Collection
    from asana_resources.utils import api_types

    if sys.version_info < (3, 11):
        from typing_extensions import Self
    else:
        from typing import Self


class Task(resource.Resource):
    """The basic object around which many operations in Asana are centered."""

    plural_name: ClassVar[str] = "tasks"
    type_name: ClassVar[str] = "task"

    name: str
    completed: bool
    memberships: list[dict]

    @classmethod
    def find_by_project(
        cls,
        client: api_types.Transport,
        project: api_types.ProjectGid | None = None,
        per_page: int = resource.DEFAULT_PAGE_SIZE,
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Self]:
        """Returns the compact task records of a project."""
        check_required(project=project)
        return cls._find_all(client, f"/projects/{project}/tasks", {"limit": per_page}, options=options)

    @classmethod
    def find_by_section(
        cls,
        client: api_types.Transport,
        section: api_types.SectionGid | None = None,
        per_page: int = resource.DEFAULT_PAGE_SIZE,
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Self]:
        """Returns the compact task records of a section."""
        check_required(section=section)
        return cls._find_all(client, f"/sections/{section}/tasks", {"limit": per_page}, options=options)


resource.RESOURCE_TYPE_REGISTRY[Task.type_name] = Task
