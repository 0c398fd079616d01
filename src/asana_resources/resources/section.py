"""Section resource."""

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


class Section(resource.Resource):
    """A section is a subdivision of a project that groups tasks together.

    It can either be a header above a list of tasks in a list view or a column in a board view of a project.
    """

    plural_name: ClassVar[str] = "sections"
    type_name: ClassVar[str] = "section"

    name: str
    project: dict
    created_at: str

    @classmethod
    def create_in_project(
        cls,
        client: api_types.Transport,
        project: api_types.ProjectGid | None = None,
        name: str | None = None,
        options: api_types.RequestOptions | None = None,
        **data,
    ) -> Self:
        """Creates a new section in a project.

        Args:
            client: the transport
            project: the project to create the section in
            name: the text to be displayed as the section name, this cannot be an empty string
            options: the request options
            **data: further fields of the new section

        Returns:
            Section: the full record of the newly created section
        """
        check_required(project=project, name=name)
        return cls._create(client, f"/projects/{project}/sections", {**data, "name": name}, options=options)

    @classmethod
    def find_by_project(
        cls,
        client: api_types.Transport,
        project: api_types.ProjectGid | None = None,
        per_page: int = resource.DEFAULT_PAGE_SIZE,
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Self]:
        """Returns the compact records for all sections in the specified project.

        Args:
            client: the transport
            project: the project to get sections from
            per_page: the number of records to fetch per page
            options: the request options
        """
        check_required(project=project)
        return cls._find_all(client, f"/projects/{project}/sections", {"limit": per_page}, options=options)

    def add_task(
        self,
        task: api_types.TaskGid | None = None,
        insert_before: api_types.TaskGid | None = None,
        insert_after: api_types.TaskGid | None = None,
        options: api_types.RequestOptions | None = None,
        **data,
    ) -> bool:
        """Adds a task to this section, this removes the task from the other sections of the project.

        The task is inserted at the top of the section unless ``insert_before`` or ``insert_after`` is given.
        Only one of the two may be given, the server rejects the request otherwise.
        This does not work for separators (tasks with the ``resource_subtype`` of section).

        Args:
            task: the task to add
            insert_before: insert the task immediately before this task
            insert_after: insert the task immediately after this task
            options: the request options
            **data: further fields of the request
        """
        check_required(task=task)
        return self._post_action(
            f"/sections/{self.gid}/addTask",
            {**data, "task": task, "insert_before": insert_before, "insert_after": insert_after},
            options=options,
        )

    def insert_in_project(
        self,
        project: api_types.ProjectGid | None = None,
        before_section: api_types.SectionGid | None = None,
        after_section: api_types.SectionGid | None = None,
        options: api_types.RequestOptions | None = None,
        **data,
    ) -> bool:
        """Moves this section relative to the other sections of its project.

        One of ``before_section`` or ``after_section`` is required by the server.
        Sections cannot be moved between projects.

        Args:
            project: the project in which to reorder the section
            before_section: insert this section immediately before the given section
            after_section: insert this section immediately after the given section
            options: the request options
            **data: further fields of the request
        """
        check_required(project=project)
        return self._post_action(
            f"/projects/{project}/sections/insert",
            {**data, "section": self.gid, "before_section": before_section, "after_section": after_section},
            options=options,
        )


resource.RESOURCE_TYPE_REGISTRY[Section.type_name] = Section
