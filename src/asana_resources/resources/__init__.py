from asana_resources.resources.collection import Collection
from asana_resources.resources.project import Project
from asana_resources.resources.resource import Resource
from asana_resources.resources.section import Section
from asana_resources.resources.task import Task

__all__ = ["Resource", "Collection", "Project", "Section", "Task"]
