"""Project slice: the unit that groups databases and change workflows."""
from __future__ import annotations

from dbcontract.codec import State, StateField
from dbcontract.store.base import EntityStore, WireModel


class Project(WireModel):
    """``projects/{id}`` resource. ``key`` prefixes issue identifiers."""

    name: str
    title: str = ""
    key: str = ""
    state: StateField = State.STATE_UNSPECIFIED


class ProjectStore(EntityStore[Project]):
    entity_type = Project

    def find_by_key(self, key: str) -> Project | None:
        for project in self.list_all():
            if project.key == key:
                return project
        return None


project_store = ProjectStore()

__all__ = ["Project", "ProjectStore", "project_store"]
