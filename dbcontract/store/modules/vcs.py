"""VCS slice: version-control providers and the project connectors using them."""
from __future__ import annotations

from typing import Any

from dbcontract.codec import VCSType, VCSTypeField
from dbcontract.store.base import EntityStore, WireModel


class VCSProvider(WireModel):
    """``vcsProviders/{id}`` resource."""

    name: str
    title: str = ""
    type: VCSTypeField = VCSType.VCS_TYPE_UNSPECIFIED
    url: str = ""


class VCSConnector(WireModel):
    """``projects/{project}/vcsConnectors/{id}``: binds a repository to a project."""

    name: str
    vcs_provider: str = ""
    full_path: str = ""
    branch: str = "main"
    base_directory: str = ""


class VCSProviderStore(EntityStore[VCSProvider]):
    entity_type = VCSProvider

    def list_by_type(self, vcs_type: Any) -> list[VCSProvider]:
        wanted = VCSType.from_json(vcs_type)
        return [item for item in self.list_all() if item.type is wanted]


class VCSConnectorStore(EntityStore[VCSConnector]):
    entity_type = VCSConnector

    def list_for_provider(self, provider: str) -> list[VCSConnector]:
        return [item for item in self.list_all() if item.vcs_provider == provider]

    def list_for_project(self, project: str) -> list[VCSConnector]:
        prefix = f"{project}/vcsConnectors/"
        return [item for item in self.list_all() if item.name.startswith(prefix)]


vcs_provider_store = VCSProviderStore()
vcs_connector_store = VCSConnectorStore()

__all__ = [
    "VCSConnector",
    "VCSConnectorStore",
    "VCSProvider",
    "VCSProviderStore",
    "vcs_connector_store",
    "vcs_provider_store",
]
