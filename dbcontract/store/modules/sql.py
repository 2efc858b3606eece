"""SQL slice: query result export requests."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field

from dbcontract.codec import ExportFormat, ExportFormatField
from dbcontract.store.base import EntityStore, WireModel

_EXTENSIONS: Dict[ExportFormat, str] = {
    ExportFormat.CSV: "csv",
    ExportFormat.JSON: "json",
    ExportFormat.SQL: "sql",
    ExportFormat.XLSX: "xlsx",
}


def export_file_extension(export_format: Any) -> Optional[str]:
    """File extension for a format, or None when it is unset or unrecognized."""

    return _EXTENSIONS.get(ExportFormat.from_json(export_format))


class ExportRequest(WireModel):
    """Export of a statement's result set against one database."""

    name: str
    database: str = ""
    statement: str = ""
    format: ExportFormatField = ExportFormat.FORMAT_UNSPECIFIED
    limit: int = Field(0, ge=0)
    admin: bool = False
    password: str = ""


class ExportStore(EntityStore[ExportRequest]):
    entity_type = ExportRequest

    def list_by_format(self, export_format: Any) -> list[ExportRequest]:
        wanted = ExportFormat.from_json(export_format)
        return [item for item in self.list_all() if item.format is wanted]

    def exportable(self) -> list[ExportRequest]:
        """Requests whose format this build knows how to write."""

        return [item for item in self.list_all() if export_file_extension(item.format) is not None]


export_store = ExportStore()

__all__ = ["ExportRequest", "ExportStore", "export_file_extension", "export_store"]
