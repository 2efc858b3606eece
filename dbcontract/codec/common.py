"""Vocabularies shared with the service (package ``bytebase.v1``).

Ordinals are part of the wire contract: they are assigned once and never
reused or renumbered. New members take the next unused ordinal.
"""
from __future__ import annotations

from typing import Any, Dict

from .base import ProtoEnum, vocabulary

PROTOBUF_PACKAGE = "bytebase.v1"


@vocabulary
class State(ProtoEnum):
    """Lifecycle state of a resource."""

    STATE_UNSPECIFIED = 0
    ACTIVE = 1
    DELETED = 2
    UNRECOGNIZED = -1


@vocabulary
class Engine(ProtoEnum):
    """Database engine identity."""

    ENGINE_UNSPECIFIED = 0
    CLICKHOUSE = 1
    MYSQL = 2
    POSTGRES = 3
    SNOWFLAKE = 4
    SQLITE = 5
    TIDB = 6
    MONGODB = 7
    REDIS = 8
    ORACLE = 9
    SPANNER = 10
    MSSQL = 11
    REDSHIFT = 12
    MARIADB = 13
    OCEANBASE = 14
    DM = 15
    RISINGWAVE = 16
    OCEANBASE_ORACLE = 17
    STARROCKS = 18
    DORIS = 19
    HIVE = 20
    UNRECOGNIZED = -1


@vocabulary
class VCSType(ProtoEnum):
    """Version-control provider."""

    VCS_TYPE_UNSPECIFIED = 0
    GITHUB = 1  # GitHub community edition
    GITLAB = 2  # GitLab community and enterprise editions
    BITBUCKET = 3  # Bitbucket cloud or server
    AZURE_DEVOPS = 4
    UNRECOGNIZED = -1


@vocabulary
class MaskingLevel(ProtoEnum):
    """How much of a sensitive column is hidden from query results."""

    MASKING_LEVEL_UNSPECIFIED = 0
    NONE = 1
    PARTIAL = 2
    FULL = 3
    UNRECOGNIZED = -1


@vocabulary
class ExportFormat(ProtoEnum):
    """File format of a query result export."""

    FORMAT_UNSPECIFIED = 0
    CSV = 1
    JSON = 2
    SQL = 3
    XLSX = 4
    UNRECOGNIZED = -1


VOCABULARIES: Dict[str, type[ProtoEnum]] = {
    "state": State,
    "engine": Engine,
    "vcs_type": VCSType,
    "masking_level": MaskingLevel,
    "export_format": ExportFormat,
}


def state_from_json(value: Any) -> State:
    return State.from_json(value)


def state_to_json(value: Any) -> str:
    return State.to_json(value)


def engine_from_json(value: Any) -> Engine:
    return Engine.from_json(value)


def engine_to_json(value: Any) -> str:
    return Engine.to_json(value)


def vcs_type_from_json(value: Any) -> VCSType:
    return VCSType.from_json(value)


def vcs_type_to_json(value: Any) -> str:
    return VCSType.to_json(value)


def masking_level_from_json(value: Any) -> MaskingLevel:
    return MaskingLevel.from_json(value)


def masking_level_to_json(value: Any) -> str:
    return MaskingLevel.to_json(value)


def export_format_from_json(value: Any) -> ExportFormat:
    return ExportFormat.from_json(value)


def export_format_to_json(value: Any) -> str:
    return ExportFormat.to_json(value)


__all__ = [
    "PROTOBUF_PACKAGE",
    "VOCABULARIES",
    "Engine",
    "ExportFormat",
    "MaskingLevel",
    "State",
    "VCSType",
    "engine_from_json",
    "engine_to_json",
    "export_format_from_json",
    "export_format_to_json",
    "masking_level_from_json",
    "masking_level_to_json",
    "state_from_json",
    "state_to_json",
    "vcs_type_from_json",
    "vcs_type_to_json",
]
