"""Enum codec shared with the service: ordinals, wire names and the sentinel."""

from .base import SENTINEL_NAME, SENTINEL_ORDINAL, ProtoEnum, vocabulary
from .common import (
    PROTOBUF_PACKAGE,
    VOCABULARIES,
    Engine,
    ExportFormat,
    MaskingLevel,
    State,
    VCSType,
    engine_from_json,
    engine_to_json,
    export_format_from_json,
    export_format_to_json,
    masking_level_from_json,
    masking_level_to_json,
    state_from_json,
    state_to_json,
    vcs_type_from_json,
    vcs_type_to_json,
)
from .fields import (
    EngineField,
    ExportFormatField,
    MaskingLevelField,
    StateField,
    VCSTypeField,
    WireEnum,
)

__all__ = [
    "PROTOBUF_PACKAGE",
    "SENTINEL_NAME",
    "SENTINEL_ORDINAL",
    "VOCABULARIES",
    "Engine",
    "EngineField",
    "ExportFormat",
    "ExportFormatField",
    "MaskingLevel",
    "MaskingLevelField",
    "ProtoEnum",
    "State",
    "StateField",
    "VCSType",
    "VCSTypeField",
    "WireEnum",
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
    "vocabulary",
]
