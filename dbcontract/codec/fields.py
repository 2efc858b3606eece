"""Pydantic field types that route enum fields through the wire codec."""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from .base import ProtoEnum
from .common import Engine, ExportFormat, MaskingLevel, State, VCSType


def WireEnum(enum_cls: type[ProtoEnum]) -> Any:
    """Return an ``Annotated`` type decoding via ``from_json``, encoding via ``to_json``.

    Validation never fails on an unknown value; it yields the sentinel.
    Python-mode dumps keep the member, JSON-mode dumps emit the wire name.
    """

    return Annotated[
        enum_cls,
        BeforeValidator(enum_cls.from_json),
        PlainSerializer(enum_cls.to_json, return_type=str, when_used="json"),
    ]


StateField = WireEnum(State)
EngineField = WireEnum(Engine)
VCSTypeField = WireEnum(VCSType)
MaskingLevelField = WireEnum(MaskingLevel)
ExportFormatField = WireEnum(ExportFormat)

__all__ = [
    "EngineField",
    "ExportFormatField",
    "MaskingLevelField",
    "StateField",
    "VCSTypeField",
    "WireEnum",
]
