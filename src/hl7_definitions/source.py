# src/hl7_definitions/source.py
"""
Definition source documents.

Pydantic models for the two JSON documents the schema compiler consumes:

- the table catalog (``tables.json``): table id -> description and values
- the definitions catalog (``defs.json``): version -> fields, segments and
  message structures

Loaders validate one top-level entry at a time so that a failure names the
table id or version (and the field, segment or message inside it) that is
malformed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from .exceptions import SourceError

__all__ = [
    "SourceDefinition",
    "SourceField",
    "SourceMessage",
    "SourceMessageCompound",
    "SourceMessageSegment",
    "SourceMessageSegments",
    "SourceSegment",
    "SourceSubField",
    "SourceTable",
    "load_definitions",
    "load_tables",
]

Count = Annotated[StrictInt, Field(ge=0)]

_M = TypeVar("_M", bound=BaseModel)


# ------------------------------------------------------------------------------
# models
# ------------------------------------------------------------------------------


class SourceTable(BaseModel):
    desc: StrictStr
    values: Dict[StrictStr, StrictStr]


class SourceSubField(BaseModel):
    datatype: StrictStr
    desc: StrictStr
    opt: Count
    rep: Count
    len: Optional[Count] = None
    table: Optional[Count] = None


class SourceField(BaseModel):
    desc: StrictStr
    subfields: List[SourceSubField]


class SourceSegment(BaseModel):
    desc: StrictStr
    fields: List[SourceSubField]


class SourceMessageCompound(BaseModel):
    name: Optional[StrictStr] = None
    desc: StrictStr
    min: Count
    max: Count


class SourceMessageSegment(BaseModel):
    name: StrictStr
    desc: StrictStr
    min: Count
    max: Count
    children: Optional[List["SourceMessageSegment"]] = None
    compounds: Optional[List[SourceMessageCompound]] = None


SourceMessageSegment.model_rebuild()


class SourceMessageSegments(BaseModel):
    desc: StrictStr
    segments: List[SourceMessageSegment]


class SourceMessage(BaseModel):
    desc: StrictStr
    name: StrictStr
    segments: SourceMessageSegments


class SourceDefinition(BaseModel):
    fields: Dict[StrictStr, SourceField]
    segments: Dict[StrictStr, SourceSegment]
    messages: Dict[StrictStr, SourceMessage]


# ------------------------------------------------------------------------------
# helpers
# ------------------------------------------------------------------------------


def _read_json_object(path: Path) -> Dict[str, Any]:
    """
    Read a JSON document whose top level must be an object.

    Raises
    ------
    SourceError
        If the file cannot be read, is not valid JSON, or its top level is
        not an object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceError(f"Failed to read {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise SourceError(
            f"{path} must contain an object at top level, got {type(data).__name__}"
        )
    return data


def _validate(model: Type[_M], raw: Any, where: str) -> _M:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise SourceError(f"Malformed {where}: {e}") from e


def _validate_entries(
    model: Type[_M], raw: Any, kind: str, version: str, path: Path
) -> Dict[str, _M]:
    if not isinstance(raw, dict):
        raise SourceError(
            f"Malformed {kind} in version {version!r} of {path}: "
            f"expected an object, got {type(raw).__name__}"
        )
    return {
        name: _validate(model, value, f"{kind[:-1]} {name!r} in version {version!r}")
        for name, value in raw.items()
    }


# ------------------------------------------------------------------------------
# loaders
# ------------------------------------------------------------------------------


def load_tables(path: Path) -> Dict[str, SourceTable]:
    """
    Load the table catalog.

    Parameters
    ----------
    path : Path
        Path to ``tables.json``.

    Returns
    -------
    Dict[str, SourceTable]
        Tables keyed by their (still textual) id, in document order.

    Raises
    ------
    SourceError
        If the document is unreadable or any table entry is malformed.
    """
    data = _read_json_object(path)
    return {
        table_id: _validate(SourceTable, raw, f"table {table_id!r} in {path}")
        for table_id, raw in data.items()
    }


def load_definitions(path: Path) -> Dict[str, SourceDefinition]:
    """
    Load the versioned definitions catalog.

    Fields, segments and messages are validated one by one so that an error
    names the offending entry.

    Parameters
    ----------
    path : Path
        Path to ``defs.json``.

    Returns
    -------
    Dict[str, SourceDefinition]
        Definitions keyed by version, in document order.

    Raises
    ------
    SourceError
        If the document is unreadable or any entry is malformed.
    """
    data = _read_json_object(path)
    out: Dict[str, SourceDefinition] = {}
    for version, raw in data.items():
        if not isinstance(raw, dict):
            raise SourceError(
                f"Malformed version {version!r} in {path}: "
                f"expected an object, got {type(raw).__name__}"
            )
        missing = [k for k in ("fields", "segments", "messages") if k not in raw]
        if missing:
            raise SourceError(
                f"Malformed version {version!r} in {path}: "
                f"missing {', '.join(missing)}"
            )
        out[version] = SourceDefinition.model_construct(
            fields=_validate_entries(SourceField, raw["fields"], "fields", version, path),
            segments=_validate_entries(
                SourceSegment, raw["segments"], "segments", version, path
            ),
            messages=_validate_entries(
                SourceMessage, raw["messages"], "messages", version, path
            ),
        )
    return out
