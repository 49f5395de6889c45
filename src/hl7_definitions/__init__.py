# src/hl7_definitions/__init__.py
"""
hl7_definitions: HL7 v2.x schema reference data.

This package provides:
- Coded value tables, datatypes, segments and message structures for the
  HL7 versions selected at build time.
- A read-only query API over that data (no parsing at runtime).
- A schema compiler that turns definition source documents into the
  generated store module (see ``hl7-definitions compile``).

The query API is resolved on first access, so the compiler and the CLI
import cleanly while the generated store module is missing or being rebuilt.
"""

from __future__ import annotations

from typing import Any

from .models import (
    Definition,
    Field,
    FieldOptionality,
    FieldRepeatability,
    Message,
    MessageCompound,
    MessageSegment,
    RepeatKind,
    Segment,
    SubField,
)

__version__ = "0.1.0"

_QUERY_API = frozenset(
    {
        "VERSIONS",
        "get_definition",
        "get_field",
        "get_message",
        "get_segment",
        "table_description",
        "table_value",
        "table_values",
        "versions",
    }
)


def __getattr__(name: str) -> Any:
    if name in _QUERY_API:
        from . import query

        return getattr(query, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "Definition",
    "Field",
    "FieldOptionality",
    "FieldRepeatability",
    "Message",
    "MessageCompound",
    "MessageSegment",
    "RepeatKind",
    "Segment",
    "SubField",
    *sorted(_QUERY_API),
]
