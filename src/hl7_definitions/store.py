# src/hl7_definitions/store.py
"""
Static lookup store.

A Store wraps the read-only maps of a generated module (see
``hl7_definitions.compiler``). All lookups are exact-key, case-sensitive
mapping reads; an absent key, or a key of the wrong type, yields None.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any, Mapping, Optional, Tuple

from .models import Definition, Field, Message, Segment

TableValues = Mapping[str, str]
TableEntries = Tuple[Tuple[str, str], ...]


def _get(mapping: Mapping[Any, Any], key: Any, key_type: type) -> Any:
    # True == 1 and 3.0 == 3 hash alike; only keys of the stored type match
    if not isinstance(key, key_type) or isinstance(key, bool):
        return None
    return mapping.get(key)


@dataclass(frozen=True)
class Store:
    """
    Immutable view over compiled-in tables and definitions.

    Attributes
    ----------
    table_descriptions : Mapping[int, str]
        Table id -> description.
    tables : Mapping[int, Mapping[str, str]]
        Table id -> code -> meaning.
    table_entries : Mapping[int, Tuple[Tuple[str, str], ...]]
        Table id -> (code, meaning) pairs in source order.
    definitions : Mapping[str, Definition]
        Version -> root definition.
    versions : Tuple[str, ...]
        Versions compiled into the store.
    """

    table_descriptions: Mapping[int, str]
    tables: Mapping[int, TableValues]
    table_entries: Mapping[int, TableEntries]
    definitions: Mapping[str, Definition]
    versions: Tuple[str, ...]

    @classmethod
    def from_module(cls, module: ModuleType) -> "Store":
        """Bind the root maps of a generated module."""
        return cls(
            table_descriptions=module.TABLE_DESCRIPTIONS,
            tables=module.TABLES,
            table_entries=module.TABLE_ENTRIES,
            definitions=module.DEFINITIONS,
            versions=tuple(module.VERSIONS),
        )

    def table_description(self, table_id: int) -> Optional[str]:
        return _get(self.table_descriptions, table_id, int)

    def table_value(self, table_id: int, code: str) -> Optional[str]:
        values = _get(self.tables, table_id, int)
        if values is None:
            return None
        return _get(values, code, str)

    def table_values(self, table_id: int) -> Optional[TableEntries]:
        return _get(self.table_entries, table_id, int)

    def get_definition(self, version: str) -> Optional[Definition]:
        return _get(self.definitions, version, str)

    def get_field(self, version: str, name: str) -> Optional[Field]:
        definition = self.get_definition(version)
        if definition is None:
            return None
        return _get(definition.fields, name, str)

    def get_segment(self, version: str, name: str) -> Optional[Segment]:
        definition = self.get_definition(version)
        if definition is None:
            return None
        return _get(definition.segments, name, str)

    def get_message(self, version: str, name: str) -> Optional[Message]:
        definition = self.get_definition(version)
        if definition is None:
            return None
        return _get(definition.messages, name, str)
