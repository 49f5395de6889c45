# src/hl7_definitions/query.py
"""
Query API over the compiled-in store.

Every function is a pure, read-only lookup against the default store bound
to ``hl7_definitions._generated`` at import time. Anything excluded at build
time is reported exactly like something the standard never defined: None.
"""

from __future__ import annotations

from typing import Optional, Tuple

from . import _generated
from .models import Definition, Field, Message, Segment
from .store import Store

__all__ = [
    "DEFAULT_STORE",
    "VERSIONS",
    "get_definition",
    "get_field",
    "get_message",
    "get_segment",
    "table_description",
    "table_value",
    "table_values",
    "versions",
]

DEFAULT_STORE = Store.from_module(_generated)

#: All of the versions compiled into the library
VERSIONS: Tuple[str, ...] = DEFAULT_STORE.versions


def versions() -> Tuple[str, ...]:
    """
    Return the versions compiled into the library.

    Example
    -------
    >>> "2.5.1" in versions()
    True
    """
    return VERSIONS


def table_description(table_id: int) -> Optional[str]:
    """
    Get the description of the given table.

    Example
    -------
    >>> table_description(3)
    'Event type'
    """
    return DEFAULT_STORE.table_description(table_id)


def table_value(table_id: int, code: str) -> Optional[str]:
    """
    Get a single value from a table.

    Example
    -------
    >>> table_value(3, "A01")
    'ADT/ACK - Admit/visit notification'
    """
    return DEFAULT_STORE.table_value(table_id, code)


def table_values(table_id: int) -> Optional[Tuple[Tuple[str, str], ...]]:
    """
    Get all (code, meaning) pairs of a table.

    Example
    -------
    >>> len(table_values(7))
    7
    """
    return DEFAULT_STORE.table_values(table_id)


def get_definition(version: str) -> Optional[Definition]:
    """Root definition (fields, segments, messages) for an HL7 version."""
    return DEFAULT_STORE.get_definition(version)


def get_field(version: str, name: str) -> Optional[Field]:
    """A field / datatype (e.g. "TS") for the given version."""
    return DEFAULT_STORE.get_field(version, name)


def get_segment(version: str, name: str) -> Optional[Segment]:
    """A segment (e.g. "MSH") for the given version."""
    return DEFAULT_STORE.get_segment(version, name)


def get_message(version: str, name: str) -> Optional[Message]:
    """A message structure (e.g. "ADT_A01") for the given version."""
    return DEFAULT_STORE.get_message(version, name)
