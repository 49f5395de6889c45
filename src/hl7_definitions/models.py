# src/hl7_definitions/models.py
"""
Runtime schema types for HL7 v2.x definitions.

Everything here is immutable: dataclasses are frozen, ordered collections are
tuples and keyed collections are read-only mappings. Instances are created
once, when the generated store module is imported, and shared by every caller
for the lifetime of the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple

__all__ = [
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
]


class FieldOptionality(Enum):
    """How "required" a field is."""

    OPTIONAL = "optional"
    REQUIRED = "required"
    # Required only when a condition elsewhere in the message holds.
    CONDITIONAL = "conditional"
    BACKWARD_COMPATIBILITY = "backwards compatibility"

    @classmethod
    def from_code(cls, code: int) -> "FieldOptionality":
        """
        Map a source optionality code onto an optionality.

        Parameters
        ----------
        code : int
            1 = optional, 2 = required, 3 = conditional. Every other value,
            0 included, means backward compatibility.

        Returns
        -------
        FieldOptionality
        """
        return _OPTIONALITY_CODES.get(code, cls.BACKWARD_COMPATIBILITY)

    def __str__(self) -> str:
        return self.value


_OPTIONALITY_CODES = {
    1: FieldOptionality.OPTIONAL,
    2: FieldOptionality.REQUIRED,
    3: FieldOptionality.CONDITIONAL,
}


class RepeatKind(Enum):
    UNBOUNDED = "unbounded"
    SINGLE = "single"
    BOUNDED = "bounded"


@dataclass(frozen=True)
class FieldRepeatability:
    """
    How many times a field can be repeated.

    Attributes
    ----------
    kind : RepeatKind
        Unbounded, single, or bounded.
    count : int or None
        Upper bound for BOUNDED repeatability; None otherwise.
    """

    kind: RepeatKind
    count: Optional[int] = None

    @classmethod
    def unbounded(cls) -> "FieldRepeatability":
        return cls(RepeatKind.UNBOUNDED)

    @classmethod
    def single(cls) -> "FieldRepeatability":
        return cls(RepeatKind.SINGLE)

    @classmethod
    def bounded(cls, count: int) -> "FieldRepeatability":
        if count < 2:
            raise ValueError(f"bounded repeatability needs count >= 2, got {count}")
        return cls(RepeatKind.BOUNDED, count)

    @classmethod
    def from_code(cls, code: int) -> "FieldRepeatability":
        """Map a source repetition count: 0 = unbounded, 1 = single, n = bounded."""
        if code < 0:
            raise ValueError(f"repetition code must be non-negative, got {code}")
        if code == 0:
            return cls.unbounded()
        if code == 1:
            return cls.single()
        return cls.bounded(code)

    def __str__(self) -> str:
        if self.kind is RepeatKind.UNBOUNDED:
            return "unbounded"
        if self.kind is RepeatKind.SINGLE:
            return "singular"
        return f"maximum {self.count}"


@dataclass(frozen=True)
class SubField:
    """
    The lowest-level description: what a field, component or sub-component
    can hold.

    Attributes
    ----------
    datatype : str
        Name of the Field (datatype) this sub-field is made of.
    description : str
        Human-readable description.
    optionality : FieldOptionality
        Whether the sub-field is required.
    repeatability : FieldRepeatability
        How many times the sub-field can be repeated.
    max_length : int or None
        Maximum length; None when unbounded or not applicable.
    table : int or None
        Id of the table holding valid values for this sub-field.
    """

    datatype: str
    description: str
    optionality: FieldOptionality
    repeatability: FieldRepeatability
    max_length: Optional[int] = None
    table: Optional[int] = None


@dataclass(frozen=True)
class Field:
    """A datatype: an HL7 field, component or sub-component type."""

    description: str
    subfields: Tuple[SubField, ...] = ()


@dataclass(frozen=True)
class Segment:
    """Schema for a segment (MSH, PID, ...): its fields in wire order."""

    description: str
    fields: Tuple[SubField, ...] = ()


@dataclass(frozen=True)
class MessageCompound:
    """One alternative in a set of segment choices at a single position."""

    name: Optional[str]
    description: str
    min: int
    max: int


@dataclass(frozen=True)
class MessageSegment:
    """
    A segment (or segment group) within a message template.

    Attributes
    ----------
    name : str
        Segment or group name, e.g. "MSH" or "PROCEDURE".
    description : str
        Human-readable description.
    min : int
        Minimum occurrences; greater than zero means required.
    max : int
        Maximum occurrences; greater than one means repeatable.
    children : tuple of MessageSegment or None
        Nested segments when this node is a group.
    compounds : tuple of MessageCompound or None
        Alternative segments allowed at this position.
    """

    name: str
    description: str
    min: int
    max: int
    children: Optional[Tuple["MessageSegment", ...]] = None
    compounds: Optional[Tuple[MessageCompound, ...]] = None

    @property
    def required(self) -> bool:
        return self.min > 0

    @property
    def repeatable(self) -> bool:
        return self.max > 1


@dataclass(frozen=True)
class Message:
    """Schema for a message structure (ADT_A01, ...)."""

    name: str
    description: str
    segments: Tuple[MessageSegment, ...] = ()


@dataclass(frozen=True)
class Definition:
    """
    Root definition for one HL7 version.

    Attributes
    ----------
    fields : Mapping[str, Field]
        Every field / datatype in the version, by name.
    segments : Mapping[str, Segment]
        Every segment in the version, by name.
    messages : Mapping[str, Message]
        Every message structure in the version, by name.
    """

    fields: Mapping[str, Field]
    segments: Mapping[str, Segment]
    messages: Mapping[str, Message]
