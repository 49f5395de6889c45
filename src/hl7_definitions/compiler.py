# src/hl7_definitions/compiler.py
"""
Schema compiler: definition source documents -> generated lookup module.

The compiler runs once, at build time. It reads ``tables.json`` and
``defs.json``, lowers every entry into the runtime types of
``hl7_definitions.models`` and writes a Python module that rebuilds those
values as literals, wrapped in read-only mappings. Importing the generated
module is all the runtime ever does: no JSON is parsed after the build.

Processing order
----------------
1. Tables: disabled -> empty root maps; enabled -> one map and one
   (code, meaning) tuple per table, plus TABLE_DESCRIPTIONS, TABLES and
   TABLE_ENTRIES keyed by numeric id.
2. Definitions: every version must be opted in; the rest are skipped with a
   warning.
3. Fields and segments are lowered into SubField tuples.
4. Messages are lowered recursively, keeping children and compounds nested.
5. Per-version maps, DEFINITIONS and the VERSIONS tuple are emitted.

Output is deterministic: map keys are sorted (table ids numerically, names
lexically) while ordered sequences keep source order.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import BuildConfig
from .exceptions import CompileError
from .models import (
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
from .source import (
    SourceDefinition,
    SourceField,
    SourceMessage,
    SourceMessageCompound,
    SourceMessageSegment,
    SourceSegment,
    SourceSubField,
    SourceTable,
    load_definitions,
    load_tables,
)

# ------------------------------------------------------------------------------
# globals
# ------------------------------------------------------------------------------

LOG = logging.getLogger("hl7_definitions.compiler")

MAX_TABLE_ID = 0xFFFF

_TABLE_ID_RE = re.compile(r"[0-9]+")
_VERSION_RE = re.compile(r"[0-9A-Za-z.]+")

_INDENT = "    "

HEADER = '''# Generated by hl7_definitions.compiler. Do not edit.
"""Static lookup store: HL7 tables and versioned definitions."""

from types import MappingProxyType

from hl7_definitions.models import (
    Definition,
    Field,
    FieldOptionality,
    FieldRepeatability,
    Message,
    MessageCompound,
    MessageSegment,
    Segment,
    SubField,
)
'''


# ------------------------------------------------------------------------------
# lowering: source models -> runtime models
# ------------------------------------------------------------------------------


def lower_subfield(src: SourceSubField) -> SubField:
    return SubField(
        datatype=src.datatype,
        description=src.desc,
        optionality=FieldOptionality.from_code(src.opt),
        repeatability=FieldRepeatability.from_code(src.rep),
        max_length=src.len,
        table=src.table,
    )


def lower_field(src: SourceField) -> Field:
    return Field(
        description=src.desc,
        subfields=tuple(lower_subfield(s) for s in src.subfields),
    )


def lower_segment(src: SourceSegment) -> Segment:
    return Segment(
        description=src.desc,
        fields=tuple(lower_subfield(s) for s in src.fields),
    )


def _check_bounds(min_: int, max_: int, where: str) -> None:
    # max == 0 records no upper bound
    if max_ > 0 and min_ > max_:
        raise CompileError(f"{where}: min {min_} exceeds max {max_}")


def _lower_compound(src: SourceMessageCompound, where: str) -> MessageCompound:
    _check_bounds(src.min, src.max, where)
    return MessageCompound(
        name=src.name, description=src.desc, min=src.min, max=src.max
    )


def lower_message_segment(
    src: SourceMessageSegment, where: str = "message segment"
) -> MessageSegment:
    """
    Recursively lower a message segment node.

    Parameters
    ----------
    src : SourceMessageSegment
        Source node, possibly with children and compounds.
    where : str
        Location prefix used in error messages.

    Returns
    -------
    MessageSegment
        Runtime node with the same nesting; absent children or compounds stay
        None, empty ones become empty tuples.

    Raises
    ------
    CompileError
        If the node or any descendant has min greater than a bounded max.
    """
    here = f"{where} / {src.name}"
    _check_bounds(src.min, src.max, here)

    children: Optional[Tuple[MessageSegment, ...]] = None
    if src.children is not None:
        children = tuple(lower_message_segment(c, here) for c in src.children)

    compounds: Optional[Tuple[MessageCompound, ...]] = None
    if src.compounds is not None:
        compounds = tuple(
            _lower_compound(c, f"{here} / compound {c.name or '<unnamed>'}")
            for c in src.compounds
        )

    return MessageSegment(
        name=src.name,
        description=src.desc,
        min=src.min,
        max=src.max,
        children=children,
        compounds=compounds,
    )


def lower_message(src: SourceMessage, where: str = "message") -> Message:
    return Message(
        name=src.name,
        description=src.desc,
        segments=tuple(
            lower_message_segment(s, where) for s in src.segments.segments
        ),
    )


# ------------------------------------------------------------------------------
# emission helpers
# ------------------------------------------------------------------------------


def _format_tuple(items: Sequence[str], indent: int) -> str:
    """Format pre-rendered items as a multi-line tuple closing at `indent`."""
    if not items:
        return "()"
    inner = _INDENT * (indent + 1)
    body = "".join(f"{inner}{item},\n" for item in items)
    return f"(\n{body}{_INDENT * indent})"


def _emit_map(name: str, entries: Iterable[Tuple[str, str]]) -> str:
    body = "".join(f"{_INDENT}{key}: {value},\n" for key, value in entries)
    if not body:
        return f"{name} = MappingProxyType({{}})\n"
    return f"{name} = MappingProxyType({{\n{body}}})\n"


def _format_optionality(opt: FieldOptionality) -> str:
    return f"FieldOptionality.{opt.name}"


def _format_repeatability(rep: FieldRepeatability) -> str:
    if rep.kind is RepeatKind.UNBOUNDED:
        return "FieldRepeatability.unbounded()"
    if rep.kind is RepeatKind.SINGLE:
        return "FieldRepeatability.single()"
    return f"FieldRepeatability.bounded({rep.count})"


def _format_subfield(sub: SubField) -> str:
    return (
        f"SubField({sub.datatype!r}, {sub.description!r}, "
        f"{_format_optionality(sub.optionality)}, "
        f"{_format_repeatability(sub.repeatability)}, "
        f"{sub.max_length!r}, {sub.table!r})"
    )


def _format_field(field: Field, indent: int) -> str:
    subfields = [_format_subfield(s) for s in field.subfields]
    return f"Field({field.description!r}, {_format_tuple(subfields, indent)})"


def _format_segment(segment: Segment, indent: int) -> str:
    fields = [_format_subfield(s) for s in segment.fields]
    return f"Segment({segment.description!r}, {_format_tuple(fields, indent)})"


def _format_compound(c: MessageCompound) -> str:
    return f"MessageCompound({c.name!r}, {c.description!r}, {c.min}, {c.max})"


def _format_message_segment(seg: MessageSegment, indent: int) -> str:
    children = "None"
    if seg.children is not None:
        children = _format_tuple(
            [_format_message_segment(c, indent + 1) for c in seg.children], indent
        )
    compounds = "None"
    if seg.compounds is not None:
        compounds = _format_tuple([_format_compound(c) for c in seg.compounds], indent)
    return (
        f"MessageSegment({seg.name!r}, {seg.description!r}, {seg.min}, {seg.max}, "
        f"{children}, {compounds})"
    )


def _format_message(message: Message, indent: int) -> str:
    segments = [_format_message_segment(s, indent + 1) for s in message.segments]
    return (
        f"Message({message.name!r}, {message.description!r}, "
        f"{_format_tuple(segments, indent)})"
    )


# ------------------------------------------------------------------------------
# table pass
# ------------------------------------------------------------------------------


def parse_table_id(raw: str) -> int:
    """
    Parse a textual table id as an unsigned 16-bit integer.

    Raises
    ------
    CompileError
        If the id is not made of ASCII digits or does not fit in 16 bits.
    """
    if not _TABLE_ID_RE.fullmatch(raw):
        raise CompileError(f"Table id {raw!r} is not an unsigned integer")
    table_id = int(raw)
    if table_id > MAX_TABLE_ID:
        raise CompileError(f"Table id {raw!r} is out of range (0..{MAX_TABLE_ID})")
    return table_id


def compile_tables(tables: Optional[Mapping[str, SourceTable]]) -> str:
    """
    Emit the table section of the generated module.

    Parameters
    ----------
    tables : Mapping[str, SourceTable] or None
        Source tables keyed by textual id, or None when the tables capability
        is disabled. Disabled tables still emit TABLE_DESCRIPTIONS, TABLES and
        TABLE_ENTRIES, all empty, so lookups compile and simply find nothing.

    Returns
    -------
    str
        Python source text.

    Raises
    ------
    CompileError
        On a non-numeric, out-of-range or duplicate table id.
    """
    if tables is None:
        LOG.warning("Tables not enabled; tables will NOT be available")
        return "\n".join(
            [
                _emit_map("TABLE_DESCRIPTIONS", []),
                _emit_map("TABLES", []),
                _emit_map("TABLE_ENTRIES", []),
            ]
        )

    by_id: Dict[int, SourceTable] = {}
    for raw_id, table in tables.items():
        table_id = parse_table_id(raw_id)
        if table_id in by_id:
            raise CompileError(f"Duplicate table id {raw_id!r} (= {table_id})")
        by_id[table_id] = table

    ids = sorted(by_id)
    sections: List[str] = []
    for table_id in ids:
        values = by_id[table_id].values
        sections.append(
            _emit_map(
                f"TABLE_{table_id}",
                ((repr(code), repr(meaning)) for code, meaning in values.items()),
            )
        )
        entries = [f"({code!r}, {meaning!r})" for code, meaning in values.items()]
        sections.append(f"TABLE_{table_id}_ENTRIES = {_format_tuple(entries, 0)}\n")
    sections.append(
        _emit_map(
            "TABLE_DESCRIPTIONS",
            ((str(i), repr(by_id[i].desc)) for i in ids),
        )
    )
    sections.append(_emit_map("TABLES", ((str(i), f"TABLE_{i}") for i in ids)))
    sections.append(
        _emit_map("TABLE_ENTRIES", ((str(i), f"TABLE_{i}_ENTRIES") for i in ids))
    )

    LOG.info("Compiled %d tables", len(ids))
    return "\n".join(sections)


# ------------------------------------------------------------------------------
# definitions pass
# ------------------------------------------------------------------------------


def version_ident(version: str) -> str:
    """
    Turn a version string into the identifier fragment used by generated
    names: "2.5.1" -> "2_5_1".

    Raises
    ------
    CompileError
        If the version contains anything but ASCII letters, digits and dots.
    """
    if not _VERSION_RE.fullmatch(version):
        raise CompileError(f"Version {version!r} is not a valid version identifier")
    return version.replace(".", "_")


def _compile_version(version: str, definition: SourceDefinition) -> str:
    ident = version_ident(version)

    fields = [
        (repr(name), _format_field(lower_field(f), 1))
        for name, f in sorted(definition.fields.items(), key=lambda kv: kv[0])
    ]
    segments = [
        (repr(name), _format_segment(lower_segment(s), 1))
        for name, s in sorted(definition.segments.items(), key=lambda kv: kv[0])
    ]
    messages = [
        (
            repr(name),
            _format_message(
                lower_message(m, f"version {version!r} / message {name!r}"), 1
            ),
        )
        for name, m in sorted(definition.messages.items(), key=lambda kv: kv[0])
    ]

    LOG.info(
        "Version %s: %d fields, %d segments, %d messages",
        version,
        len(fields),
        len(segments),
        len(messages),
    )
    return "\n".join(
        [
            _emit_map(f"DEFS_V{ident}_FIELDS", fields),
            _emit_map(f"DEFS_V{ident}_SEGMENTS", segments),
            _emit_map(f"DEFS_V{ident}_MESSAGES", messages),
        ]
    )


def compile_definitions(
    definitions: Mapping[str, SourceDefinition], versions: Iterable[str]
) -> str:
    """
    Emit the definitions section of the generated module.

    Parameters
    ----------
    definitions : Mapping[str, SourceDefinition]
        Source definitions keyed by version.
    versions : Iterable[str]
        Versions opted in at build time. Anything else is skipped.

    Returns
    -------
    str
        Python source text ending with DEFINITIONS and VERSIONS.

    Raises
    ------
    CompileError
        On an invalid version identifier or inverted message bounds.
    """
    enabled = set(versions)
    selected: List[str] = []
    sections: List[str] = []

    for version, definition in definitions.items():
        if version not in enabled:
            LOG.warning(
                "Version %s not enabled; version %s will NOT be available",
                version,
                version,
            )
            continue
        sections.append(_compile_version(version, definition))
        selected.append(version)

    for version in sorted(enabled.difference(definitions)):
        LOG.warning("Version %s enabled but not present in the source", version)

    sections.append(
        _emit_map(
            "DEFINITIONS",
            (
                (
                    repr(v),
                    f"Definition(DEFS_V{version_ident(v)}_FIELDS, "
                    f"DEFS_V{version_ident(v)}_SEGMENTS, "
                    f"DEFS_V{version_ident(v)}_MESSAGES)",
                )
                for v in selected
            ),
        )
    )
    sections.append(f"VERSIONS = {tuple(selected)!r}\n")
    return "\n".join(sections)


# ------------------------------------------------------------------------------
# entrypoints
# ------------------------------------------------------------------------------


def compile_schema(config: BuildConfig) -> str:
    """
    Compile the configured source documents into generated module text.

    The table catalog is only read when tables are enabled; the definitions
    catalog is always read.

    Parameters
    ----------
    config : BuildConfig
        Feature selection and source location.

    Returns
    -------
    str
        Complete Python source of the generated store module.

    Raises
    ------
    SourceError
        If a source document is unreadable or malformed.
    CompileError
        If the sources cannot be lowered.
    """
    tables = load_tables(config.tables_path) if config.tables else None
    definitions = load_definitions(config.definitions_path)

    return "\n".join(
        [
            HEADER,
            compile_tables(tables),
            compile_definitions(definitions, config.versions),
        ]
    )


def write_schema(config: BuildConfig) -> Path:
    """
    Compile and write the generated module to ``config.output``.

    Nothing is written unless compilation succeeds as a whole. The module is
    written to a temporary file next to ``config.output`` and renamed over it,
    so the output path only ever holds a complete module.

    Returns
    -------
    Path
        The written module path.
    """
    text = compile_schema(config)
    out = config.output
    out.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp = tempfile.mkstemp(prefix=f".{out.name}.", suffix=".tmp", dir=out.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.chmod(tmp, 0o644)
        os.replace(tmp, out)
    except BaseException:
        os.unlink(tmp)
        raise
    LOG.info("Wrote %s", out)
    return out
